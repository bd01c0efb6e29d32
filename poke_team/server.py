"""FastMCP server exposing Pokemon team building tools."""

from __future__ import annotations

from dataclasses import asdict
from typing import Annotated, Any, Dict, List

from fastmcp import FastMCP

from .analysis import TeamRecommendationService
from .clients import PokeAPIClient, PokeAPIClientError
from .data.type_chart import effectiveness, type_profile as build_type_profile
from .services import TeamBuilderService, load_roster

app = FastMCP("poke-team", version="0.1.0")
_pokeapi = PokeAPIClient()
_service = TeamBuilderService(
    recommender=TeamRecommendationService(pokeapi_client=_pokeapi),
)


@app.tool()
def analyze_team(
    pokemon: Annotated[List[str], "Up to six Pokemon names or National Dex ids"],
) -> Dict[str, Any]:
    """Score a team and list its shared weaknesses and coverage gaps."""

    try:
        roster = load_roster(_pokeapi, pokemon)
    except (PokeAPIClientError, ValueError) as exc:
        return {"error": f"Could not load team: {exc}"}
    return asdict(_service.analyze(roster))


@app.tool()
def recommend_team(
    pokemon: Annotated[List[str], "Up to six Pokemon names or National Dex ids"],
    max_recommendations: Annotated[int, "Maximum suggestions to return"] = 6,
) -> Dict[str, Any]:
    """Suggest Pokemon to add to empty slots or swap in for weak links."""

    try:
        roster = load_roster(_pokeapi, pokemon)
    except (PokeAPIClientError, ValueError) as exc:
        return {"error": f"Could not load team: {exc}"}
    recommendations = _service.recommend(roster, max_recommendations)
    return {"recommendations": [asdict(rec) for rec in recommendations]}


@app.tool()
def get_pokemon_data(
    species: Annotated[str, "Species name or id (e.g., 'garchomp')"],
) -> str:
    """Get basic typing and stat info for a Pokémon via PokéAPI."""

    try:
        pokemon = _pokeapi.get_pokemon(species)
    except PokeAPIClientError as exc:
        return f"Error fetching {species}: {exc}"

    return (
        f"Name: {pokemon.name} (#{pokemon.id})\n"
        f"Types: {', '.join(pokemon.types) or 'unknown'}\n"
        f"Abilities: {', '.join(pokemon.abilities) or 'unknown'}\n"
        f"Stats: {pokemon.stats or 'unknown'} (total {pokemon.stat_total})"
    )


@app.tool()
def calculate_type_matchup(
    attacker_type: Annotated[str, "Attacking type"],
    defender_type: Annotated[str, "Defending type"],
) -> str:
    """Return the effectiveness multiplier of an attacking type against a defender type."""

    multiplier = effectiveness(attacker_type.strip(), defender_type.strip())
    return f"{attacker_type.title()} vs {defender_type.title()} -> {multiplier}x"


@app.tool()
def type_profile(
    types: Annotated[List[str], "One or two defending types"],
) -> Dict[str, List[str]]:
    """Weaknesses, resistances, immunities and super-effective targets for a typing."""

    return build_type_profile(types)


def run() -> None:
    """Entry point for `python -m poke_team.server` or console script."""

    print("[poke-team] Starting MCP server. Press Ctrl+C to stop.")
    app.run()


if __name__ == "__main__":
    run()
