"""FastAPI web server exposing Pokemon team building tools via REST API."""

from __future__ import annotations

from dataclasses import asdict
from typing import Any, Dict, List

from fastapi import FastAPI, HTTPException, Query
from fastapi.responses import HTMLResponse
from pydantic import BaseModel, Field

from .analysis import TeamRecommendationService
from .clients import NotFoundError, PokeAPIClient, PokeAPIClientError
from .data.presentation import damage_class_color, type_color
from .data.type_chart import effectiveness, type_profile
from .models import TeamRoster
from .services import TeamBuilderService, load_roster

app = FastAPI(
    title="Poke-Team Web API",
    description="REST API for Pokemon team analysis and recommendations",
    version="0.1.0",
)

# Shared services (same wiring as the MCP server)
_pokeapi = PokeAPIClient()
_service = TeamBuilderService(
    recommender=TeamRecommendationService(pokeapi_client=_pokeapi),
)


# Pydantic models for request/response
class TeamRequest(BaseModel):
    """Request model for team endpoints."""

    pokemon: List[str] = Field(default_factory=list, max_length=6)
    max_recommendations: int = Field(default=6, ge=1, le=20)


class AnalyzeTeamResponse(BaseModel):
    """Response model for team analysis."""

    result: Dict[str, Any]


class RecommendationsResponse(BaseModel):
    """Response model for team recommendations."""

    result: List[Dict[str, Any]]


class PokemonDataResponse(BaseModel):
    """Response model for a single Pokemon."""

    result: Dict[str, Any]


class TypeMatchupResponse(BaseModel):
    """Response model for type matchup calculation."""

    attacker_type: str
    defender_type: str
    multiplier: float


class TypeProfileResponse(BaseModel):
    result: Dict[str, List[str]]


class SearchResponse(BaseModel):
    result: List[Dict[str, Any]]


def _load_roster(names: List[str]) -> TeamRoster:
    try:
        return load_roster(_pokeapi, names)
    except NotFoundError as exc:
        raise HTTPException(status_code=404, detail=f"Unknown Pokemon: {exc}")
    except PokeAPIClientError as exc:
        raise HTTPException(status_code=502, detail=f"PokeAPI unavailable: {exc}")
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc))


def _pokemon_payload(pokemon) -> Dict[str, Any]:
    payload = asdict(pokemon)
    payload["stat_total"] = pokemon.stat_total
    payload["image_url"] = pokemon.image_url
    payload["type_colors"] = {t: type_color(t) for t in pokemon.types}
    return payload


@app.get("/", response_class=HTMLResponse)
async def root():
    """Serve a minimal landing page."""
    return (
        "<html><body><h1>Poke-Team Web API</h1>"
        "<p>See <a href=\"/docs\">/docs</a> for the available endpoints.</p></body></html>"
    )


@app.post("/api/analyze_team", response_model=AnalyzeTeamResponse)
def analyze_team(request: TeamRequest) -> AnalyzeTeamResponse:
    """Score the submitted team and report shared weaknesses."""
    roster = _load_roster(request.pokemon)
    return AnalyzeTeamResponse(result=asdict(_service.analyze(roster)))


@app.post("/api/recommendations", response_model=RecommendationsResponse)
def recommendations(request: TeamRequest) -> RecommendationsResponse:
    """Suggest additions and swaps for the submitted team."""
    roster = _load_roster(request.pokemon)
    recs = _service.recommend(roster, request.max_recommendations)
    return RecommendationsResponse(result=[asdict(rec) for rec in recs])


@app.get("/api/pokemon/{name_or_id}", response_model=PokemonDataResponse)
def get_pokemon_data(name_or_id: str) -> PokemonDataResponse:
    """Get typing, stats and artwork for a Pokémon via PokéAPI."""
    try:
        pokemon = _pokeapi.get_pokemon(name_or_id)
    except NotFoundError:
        raise HTTPException(status_code=404, detail=f"Unknown Pokemon: {name_or_id}")
    except PokeAPIClientError as exc:
        raise HTTPException(status_code=502, detail=f"PokeAPI unavailable: {exc}")
    return PokemonDataResponse(result=_pokemon_payload(pokemon))


@app.get("/api/type_matchup", response_model=TypeMatchupResponse)
def calculate_type_matchup(
    attacker_type: str = Query(..., description="Attacking type"),
    defender_type: str = Query(..., description="Defending type"),
) -> TypeMatchupResponse:
    """Return the effectiveness multiplier of an attacking type against a defender type."""
    return TypeMatchupResponse(
        attacker_type=attacker_type.lower(),
        defender_type=defender_type.lower(),
        multiplier=effectiveness(attacker_type.strip(), defender_type.strip()),
    )


@app.get("/api/type_profile", response_model=TypeProfileResponse)
def get_type_profile(
    types: List[str] = Query(..., description="One or two defending types"),
) -> TypeProfileResponse:
    return TypeProfileResponse(result=type_profile(types))


@app.get("/api/search", response_model=SearchResponse)
def search_pokemon(q: str = Query(..., min_length=1)) -> SearchResponse:
    try:
        found = _pokeapi.search_pokemon(q)
    except PokeAPIClientError as exc:
        raise HTTPException(status_code=502, detail=f"PokeAPI unavailable: {exc}")
    return SearchResponse(result=[_pokemon_payload(pokemon) for pokemon in found])


@app.get("/api/moves/search", response_model=SearchResponse)
def search_moves(q: str = Query(..., min_length=1)) -> SearchResponse:
    try:
        moves = _pokeapi.search_moves(q)
    except PokeAPIClientError as exc:
        raise HTTPException(status_code=502, detail=f"PokeAPI unavailable: {exc}")
    result = []
    for move in moves:
        payload = asdict(move)
        payload["display_name"] = move.display_name
        payload["color"] = damage_class_color(move.damage_class or "")
        result.append(payload)
    return SearchResponse(result=result)


def run(host: str = "127.0.0.1", port: int = 8000) -> None:
    """Entry point for running the web server."""
    import uvicorn

    print(f"[poke-team-web] Starting web server at http://{host}:{port}")
    print("[poke-team-web] Press Ctrl+C to stop.")
    uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    run()
