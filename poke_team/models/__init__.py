"""Shared dataclasses for Pokemon team building."""

from .pokemon import (
    Move,
    NamedResource,
    Pokemon,
    PokemonSpecies,
    ResourcePage,
    format_move_name,
    pokemon_image_url,
)
from .team import (
    CriticalWeakness,
    PokemonAnalysis,
    PokemonRecommendation,
    TeamAnalysis,
    TeamReport,
    TeamRoster,
    TeamSlot,
    TeamWeaknessReport,
    TypeResistance,
)

__all__ = [
    "Move",
    "NamedResource",
    "Pokemon",
    "PokemonSpecies",
    "ResourcePage",
    "format_move_name",
    "pokemon_image_url",
    "CriticalWeakness",
    "PokemonAnalysis",
    "PokemonRecommendation",
    "TeamAnalysis",
    "TeamReport",
    "TeamRoster",
    "TeamSlot",
    "TeamWeaknessReport",
    "TypeResistance",
]
