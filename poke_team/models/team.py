"""Core dataclasses shared across the team analysis and recommendation code."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .pokemon import Pokemon

TEAM_SIZE = 6

ROLES = (
    "sweeper",
    "wallbreaker",
    "wall",
    "tank",
    "pivot",
    "hazard-setter",
    "defogger",
    "support",
    "utility",
)

ARCHETYPES = ("balance", "stall", "hyper-offense", "bulky-offense", "undefined")


@dataclass(slots=True)
class TeamSlot:
    pokemon: Optional[Pokemon] = None

    def is_empty(self) -> bool:
        return self.pokemon is None


@dataclass(slots=True)
class TeamRoster:
    """Six fixed slots; the same species may occupy more than one slot."""

    slots: List[TeamSlot] = field(
        default_factory=lambda: [TeamSlot() for _ in range(TEAM_SIZE)]
    )

    @classmethod
    def from_pokemon(cls, pokemon: List[Pokemon]) -> "TeamRoster":
        if len(pokemon) > TEAM_SIZE:
            raise ValueError(f"A team holds at most {TEAM_SIZE} Pokemon")
        roster = cls()
        for index, member in enumerate(pokemon):
            roster.set_slot(index, member)
        return roster

    def set_slot(self, index: int, pokemon: Pokemon) -> None:
        self._check_index(index)
        self.slots[index] = TeamSlot(pokemon=pokemon)

    def clear_slot(self, index: int) -> None:
        self._check_index(index)
        self.slots[index] = TeamSlot()

    def members(self) -> List[Pokemon]:
        return [slot.pokemon for slot in self.slots if slot.pokemon is not None]

    def empty_slots(self) -> List[int]:
        return [index for index, slot in enumerate(self.slots) if slot.is_empty()]

    def slot_of(self, pokemon_id: int) -> int:
        for index, slot in enumerate(self.slots):
            if slot.pokemon is not None and slot.pokemon.id == pokemon_id:
                return index
        return -1

    def is_full(self) -> bool:
        return not self.empty_slots()

    def is_empty(self) -> bool:
        return not self.members()

    def snapshot(self) -> "TeamRoster":
        return TeamRoster(slots=[TeamSlot(pokemon=slot.pokemon) for slot in self.slots])

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self.slots):
            raise IndexError(f"Slot index {index} out of range 0-{len(self.slots) - 1}")


@dataclass(slots=True)
class PokemonAnalysis:
    """Per-Pokemon roles and matchup notes, cached by Pokemon id."""

    roles: List[str] = field(default_factory=list)
    core_compatibility: List[str] = field(default_factory=list)
    threats_handled: List[str] = field(default_factory=list)
    weaknesses_exposed: List[str] = field(default_factory=list)
    synergy: float = 0.0


@dataclass(slots=True)
class CriticalWeakness:
    type: str
    count: int
    pokemon: List[str] = field(default_factory=list)


@dataclass(slots=True)
class TypeResistance:
    type: str
    count: int
    pokemon: List[str] = field(default_factory=list)


@dataclass(slots=True)
class TeamWeaknessReport:
    """Type-only summary of a roster, without roles or scores."""

    critical_weaknesses: List[CriticalWeakness] = field(default_factory=list)
    resistances: List[TypeResistance] = field(default_factory=list)
    coverage_gaps: List[str] = field(default_factory=list)
    recommendations: List[str] = field(default_factory=list)


@dataclass(slots=True)
class TeamAnalysis:
    critical_weaknesses: List[CriticalWeakness] = field(default_factory=list)
    coverage_gaps: List[str] = field(default_factory=list)
    archetype: str = "undefined"
    role_distribution: Dict[str, int] = field(default_factory=dict)
    missing_roles: List[str] = field(default_factory=list)
    core_strength: float = 0.0
    defensive_rating: float = 0.0
    offensive_rating: float = 0.0
    overall_score: int = 0
    grade: str = "F"
    strengths: List[str] = field(default_factory=list)
    weaknesses: List[str] = field(default_factory=list)


@dataclass(slots=True)
class PokemonRecommendation:
    """Suggested addition to an empty slot or replacement of ``swap_slot``."""

    pokemon: Pokemon
    reason: str
    score: int
    benefits: List[str] = field(default_factory=list)
    action: str = "add"
    swap_slot: Optional[int] = None


@dataclass(slots=True)
class TeamReport:
    """Aggregated report returned by the team builder service."""

    weakness_report: TeamWeaknessReport
    analysis: Optional[TeamAnalysis] = None
    recommendations: List[PokemonRecommendation] = field(default_factory=list)
    generation: int = 0
