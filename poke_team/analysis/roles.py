"""Stat-based role classification for individual Pokemon."""

from __future__ import annotations

from threading import Lock
from typing import Dict, List

from ..data.curated import (
    CORE_COMBINATIONS,
    HAZARD_REMOVER_IDS,
    HAZARD_REMOVER_TYPES,
    HAZARD_SETTER_IDS,
    HAZARD_SETTER_TYPES,
    STRONG_SYNERGY_TYPES,
    SUPPORT_IDS,
    SUPPORT_TYPES,
)
from ..data.type_chart import TYPE_ORDER, damage_multiplier, weaknesses
from ..models import Pokemon, PokemonAnalysis

SWEEPER_MIN_OFFENSE = 100
SWEEPER_MIN_SPEED = 90
SWEEPER_MIN_TOTAL = 500
WALLBREAKER_MIN_OFFENSE = 120
WALLBREAKER_MIN_TOTAL = 480
WALL_MIN_HP = 100
WALL_MIN_DEFENSE = 90
WALL_MAX_OFFENSE = 90
TANK_MIN_BULK = 85
TANK_OFFENSE_RANGE = (70, 110)
PIVOT_MIN_SPEED = 80
PIVOT_MIN_BULK = 75
PIVOT_MIN_TOTAL = 480
HAZARD_SETTER_MIN_BULK = 70
DEFOGGER_MIN_SPEED = 80
DEFOGGER_MIN_BULK = 80
SUPPORT_MIN_BULK = 70

MAX_SYNERGY = 50


def classify_roles(pokemon: Pokemon) -> List[str]:
    """Roles a Pokemon can fill based on base stats; never empty."""

    offense = pokemon.offense
    bulk = pokemon.bulk
    total = pokemon.stat_total
    hp = pokemon.stat("hp")
    speed = pokemon.stat("speed")
    types = set(pokemon.types)
    roles: List[str] = []

    if offense >= SWEEPER_MIN_OFFENSE and speed >= SWEEPER_MIN_SPEED and total >= SWEEPER_MIN_TOTAL:
        roles.append("sweeper")
    if offense >= WALLBREAKER_MIN_OFFENSE and total >= WALLBREAKER_MIN_TOTAL:
        roles.append("wallbreaker")
    if (
        hp >= WALL_MIN_HP
        and (pokemon.stat("defense") >= WALL_MIN_DEFENSE or pokemon.stat("special-defense") >= WALL_MIN_DEFENSE)
        and offense < WALL_MAX_OFFENSE
    ):
        roles.append("wall")
    low, high = TANK_OFFENSE_RANGE
    if bulk >= TANK_MIN_BULK and low <= offense < high:
        roles.append("tank")
    if speed >= PIVOT_MIN_SPEED and bulk >= PIVOT_MIN_BULK and total >= PIVOT_MIN_TOTAL:
        roles.append("pivot")
    if (pokemon.id in HAZARD_SETTER_IDS or types & HAZARD_SETTER_TYPES) and bulk >= HAZARD_SETTER_MIN_BULK:
        roles.append("hazard-setter")
    if (pokemon.id in HAZARD_REMOVER_IDS or types & HAZARD_REMOVER_TYPES) and (
        speed >= DEFOGGER_MIN_SPEED or bulk >= DEFOGGER_MIN_BULK
    ):
        roles.append("defogger")
    if (pokemon.id in SUPPORT_IDS or types & SUPPORT_TYPES) and bulk >= SUPPORT_MIN_BULK:
        roles.append("support")

    if not roles:
        roles.append("utility")
    return roles


def core_compatibility(types: List[str]) -> List[str]:
    return [
        name
        for name, core_types in CORE_COMBINATIONS.items()
        if any(t in core_types for t in types)
    ]


def threats_handled(types: List[str]) -> List[str]:
    """Attacking types this typing takes reduced (or no) damage from."""

    return [attack for attack in TYPE_ORDER if damage_multiplier(attack, types) < 1]


def base_synergy(pokemon: Pokemon) -> float:
    synergy = min(pokemon.stat_total / 15, 30)
    if any(t in STRONG_SYNERGY_TYPES for t in pokemon.types):
        synergy += 10
    if len(pokemon.types) == 2:
        synergy += 5
    return min(synergy, MAX_SYNERGY)


class RoleClassifier:
    """Caches :class:`PokemonAnalysis` per Pokemon id for the classifier's lifetime."""

    def __init__(self) -> None:
        self._cache: Dict[int, PokemonAnalysis] = {}
        self._lock = Lock()

    def analyze(self, pokemon: Pokemon) -> PokemonAnalysis:
        with self._lock:
            cached = self._cache.get(pokemon.id)
        if cached is not None:
            return cached

        analysis = PokemonAnalysis(
            roles=classify_roles(pokemon),
            core_compatibility=core_compatibility(pokemon.types),
            threats_handled=threats_handled(pokemon.types),
            weaknesses_exposed=weaknesses(pokemon.types),
            synergy=base_synergy(pokemon),
        )
        with self._lock:
            return self._cache.setdefault(pokemon.id, analysis)

    def clear(self) -> None:
        with self._lock:
            self._cache.clear()

    def __len__(self) -> int:
        return len(self._cache)
