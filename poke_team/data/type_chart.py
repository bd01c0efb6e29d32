"""Static type chart utilities for Pokemon type matchups."""

from __future__ import annotations

from typing import Dict, Iterable, List

TYPE_ORDER = [
    "normal",
    "fire",
    "water",
    "electric",
    "grass",
    "ice",
    "fighting",
    "poison",
    "ground",
    "flying",
    "psychic",
    "bug",
    "rock",
    "ghost",
    "dragon",
    "dark",
    "steel",
    "fairy",
]

TYPE_CHART: dict[str, dict[str, tuple[str, ...]]] = {
    "normal": {"double": (), "half": ("rock", "steel"), "zero": ("ghost",)},
    "fire": {
        "double": ("grass", "ice", "bug", "steel"),
        "half": ("fire", "water", "rock", "dragon"),
        "zero": (),
    },
    "water": {
        "double": ("fire", "ground", "rock"),
        "half": ("water", "grass", "dragon"),
        "zero": (),
    },
    "electric": {
        "double": ("water", "flying"),
        "half": ("electric", "grass", "dragon"),
        "zero": ("ground",),
    },
    "grass": {
        "double": ("water", "ground", "rock"),
        "half": ("fire", "grass", "poison", "flying", "bug", "dragon", "steel"),
        "zero": (),
    },
    "ice": {
        "double": ("grass", "ground", "flying", "dragon"),
        "half": ("fire", "water", "ice", "steel"),
        "zero": (),
    },
    "fighting": {
        "double": ("normal", "ice", "rock", "dark", "steel"),
        "half": ("poison", "flying", "psychic", "bug", "fairy"),
        "zero": ("ghost",),
    },
    "poison": {
        "double": ("grass", "fairy"),
        "half": ("poison", "ground", "rock", "ghost"),
        "zero": ("steel",),
    },
    "ground": {
        "double": ("fire", "electric", "poison", "rock", "steel"),
        "half": ("grass", "bug"),
        "zero": ("flying",),
    },
    "flying": {
        "double": ("grass", "fighting", "bug"),
        "half": ("electric", "rock", "steel"),
        "zero": (),
    },
    "psychic": {
        "double": ("fighting", "poison"),
        "half": ("psychic", "steel"),
        "zero": ("dark",),
    },
    "bug": {
        "double": ("grass", "psychic", "dark"),
        "half": ("fire", "fighting", "poison", "flying", "ghost", "steel", "fairy"),
        "zero": (),
    },
    "rock": {
        "double": ("fire", "ice", "flying", "bug"),
        "half": ("fighting", "ground", "steel"),
        "zero": (),
    },
    "ghost": {
        "double": ("psychic", "ghost"),
        "half": ("dark",),
        "zero": ("normal",),
    },
    "dragon": {
        "double": ("dragon",),
        "half": ("steel",),
        "zero": ("fairy",),
    },
    "dark": {
        "double": ("psychic", "ghost"),
        "half": ("fighting", "dark", "fairy"),
        "zero": (),
    },
    "steel": {
        "double": ("ice", "rock", "fairy"),
        "half": ("fire", "water", "electric", "steel"),
        "zero": (),
    },
    "fairy": {
        "double": ("fighting", "dragon", "dark"),
        "half": ("fire", "poison", "steel"),
        "zero": (),
    },
}

# Attacking type -> defending type -> multiplier. Missing pairs are neutral.
TYPE_EFFECTIVENESS: Dict[str, Dict[str, float]] = {
    attack: {
        **{defender: 2.0 for defender in relations["double"]},
        **{defender: 0.5 for defender in relations["half"]},
        **{defender: 0.0 for defender in relations["zero"]},
    }
    for attack, relations in TYPE_CHART.items()
}


def effectiveness(attack_type: str, defender_type: str) -> float:
    """Multiplier of a single attacking type against a single defending type."""

    chart = TYPE_EFFECTIVENESS.get(attack_type.lower())
    if chart is None:
        return 1.0
    return chart.get(defender_type.lower(), 1.0)


def damage_multiplier(attack_type: str, defender_types: Iterable[str]) -> float:
    """Compute damage multiplier for an attack hitting defender types."""

    multiplier = 1.0
    for defender in defender_types:
        multiplier *= effectiveness(attack_type, defender)
    return multiplier


def weaknesses(defender_types: Iterable[str]) -> List[str]:
    types = list(defender_types)
    return [attack for attack in TYPE_ORDER if damage_multiplier(attack, types) > 1]


def resistances(defender_types: Iterable[str]) -> List[str]:
    types = list(defender_types)
    return [
        attack
        for attack in TYPE_ORDER
        if 0 < damage_multiplier(attack, types) < 1
    ]


def immunities(defender_types: Iterable[str]) -> List[str]:
    types = list(defender_types)
    return [attack for attack in TYPE_ORDER if damage_multiplier(attack, types) == 0]


def super_effective_against(own_types: Iterable[str]) -> List[str]:
    """Defending types hit for more than 1x, treating own types as attack types.

    Real movesets are not considered: a Fire/Flying Pokemon is assumed to
    attack with Fire and Flying moves.
    """

    targets: List[str] = []
    for own in own_types:
        chart = TYPE_EFFECTIVENESS.get(own.lower(), {})
        for defender, multiplier in chart.items():
            if multiplier > 1 and defender not in targets:
                targets.append(defender)
    return targets


def types_resistant_to(attack_type: str) -> List[str]:
    """Single defending types that take less than neutral damage (immunities included)."""

    return [defender for defender in TYPE_ORDER if effectiveness(attack_type, defender) < 1]


def types_effective_against(defender_type: str) -> List[str]:
    return [attack for attack in TYPE_ORDER if effectiveness(attack, defender_type) > 1]


def type_profile(types: Iterable[str]) -> Dict[str, List[str]]:
    """Weaknesses, resistances, immunities and offensive targets for a typing."""

    types = [t.lower() for t in types]
    return {
        "types": types,
        "weaknesses": weaknesses(types),
        "resistances": resistances(types),
        "immunities": immunities(types),
        "super_effective_against": super_effective_against(types),
    }
