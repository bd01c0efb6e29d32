"""Weighted scoring of a candidate Pokemon against an analysed team."""

from __future__ import annotations

from typing import Sequence

from ..data.curated import (
    COMPETITIVE_STAPLE_IDS,
    COMPLEMENTARY_TYPE_PAIRS,
    LEGENDARY_ID_RANGES,
    PSEUDO_LEGENDARY_IDS,
    STRONG_OFFENSIVE_TYPES,
)
from ..data.type_chart import damage_multiplier, effectiveness, weaknesses
from ..models import Pokemon, PokemonAnalysis, TeamAnalysis

BASE_SCORE = 20
ROLE_WEIGHT = 0.6
COMPOSITION_WEIGHT = 0.7
DEFENSIVE_WEIGHT = 0.4
OFFENSIVE_WEIGHT = 0.4
SYNERGY_WEIGHT = 0.3
STATS_WEIGHT = 0.3

ROLE_CAP = 35
COMPOSITION_CAP = 25
DEFENSIVE_CAP = 30
OFFENSIVE_CAP = 25
COVERAGE_CAP = 20
SYNERGY_CAP = 20
STATS_CAP = 20

MISSING_ROLE_BONUS = 15
OVERSATURATED_ROLE_COUNT = 3
OVERSATURATED_ROLE_PENALTY = 8

# archetype -> role -> (bonus, only while the team holds fewer than this many)
ARCHETYPE_ROLE_BONUSES = {
    "balance": {"wall": (8, 2), "sweeper": (8, 2), "wallbreaker": (8, 2)},
    "hyper-offense": {"sweeper": (12, None), "wallbreaker": (8, None)},
    "stall": {"wall": (12, None), "support": (8, None), "defogger": (8, None)},
    "bulky-offense": {"wallbreaker": (12, None), "tank": (8, None)},
}

LEGENDARY_BONUS = 8
PSEUDO_LEGENDARY_BONUS = 6
COMPETITIVE_STAPLE_BONUS = 4

CONTRIBUTION_RESIST_BONUS = 20
CONTRIBUTION_UNIQUE_TYPE_BONUS = 10
CONTRIBUTION_GAP_BONUS = 5
CONTRIBUTION_STAT_DIVISOR = 20
CONTRIBUTION_SHARED_WEAKNESS_PENALTY = 5


def _critical_types(team: TeamAnalysis) -> list[str]:
    return [weakness.type for weakness in team.critical_weaknesses]


def role_score(candidate: PokemonAnalysis, team: TeamAnalysis) -> float:
    score = 0.0
    for role in candidate.roles:
        if role in team.missing_roles:
            score += MISSING_ROLE_BONUS

    for role, (bonus, below) in ARCHETYPE_ROLE_BONUSES.get(team.archetype, {}).items():
        if role not in candidate.roles:
            continue
        if below is None or team.role_distribution.get(role, 0) < below:
            score += bonus

    for role in candidate.roles:
        if team.role_distribution.get(role, 0) >= OVERSATURATED_ROLE_COUNT:
            score -= OVERSATURATED_ROLE_PENALTY
    return min(score, ROLE_CAP)


def composition_score(candidate: PokemonAnalysis, team: TeamAnalysis) -> float:
    score = len(candidate.core_compatibility) * 3
    score += candidate.synergy * 0.2

    critical = _critical_types(team)
    new_threats = [t for t in candidate.threats_handled if t not in critical]
    score += min(len(new_threats), 3) * 1.5

    if team.defensive_rating < 60 and any(r in ("wall", "tank") for r in candidate.roles):
        score += 6
    if team.offensive_rating < 60 and any(r in ("sweeper", "wallbreaker") for r in candidate.roles):
        score += 6
    if team.core_strength < 50:
        score += min(candidate.synergy / 3, 5)
    return min(score, COMPOSITION_CAP)


def defensive_score(pokemon: Pokemon, team: TeamAnalysis) -> float:
    score = 0.0
    for weakness in team.critical_weaknesses:
        multiplier = damage_multiplier(weakness.type, pokemon.types)
        if multiplier < 1:
            score += 15 + weakness.count * 3
            if multiplier <= 0.5:
                score += 5

    critical = _critical_types(team)
    shared = [w for w in weaknesses(pokemon.types) if w in critical]
    score -= len(shared) * 8

    if pokemon.bulk > 80:
        score += 8
    if pokemon.bulk > 100:
        score += 5
    return min(score, DEFENSIVE_CAP)


def offensive_score(pokemon: Pokemon, team: TeamAnalysis) -> float:
    coverage = sum(
        4
        for own in pokemon.types
        for gap in team.coverage_gaps
        if effectiveness(own, gap) > 1
    )
    score = float(min(coverage, COVERAGE_CAP))

    avg_offense = (
        pokemon.stat("attack") + pokemon.stat("special-attack") + pokemon.stat("speed")
    ) / 3
    if avg_offense > 90:
        score += 8
    if avg_offense > 110:
        score += 5

    if any(t in STRONG_OFFENSIVE_TYPES for t in pokemon.types):
        score += 5
    return min(score, OFFENSIVE_CAP)


def synergy_score(pokemon: Pokemon, team_types: Sequence[str]) -> float:
    new_types = [t for t in pokemon.types if t not in team_types]
    score = len(new_types) * 6

    for first, second in COMPLEMENTARY_TYPE_PAIRS:
        has_first = first in pokemon.types or first in team_types
        has_second = second in pokemon.types or second in team_types
        if has_first and has_second:
            score += 3

    overlapping = [t for t in pokemon.types if t in team_types]
    score -= len(overlapping) * 3
    return min(score, SYNERGY_CAP)


def stats_score(pokemon: Pokemon) -> float:
    values = list(pokemon.stats.values())
    if not values:
        return 0.0
    score = min(sum(values) / 15, 15)
    if max(values) - min(values) < 60:
        score += 3
    if max(values) > 130:
        score += 2
    return min(score, STATS_CAP)


def rarity_score(pokemon: Pokemon) -> float:
    if any(low <= pokemon.id <= high for low, high in LEGENDARY_ID_RANGES):
        return LEGENDARY_BONUS
    if pokemon.id in PSEUDO_LEGENDARY_IDS:
        return PSEUDO_LEGENDARY_BONUS
    if pokemon.id in COMPETITIVE_STAPLE_IDS:
        return COMPETITIVE_STAPLE_BONUS
    return 0


def recommendation_score(
    pokemon: Pokemon,
    candidate: PokemonAnalysis,
    team: TeamAnalysis,
    team_types: Sequence[str],
) -> int:
    """Overall 0-100 fit of ``pokemon`` for the analysed team."""

    score = BASE_SCORE
    score += role_score(candidate, team) * ROLE_WEIGHT
    score += composition_score(candidate, team) * COMPOSITION_WEIGHT
    score += defensive_score(pokemon, team) * DEFENSIVE_WEIGHT
    score += offensive_score(pokemon, team) * OFFENSIVE_WEIGHT
    score += synergy_score(pokemon, team_types) * SYNERGY_WEIGHT
    score += stats_score(pokemon) * STATS_WEIGHT
    score += rarity_score(pokemon)
    return int(round(max(0, min(score, 100))))


def team_contribution(pokemon: Pokemon, team: Sequence[Pokemon], analysis: TeamAnalysis) -> float:
    """How much ``pokemon`` adds to ``team`` (which is expected to contain it)."""

    contribution = 0.0
    for weakness in analysis.critical_weaknesses:
        if damage_multiplier(weakness.type, pokemon.types) < 1:
            contribution += CONTRIBUTION_RESIST_BONUS

    teammates = [member for member in team if member.id != pokemon.id]
    teammate_types = [t for member in teammates for t in member.types]
    unique = [t for t in pokemon.types if t not in teammate_types]
    contribution += len(unique) * CONTRIBUTION_UNIQUE_TYPE_BONUS

    for own in pokemon.types:
        covered = [gap for gap in analysis.coverage_gaps if effectiveness(own, gap) > 1]
        contribution += len(covered) * CONTRIBUTION_GAP_BONUS

    contribution += pokemon.stat_total / CONTRIBUTION_STAT_DIVISOR

    teammate_weaknesses = {w for member in teammates for w in weaknesses(member.types)}
    shared = [w for w in weaknesses(pokemon.types) if w in teammate_weaknesses]
    contribution -= len(shared) * CONTRIBUTION_SHARED_WEAKNESS_PENALTY
    return contribution
