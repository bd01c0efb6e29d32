"""Type-only roster analysis: shared weaknesses, resistances and coverage gaps."""

from __future__ import annotations

from typing import Dict, Iterable, List, Sequence, Tuple

from ..data.type_chart import (
    TYPE_ORDER,
    effectiveness,
    resistances,
    types_effective_against,
    types_resistant_to,
    weaknesses,
)
from ..models import CriticalWeakness, Pokemon, TeamWeaknessReport, TypeResistance

TeamMember = Tuple[str, Sequence[str]]

CRITICAL_WEAKNESS_THRESHOLD = 2


def simplify_team(pokemon: Iterable[Pokemon]) -> List[TeamMember]:
    return [(member.name, list(member.types)) for member in pokemon]


def tally_weaknesses(team: Sequence[TeamMember]) -> List[CriticalWeakness]:
    """Attacking types at least two members are weak to, most shared first."""

    counts: Dict[str, List[str]] = {}
    for name, types in team:
        for attack in weaknesses(types):
            counts.setdefault(attack, []).append(name)
    critical = [
        CriticalWeakness(type=attack, count=len(names), pokemon=names)
        for attack, names in counts.items()
        if len(names) >= CRITICAL_WEAKNESS_THRESHOLD
    ]
    return sorted(critical, key=lambda weakness: weakness.count, reverse=True)


def coverage_gaps(team_types: Sequence[str]) -> List[str]:
    """Defending types none of the team's own types hit super-effectively."""

    return [
        defender
        for defender in TYPE_ORDER
        if not any(effectiveness(attack, defender) > 1 for attack in team_types)
    ]


def analyze_team_weaknesses(team: Sequence[TeamMember]) -> TeamWeaknessReport:
    critical = tally_weaknesses(team)

    resist_counts: Dict[str, List[str]] = {}
    for name, types in team:
        for attack in resistances(types):
            resist_counts.setdefault(attack, []).append(name)
    resisted = sorted(
        (
            TypeResistance(type=attack, count=len(names), pokemon=names)
            for attack, names in resist_counts.items()
        ),
        key=lambda resistance: resistance.count,
        reverse=True,
    )

    team_types = [t for _, types in team for t in types]
    gaps = coverage_gaps(team_types)

    recommendations: List[str] = []
    if critical:
        top = critical[0]
        missing = [t for t in types_resistant_to(top.type) if t not in team_types]
        if missing:
            recommendations.append(
                f"Consider adding a {' or '.join(missing[:3])} type to resist "
                f"{top.type} attacks (affects {top.count} Pokemon)"
            )
        else:
            recommendations.append(
                f"Your team has good type diversity, but {top.count} Pokemon "
                f"share a {top.type} weakness"
            )

    for gap in gaps[:2]:
        missing = [t for t in types_effective_against(gap) if t not in team_types]
        if missing:
            recommendations.append(
                f"Add {' or '.join(missing[:2])} type to cover {gap} weakness"
            )

    return TeamWeaknessReport(
        critical_weaknesses=critical,
        resistances=resisted,
        coverage_gaps=gaps,
        recommendations=recommendations,
    )
