"""Team scoring combining type matchups, stat-based roles and archetypes."""

from __future__ import annotations

from typing import Dict, List, Optional, Sequence

from ..data.curated import TEAM_CORES
from ..models import CriticalWeakness, Pokemon, PokemonAnalysis, TeamAnalysis
from ..models.team import ROLES, TEAM_SIZE
from .roles import RoleClassifier
from .weakness import coverage_gaps, simplify_team, tally_weaknesses

ARCHETYPE_MIN_TEAM = 3

# Minimum count per role each archetype expects.
ARCHETYPE_REQUIREMENTS: Dict[str, Dict[str, int]] = {
    "balance": {"wall": 1, "sweeper": 1, "wallbreaker": 1, "hazard-setter": 1},
    "stall": {"wall": 3, "support": 1, "defogger": 1, "hazard-setter": 1},
    "hyper-offense": {"sweeper": 2, "wallbreaker": 1, "hazard-setter": 1},
    "bulky-offense": {"wallbreaker": 2, "tank": 1, "defogger": 1},
    "undefined": {},
}

CORE_BONUS = 25
DISTINCT_TYPE_BONUS = 2

DEFENSE_BASE = 85
DEFENSE_PER_WEAKNESS_CAP = 12
DEFENSE_WEAKNESS_CAP = 40
DEFENSE_BULK_BONUSES = ((75, 10), (90, 10), (105, 5))
DEFENSE_DIVERSITY_BONUSES = ((6, 5), (8, 5))
DEFENSE_FLOOR = 20

OFFENSE_BASE = 60
OFFENSE_GAP_PENALTY = 3
OFFENSE_STAT_BONUSES = ((90, 15), (110, 10))
OFFENSE_SPEED_BONUSES = ((85, 10), (100, 5))

SCORE_BASE = 40
SCORE_COMPLETENESS = 20
SCORE_ROLE_BALANCE_CAP = 15
SCORE_MISSING_ROLE_PENALTY = 2
SCORE_MISSING_ROLE_CAP = 10
SCORE_ARCHETYPE_BONUS = 10
SCORE_NO_ARCHETYPE_PENALTY = 5
SCORE_CORE_WEIGHT = 0.2
SCORE_DEFENSE_WEIGHT = 0.25
SCORE_OFFENSE_WEIGHT = 0.25
SCORE_WEAKNESS_CAP = 15
SCORE_GAP_CAP = 10
SCORE_FULL_TEAM_BONUS = 5
SCORE_SMALL_TEAM_PENALTY = 10
SCORE_QUALITY_BASELINE = 400
SCORE_QUALITY_CAP = 10

GRADE_THRESHOLDS = ((90, "S"), (80, "A"), (70, "B"), (60, "C"), (50, "D"))

NARRATIVE_LIMIT = 4


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(value, high))


def _average(values: Sequence[float]) -> float:
    return sum(values) / len(values) if values else 0.0


def grade_for_score(score: float) -> str:
    for threshold, grade in GRADE_THRESHOLDS:
        if score >= threshold:
            return grade
    return "F"


class TeamAnalyzer:
    """Scores a roster and explains its strengths and weaknesses."""

    def __init__(self, *, role_classifier: Optional[RoleClassifier] = None) -> None:
        self.roles = role_classifier or RoleClassifier()

    def analyze(self, team: Sequence[Pokemon]) -> TeamAnalysis:
        team = list(team)
        team_types = [t for member in team for t in member.types]
        analyses = [self.roles.analyze(member) for member in team]

        critical = tally_weaknesses(simplify_team(team))
        gaps = coverage_gaps(team_types)
        distribution = self.role_distribution(analyses)
        archetype = self.determine_archetype(distribution, team)
        missing = self.missing_roles(distribution, archetype)
        core = self.core_strength(analyses, team)
        defensive = self.defensive_rating(team, critical)
        offensive = self.offensive_rating(team, gaps)

        score = self.overall_score(
            team=team,
            distribution=distribution,
            archetype=archetype,
            missing=missing,
            core=core,
            defensive=defensive,
            offensive=offensive,
            critical=critical,
            gaps=gaps,
        )
        return TeamAnalysis(
            critical_weaknesses=critical,
            coverage_gaps=gaps,
            archetype=archetype,
            role_distribution=distribution,
            missing_roles=missing,
            core_strength=core,
            defensive_rating=defensive,
            offensive_rating=offensive,
            overall_score=score,
            grade=grade_for_score(score),
            strengths=self._strengths(core, defensive, offensive, distribution, archetype),
            weaknesses=self._weaknesses(critical, gaps, missing, defensive, offensive),
        )

    # ------------------------------------------------------------------
    # Roles & archetype
    # ------------------------------------------------------------------
    @staticmethod
    def role_distribution(analyses: Sequence[PokemonAnalysis]) -> Dict[str, int]:
        distribution = {role: 0 for role in ROLES}
        for analysis in analyses:
            for role in analysis.roles:
                distribution[role] += 1
        return distribution

    @staticmethod
    def determine_archetype(distribution: Dict[str, int], team: Sequence[Pokemon]) -> str:
        # First matching rule wins.
        if len(team) < ARCHETYPE_MIN_TEAM:
            return "undefined"
        avg_speed = _average([member.stat("speed") for member in team])
        avg_bulk = _average([member.bulk for member in team])

        if distribution["wall"] >= 3 and distribution["sweeper"] <= 1:
            return "stall"
        if distribution["sweeper"] >= 2 and avg_speed >= 90:
            return "hyper-offense"
        if distribution["wallbreaker"] >= 2 and avg_bulk >= 75:
            return "bulky-offense"
        if distribution["wall"] >= 1 and distribution["sweeper"] >= 1 and distribution["wallbreaker"] >= 1:
            return "balance"
        return "undefined"

    @staticmethod
    def missing_roles(distribution: Dict[str, int], archetype: str) -> List[str]:
        required = ARCHETYPE_REQUIREMENTS.get(archetype, {})
        return [role for role, count in required.items() if distribution.get(role, 0) < count]

    # ------------------------------------------------------------------
    # Ratings
    # ------------------------------------------------------------------
    @staticmethod
    def core_strength(analyses: Sequence[PokemonAnalysis], team: Sequence[Pokemon]) -> float:
        team_types = {t for member in team for t in member.types}
        strength = 0.0
        for core_types in TEAM_CORES.values():
            if all(t in team_types for t in core_types):
                strength += CORE_BONUS
        strength += _average([analysis.synergy for analysis in analyses])
        strength += len(team_types) * DISTINCT_TYPE_BONUS
        return _clamp(strength, 0, 100)

    @staticmethod
    def defensive_rating(team: Sequence[Pokemon], critical: Sequence[CriticalWeakness]) -> float:
        penalty = sum(
            min(weakness.count * 4, DEFENSE_PER_WEAKNESS_CAP) for weakness in critical
        )
        rating = DEFENSE_BASE - min(penalty, DEFENSE_WEAKNESS_CAP)

        avg_bulk = _average([member.bulk for member in team])
        for threshold, bonus in DEFENSE_BULK_BONUSES:
            if avg_bulk > threshold:
                rating += bonus

        distinct_types = len({t for member in team for t in member.types})
        for threshold, bonus in DEFENSE_DIVERSITY_BONUSES:
            if distinct_types >= threshold:
                rating += bonus
        return _clamp(rating, DEFENSE_FLOOR, 100)

    @staticmethod
    def offensive_rating(team: Sequence[Pokemon], gaps: Sequence[str]) -> float:
        rating = OFFENSE_BASE - len(gaps) * OFFENSE_GAP_PENALTY

        avg_offense = _average([member.offense for member in team])
        for threshold, bonus in OFFENSE_STAT_BONUSES:
            if avg_offense > threshold:
                rating += bonus

        avg_speed = _average([member.stat("speed") for member in team])
        for threshold, bonus in OFFENSE_SPEED_BONUSES:
            if avg_speed > threshold:
                rating += bonus
        return _clamp(rating, 0, 100)

    @staticmethod
    def overall_score(
        *,
        team: Sequence[Pokemon],
        distribution: Dict[str, int],
        archetype: str,
        missing: Sequence[str],
        core: float,
        defensive: float,
        offensive: float,
        critical: Sequence[CriticalWeakness],
        gaps: Sequence[str],
    ) -> int:
        size = len(team)
        score = float(SCORE_BASE)
        score += size / TEAM_SIZE * SCORE_COMPLETENESS

        total_roles = sum(distribution.values())
        if size and total_roles:
            score += min(total_roles / size * 10, SCORE_ROLE_BALANCE_CAP)

        score -= min(len(missing) * SCORE_MISSING_ROLE_PENALTY, SCORE_MISSING_ROLE_CAP)

        if size >= ARCHETYPE_MIN_TEAM:
            if archetype != "undefined":
                score += SCORE_ARCHETYPE_BONUS
            else:
                score -= SCORE_NO_ARCHETYPE_PENALTY

        score += core * SCORE_CORE_WEIGHT
        score += defensive * SCORE_DEFENSE_WEIGHT
        score += offensive * SCORE_OFFENSE_WEIGHT

        score -= min(sum(weakness.count * 2 for weakness in critical), SCORE_WEAKNESS_CAP)
        score -= min(len(gaps), SCORE_GAP_CAP)

        if size == TEAM_SIZE:
            score += SCORE_FULL_TEAM_BONUS
        elif size < ARCHETYPE_MIN_TEAM:
            score -= SCORE_SMALL_TEAM_PENALTY

        if size:
            avg_total = _average([member.stat_total for member in team])
            score += _clamp((avg_total - SCORE_QUALITY_BASELINE) / 50, 0, SCORE_QUALITY_CAP)

        return int(round(_clamp(score, 0, 100)))

    # ------------------------------------------------------------------
    # Narrative
    # ------------------------------------------------------------------
    @staticmethod
    def _strengths(
        core: float,
        defensive: float,
        offensive: float,
        distribution: Dict[str, int],
        archetype: str,
    ) -> List[str]:
        strengths: List[str] = []
        if defensive >= 80:
            strengths.append("Excellent defensive coverage")
        elif defensive >= 70:
            strengths.append("Good defensive synergy")

        if offensive >= 80:
            strengths.append("Outstanding offensive pressure")
        elif offensive >= 70:
            strengths.append("Solid offensive coverage")

        if core >= 75:
            strengths.append("Strong type core synergy")

        archetype_notes = {
            "balance": "Well-balanced team composition",
            "hyper-offense": "High-speed aggressive strategy",
            "stall": "Defensive endurance strategy",
            "bulky-offense": "Controlled offensive pressure",
        }
        if archetype in archetype_notes:
            strengths.append(archetype_notes[archetype])

        if distribution["sweeper"] >= 2:
            strengths.append("Multiple win conditions")
        if distribution["wall"] >= 2:
            strengths.append("Strong defensive backbone")
        if distribution["hazard-setter"] >= 1 and distribution["defogger"] >= 1:
            strengths.append("Complete hazard control")
        return strengths[:NARRATIVE_LIMIT]

    @staticmethod
    def _weaknesses(
        critical: Sequence[CriticalWeakness],
        gaps: Sequence[str],
        missing: Sequence[str],
        defensive: float,
        offensive: float,
    ) -> List[str]:
        notes: List[str] = []
        if critical:
            top = critical[0]
            notes.append(f"Vulnerable to {top.type} attacks ({top.count} Pokemon affected)")

        if len(gaps) >= 8:
            notes.append(f"Limited offensive coverage ({len(gaps)} types uncovered)")
        elif len(gaps) >= 5:
            notes.append("Some offensive coverage gaps")

        if defensive < 60:
            notes.append("Poor defensive synergy")
        if offensive < 60:
            notes.append("Weak offensive presence")

        if len(missing) >= 3:
            notes.append("Unclear team strategy")
        elif missing:
            names = " and ".join(role.replace("-", " ") for role in missing[:2])
            suffix = "s" if len(missing) > 1 else ""
            notes.append(f"Missing {names} role{suffix}")
        return notes[:NARRATIVE_LIMIT]
