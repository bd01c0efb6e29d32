"""Add/swap suggestions for a roster, ranked by :func:`recommendation_score`."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from threading import Lock
from typing import Callable, Dict, Iterable, List, Optional, Sequence

from ..clients import PokeAPIClient
from ..config import Settings
from ..data.curated import POPULAR_FALLBACK_TYPES, POPULAR_POKEMON_BY_TYPE, STARTER_IDS
from ..data.type_chart import damage_multiplier, effectiveness, types_effective_against, types_resistant_to
from ..models import Pokemon, PokemonRecommendation, TeamAnalysis, TeamRoster
from ..models.team import TEAM_SIZE
from .scoring import recommendation_score, team_contribution
from .team_analyzer import TeamAnalyzer

DEFAULT_MAX_RECOMMENDATIONS = 6
STARTER_SCORE = 85
SWAP_MIN_TEAM = 3
HIGH_STAT_TOTAL = 500
SWAP_STAT_MARGIN = 50
ALTERNATIVE_MIN_GAIN = 10


class TeamRecommendationService:
    """Builds ranked add/swap recommendations from curated candidate pools.

    Candidate Pokemon are fetched through ``pokeapi_client`` (anything with a
    ``get_pokemon_by_id`` method) and cached by id for the service's lifetime.
    """

    def __init__(
        self,
        *,
        pokeapi_client: Optional[PokeAPIClient] = None,
        analyzer: Optional[TeamAnalyzer] = None,
        max_workers: Optional[int] = None,
        debug_logger: Optional[Callable[[str], None]] = None,
    ) -> None:
        self.pokeapi = pokeapi_client or PokeAPIClient()
        self.analyzer = analyzer or TeamAnalyzer()
        self.max_workers = max_workers or Settings.from_env().max_workers
        self._debug_logger = debug_logger
        self._pokemon_cache: Dict[int, Pokemon] = {}
        self._cache_lock = Lock()

    def _debug(self, message: str) -> None:
        if self._debug_logger:
            self._debug_logger(message)

    def analyze_team(self, team: Sequence[Pokemon]) -> TeamAnalysis:
        return self.analyzer.analyze(team)

    def get_team_recommendations(
        self,
        roster: TeamRoster,
        max_recommendations: int = DEFAULT_MAX_RECOMMENDATIONS,
    ) -> List[PokemonRecommendation]:
        team = roster.members()
        if not team:
            return self._starter_recommendations()[:max_recommendations]

        analysis = self.analyzer.analyze(team)
        recommendations: List[PokemonRecommendation] = []

        empty_slots = roster.empty_slots()
        if empty_slots:
            recommendations.extend(self._add_recommendations(team, analysis, len(empty_slots)))
        if len(team) >= SWAP_MIN_TEAM:
            recommendations.extend(self._swap_recommendations(roster, team, analysis))
        if len(team) == TEAM_SIZE:
            recommendations.extend(self._alternative_recommendations(roster, team, analysis))

        on_roster = {member.id for member in team}
        recommendations = [rec for rec in recommendations if rec.pokemon.id not in on_roster]
        recommendations.sort(key=lambda rec: rec.score, reverse=True)
        return recommendations[:max_recommendations]

    # ------------------------------------------------------------------
    # Candidate fetching
    # ------------------------------------------------------------------
    def get_pokemon(self, pokemon_id: int) -> Pokemon:
        with self._cache_lock:
            cached = self._pokemon_cache.get(pokemon_id)
        if cached is not None:
            return cached
        pokemon = self.pokeapi.get_pokemon_by_id(pokemon_id)
        with self._cache_lock:
            return self._pokemon_cache.setdefault(pokemon_id, pokemon)

    def get_pokemon_batch(self, ids: Iterable[int]) -> List[Optional[Pokemon]]:
        """Fetch ids concurrently; results keep input order, failures become ``None``."""

        ids = list(ids)
        if not ids:
            return []
        with ThreadPoolExecutor(max_workers=min(self.max_workers, len(ids))) as pool:
            return list(pool.map(self._try_get_pokemon, ids))

    def get_pokemon_by_type(self, type_name: str, limit: int) -> List[Pokemon]:
        ids = POPULAR_POKEMON_BY_TYPE.get(type_name, [])[: limit + 2]
        results: List[Pokemon] = []
        for pokemon in self.get_pokemon_batch(ids):
            if pokemon is None or type_name not in pokemon.types:
                continue
            results.append(pokemon)
            if len(results) >= limit:
                break
        return results

    def _try_get_pokemon(self, pokemon_id: int) -> Optional[Pokemon]:
        # One bad candidate never aborts the batch, whatever it raised.
        try:
            return self.get_pokemon(pokemon_id)
        except Exception as exc:
            self._debug(f"Failed to fetch Pokemon {pokemon_id}: {exc}")
            return None

    # ------------------------------------------------------------------
    # Recommendation branches
    # ------------------------------------------------------------------
    def _starter_recommendations(self) -> List[PokemonRecommendation]:
        return [
            PokemonRecommendation(
                pokemon=pokemon,
                reason="Great starter Pokemon with balanced stats",
                score=STARTER_SCORE,
                benefits=["Well-rounded stats", "Good type coverage", "Reliable team foundation"],
                action="add",
            )
            for pokemon in self.get_pokemon_batch(STARTER_IDS)
            if pokemon is not None
        ]

    def _add_recommendations(
        self, team: List[Pokemon], analysis: TeamAnalysis, slots_to_fill: int
    ) -> List[PokemonRecommendation]:
        team_types = [t for member in team for t in member.types]
        on_roster = {member.id for member in team}

        wanted: Dict[str, None] = {}
        for weakness in analysis.critical_weaknesses[:2]:
            for candidate in types_resistant_to(weakness.type):
                if candidate not in team_types:
                    wanted.setdefault(candidate)
        for gap in analysis.coverage_gaps[:3]:
            for candidate in types_effective_against(gap):
                if candidate not in team_types:
                    wanted.setdefault(candidate)
        if not wanted:
            for candidate in POPULAR_FALLBACK_TYPES:
                if candidate not in team_types:
                    wanted.setdefault(candidate)

        recommendations: List[PokemonRecommendation] = []
        for type_name in list(wanted)[: slots_to_fill * 2]:
            for pokemon in self.get_pokemon_by_type(type_name, 2):
                if pokemon.id in on_roster:
                    continue
                recommendations.append(
                    PokemonRecommendation(
                        pokemon=pokemon,
                        reason=self._add_reason(pokemon, analysis, team_types),
                        score=self._score(pokemon, analysis, team_types),
                        benefits=self._add_benefits(pokemon, analysis, team_types),
                        action="add",
                    )
                )
        return recommendations

    def _swap_recommendations(
        self, roster: TeamRoster, team: List[Pokemon], analysis: TeamAnalysis
    ) -> List[PokemonRecommendation]:
        team_types = [t for member in team for t in member.types]
        on_roster = {member.id for member in team}
        recommendations: List[PokemonRecommendation] = []

        for weakness in analysis.critical_weaknesses[:1]:
            vulnerable = [
                member for member in team if damage_multiplier(weakness.type, member.types) > 1
            ]
            alternative_types = [
                t for t in types_resistant_to(weakness.type) if t not in team_types
            ]
            for member in vulnerable[:2]:
                slot = roster.slot_of(member.id)
                if slot == -1:
                    continue
                for type_name in alternative_types[:2]:
                    for alternative in self.get_pokemon_by_type(type_name, 1):
                        if alternative.id in on_roster:
                            continue
                        recommendations.append(
                            PokemonRecommendation(
                                pokemon=alternative,
                                reason=(
                                    f"Replace {member.name} with {alternative.name} to "
                                    "improve team balance and fix weaknesses"
                                ),
                                score=self._score(alternative, analysis, team_types),
                                benefits=self._swap_benefits(member, alternative, analysis),
                                action="swap",
                                swap_slot=slot,
                            )
                        )
        return recommendations

    def _alternative_recommendations(
        self, roster: TeamRoster, team: List[Pokemon], analysis: TeamAnalysis
    ) -> List[PokemonRecommendation]:
        team_types = [t for member in team for t in member.types]
        ranked = sorted(team, key=lambda member: team_contribution(member, team, analysis))
        recommendations: List[PokemonRecommendation] = []

        for member in ranked[:2]:
            slot = roster.slot_of(member.id)
            for alternative in self._better_alternatives(member, team, analysis)[:2]:
                recommendations.append(
                    PokemonRecommendation(
                        pokemon=alternative,
                        reason=f"Better team synergy than {member.name}",
                        score=self._score(alternative, analysis, team_types),
                        benefits=self._swap_benefits(member, alternative, analysis),
                        action="swap",
                        swap_slot=slot,
                    )
                )
        return recommendations

    def _better_alternatives(
        self, current: Pokemon, team: List[Pokemon], analysis: TeamAnalysis
    ) -> List[Pokemon]:
        without_current = [member for member in team if member.id != current.id]
        on_roster = {member.id for member in team}
        baseline = team_contribution(current, team, analysis)

        types_to_try = list(
            dict.fromkeys(current.types + self._complementary_types(without_current, analysis))
        )
        alternatives: List[Pokemon] = []
        for type_name in types_to_try[:4]:
            for pokemon in self.get_pokemon_by_type(type_name, 3):
                if pokemon.id in on_roster:
                    continue
                gain = team_contribution(pokemon, without_current + [pokemon], analysis)
                if gain > baseline + ALTERNATIVE_MIN_GAIN:
                    alternatives.append(pokemon)
        return alternatives[:3]

    @staticmethod
    def _complementary_types(team: List[Pokemon], analysis: TeamAnalysis) -> List[str]:
        team_types = [t for member in team for t in member.types]
        complementary: List[str] = []
        for weakness in analysis.critical_weaknesses[:2]:
            complementary.extend(
                t for t in types_resistant_to(weakness.type) if t not in team_types
            )
        for gap in analysis.coverage_gaps[:3]:
            complementary.extend(
                t for t in types_effective_against(gap) if t not in team_types
            )
        return list(dict.fromkeys(complementary))

    # ------------------------------------------------------------------
    # Scoring & text
    # ------------------------------------------------------------------
    def _score(self, pokemon: Pokemon, analysis: TeamAnalysis, team_types: List[str]) -> int:
        candidate = self.analyzer.roles.analyze(pokemon)
        return recommendation_score(pokemon, candidate, analysis, team_types)

    @staticmethod
    def _add_benefits(pokemon: Pokemon, analysis: TeamAnalysis, team_types: List[str]) -> List[str]:
        benefits: List[str] = []
        for weakness in analysis.critical_weaknesses:
            if damage_multiplier(weakness.type, pokemon.types) < 1:
                benefits.append(f"Resists {weakness.type} attacks")

        coverage = [
            t for t in pokemon.types
            if any(effectiveness(t, gap) > 1 for gap in analysis.coverage_gaps)
        ]
        if coverage:
            benefits.append(f"Adds coverage against {', '.join(coverage[:2])}")

        new_types = [t for t in pokemon.types if t not in team_types]
        if new_types:
            benefits.append(f"Adds new {'/'.join(new_types)} typing")

        if pokemon.stat_total >= HIGH_STAT_TOTAL:
            benefits.append("High base stat total")
        return benefits

    @staticmethod
    def _swap_benefits(old: Pokemon, new: Pokemon, analysis: TeamAnalysis) -> List[str]:
        benefits: List[str] = []
        for weakness in analysis.critical_weaknesses:
            before = damage_multiplier(weakness.type, old.types)
            after = damage_multiplier(weakness.type, new.types)
            if before > 1 and after <= 1:
                benefits.append(f"Fixes {weakness.type} weakness")
        if new.stat_total > old.stat_total + SWAP_STAT_MARGIN:
            benefits.append("Better overall stats")
        return benefits

    def _add_reason(self, pokemon: Pokemon, analysis: TeamAnalysis, team_types: List[str]) -> str:
        candidate = self.analyzer.roles.analyze(pokemon)

        filled = [role for role in analysis.missing_roles if role in candidate.roles]
        if filled:
            names = " and ".join(role.replace("-", " ") for role in filled)
            return f"Fills critical {names} role needed for your {analysis.archetype} team"

        if analysis.archetype == "hyper-offense" and "sweeper" in candidate.roles:
            return "Fast sweeper perfect for your hyper-offensive team strategy"
        if analysis.archetype == "stall" and "wall" in candidate.roles:
            return "Defensive wall that strengthens your stall strategy"
        if analysis.archetype == "balance" and len(candidate.roles) >= 2:
            return "Versatile Pokemon that fills multiple roles in your balanced team"

        for weakness in analysis.critical_weaknesses:
            if damage_multiplier(weakness.type, pokemon.types) < 1:
                return (
                    f"Resists {weakness.type} attacks that threaten "
                    f"{weakness.count} of your Pokemon"
                )

        coverage = [
            t for t in pokemon.types
            if any(effectiveness(t, gap) > 1 for gap in analysis.coverage_gaps)
        ]
        if coverage:
            return f"Provides super effective coverage against {' and '.join(coverage[:2])} types"

        if candidate.core_compatibility:
            return f"Completes {candidate.core_compatibility[0]} core synergy"

        if analysis.defensive_rating < 70 and any(r in ("wall", "tank") for r in candidate.roles):
            return f"Improves team's defensive rating (currently {analysis.defensive_rating:g}/100)"
        if analysis.offensive_rating < 70 and any(
            r in ("sweeper", "wallbreaker") for r in candidate.roles
        ):
            return f"Boosts team's offensive power (currently {analysis.offensive_rating:g}/100)"

        new_types = [t for t in pokemon.types if t not in team_types]
        if new_types:
            return f"Adds valuable {'/'.join(new_types)} typing to your team"
        return "High-tier Pokemon with excellent competitive viability"
