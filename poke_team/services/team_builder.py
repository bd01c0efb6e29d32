"""High-level team builder service combining analysis and recommendations."""

from __future__ import annotations

from threading import Lock
from typing import Callable, Optional, Sequence, Union

from ..analysis import TeamRecommendationService, analyze_team_weaknesses, simplify_team
from ..analysis.recommendations import DEFAULT_MAX_RECOMMENDATIONS
from ..models import TeamReport, TeamRoster


class TeamBuilderService:
    """Coordinates roster analysis and recommendations for a UI or API caller.

    ``refresh`` tags each run with a generation number. When a newer refresh
    starts before an older one finishes, the older result is discarded and
    ``None`` is returned for it.
    """

    def __init__(
        self,
        *,
        recommender: Optional[TeamRecommendationService] = None,
        max_recommendations: int = DEFAULT_MAX_RECOMMENDATIONS,
        debug_logger: Optional[Callable[[str], None]] = None,
    ) -> None:
        self.recommender = recommender or TeamRecommendationService(debug_logger=debug_logger)
        self.max_recommendations = max_recommendations
        self._debug_logger = debug_logger
        self._generation = 0
        self._generation_lock = Lock()
        self.latest: Optional[TeamReport] = None

    def _debug(self, message: str) -> None:
        if self._debug_logger:
            self._debug_logger(message)

    def analyze(self, roster: TeamRoster) -> TeamReport:
        """Type-only report always; full scoring when it succeeds."""

        team = roster.members()
        report = TeamReport(weakness_report=analyze_team_weaknesses(simplify_team(team)))
        try:
            report.analysis = self.recommender.analyze_team(team)
        except Exception as exc:
            self._debug(f"Full team analysis failed, using weakness report only: {exc}")
        return report

    def recommend(self, roster: TeamRoster, max_recommendations: Optional[int] = None):
        limit = self.max_recommendations if max_recommendations is None else max_recommendations
        try:
            return self.recommender.get_team_recommendations(roster, limit)
        except Exception as exc:
            self._debug(f"Recommendations failed: {exc}")
            return []

    def refresh(self, roster: TeamRoster) -> Optional[TeamReport]:
        with self._generation_lock:
            self._generation += 1
            generation = self._generation

        snapshot = roster.snapshot()
        report = self.analyze(snapshot)
        report.recommendations = self.recommend(snapshot)
        report.generation = generation

        with self._generation_lock:
            if generation != self._generation:
                self._debug(
                    f"Discarding stale refresh {generation}; latest is {self._generation}"
                )
                return None
            self.latest = report
        return report


def load_roster(client, identifiers: Sequence[Union[str, int]]) -> TeamRoster:
    """Fetch each name or id in order and place it in consecutive slots."""

    cleaned = [str(identifier).strip() for identifier in identifiers if str(identifier).strip()]
    return TeamRoster.from_pokemon([client.get_pokemon(identifier) for identifier in cleaned])
