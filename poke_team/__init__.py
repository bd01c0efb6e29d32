"""Pokemon team analysis and recommendation utilities."""

from .analysis import TeamAnalyzer, TeamRecommendationService, analyze_team_weaknesses
from .services import TeamBuilderService

__all__ = [
    "TeamAnalyzer",
    "TeamBuilderService",
    "TeamRecommendationService",
    "analyze_team_weaknesses",
]
