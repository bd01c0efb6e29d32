"""Analysis utilities for Pokemon teams."""

from .recommendations import TeamRecommendationService
from .roles import RoleClassifier, classify_roles
from .team_analyzer import TeamAnalyzer, grade_for_score
from .weakness import analyze_team_weaknesses, simplify_team

__all__ = [
    "RoleClassifier",
    "TeamAnalyzer",
    "TeamRecommendationService",
    "analyze_team_weaknesses",
    "classify_roles",
    "grade_for_score",
    "simplify_team",
]
