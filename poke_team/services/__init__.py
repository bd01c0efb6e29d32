"""Service layer orchestrating analysis for outer surfaces."""

from .team_builder import TeamBuilderService, load_roster

__all__ = ["TeamBuilderService", "load_roster"]
