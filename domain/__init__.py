"""
Domain layer for the TotalGrind training log.

This package contains pure domain models that are independent of
infrastructure concerns (database, API, external services).
"""

from domain.models import (
    BlockSource,
    CoachRequest,
    Day,
    Exercise,
    ProgressEntry,
    ProgressRecord,
    TrainingBlock,
    User,
    UserRole,
    Week,
    WorkSet,
)

__all__ = [
    "TrainingBlock",
    "Week",
    "Day",
    "Exercise",
    "WorkSet",
    "BlockSource",
    "ProgressRecord",
    "ProgressEntry",
    "User",
    "UserRole",
    "CoachRequest",
]
