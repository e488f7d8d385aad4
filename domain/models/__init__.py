"""
Domain models for the TotalGrind training log.

Pure pydantic models, independent of persistence and HTTP concerns:
- TrainingBlock: aggregate root holding weeks -> days -> exercises -> sets
- ProgressRecord: per (user, lift) history of dated best efforts
- User: role, coach link, athlete list and pending coach requests

Usage:
    >>> from domain.models import TrainingBlock, Week, Day, Exercise, WorkSet

    >>> block = TrainingBlock(
    ...     owner_id="u1",
    ...     title="Strength Block",
    ...     weeks=[
    ...         Week(
    ...             week_number=1,
    ...             days=[
    ...                 Day(
    ...                     day_name="Day 1",
    ...                     exercises=[
    ...                         Exercise(
    ...                             name="Comp SQ",
    ...                             sets=[WorkSet(weight=160, reps=5, rpe=7)],
    ...                         )
    ...                     ],
    ...                 )
    ...             ],
    ...         )
    ...     ],
    ... )

    >>> # Serialize with camelCase keys
    >>> payload = block.model_dump(mode="json", by_alias=True)
"""

from domain.models.base import CamelModel, new_id
from domain.models.progress import ProgressEntry, ProgressRecord
from domain.models.training_block import (
    BlockSource,
    BlockUpdate,
    Day,
    Exercise,
    TrainingBlock,
    Week,
    WorkSet,
    default_weeks,
)
from domain.models.user import CoachRequest, User, UserRole

__all__ = [
    # Base
    "CamelModel",
    "new_id",
    # Training blocks
    "TrainingBlock",
    "Week",
    "Day",
    "Exercise",
    "WorkSet",
    "BlockSource",
    "BlockUpdate",
    "default_weeks",
    # Progress
    "ProgressRecord",
    "ProgressEntry",
    # Users
    "User",
    "UserRole",
    "CoachRequest",
]
