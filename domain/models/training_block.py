"""
Training block aggregate: block -> weeks -> days -> exercises -> sets.

A block is owned by exactly one user. ``source`` records whether the athlete
wrote it (personal) or a coach assigned it (assigned).
"""

from datetime import date
from enum import Enum
from typing import Iterator, List, Optional, Tuple, Union

from pydantic import ConfigDict, Field

from domain.models.base import CamelModel, new_id


class BlockSource(str, Enum):
    """Who authored a training block."""

    PERSONAL = "personal"
    ASSIGNED = "assigned"


class TrainingModel(CamelModel):
    """Nested training entities keep unknown client fields on round-trip."""

    model_config = ConfigDict(extra="allow")


class WorkSet(TrainingModel):
    """
    A single set inside an exercise.

    ``weight``, ``reps`` and ``rpe`` are stored as submitted. Clients may send
    numbers or numeric strings; values that do not parse are kept but ignored
    by progress aggregation.
    """

    id: str = Field(default_factory=new_id)
    weight: Optional[Union[float, str]] = None
    reps: Optional[Union[int, float, str]] = None
    rpe: Optional[Union[float, str]] = None
    estimated_1rm: Optional[float] = Field(default=None, alias="estimated1rm")
    target_reps: Optional[Union[int, str]] = None
    target_rpe: Optional[float] = None
    is_completed: bool = False


class Exercise(TrainingModel):
    """An exercise performed on a training day."""

    id: str = Field(default_factory=new_id)
    name: str
    sets: List[WorkSet] = Field(default_factory=list)


class Day(TrainingModel):
    """A training day. Completion replaces ``exercises`` wholesale."""

    id: str = Field(default_factory=new_id)
    day_name: str = ""
    is_completed: bool = False
    exercises: List[Exercise] = Field(default_factory=list)
    athlete_notes: Optional[str] = None


class Week(TrainingModel):
    """A week inside a block."""

    id: str = Field(default_factory=new_id)
    week_number: int = 1
    days: List[Day] = Field(default_factory=list)


def default_weeks() -> List[Week]:
    """Skeleton schedule for a freshly created block: one week, one empty day."""
    return [Week(week_number=1, days=[Day(day_name="Day 1")])]


class TrainingBlock(CamelModel):
    """
    Aggregate root for a multi-week training plan.

    Examples:
        >>> block = TrainingBlock(owner_id="u1", title="Peaking")
        >>> block.source
        <BlockSource.PERSONAL: 'personal'>
        >>> len(block.weeks)
        1
    """

    id: str = Field(default_factory=new_id)
    owner_id: str
    title: str
    source: BlockSource = BlockSource.PERSONAL
    assigned_by: Optional[str] = None
    start_date: date = Field(default_factory=date.today)
    weeks: List[Week] = Field(default_factory=default_weeks)

    @property
    def is_assigned(self) -> bool:
        return self.source == BlockSource.ASSIGNED

    def iter_days(self) -> Iterator[Tuple[Week, Day]]:
        """Yield every (week, day) pair in schedule order."""
        for week in self.weeks:
            for day in week.days:
                yield week, day

    def find_day(self, day_id: str) -> Optional[Day]:
        """Return the day with ``day_id`` or None."""
        for _, day in self.iter_days():
            if day.id == day_id:
                return day
        return None


class BlockUpdate(CamelModel):
    """
    Partial structural update for a block.

    Only fields present in the request are applied. ``assigned_by`` may be
    cleared with an explicit null; null is ignored for the other fields.
    """

    title: Optional[str] = None
    start_date: Optional[date] = None
    source: Optional[BlockSource] = None
    assigned_by: Optional[str] = None
    weeks: Optional[List[Week]] = None
