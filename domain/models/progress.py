"""
Progress history per (user, exercise name).

Each record holds at most one entry per calendar date. Entries only ever move
upwards within a day; see ``backend.core.progress_service.merge_daily_best``.
"""

from datetime import date as Date
from typing import List, Optional

from pydantic import Field

from domain.models.base import CamelModel, new_id


class ProgressEntry(CamelModel):
    """Best estimated and actual max recorded on one calendar date."""

    date: Date
    estimated_max: float = 0
    actual_max: float = 0


class ProgressRecord(CamelModel):
    """Dated best-effort history for one lift of one user."""

    id: str = Field(default_factory=new_id)
    user_id: str
    exercise_name: str
    history: List[ProgressEntry] = Field(default_factory=list)

    def entry_for(self, on: Date) -> Optional[ProgressEntry]:
        """Return the entry recorded on ``on``, if any."""
        for entry in self.history:
            if entry.date == on:
                return entry
        return None
