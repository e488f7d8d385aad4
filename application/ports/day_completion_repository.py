"""
Day completion repository port (interface).

Commits a completed day's block and the progress records derived from it as a
single unit, so a failure never leaves a day marked complete without its
progress (or the reverse).
"""

from typing import List, Protocol

from domain.models import ProgressRecord, TrainingBlock


class DayCompletionRepository(Protocol):
    """Atomic writer for the day-completion flow."""

    def commit(
        self,
        block: TrainingBlock,
        progress_records: List[ProgressRecord],
    ) -> None:
        """
        Persist ``block`` and every record in ``progress_records`` atomically.

        Args:
            block: The block containing the completed day (written in full)
            progress_records: Merged progress records to upsert (may be empty)

        Raises:
            DayCompletionError: If the commit failed; nothing was written
        """
        ...
