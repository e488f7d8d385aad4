"""
CompleteDay Use Case.

Orchestrates the day-completion flow:
1. Locate the day inside the caller's own blocks
2. Replace its exercises and mark it completed
3. Summarize competition lifts (best e1RM and heaviest weight)
4. Merge the summaries into the caller's progress history (same-day upsert)
5. Commit the block and the merged progress records atomically
"""

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Callable, List, Optional, Tuple

from application.exceptions import NotFoundError
from application.ports import BlockRepository, DayCompletionRepository, ProgressRepository
from backend.core.one_rep_max import summarize_competition_lifts
from backend.core.progress_service import merge_daily_best
from domain.models import Day, Exercise, ProgressRecord, TrainingBlock

logger = logging.getLogger(__name__)


@dataclass
class CompleteDayResult:
    """Result of the CompleteDay use case execution."""

    block_id: str
    day_id: str
    progress_records: List[ProgressRecord] = field(default_factory=list)


class CompleteDayUseCase:
    """
    Use case for submitting a completed training day.

    Day ids are only unique within one user's blocks, so the search is
    restricted to blocks owned by the caller.

    Usage:
        >>> use_case = CompleteDayUseCase(
        ...     block_repo=block_repo,
        ...     progress_repo=progress_repo,
        ...     day_completion_repo=day_completion_repo,
        ... )
        >>> result = use_case.execute(
        ...     user_id="user-123",
        ...     day_id="d1",
        ...     exercises=[Exercise(name="Comp SQ", sets=[...])],
        ... )
    """

    def __init__(
        self,
        block_repo: BlockRepository,
        progress_repo: ProgressRepository,
        day_completion_repo: DayCompletionRepository,
        *,
        today: Callable[[], date] = date.today,
    ) -> None:
        """
        Initialize the use case with required dependencies.

        Args:
            block_repo: Repository for reading the caller's blocks
            progress_repo: Repository for reading existing progress records
            day_completion_repo: Atomic writer for block + progress
            today: Clock returning the server-local calendar date
        """
        self._block_repo = block_repo
        self._progress_repo = progress_repo
        self._day_completion_repo = day_completion_repo
        self._today = today

    def execute(
        self,
        user_id: str,
        day_id: str,
        exercises: List[Exercise],
        *,
        athlete_notes: Optional[str] = None,
    ) -> CompleteDayResult:
        """
        Execute the day-completion workflow.

        Args:
            user_id: Authenticated user submitting the day
            day_id: ID of the day within one of the user's blocks
            exercises: Full replacement exercise list
            athlete_notes: Optional notes stored on the day

        Returns:
            CompleteDayResult with the merged progress records

        Raises:
            NotFoundError: If no block of the user contains the day
            DayCompletionError: If the atomic commit failed
        """
        block, day = self._locate_day(user_id, day_id)

        day.exercises = list(exercises)
        day.is_completed = True
        if athlete_notes is not None:
            day.athlete_notes = athlete_notes

        on = self._today()
        records: List[ProgressRecord] = []
        for name, summary in summarize_competition_lifts(day.exercises).items():
            record = self._progress_repo.get(user_id, name)
            if record is None:
                record = ProgressRecord(user_id=user_id, exercise_name=name)
            records.append(merge_daily_best(record, summary, on))

        self._day_completion_repo.commit(block, records)
        logger.info(
            f"Day {day_id} completed in block {block.id} for user {user_id} "
            f"({len(records)} progress records updated)"
        )
        return CompleteDayResult(block_id=block.id, day_id=day.id, progress_records=records)

    def _locate_day(self, user_id: str, day_id: str) -> Tuple[TrainingBlock, Day]:
        for block in self._block_repo.list_by_owner(user_id):
            day = block.find_day(day_id)
            if day is not None:
                return block, day
        logger.warning(f"Day {day_id} not found in blocks of user {user_id}")
        raise NotFoundError("Day not found")
