"""
Coaching use cases.

Covers the coach-athlete invitation flow and the coach's views of linked
athletes:
- invite / accept / reject / remove
- list athletes, read an athlete's progress and blocks
- assign a block to an athlete
"""

import logging
from datetime import date
from typing import List, Optional

from application.exceptions import ForbiddenError, NotFoundError
from application.ports import BlockRepository, ProgressRepository, UserRepository
from application.use_cases.manage_blocks import CreateBlockUseCase
from backend.core import coach_links
from domain.models import BlockSource, CoachRequest, ProgressRecord, TrainingBlock, User, Week

logger = logging.getLogger(__name__)


class CoachingUseCase:
    """
    Use case for coach-athlete links and coach views.

    Dependencies are injected via constructor for testability.
    """

    def __init__(
        self,
        user_repo: UserRepository,
        block_repo: BlockRepository,
        progress_repo: ProgressRepository,
    ) -> None:
        """
        Initialize with required dependencies.

        Args:
            user_repo: Repository for users and their links
            block_repo: Repository for athletes' blocks
            progress_repo: Repository for athletes' progress
        """
        self._user_repo = user_repo
        self._block_repo = block_repo
        self._progress_repo = progress_repo

    # -------------------------------------------------------------------------
    # Lookups
    # -------------------------------------------------------------------------

    def _get_user(self, user_id: str, message: str = "User not found") -> User:
        user = self._user_repo.get_by_id(user_id)
        if user is None:
            raise NotFoundError(message)
        return user

    def _get_coach(self, coach_id: str, message: str = "Only coaches can access this") -> User:
        coach = self._get_user(coach_id)
        if not coach.is_coach:
            raise ForbiddenError(message)
        return coach

    def _get_coached_athlete_id(self, coach_id: str, athlete_id: str) -> str:
        coach = self._get_coach(coach_id)
        if not coach.coaches_athlete(athlete_id):
            raise ForbiddenError("Unauthorized")
        return athlete_id

    # -------------------------------------------------------------------------
    # Invitations (athlete side)
    # -------------------------------------------------------------------------

    def list_invites(self, athlete_id: str) -> List[CoachRequest]:
        """Get the pending coach invitations of an athlete."""
        return self._get_user(athlete_id).coach_requests

    def accept_invite(self, athlete_id: str, coach_id: str) -> None:
        """
        Accept a coach's invitation.

        Raises:
            NotFoundError: If the coach or the invitation does not exist
        """
        athlete = self._get_user(athlete_id)
        coach = self._get_user(coach_id, "Coach not found")
        previous = None
        if athlete.coach_id and athlete.coach_id != coach_id:
            previous = self._user_repo.get_by_id(athlete.coach_id)

        coach_links.accept_invite(athlete, coach, previous)
        self._user_repo.save(athlete)
        self._user_repo.save(coach)
        if previous is not None:
            self._user_repo.save(previous)

    def reject_invite(self, athlete_id: str, coach_id: str) -> None:
        """Reject a coach's invitation; other invitations are kept."""
        athlete = self._get_user(athlete_id)
        coach_links.reject_invite(athlete, coach_id)
        self._user_repo.save(athlete)
        logger.info(f"Athlete {athlete_id} rejected coach {coach_id}")

    # -------------------------------------------------------------------------
    # Coach side
    # -------------------------------------------------------------------------

    def invite_athlete(self, coach_id: str, athlete_email: str) -> None:
        """
        Send an invitation to the athlete registered under ``athlete_email``.

        Raises:
            ForbiddenError: If the requester is not a coach
            NotFoundError: If no user has that email
            ValidationError: Self-invite or duplicate invitation
        """
        coach = self._get_coach(coach_id, "Only coaches can add athletes")
        athlete = self._user_repo.get_by_email(athlete_email.strip().lower())
        if athlete is None:
            raise NotFoundError("Athlete not found")

        coach_links.send_invite(coach, athlete)
        self._user_repo.save(athlete)

    def remove_athlete(self, coach_id: str, athlete_id: str) -> None:
        """
        Remove an athlete from the coach's list and clear the athlete's link.

        Raises:
            ForbiddenError: If the requester is not a coach
        """
        coach = self._get_coach(coach_id, "Only coaches can remove athletes")
        athlete = self._user_repo.get_by_id(athlete_id)

        coach_links.unlink(coach, athlete_id, athlete)
        self._user_repo.save(coach)
        if athlete is not None:
            self._user_repo.save(athlete)

    def list_athletes(self, coach_id: str) -> List[User]:
        """Get the athletes linked to a coach."""
        coach = self._get_coach(coach_id)
        return self._user_repo.get_many(coach.athletes)

    def athlete_progress(self, coach_id: str, athlete_id: str) -> List[ProgressRecord]:
        """Get a linked athlete's progress records."""
        return self._progress_repo.list_by_user(self._get_coached_athlete_id(coach_id, athlete_id))

    def athlete_blocks(self, coach_id: str, athlete_id: str) -> List[TrainingBlock]:
        """Get a linked athlete's blocks."""
        return self._block_repo.list_by_owner(self._get_coached_athlete_id(coach_id, athlete_id))

    def assign_block(
        self,
        coach_id: str,
        athlete_id: str,
        title: Optional[str],
        *,
        start_date: Optional[date] = None,
        weeks: Optional[List[Week]] = None,
    ) -> TrainingBlock:
        """
        Create an assigned block owned by a linked athlete.

        The block is locked against structural edits by the athlete.
        """
        coach = self._get_coach(coach_id, "Unauthorized")
        if not coach.coaches_athlete(athlete_id):
            raise ForbiddenError("Unauthorized")

        return CreateBlockUseCase(self._block_repo).execute(
            athlete_id,
            title,
            source=BlockSource.ASSIGNED,
            assigned_by=coach.name,
            start_date=start_date,
            weeks=weeks,
        )
