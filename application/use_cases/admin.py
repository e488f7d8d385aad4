"""
Admin use cases.

User management for the admin dashboard: stats, user listing and detail with
best competition lifts, user edit/delete, direct coach-athlete assignment and
block creation on behalf of any user. Callers must already be authorized as
admins (see ``api.deps.require_admin``).
"""

import logging
from typing import Any, Dict, List, Optional

from application.exceptions import NotFoundError, ValidationError
from application.ports import BlockRepository, ProgressRepository, UserRepository
from application.use_cases.manage_blocks import CreateBlockUseCase
from backend.core import coach_links
from backend.core.progress_service import best_lifts
from domain.models import TrainingBlock, User, UserRole

logger = logging.getLogger(__name__)


class AdminUseCase:
    """Use case for admin user management."""

    def __init__(
        self,
        user_repo: UserRepository,
        block_repo: BlockRepository,
        progress_repo: ProgressRepository,
    ) -> None:
        self._user_repo = user_repo
        self._block_repo = block_repo
        self._progress_repo = progress_repo

    def _get_user(self, user_id: str) -> User:
        user = self._user_repo.get_by_id(user_id)
        if user is None:
            raise NotFoundError("User not found")
        return user

    # -------------------------------------------------------------------------
    # Reads
    # -------------------------------------------------------------------------

    def stats(self) -> Dict[str, int]:
        """Count users by role and blocks overall."""
        users = self._user_repo.list_users()
        return {
            "totalUsers": len(users),
            "totalAthletes": sum(1 for u in users if u.role == UserRole.ATHLETE),
            "totalCoaches": sum(1 for u in users if u.role == UserRole.COACH),
            "totalBlocks": self._block_repo.count(),
        }

    def list_users(self) -> List[User]:
        return self._user_repo.list_users()

    def user_detail(self, user_id: str) -> Dict[str, Any]:
        """
        Get a user with their blocks, progress and best lifts.

        Returns:
            Dict with ``user``, ``blocks``, ``progress`` and ``bestLifts``
        """
        user = self._get_user(user_id)
        progress = self._progress_repo.list_by_user(user_id)
        return {
            "user": user,
            "blocks": self._block_repo.list_by_owner(user_id),
            "progress": progress,
            "bestLifts": best_lifts(progress),
        }

    def available_athletes(self) -> List[User]:
        """Athletes without an active coach."""
        return [
            u for u in self._user_repo.list_users(role=UserRole.ATHLETE)
            if not u.coach_id
        ]

    def coach_athletes(self, coach_id: str) -> List[User]:
        coach = self._get_user(coach_id)
        return self._user_repo.get_many(coach.athletes)

    # -------------------------------------------------------------------------
    # Writes
    # -------------------------------------------------------------------------

    def update_user(
        self,
        user_id: str,
        *,
        name: Optional[str] = None,
        email: Optional[str] = None,
        role: Optional[UserRole] = None,
    ) -> User:
        """
        Update a user's name, email or role.

        Raises:
            NotFoundError: If the user does not exist
            ValidationError: Blank name or an email already used by another user
        """
        user = self._get_user(user_id)

        if name is not None:
            if not name.strip():
                raise ValidationError("Name cannot be empty")
            user.name = name.strip()
        if email is not None:
            normalized = email.strip().lower()
            existing = self._user_repo.get_by_email(normalized)
            if existing is not None and existing.id != user_id:
                raise ValidationError("Email already in use")
            user.email = normalized
        if role is not None:
            user.role = role

        saved = self._user_repo.save(user)
        logger.info(f"Admin updated user {user_id}")
        return saved

    def delete_user(self, user_id: str) -> None:
        """
        Delete a user with their blocks and progress, and drop every link to them.

        Raises:
            NotFoundError: If the user does not exist
            ValidationError: If the user is an admin
        """
        user = self._get_user(user_id)
        if user.is_admin:
            raise ValidationError("Cannot delete an admin user")

        for other in self._user_repo.list_users():
            if other.id == user_id:
                continue
            changed = False
            if other.coaches_athlete(user_id):
                coach_links.unlink(other, user_id, None)
                changed = True
            if other.coach_id == user_id:
                other.coach_id = None
                changed = True
            if other.has_request_from(user_id):
                coach_links.reject_invite(other, user_id)
                changed = True
            if changed:
                self._user_repo.save(other)

        blocks = self._block_repo.delete_by_owner(user_id)
        records = self._progress_repo.delete_by_user(user_id)
        self._user_repo.delete(user_id)
        logger.info(
            f"Admin deleted user {user_id} ({blocks} blocks, {records} progress records)"
        )

    def assign_athlete(self, coach_id: str, athlete_id: str) -> None:
        """
        Link an athlete to a coach without an invitation.

        Raises:
            NotFoundError: If either user does not exist
            ValidationError: If the target is not a coach
        """
        coach = self._get_user(coach_id)
        athlete = self._get_user(athlete_id)
        previous = None
        if athlete.coach_id and athlete.coach_id != coach_id:
            previous = self._user_repo.get_by_id(athlete.coach_id)

        coach_links.assign_directly(coach, athlete, previous)
        self._user_repo.save(athlete)
        self._user_repo.save(coach)
        if previous is not None:
            self._user_repo.save(previous)

    def remove_athlete(self, coach_id: str, athlete_id: str) -> None:
        """Unlink an athlete from a coach on both sides."""
        coach = self._get_user(coach_id)
        athlete = self._user_repo.get_by_id(athlete_id)

        coach_links.unlink(coach, athlete_id, athlete)
        self._user_repo.save(coach)
        if athlete is not None:
            self._user_repo.save(athlete)

    def create_block(self, user_id: str, title: Optional[str]) -> TrainingBlock:
        """Create a personal block on behalf of a user."""
        self._get_user(user_id)
        return CreateBlockUseCase(self._block_repo).execute(user_id, title)
