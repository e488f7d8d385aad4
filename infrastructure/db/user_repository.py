"""
Supabase implementation of UserRepository.

Profiles live in the ``users`` table. ``athletes`` and ``coach_requests`` are
JSONB arrays; ``email`` is stored lower-cased and unique.
"""

import logging
from typing import Any, Dict, List, Optional

from supabase import Client

from application.exceptions import RepositoryError
from domain.models import User, UserRole

logger = logging.getLogger(__name__)

TABLE = "users"


def user_to_row(user: User) -> Dict[str, Any]:
    # created_at is owned by the database default
    return user.model_dump(mode="json", exclude={"created_at"})


def row_to_user(row: Dict[str, Any]) -> User:
    return User.model_validate(row)


class SupabaseUserRepository:
    """Supabase implementation of UserRepository protocol."""

    def __init__(self, client: Client):
        """
        Initialize with Supabase client.

        Args:
            client: Supabase client instance (injected)
        """
        self._client = client

    def _select_one(self, column: str, value: str) -> Optional[User]:
        try:
            response = (
                self._client.table(TABLE)
                .select("*")
                .eq(column, value)
                .limit(1)
                .execute()
            )
        except Exception as e:
            logger.error(f"Failed to get user by {column}: {e}")
            raise RepositoryError(f"Failed to get user: {e}") from e
        return row_to_user(response.data[0]) if response.data else None

    def get_by_id(self, user_id: str) -> Optional[User]:
        return self._select_one("id", user_id)

    def get_by_email(self, email: str) -> Optional[User]:
        return self._select_one("email", email.lower())

    def get_many(self, user_ids: List[str]) -> List[User]:
        if not user_ids:
            return []
        try:
            response = self._client.table(TABLE).select("*").in_("id", user_ids).execute()
        except Exception as e:
            logger.error(f"Failed to get users: {e}")
            raise RepositoryError(f"Failed to get users: {e}") from e
        return [row_to_user(row) for row in response.data or []]

    def list_users(self, *, role: Optional[UserRole] = None) -> List[User]:
        try:
            query = self._client.table(TABLE).select("*")
            if role is not None:
                query = query.eq("role", role.value)
            response = query.order("created_at", desc=True).execute()
        except Exception as e:
            logger.error(f"Failed to list users: {e}")
            raise RepositoryError(f"Failed to list users: {e}") from e
        return [row_to_user(row) for row in response.data or []]

    def save(self, user: User) -> User:
        try:
            response = self._client.table(TABLE).upsert(user_to_row(user)).execute()
        except Exception as e:
            logger.error(f"Failed to save user {user.id}: {e}")
            raise RepositoryError(f"Failed to save user: {e}") from e
        if not response.data:
            raise RepositoryError(f"User {user.id} was not saved")
        return row_to_user(response.data[0])

    def delete(self, user_id: str) -> bool:
        try:
            response = self._client.table(TABLE).delete().eq("id", user_id).execute()
        except Exception as e:
            logger.error(f"Failed to delete user {user_id}: {e}")
            raise RepositoryError(f"Failed to delete user: {e}") from e
        return bool(response.data)
