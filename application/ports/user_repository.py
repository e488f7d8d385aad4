"""
User repository port (interface).

Covers the profile, role and coach/athlete link fields. Credentials are
managed by the external auth service and are not part of this contract.
"""

from typing import List, Optional, Protocol

from domain.models import User, UserRole


class UserRepository(Protocol):
    """Repository interface for user persistence."""

    def get_by_id(self, user_id: str) -> Optional[User]:
        """
        Get a user by ID.

        Returns:
            User if found, None otherwise
        """
        ...

    def get_by_email(self, email: str) -> Optional[User]:
        """
        Get a user by email (stored lower-cased).

        Returns:
            User if found, None otherwise
        """
        ...

    def get_many(self, user_ids: List[str]) -> List[User]:
        """Get the users with the given IDs; unknown IDs are skipped."""
        ...

    def list_users(self, *, role: Optional[UserRole] = None) -> List[User]:
        """List users, optionally filtered by role."""
        ...

    def save(self, user: User) -> User:
        """
        Replace a stored user in full.

        Returns:
            The stored user
        """
        ...

    def delete(self, user_id: str) -> bool:
        """
        Delete a user.

        Returns:
            True if deleted, False if not found
        """
        ...
