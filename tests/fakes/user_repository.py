"""
Fake user repository for testing.
"""

from typing import Dict, List, Optional

from domain.models import User, UserRole


class FakeUserRepository:
    """In-memory fake implementation of UserRepository."""

    def __init__(self):
        """Initialize with empty storage."""
        self._users: Dict[str, User] = {}

    def seed(self, users: List[User]) -> None:
        """Seed the repository with users."""
        for user in users:
            self._users[user.id] = user.model_copy(deep=True)

    def reset(self) -> None:
        """Clear all stored data."""
        self._users.clear()

    def get_by_id(self, user_id: str) -> Optional[User]:
        user = self._users.get(user_id)
        return user.model_copy(deep=True) if user else None

    def get_by_email(self, email: str) -> Optional[User]:
        for user in self._users.values():
            if user.email == email:
                return user.model_copy(deep=True)
        return None

    def get_many(self, user_ids: List[str]) -> List[User]:
        return [
            self._users[uid].model_copy(deep=True)
            for uid in user_ids
            if uid in self._users
        ]

    def list_users(self, *, role: Optional[UserRole] = None) -> List[User]:
        return [
            u.model_copy(deep=True)
            for u in self._users.values()
            if role is None or u.role == role
        ]

    def save(self, user: User) -> User:
        self._users[user.id] = user.model_copy(deep=True)
        return user

    def delete(self, user_id: str) -> bool:
        return self._users.pop(user_id, None) is not None
