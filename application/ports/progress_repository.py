"""
Progress repository port (interface).

Progress records are keyed by (user_id, exercise_name) and hold the dated
best-effort history for one competition lift. Writes go through
DayCompletionRepository.commit together with the completed day.
"""

from typing import List, Optional, Protocol

from domain.models import ProgressRecord


class ProgressRepository(Protocol):
    """Repository interface for per-lift progress history."""

    def get(self, user_id: str, exercise_name: str) -> Optional[ProgressRecord]:
        """
        Get the progress record for one lift of one user.

        Args:
            user_id: Owner of the history
            exercise_name: Exact (case-sensitive) exercise name

        Returns:
            ProgressRecord if found, None otherwise
        """
        ...

    def list_by_user(self, user_id: str) -> List[ProgressRecord]:
        """Get all progress records of a user."""
        ...

    def delete_by_user(self, user_id: str) -> int:
        """Delete all progress records of a user. Returns the count deleted."""
        ...
