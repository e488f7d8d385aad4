"""
Supabase implementation of ProgressRepository.

One row per (user_id, exercise_name) in the ``progress`` table, with the dated
history in a JSONB column. Rows are written only by the
``complete_training_day`` function (see day_completion_repository).
"""

import logging
from typing import Any, Dict, List, Optional

from supabase import Client

from application.exceptions import RepositoryError
from domain.models import ProgressRecord

logger = logging.getLogger(__name__)

TABLE = "progress"


def record_to_row(record: ProgressRecord) -> Dict[str, Any]:
    return record.model_dump(mode="json")


def row_to_record(row: Dict[str, Any]) -> ProgressRecord:
    return ProgressRecord.model_validate(row)


class SupabaseProgressRepository:
    """Supabase implementation of ProgressRepository protocol."""

    def __init__(self, client: Client):
        """
        Initialize with Supabase client.

        Args:
            client: Supabase client instance (injected)
        """
        self._client = client

    def get(self, user_id: str, exercise_name: str) -> Optional[ProgressRecord]:
        try:
            response = (
                self._client.table(TABLE)
                .select("*")
                .eq("user_id", user_id)
                .eq("exercise_name", exercise_name)
                .limit(1)
                .execute()
            )
        except Exception as e:
            logger.exception(f"Error fetching progress for {user_id}/{exercise_name}: {e}")
            raise RepositoryError(f"Failed to get progress: {e}") from e
        return row_to_record(response.data[0]) if response.data else None

    def list_by_user(self, user_id: str) -> List[ProgressRecord]:
        try:
            response = (
                self._client.table(TABLE)
                .select("*")
                .eq("user_id", user_id)
                .order("exercise_name")
                .execute()
            )
        except Exception as e:
            logger.exception(f"Error listing progress for {user_id}: {e}")
            raise RepositoryError(f"Failed to list progress: {e}") from e
        return [row_to_record(row) for row in response.data or []]

    def delete_by_user(self, user_id: str) -> int:
        try:
            response = self._client.table(TABLE).delete().eq("user_id", user_id).execute()
        except Exception as e:
            logger.exception(f"Error deleting progress for {user_id}: {e}")
            raise RepositoryError(f"Failed to delete progress: {e}") from e
        return len(response.data or [])
