"""
Supabase implementation of BlockRepository.

Blocks live in the ``training_blocks`` table; the week/day/exercise/set tree
is stored whole in the ``weeks`` JSONB column.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from supabase import Client

from application.exceptions import RepositoryError
from domain.models import TrainingBlock

logger = logging.getLogger(__name__)

TABLE = "training_blocks"


def block_to_row(block: TrainingBlock) -> Dict[str, Any]:
    """Serialize a block to a ``training_blocks`` row."""
    return block.model_dump(mode="json")


def row_to_block(row: Dict[str, Any]) -> TrainingBlock:
    """Build a block from a ``training_blocks`` row (extra columns ignored)."""
    return TrainingBlock.model_validate(row)


class SupabaseBlockRepository:
    """
    Supabase implementation of BlockRepository protocol.

    The client is injected via constructor for testability. Every failure is
    logged and re-raised as RepositoryError.
    """

    def __init__(self, client: Client):
        """
        Initialize with Supabase client.

        Args:
            client: Supabase client instance (injected, not global)
        """
        self._client = client

    def get_by_id(self, block_id: str) -> Optional[TrainingBlock]:
        try:
            response = (
                self._client.table(TABLE)
                .select("*")
                .eq("id", block_id)
                .limit(1)
                .execute()
            )
        except Exception as e:
            logger.error(f"Failed to get block {block_id}: {e}")
            raise RepositoryError(f"Failed to get block: {e}") from e
        return row_to_block(response.data[0]) if response.data else None

    def list_by_owner(self, owner_id: str) -> List[TrainingBlock]:
        try:
            response = (
                self._client.table(TABLE)
                .select("*")
                .eq("owner_id", owner_id)
                .order("created_at")
                .execute()
            )
        except Exception as e:
            logger.error(f"Failed to list blocks for {owner_id}: {e}")
            raise RepositoryError(f"Failed to list blocks: {e}") from e
        return [row_to_block(row) for row in response.data or []]

    def create(self, block: TrainingBlock) -> TrainingBlock:
        try:
            response = self._client.table(TABLE).insert(block_to_row(block)).execute()
        except Exception as e:
            logger.error(f"Failed to create block for {block.owner_id}: {e}")
            raise RepositoryError(f"Failed to create block: {e}") from e
        if not response.data:
            raise RepositoryError("Block insert returned no data")
        return row_to_block(response.data[0])

    def save(self, block: TrainingBlock) -> TrainingBlock:
        row = block_to_row(block)
        row["updated_at"] = datetime.now(timezone.utc).isoformat()
        try:
            response = (
                self._client.table(TABLE)
                .update(row)
                .eq("id", block.id)
                .execute()
            )
        except Exception as e:
            logger.error(f"Failed to save block {block.id}: {e}")
            raise RepositoryError(f"Failed to save block: {e}") from e
        if not response.data:
            raise RepositoryError(f"Block {block.id} was not updated")
        return row_to_block(response.data[0])

    def delete(self, block_id: str) -> bool:
        try:
            response = self._client.table(TABLE).delete().eq("id", block_id).execute()
        except Exception as e:
            logger.error(f"Failed to delete block {block_id}: {e}")
            raise RepositoryError(f"Failed to delete block: {e}") from e
        return bool(response.data)

    def delete_by_owner(self, owner_id: str) -> int:
        try:
            response = self._client.table(TABLE).delete().eq("owner_id", owner_id).execute()
        except Exception as e:
            logger.error(f"Failed to delete blocks of {owner_id}: {e}")
            raise RepositoryError(f"Failed to delete blocks: {e}") from e
        return len(response.data or [])

    def count(self) -> int:
        try:
            response = self._client.table(TABLE).select("id", count="exact").execute()
        except Exception as e:
            logger.error(f"Failed to count blocks: {e}")
            raise RepositoryError(f"Failed to count blocks: {e}") from e
        return response.count or 0
