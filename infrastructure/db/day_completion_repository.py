"""
Supabase implementation of DayCompletionRepository.

Uses the ``complete_training_day`` PostgreSQL function so the block update
and the progress upserts run in a single transaction. If any statement fails,
the whole commit is rolled back.
"""

import logging
from typing import List

from supabase import Client

from application.exceptions import DayCompletionError
from domain.models import ProgressRecord, TrainingBlock
from infrastructure.db.block_repository import block_to_row
from infrastructure.db.progress_repository import record_to_row

logger = logging.getLogger(__name__)


class SupabaseDayCompletionRepository:
    """Atomic block + progress writer backed by a Supabase RPC."""

    def __init__(self, client: Client):
        """
        Initialize with Supabase client.

        Args:
            client: Supabase client instance (injected)
        """
        self._client = client

    def commit(
        self,
        block: TrainingBlock,
        progress_records: List[ProgressRecord],
    ) -> None:
        """
        Write the block and its derived progress records atomically.

        Raises:
            DayCompletionError: If the RPC call fails
        """
        try:
            self._client.rpc(
                "complete_training_day",
                {
                    "p_block": block_to_row(block),
                    "p_progress": [record_to_row(r) for r in progress_records],
                },
            ).execute()
        except Exception as e:
            logger.error(f"Atomic day completion failed for block {block.id}: {e}")
            raise DayCompletionError(f"Atomic day completion failed: {e}") from e
