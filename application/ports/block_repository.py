"""
Training block repository port (interface).

This Protocol defines the contract for block persistence operations.
Infrastructure implementations (e.g., Supabase) must satisfy this interface.
"""

from typing import List, Optional, Protocol

from domain.models import TrainingBlock


class BlockRepository(Protocol):
    """
    Repository interface for training block persistence.

    Blocks are stored whole: saving a block writes its full week/day tree.
    Implementations raise ``RepositoryError`` on persistence failures.
    """

    def get_by_id(self, block_id: str) -> Optional[TrainingBlock]:
        """
        Get a block by its ID.

        Args:
            block_id: The block's ID

        Returns:
            TrainingBlock if found, None otherwise
        """
        ...

    def list_by_owner(self, owner_id: str) -> List[TrainingBlock]:
        """
        Get all blocks owned by a user.

        Args:
            owner_id: The owning user's ID

        Returns:
            List of blocks, oldest first
        """
        ...

    def create(self, block: TrainingBlock) -> TrainingBlock:
        """
        Persist a new block.

        Args:
            block: Block to insert (its ``id`` is kept)

        Returns:
            The stored block
        """
        ...

    def save(self, block: TrainingBlock) -> TrainingBlock:
        """
        Replace an existing block in full.

        Args:
            block: Block with updated fields and weeks

        Returns:
            The stored block
        """
        ...

    def delete(self, block_id: str) -> bool:
        """
        Delete a block.

        Args:
            block_id: The block's ID

        Returns:
            True if deleted, False if not found
        """
        ...

    def delete_by_owner(self, owner_id: str) -> int:
        """
        Delete every block owned by a user.

        Returns:
            Number of blocks deleted
        """
        ...

    def count(self) -> int:
        """Count all blocks."""
        ...
