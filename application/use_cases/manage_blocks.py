"""
Block management use cases.

- CreateBlockUseCase: personal blocks, coach-assigned blocks, admin-created blocks
- UpdateBlockUseCase: partial structural updates under the block update rule
- DeleteBlockUseCase: deletion under the (looser) block delete rule
"""

import logging
from datetime import date
from typing import List, Optional

from application.exceptions import NotFoundError, ValidationError
from application.ports import BlockRepository, UserRepository
from backend.core.block_access import authorize_block_delete, authorize_block_update
from domain.models import BlockSource, BlockUpdate, TrainingBlock, User, Week, default_weeks

logger = logging.getLogger(__name__)

# Fields that may be cleared with an explicit null
_NULLABLE_FIELDS = {"assigned_by"}


def _require_title(title: Optional[str]) -> str:
    if not title or not title.strip():
        raise ValidationError("Title is required")
    return title


class CreateBlockUseCase:
    """Use case for creating training blocks."""

    def __init__(self, block_repo: BlockRepository) -> None:
        self._block_repo = block_repo

    def execute(
        self,
        owner_id: str,
        title: Optional[str],
        *,
        source: Optional[BlockSource] = None,
        assigned_by: Optional[str] = None,
        start_date: Optional[date] = None,
        weeks: Optional[List[Week]] = None,
    ) -> TrainingBlock:
        """
        Create a block for ``owner_id``.

        Missing fields fall back to a personal block starting today with a
        single week holding one empty day.

        Raises:
            ValidationError: If the title is missing or blank
        """
        block = TrainingBlock(
            owner_id=owner_id,
            title=_require_title(title),
            source=source or BlockSource.PERSONAL,
            assigned_by=assigned_by,
            start_date=start_date or date.today(),
            weeks=weeks if weeks else default_weeks(),
        )
        created = self._block_repo.create(block)
        logger.info(f"Created {created.source.value} block {created.id} for user {owner_id}")
        return created


class _BlockAccessUseCase:
    """Shared lookups for use cases that authorize against a block's owner."""

    def __init__(self, block_repo: BlockRepository, user_repo: UserRepository) -> None:
        self._block_repo = block_repo
        self._user_repo = user_repo

    def _get_block(self, block_id: str) -> TrainingBlock:
        block = self._block_repo.get_by_id(block_id)
        if block is None:
            raise NotFoundError("Block not found")
        return block

    def _owner_coach_id(self, block: TrainingBlock) -> Optional[str]:
        owner: Optional[User] = self._user_repo.get_by_id(block.owner_id)
        return owner.coach_id if owner else None

    def _is_admin(self, requester_id: str) -> bool:
        requester = self._user_repo.get_by_id(requester_id)
        return bool(requester and requester.is_admin)


class UpdateBlockUseCase(_BlockAccessUseCase):
    """
    Use case for structural block updates.

    The owner of a personal block, the owner's linked coach, and admins may
    update. The owner of an assigned block may not.
    """

    def execute(self, block_id: str, requester_id: str, update: BlockUpdate) -> TrainingBlock:
        """
        Apply ``update`` to the block.

        Raises:
            NotFoundError: If the block does not exist
            ForbiddenError: If the requester may not update it
            ValidationError: If the title is set to a blank value
        """
        block = self._get_block(block_id)
        authorize_block_update(
            block,
            requester_id,
            self._owner_coach_id(block),
            is_admin=self._is_admin(requester_id),
        )

        for name in update.model_fields_set:
            value = getattr(update, name)
            if value is None and name not in _NULLABLE_FIELDS:
                continue
            if name == "title":
                _require_title(value)
            setattr(block, name, value)

        saved = self._block_repo.save(block)
        logger.info(f"Block {block_id} updated by {requester_id}")
        return saved


class DeleteBlockUseCase(_BlockAccessUseCase):
    """
    Use case for deleting blocks.

    Owner, linked coach, or admin may delete, including assigned blocks.
    """

    def execute(self, block_id: str, requester_id: str) -> None:
        """
        Delete the block.

        Raises:
            NotFoundError: If the block does not exist
            ForbiddenError: If the requester may not delete it
        """
        block = self._get_block(block_id)
        authorize_block_delete(
            block,
            requester_id,
            self._owner_coach_id(block),
            is_admin=self._is_admin(requester_id),
        )
        self._block_repo.delete(block_id)
        logger.info(f"Block {block_id} deleted by {requester_id}")
