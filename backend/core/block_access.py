"""
Authorization rules for mutating training blocks.

Update rule, evaluated in order:
1. Admins may always update.
2. Anyone other than the owner or the owner's linked coach is rejected.
3. The owner of an assigned block is rejected; only the coach (or an admin)
   may change an assigned plan.
4. Everyone else is permitted.

Delete rule: owner, owner's linked coach, or admin. Unlike updates there is no
assigned-block exception, so an athlete may delete a block their coach
assigned.
"""

from typing import Optional

from application.exceptions import ForbiddenError
from domain.models import TrainingBlock

NOT_OWNER_OR_COACH = "Unauthorized"
ASSIGNED_BLOCK_LOCKED = "Cannot edit assigned blocks. Contact your coach for changes."
DELETE_DENIED = "Unauthorized to delete this block"


def _is_owner_or_coach(
    block: TrainingBlock,
    requester_id: str,
    owner_coach_id: Optional[str],
) -> bool:
    is_owner = block.owner_id == requester_id
    is_coach = owner_coach_id is not None and owner_coach_id == requester_id
    return is_owner or is_coach


def _update_denial(
    block: TrainingBlock,
    requester_id: str,
    owner_coach_id: Optional[str],
    is_admin: bool,
) -> Optional[str]:
    if is_admin:
        return None
    if not _is_owner_or_coach(block, requester_id, owner_coach_id):
        return NOT_OWNER_OR_COACH
    if block.owner_id == requester_id and block.is_assigned:
        return ASSIGNED_BLOCK_LOCKED
    return None


def can_update_block(
    block: TrainingBlock,
    requester_id: str,
    owner_coach_id: Optional[str],
    *,
    is_admin: bool = False,
) -> bool:
    """Check whether ``requester_id`` may structurally update ``block``."""
    return _update_denial(block, requester_id, owner_coach_id, is_admin) is None


def authorize_block_update(
    block: TrainingBlock,
    requester_id: str,
    owner_coach_id: Optional[str],
    *,
    is_admin: bool = False,
) -> None:
    """
    Enforce the update rule.

    Raises:
        ForbiddenError: If the requester may not update the block
    """
    reason = _update_denial(block, requester_id, owner_coach_id, is_admin)
    if reason is not None:
        raise ForbiddenError(reason)


def can_delete_block(
    block: TrainingBlock,
    requester_id: str,
    owner_coach_id: Optional[str],
    *,
    is_admin: bool = False,
) -> bool:
    """Check whether ``requester_id`` may delete ``block``."""
    return is_admin or _is_owner_or_coach(block, requester_id, owner_coach_id)


def authorize_block_delete(
    block: TrainingBlock,
    requester_id: str,
    owner_coach_id: Optional[str],
    *,
    is_admin: bool = False,
) -> None:
    """
    Enforce the delete rule.

    Raises:
        ForbiddenError: If the requester may not delete the block
    """
    if not can_delete_block(block, requester_id, owner_coach_id, is_admin=is_admin):
        raise ForbiddenError(DELETE_DENIED)
