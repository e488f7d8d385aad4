"""
Blocks router for training block management.

This router contains endpoints for:
- GET /blocks - List the caller's blocks
- POST /blocks - Create a personal block
- PUT /blocks/{block_id} - Partially update a block
- DELETE /blocks/{block_id} - Delete a block
"""

from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends

from api.deps import (
    get_block_repo,
    get_create_block_use_case,
    get_current_user,
    get_delete_block_use_case,
    get_update_block_use_case,
)
from application.ports import BlockRepository
from application.use_cases import CreateBlockUseCase, DeleteBlockUseCase, UpdateBlockUseCase
from domain.models import BlockUpdate, CamelModel, Week

router = APIRouter(
    prefix="/blocks",
    tags=["Blocks"],
)


# =============================================================================
# Request Models
# =============================================================================


class CreateBlockRequest(CamelModel):
    """Request model for creating a block."""
    title: Optional[str] = None
    start_date: Optional[date] = None
    weeks: Optional[List[Week]] = None


# =============================================================================
# Endpoints
# =============================================================================


@router.get("")
def list_blocks_endpoint(
    user_id: str = Depends(get_current_user),
    block_repo: BlockRepository = Depends(get_block_repo),
):
    """Get all blocks owned by the caller."""
    return block_repo.list_by_owner(user_id)


@router.post("", status_code=201)
def create_block_endpoint(
    request: CreateBlockRequest,
    user_id: str = Depends(get_current_user),
    use_case: CreateBlockUseCase = Depends(get_create_block_use_case),
):
    """
    Create a personal block for the caller.

    Returns:
        The created block; 400 when the title is missing
    """
    return use_case.execute(
        user_id,
        request.title,
        start_date=request.start_date,
        weeks=request.weeks,
    )


@router.put("/{block_id}")
def update_block_endpoint(
    block_id: str,
    request: BlockUpdate,
    user_id: str = Depends(get_current_user),
    use_case: UpdateBlockUseCase = Depends(get_update_block_use_case),
):
    """
    Update a block's title, start date, source, assigned-by or weeks.

    Owners cannot edit blocks assigned to them by a coach.

    Returns:
        The updated block
    """
    return use_case.execute(block_id, user_id, request)


@router.delete("/{block_id}")
def delete_block_endpoint(
    block_id: str,
    user_id: str = Depends(get_current_user),
    use_case: DeleteBlockUseCase = Depends(get_delete_block_use_case),
):
    """Delete a block owned by the caller or by one of the caller's athletes."""
    use_case.execute(block_id, user_id)
    return {"success": True}
