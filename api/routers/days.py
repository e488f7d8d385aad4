"""
Days router for submitting completed training days.

This router contains endpoints for:
- PUT /days/{day_id} - Replace a day's exercises, mark it completed and
  record competition-lift progress
"""

from typing import List, Optional

from fastapi import APIRouter, Depends

from api.deps import get_complete_day_use_case, get_current_user
from application.use_cases import CompleteDayUseCase
from domain.models import CamelModel, Exercise

router = APIRouter(
    prefix="/days",
    tags=["Days"],
)


# =============================================================================
# Request Models
# =============================================================================


class CompleteDayRequest(CamelModel):
    """Request model for submitting a day."""
    exercises: List[Exercise]
    athlete_notes: Optional[str] = None


# =============================================================================
# Endpoints
# =============================================================================


@router.put("/{day_id}")
def complete_day_endpoint(
    day_id: str,
    request: CompleteDayRequest,
    user_id: str = Depends(get_current_user),
    use_case: CompleteDayUseCase = Depends(get_complete_day_use_case),
):
    """
    Submit a training day.

    The day is looked up among the caller's own blocks only. Sets of
    ``Comp SQ``, ``Comp BP`` and ``Comp DL`` update today's progress entry
    for that lift, never lowering a value recorded earlier the same day.

    Returns:
        ``{"success": true}``; 404 when the day is not in the caller's blocks
    """
    use_case.execute(
        user_id,
        day_id,
        request.exercises,
        athlete_notes=request.athlete_notes,
    )
    return {"success": True}
