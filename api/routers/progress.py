"""
Progress router for competition-lift history.

This router provides endpoints for:
- The caller's dated best-lift history
- Previewing an e1RM estimate for a set before it is submitted
"""
from typing import Any, Optional

from fastapi import APIRouter, Depends

from api.deps import get_current_user, get_progress_repo
from application.exceptions import ValidationError
from application.ports import ProgressRepository
from backend.core.one_rep_max import calculate_1rm, effective_rpe, to_number
from domain.models import CamelModel

router = APIRouter(
    prefix="/progress",
    tags=["Progress"],
)


class EstimateRequest(CamelModel):
    """Set values to estimate; numeric strings are accepted."""
    weight: Any = None
    reps: Any = None
    rpe: Optional[Any] = None


@router.get("")
def list_progress_endpoint(
    user_id: str = Depends(get_current_user),
    progress_repo: ProgressRepository = Depends(get_progress_repo),
):
    """Get all progress records of the caller."""
    return progress_repo.list_by_user(user_id)


@router.post("/estimate")
def estimate_endpoint(
    request: EstimateRequest,
    user_id: str = Depends(get_current_user),
):
    """
    Estimate a one-rep max with the formula used for progress tracking.

    Returns:
        ``{"estimated1rm": value}``
    """
    weight = to_number(request.weight)
    reps = to_number(request.reps)
    if weight is None or reps is None or weight <= 0 or reps <= 0:
        raise ValidationError("Weight and reps must be positive numbers")
    return {"estimated1rm": calculate_1rm(weight, reps, effective_rpe(request.rpe))}
