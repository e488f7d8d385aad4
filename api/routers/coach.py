"""
Coach router for managing athletes.

This router contains endpoints for:
- GET /coach/athletes - Linked athletes
- POST /coach/athletes - Invite an athlete by email
- DELETE /coach/athletes/{athlete_id} - Unlink an athlete
- GET /coach/athletes/{athlete_id}/progress - An athlete's progress
- GET /coach/athletes/{athlete_id}/blocks - An athlete's blocks
- POST /coach/athletes/{athlete_id}/blocks - Assign a block to an athlete
"""

from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends

from api.deps import get_coaching_use_case, get_current_user
from application.use_cases import CoachingUseCase
from domain.models import CamelModel, Week

router = APIRouter(
    prefix="/coach",
    tags=["Coach"],
)


# =============================================================================
# Request Models
# =============================================================================


class InviteAthleteRequest(CamelModel):
    """Request model for inviting an athlete."""
    athlete_email: str


class AssignBlockRequest(CamelModel):
    """Request model for assigning a block to an athlete."""
    title: Optional[str] = None
    start_date: Optional[date] = None
    weeks: Optional[List[Week]] = None


# =============================================================================
# Athlete List Endpoints
# =============================================================================


@router.get("/athletes")
def list_athletes_endpoint(
    user_id: str = Depends(get_current_user),
    use_case: CoachingUseCase = Depends(get_coaching_use_case),
):
    """
    Get the caller's athletes.

    Returns:
        List of ``{id, name, email}``
    """
    return [
        {"id": athlete.id, "name": athlete.name, "email": athlete.email}
        for athlete in use_case.list_athletes(user_id)
    ]


@router.post("/athletes")
def invite_athlete_endpoint(
    request: InviteAthleteRequest,
    user_id: str = Depends(get_current_user),
    use_case: CoachingUseCase = Depends(get_coaching_use_case),
):
    """Send an invitation to the athlete registered under ``athleteEmail``."""
    use_case.invite_athlete(user_id, request.athlete_email)
    return {"success": True, "message": "Invitation sent"}


@router.delete("/athletes/{athlete_id}")
def remove_athlete_endpoint(
    athlete_id: str,
    user_id: str = Depends(get_current_user),
    use_case: CoachingUseCase = Depends(get_coaching_use_case),
):
    """Unlink an athlete from the caller."""
    use_case.remove_athlete(user_id, athlete_id)
    return {"success": True}


# =============================================================================
# Per-Athlete Endpoints
# =============================================================================


@router.get("/athletes/{athlete_id}/progress")
def athlete_progress_endpoint(
    athlete_id: str,
    user_id: str = Depends(get_current_user),
    use_case: CoachingUseCase = Depends(get_coaching_use_case),
):
    """Get the progress records of one of the caller's athletes."""
    return use_case.athlete_progress(user_id, athlete_id)


@router.get("/athletes/{athlete_id}/blocks")
def athlete_blocks_endpoint(
    athlete_id: str,
    user_id: str = Depends(get_current_user),
    use_case: CoachingUseCase = Depends(get_coaching_use_case),
):
    """Get the blocks of one of the caller's athletes."""
    return use_case.athlete_blocks(user_id, athlete_id)


@router.post("/athletes/{athlete_id}/blocks", status_code=201)
def assign_block_endpoint(
    athlete_id: str,
    request: AssignBlockRequest,
    user_id: str = Depends(get_current_user),
    use_case: CoachingUseCase = Depends(get_coaching_use_case),
):
    """
    Assign a block to one of the caller's athletes.

    The block is owned by the athlete, marked ``assigned`` and carries the
    coach's name in ``assignedBy``.
    """
    return use_case.assign_block(
        user_id,
        athlete_id,
        request.title,
        start_date=request.start_date,
        weeks=request.weeks,
    )
