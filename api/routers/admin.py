"""
Admin router for user management.

Every endpoint requires the caller to hold the admin role.

This router contains endpoints for:
- GET /admin/stats - User and block counts
- GET /admin/users - All users
- GET /admin/users/{user_id} - User detail with blocks, progress and best lifts
- PUT /admin/users/{user_id} - Edit name, email or role
- DELETE /admin/users/{user_id} - Delete a non-admin user and their data
- GET /admin/athletes/available - Athletes without a coach
- POST /admin/users/{user_id}/blocks - Create a block for a user
- GET /admin/coaches/{coach_id}/athletes - A coach's athletes
- POST /admin/coaches/{coach_id}/athletes/{athlete_id} - Link directly
- DELETE /admin/coaches/{coach_id}/athletes/{athlete_id} - Unlink
"""

from typing import Optional

from fastapi import APIRouter, Depends

from api.deps import get_admin_use_case, require_admin
from application.use_cases import AdminUseCase
from domain.models import CamelModel, UserRole

router = APIRouter(
    prefix="/admin",
    tags=["Admin"],
)


# =============================================================================
# Request Models
# =============================================================================


class UpdateUserRequest(CamelModel):
    """Request model for editing a user."""
    name: Optional[str] = None
    email: Optional[str] = None
    role: Optional[UserRole] = None


class CreateUserBlockRequest(CamelModel):
    """Request model for creating a block on behalf of a user."""
    title: Optional[str] = None


# =============================================================================
# Users
# =============================================================================


@router.get("/stats")
def stats_endpoint(
    admin_id: str = Depends(require_admin),
    use_case: AdminUseCase = Depends(get_admin_use_case),
):
    """Get ``{totalUsers, totalAthletes, totalCoaches, totalBlocks}``."""
    return use_case.stats()


@router.get("/users")
def list_users_endpoint(
    admin_id: str = Depends(require_admin),
    use_case: AdminUseCase = Depends(get_admin_use_case),
):
    """Get every user, newest first."""
    return use_case.list_users()


@router.get("/users/{user_id}")
def user_detail_endpoint(
    user_id: str,
    admin_id: str = Depends(require_admin),
    use_case: AdminUseCase = Depends(get_admin_use_case),
):
    """
    Get a user with their blocks and progress.

    ``bestLifts`` holds the best estimated and actual max per competition
    lift plus their ``Total``.
    """
    return use_case.user_detail(user_id)


@router.put("/users/{user_id}")
def update_user_endpoint(
    user_id: str,
    request: UpdateUserRequest,
    admin_id: str = Depends(require_admin),
    use_case: AdminUseCase = Depends(get_admin_use_case),
):
    """Edit a user's name, email or role."""
    return use_case.update_user(
        user_id,
        name=request.name,
        email=request.email,
        role=request.role,
    )


@router.delete("/users/{user_id}")
def delete_user_endpoint(
    user_id: str,
    admin_id: str = Depends(require_admin),
    use_case: AdminUseCase = Depends(get_admin_use_case),
):
    """Delete a user together with their blocks, progress and coach links."""
    use_case.delete_user(user_id)
    return {"success": True}


@router.post("/users/{user_id}/blocks", status_code=201)
def create_user_block_endpoint(
    user_id: str,
    request: CreateUserBlockRequest,
    admin_id: str = Depends(require_admin),
    use_case: AdminUseCase = Depends(get_admin_use_case),
):
    """Create a personal block owned by ``user_id``."""
    return use_case.create_block(user_id, request.title)


@router.get("/athletes/available")
def available_athletes_endpoint(
    admin_id: str = Depends(require_admin),
    use_case: AdminUseCase = Depends(get_admin_use_case),
):
    """Get athletes that have no coach."""
    return use_case.available_athletes()


# =============================================================================
# Coach Links
# =============================================================================


@router.get("/coaches/{coach_id}/athletes")
def coach_athletes_endpoint(
    coach_id: str,
    admin_id: str = Depends(require_admin),
    use_case: AdminUseCase = Depends(get_admin_use_case),
):
    """Get the athletes linked to a coach."""
    return use_case.coach_athletes(coach_id)


@router.post("/coaches/{coach_id}/athletes/{athlete_id}")
def assign_athlete_endpoint(
    coach_id: str,
    athlete_id: str,
    admin_id: str = Depends(require_admin),
    use_case: AdminUseCase = Depends(get_admin_use_case),
):
    """Link an athlete to a coach without an invitation."""
    use_case.assign_athlete(coach_id, athlete_id)
    return {"success": True}


@router.delete("/coaches/{coach_id}/athletes/{athlete_id}")
def remove_athlete_endpoint(
    coach_id: str,
    athlete_id: str,
    admin_id: str = Depends(require_admin),
    use_case: AdminUseCase = Depends(get_admin_use_case),
):
    """Unlink an athlete from a coach."""
    use_case.remove_athlete(coach_id, athlete_id)
    return {"success": True}
