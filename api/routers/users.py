"""
Users router for the caller's own account and coach invitations.

This router contains endpoints for:
- GET /user/me - The caller's profile
- PUT /user/profile - Rename the caller
- GET /user/invites - Pending coach invitations
- POST /user/invites/{coach_id}/accept - Link to the inviting coach
- POST /user/invites/{coach_id}/reject - Drop one invitation
- PUT /users/role - Switch between athlete and coach
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends

from api.deps import get_coaching_use_case, get_current_user, get_user_repo
from application.exceptions import NotFoundError, ValidationError
from application.ports import UserRepository
from application.use_cases import CoachingUseCase
from domain.models import CamelModel, User, UserRole

logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["Users"],
)

# Roles users may pick for themselves; admin is granted by admins only
SELF_SERVICE_ROLES = {UserRole.ATHLETE.value, UserRole.COACH.value}


# =============================================================================
# Request Models
# =============================================================================


class UpdateProfileRequest(CamelModel):
    """Request model for updating the caller's profile."""
    name: Optional[str] = None


class UpdateRoleRequest(CamelModel):
    """Request model for switching the caller's role."""
    role: Optional[str] = None


def _load_user(user_repo: UserRepository, user_id: str) -> User:
    user = user_repo.get_by_id(user_id)
    if user is None:
        raise NotFoundError("User not found")
    return user


# =============================================================================
# Profile Endpoints
# =============================================================================


@router.get("/user/me")
def get_me_endpoint(
    user_id: str = Depends(get_current_user),
    user_repo: UserRepository = Depends(get_user_repo),
):
    """Get the caller's profile."""
    return {"user": _load_user(user_repo, user_id)}


@router.put("/user/profile")
def update_profile_endpoint(
    request: UpdateProfileRequest,
    user_id: str = Depends(get_current_user),
    user_repo: UserRepository = Depends(get_user_repo),
):
    """
    Update the caller's display name.

    Returns:
        The updated profile; 400 when the name is missing or blank
    """
    if not request.name or not request.name.strip():
        raise ValidationError("No data to update")

    user = _load_user(user_repo, user_id)
    user.name = request.name.strip()
    saved = user_repo.save(user)
    return {"success": True, "user": saved}


@router.put("/users/role")
def update_role_endpoint(
    request: UpdateRoleRequest,
    user_id: str = Depends(get_current_user),
    user_repo: UserRepository = Depends(get_user_repo),
):
    """
    Switch the caller between athlete and coach.

    Existing athlete links are left untouched when a coach demotes itself.
    """
    if request.role not in SELF_SERVICE_ROLES:
        raise ValidationError("Invalid role")

    user = _load_user(user_repo, user_id)
    user.role = UserRole(request.role)
    saved = user_repo.save(user)
    logger.info(f"User {user_id} switched role to {saved.role.value}")
    return {"success": True, "role": saved.role}


# =============================================================================
# Invitation Endpoints
# =============================================================================


@router.get("/user/invites")
def list_invites_endpoint(
    user_id: str = Depends(get_current_user),
    use_case: CoachingUseCase = Depends(get_coaching_use_case),
):
    """Get pending coach invitations of the caller."""
    return use_case.list_invites(user_id)


@router.post("/user/invites/{coach_id}/accept")
def accept_invite_endpoint(
    coach_id: str,
    user_id: str = Depends(get_current_user),
    use_case: CoachingUseCase = Depends(get_coaching_use_case),
):
    """
    Accept a coach's invitation.

    All other pending invitations are discarded.
    """
    use_case.accept_invite(user_id, coach_id)
    return {"success": True}


@router.post("/user/invites/{coach_id}/reject")
def reject_invite_endpoint(
    coach_id: str,
    user_id: str = Depends(get_current_user),
    use_case: CoachingUseCase = Depends(get_coaching_use_case),
):
    """Reject a coach's invitation. Succeeds when there is none."""
    use_case.reject_invite(user_id, coach_id)
    return {"success": True}
