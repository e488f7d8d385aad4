"""
Router package for the TotalGrind API.

This package contains all API routers organized by domain:
- health: Liveness endpoint
- blocks: Training block CRUD
- days: Day completion and progress recording
- progress: Progress history and e1RM preview
- users: The caller's profile, role and coach invitations
- coach: Coach-side athlete management and views
- admin: Admin dashboard endpoints
"""

from api.routers.admin import router as admin_router
from api.routers.blocks import router as blocks_router
from api.routers.coach import router as coach_router
from api.routers.days import router as days_router
from api.routers.health import router as health_router
from api.routers.progress import router as progress_router
from api.routers.users import router as users_router

__all__ = [
    "admin_router",
    "blocks_router",
    "coach_router",
    "days_router",
    "health_router",
    "progress_router",
    "users_router",
]
