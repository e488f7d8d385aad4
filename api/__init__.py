"""
API package for the TotalGrind training log.

This package contains:
- deps.py: FastAPI dependency providers for DI
- routers/: API route handlers
"""

# Re-export dependency providers for convenient access
from api.deps import (
    get_settings,
    get_supabase_client,
    get_supabase_client_required,
    get_block_repo,
    get_progress_repo,
    get_user_repo,
    get_day_completion_repo,
    get_current_user,
    require_admin,
)

__all__ = [
    # Settings
    "get_settings",
    # Database
    "get_supabase_client",
    "get_supabase_client_required",
    # Repositories
    "get_block_repo",
    "get_progress_repo",
    "get_user_repo",
    "get_day_completion_repo",
    # Authentication
    "get_current_user",
    "require_admin",
]
