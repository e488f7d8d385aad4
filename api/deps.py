"""
FastAPI Dependency Providers for the TotalGrind API.

This module provides FastAPI dependency injection functions that return
interface types (Protocols) rather than concrete implementations. This
enables clean separation of concerns and easy testing with fake implementations.

Architecture:
- Settings and Supabase client are cached per-process (lru_cache)
- Repository providers create new instances per-request
- Use case providers compose repositories
- Auth providers wrap backend.auth

Usage in routers:
    from api.deps import get_block_repo, get_current_user
    from application.ports import BlockRepository

    @router.get("/blocks")
    def list_blocks(
        user_id: str = Depends(get_current_user),
        block_repo: BlockRepository = Depends(get_block_repo),
    ):
        return block_repo.list_by_owner(user_id)

Testing:
    # Override dependencies in tests
    app.dependency_overrides[get_block_repo] = lambda: FakeBlockRepository()
"""

from functools import lru_cache
from typing import Optional

from fastapi import Depends, Header, HTTPException
from supabase import Client, create_client

# Protocol types (interfaces)
from application.ports import (
    BlockRepository,
    DayCompletionRepository,
    ProgressRepository,
    UserRepository,
)

# Concrete implementations
from infrastructure import (
    SupabaseBlockRepository,
    SupabaseDayCompletionRepository,
    SupabaseProgressRepository,
    SupabaseUserRepository,
)

from application.exceptions import ForbiddenError
from application.use_cases import (
    AdminUseCase,
    CoachingUseCase,
    CompleteDayUseCase,
    CreateBlockUseCase,
    DeleteBlockUseCase,
    UpdateBlockUseCase,
)
from backend.settings import Settings, get_settings as _get_settings

# Auth from existing module (wrap to maintain single source of truth)
from backend.auth import get_current_user as _get_current_user


# =============================================================================
# Settings Provider
# =============================================================================


def get_settings() -> Settings:
    """
    Get application settings.

    Returns cached Settings instance from backend.settings.
    Use this as a FastAPI dependency for settings access.
    """
    return _get_settings()


# =============================================================================
# Supabase Client Provider
# =============================================================================


@lru_cache
def get_supabase_client() -> Optional[Client]:
    """
    Get Supabase client instance (cached).

    Creates a Supabase client using credentials from settings.
    Returns None if credentials are not configured.
    """
    settings = _get_settings()

    if not settings.supabase_url or not settings.supabase_key:
        return None

    return create_client(settings.supabase_url, settings.supabase_key)


def get_supabase_client_required() -> Client:
    """
    Get Supabase client instance, raising if not configured.

    Raises:
        HTTPException: 503 if Supabase is not configured
    """
    client = get_supabase_client()
    if client is None:
        raise HTTPException(
            status_code=503,
            detail="Database not available. Supabase credentials not configured.",
        )
    return client


# =============================================================================
# Repository Providers
# =============================================================================


def get_block_repo(
    client: Client = Depends(get_supabase_client_required),
) -> BlockRepository:
    """Get BlockRepository implementation."""
    return SupabaseBlockRepository(client)


def get_progress_repo(
    client: Client = Depends(get_supabase_client_required),
) -> ProgressRepository:
    """Get ProgressRepository implementation."""
    return SupabaseProgressRepository(client)


def get_user_repo(
    client: Client = Depends(get_supabase_client_required),
) -> UserRepository:
    """Get UserRepository implementation."""
    return SupabaseUserRepository(client)


def get_day_completion_repo(
    client: Client = Depends(get_supabase_client_required),
) -> DayCompletionRepository:
    """Get DayCompletionRepository implementation (atomic block + progress writer)."""
    return SupabaseDayCompletionRepository(client)


# =============================================================================
# Use Case Providers
# =============================================================================


def get_complete_day_use_case(
    block_repo: BlockRepository = Depends(get_block_repo),
    progress_repo: ProgressRepository = Depends(get_progress_repo),
    day_completion_repo: DayCompletionRepository = Depends(get_day_completion_repo),
) -> CompleteDayUseCase:
    return CompleteDayUseCase(
        block_repo=block_repo,
        progress_repo=progress_repo,
        day_completion_repo=day_completion_repo,
    )


def get_create_block_use_case(
    block_repo: BlockRepository = Depends(get_block_repo),
) -> CreateBlockUseCase:
    return CreateBlockUseCase(block_repo)


def get_update_block_use_case(
    block_repo: BlockRepository = Depends(get_block_repo),
    user_repo: UserRepository = Depends(get_user_repo),
) -> UpdateBlockUseCase:
    return UpdateBlockUseCase(block_repo, user_repo)


def get_delete_block_use_case(
    block_repo: BlockRepository = Depends(get_block_repo),
    user_repo: UserRepository = Depends(get_user_repo),
) -> DeleteBlockUseCase:
    return DeleteBlockUseCase(block_repo, user_repo)


def get_coaching_use_case(
    user_repo: UserRepository = Depends(get_user_repo),
    block_repo: BlockRepository = Depends(get_block_repo),
    progress_repo: ProgressRepository = Depends(get_progress_repo),
) -> CoachingUseCase:
    return CoachingUseCase(user_repo, block_repo, progress_repo)


def get_admin_use_case(
    user_repo: UserRepository = Depends(get_user_repo),
    block_repo: BlockRepository = Depends(get_block_repo),
    progress_repo: ProgressRepository = Depends(get_progress_repo),
) -> AdminUseCase:
    return AdminUseCase(user_repo, block_repo, progress_repo)


# =============================================================================
# Authentication Providers
# =============================================================================


async def get_current_user(
    authorization: Optional[str] = Header(None),
) -> str:
    """
    Get the current authenticated user ID.

    Wraps backend.auth.get_current_user for dependency injection.

    Raises:
        HTTPException: 401 if authentication fails
    """
    return await _get_current_user(authorization=authorization)


def require_admin(
    user_id: str = Depends(get_current_user),
    user_repo: UserRepository = Depends(get_user_repo),
) -> str:
    """
    Ensure the current user is an admin.

    Returns:
        str: The admin's user ID

    Raises:
        ForbiddenError: 403 if the user is missing or not an admin
    """
    user = user_repo.get_by_id(user_id)
    if user is None or not user.is_admin:
        raise ForbiddenError("Admin access required")
    return user_id


# =============================================================================
# Exports
# =============================================================================

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
    # Use cases
    "get_complete_day_use_case",
    "get_create_block_use_case",
    "get_update_block_use_case",
    "get_delete_block_use_case",
    "get_coaching_use_case",
    "get_admin_use_case",
    # Authentication
    "get_current_user",
    "require_admin",
]
