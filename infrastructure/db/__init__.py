"""
Infrastructure Database Layer.

This package provides Supabase-backed implementations of the repository
interfaces defined in application.ports. These implementations are injected
into use cases and routers through api.deps.

Usage:
    from supabase import create_client
    from infrastructure.db import (
        SupabaseBlockRepository,
        SupabaseProgressRepository,
        SupabaseUserRepository,
        SupabaseDayCompletionRepository,
    )

    # Create Supabase client
    client = create_client(SUPABASE_URL, SUPABASE_KEY)

    # Instantiate repositories with injected client
    block_repo = SupabaseBlockRepository(client)
    progress_repo = SupabaseProgressRepository(client)
    user_repo = SupabaseUserRepository(client)
    day_completion_repo = SupabaseDayCompletionRepository(client)
"""

from infrastructure.db.block_repository import SupabaseBlockRepository
from infrastructure.db.progress_repository import SupabaseProgressRepository
from infrastructure.db.user_repository import SupabaseUserRepository
from infrastructure.db.day_completion_repository import SupabaseDayCompletionRepository

__all__ = [
    # Training blocks
    "SupabaseBlockRepository",
    # Progress history
    "SupabaseProgressRepository",
    # Users and coach links
    "SupabaseUserRepository",
    # Atomic day completion
    "SupabaseDayCompletionRepository",
]
