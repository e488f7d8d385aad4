"""
Infrastructure Layer for the TotalGrind training log.

This package contains concrete implementations of repository interfaces:
- db/: Supabase database implementations
"""

# Re-export database repositories for convenient access
from infrastructure.db import (
    SupabaseBlockRepository,
    SupabaseProgressRepository,
    SupabaseUserRepository,
    SupabaseDayCompletionRepository,
)

__all__ = [
    "SupabaseBlockRepository",
    "SupabaseProgressRepository",
    "SupabaseUserRepository",
    "SupabaseDayCompletionRepository",
]
