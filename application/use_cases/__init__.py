"""
Application Use Cases for the TotalGrind training log.

This package contains application-level use cases that orchestrate domain logic
and coordinate between ports/adapters. Use cases are the entry points for
business operations and contain the application's workflow logic.

Architecture follows Clean Architecture / Hexagonal pattern:
- Use cases orchestrate domain objects and repository ports
- Dependencies are injected via constructors for testability
- Use cases return domain models and raise application exceptions

Usage:
    from application.use_cases import CompleteDayUseCase

    use_case = CompleteDayUseCase(
        block_repo=block_repo,
        progress_repo=progress_repo,
        day_completion_repo=day_completion_repo,
    )
    result = use_case.execute(user_id="user-123", day_id="d1", exercises=[...])
"""

from application.use_cases.complete_day import CompleteDayResult, CompleteDayUseCase
from application.use_cases.manage_blocks import (
    CreateBlockUseCase,
    DeleteBlockUseCase,
    UpdateBlockUseCase,
)
from application.use_cases.coaching import CoachingUseCase
from application.use_cases.admin import AdminUseCase

__all__ = [
    # CompleteDay
    "CompleteDayUseCase",
    "CompleteDayResult",
    # Blocks
    "CreateBlockUseCase",
    "UpdateBlockUseCase",
    "DeleteBlockUseCase",
    # Coaching
    "CoachingUseCase",
    # Admin
    "AdminUseCase",
]
