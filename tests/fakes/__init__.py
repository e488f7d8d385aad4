"""
Fake Repository Implementations for Testing.

This package provides in-memory fake implementations of repository interfaces
for fast, isolated testing. No database or external dependencies required.

Features:
- All fakes implement the same Protocol interfaces as real implementations
- Supports seeding with test data
- Supports reset() for test isolation
- Factory functions for common test scenarios

Usage:
    from tests.fakes import FakeBlockRepository, create_block

    repo = FakeBlockRepository()
    repo.seed([create_block(owner_id="athlete-1", day_id="d1")])
"""
from datetime import date
from typing import List, Optional

from domain.models import (
    BlockSource,
    Day,
    Exercise,
    TrainingBlock,
    User,
    UserRole,
    Week,
    WorkSet,
)

# Import all fake implementations
from tests.fakes.block_repository import FakeBlockRepository
from tests.fakes.progress_repository import FakeProgressRepository
from tests.fakes.user_repository import FakeUserRepository
from tests.fakes.day_completion_repository import FakeDayCompletionRepository


# =============================================================================
# Factory Functions
# =============================================================================


def create_user(
    user_id: str,
    *,
    role: UserRole = UserRole.ATHLETE,
    name: Optional[str] = None,
    email: Optional[str] = None,
    coach_id: Optional[str] = None,
    athletes: Optional[List[str]] = None,
) -> User:
    """
    Create a User with predictable name and email derived from its ID.

    Args:
        user_id: User ID
        role: Account role
        name: Display name (defaults to the title-cased ID)
        email: Email (defaults to ``<user_id>@example.com``)
        coach_id: Linked coach, for athletes
        athletes: Linked athlete IDs, for coaches
    """
    return User(
        id=user_id,
        email=email or f"{user_id}@example.com",
        name=name or user_id.replace("-", " ").title(),
        role=role,
        coach_id=coach_id,
        athletes=list(athletes or []),
    )


def create_block(
    *,
    owner_id: str,
    block_id: str = "block-1",
    day_id: str = "day-1",
    title: str = "Strength Block",
    source: BlockSource = BlockSource.PERSONAL,
    assigned_by: Optional[str] = None,
    num_weeks: int = 1,
) -> TrainingBlock:
    """
    Create a block whose first week holds ``day_id``.

    Later weeks get generated day IDs of the form ``<day_id>-w<n>``.
    """
    weeks = []
    for n in range(1, num_weeks + 1):
        first_day = day_id if n == 1 else f"{day_id}-w{n}"
        weeks.append(
            Week(
                id=f"{block_id}-week-{n}",
                week_number=n,
                days=[Day(id=first_day, day_name="Day 1")],
            )
        )
    return TrainingBlock(
        id=block_id,
        owner_id=owner_id,
        title=title,
        source=source,
        assigned_by=assigned_by,
        start_date=date(2024, 1, 1),
        weeks=weeks,
    )


def comp_exercise(name: str, *sets: tuple) -> Exercise:
    """
    Build an exercise from ``(weight, reps, rpe)`` tuples.

    Example:
        comp_exercise("Comp SQ", (100, 5, 8), (110, 3, None))
    """
    return Exercise(
        name=name,
        sets=[WorkSet(weight=w, reps=r, rpe=rpe) for w, r, rpe in sets],
    )


__all__ = [
    # Fakes
    "FakeBlockRepository",
    "FakeProgressRepository",
    "FakeUserRepository",
    "FakeDayCompletionRepository",
    # Factories
    "create_user",
    "create_block",
    "comp_exercise",
]
