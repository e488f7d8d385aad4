"""
Repository Interfaces (Ports) for the TotalGrind training log.

This package defines abstract interfaces that decouple use cases from
infrastructure (database, external services). Implementations are provided
in the infrastructure layer; in-memory fakes live in tests/fakes.

Architecture follows the Ports & Adapters (Hexagonal) pattern:
- Ports: Abstract interfaces defined here (what the use cases need)
- Adapters: Concrete implementations in infrastructure/ (how it's provided)

Usage:
    from application.ports import BlockRepository, ProgressRepository

    class CompleteDayUseCase:
        def __init__(self, block_repo: BlockRepository, ...):
            self._block_repo = block_repo
"""

from application.ports.block_repository import BlockRepository
from application.ports.progress_repository import ProgressRepository
from application.ports.user_repository import UserRepository
from application.ports.day_completion_repository import DayCompletionRepository

__all__ = [
    "BlockRepository",
    "ProgressRepository",
    "UserRepository",
    "DayCompletionRepository",
]
