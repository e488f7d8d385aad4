"""
Shared test fixtures.

Provides fresh fake repositories per test and an app whose repository and
authentication dependencies are overridden with them.

Usage:
    def test_something(client, as_user, user_repo):
        user_repo.seed([create_user("athlete-1")])
        as_user("athlete-1")
        response = client.get("/user/me")
"""

from typing import Callable

import pytest
from fastapi.testclient import TestClient

from api import deps
from backend.main import create_app
from backend.settings import Settings
from tests.fakes import (
    FakeBlockRepository,
    FakeDayCompletionRepository,
    FakeProgressRepository,
    FakeUserRepository,
)


# =============================================================================
# Repository Fixtures
# =============================================================================


@pytest.fixture
def block_repo() -> FakeBlockRepository:
    return FakeBlockRepository()


@pytest.fixture
def progress_repo() -> FakeProgressRepository:
    return FakeProgressRepository()


@pytest.fixture
def user_repo() -> FakeUserRepository:
    return FakeUserRepository()


@pytest.fixture
def day_completion_repo(block_repo, progress_repo) -> FakeDayCompletionRepository:
    """Atomic writer sharing storage with the block and progress fakes."""
    return FakeDayCompletionRepository(block_repo, progress_repo)


# =============================================================================
# App Fixtures
# =============================================================================


@pytest.fixture
def test_settings() -> Settings:
    return Settings(environment="test", _env_file=None)


@pytest.fixture
def current_user() -> dict:
    """Mutable holder for the authenticated user ID."""
    return {"id": "athlete-1"}


@pytest.fixture
def as_user(current_user) -> Callable[[str], None]:
    """Switch the authenticated user for subsequent requests."""

    def _as_user(user_id: str) -> None:
        current_user["id"] = user_id

    return _as_user


@pytest.fixture
def app(test_settings, block_repo, progress_repo, user_repo, day_completion_repo, current_user):
    """App with every repository and the auth dependency overridden."""
    app = create_app(settings=test_settings)

    async def mock_user():
        return current_user["id"]

    app.dependency_overrides[deps.get_current_user] = mock_user
    app.dependency_overrides[deps.get_block_repo] = lambda: block_repo
    app.dependency_overrides[deps.get_progress_repo] = lambda: progress_repo
    app.dependency_overrides[deps.get_user_repo] = lambda: user_repo
    app.dependency_overrides[deps.get_day_completion_repo] = lambda: day_completion_repo

    yield app

    # Cleanup: clear dependency overrides
    app.dependency_overrides.clear()


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)
