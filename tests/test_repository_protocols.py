"""
Tests for repository protocol definitions.

These tests verify that:
1. Protocol definitions are valid and importable
2. Protocols define the expected methods
3. Fake and Supabase implementations provide every protocol method
"""
import pytest

from application.ports import (
    BlockRepository,
    DayCompletionRepository,
    ProgressRepository,
    UserRepository,
)
from infrastructure import (
    SupabaseBlockRepository,
    SupabaseDayCompletionRepository,
    SupabaseProgressRepository,
    SupabaseUserRepository,
)
from tests.fakes import (
    FakeBlockRepository,
    FakeDayCompletionRepository,
    FakeProgressRepository,
    FakeUserRepository,
)

# All tests in this module are pure logic tests (no TestClient) - mark as unit
pytestmark = pytest.mark.unit


REQUIRED_METHODS = {
    BlockRepository: [
        "get_by_id",
        "list_by_owner",
        "create",
        "save",
        "delete",
        "delete_by_owner",
        "count",
    ],
    ProgressRepository: ["get", "list_by_user", "delete_by_user"],
    UserRepository: ["get_by_id", "get_by_email", "get_many", "list_users", "save", "delete"],
    DayCompletionRepository: ["commit"],
}

IMPLEMENTATIONS = [
    (BlockRepository, SupabaseBlockRepository),
    (BlockRepository, FakeBlockRepository),
    (ProgressRepository, SupabaseProgressRepository),
    (ProgressRepository, FakeProgressRepository),
    (UserRepository, SupabaseUserRepository),
    (UserRepository, FakeUserRepository),
    (DayCompletionRepository, SupabaseDayCompletionRepository),
    (DayCompletionRepository, FakeDayCompletionRepository),
]


class TestProtocolDefinitions:

    @pytest.mark.parametrize("protocol", list(REQUIRED_METHODS))
    def test_protocol_defines_methods(self, protocol):
        for method in REQUIRED_METHODS[protocol]:
            assert callable(getattr(protocol, method, None)), f"{protocol.__name__}.{method}"


class TestImplementationsSatisfyProtocols:

    @pytest.mark.parametrize(
        "protocol,implementation",
        IMPLEMENTATIONS,
        ids=[impl.__name__ for _, impl in IMPLEMENTATIONS],
    )
    def test_implements_all_methods(self, protocol, implementation):
        missing = [
            method
            for method in REQUIRED_METHODS[protocol]
            if not callable(getattr(implementation, method, None))
        ]
        assert missing == []


class TestProgressWritesAreAtomic:

    @pytest.mark.parametrize("implementation", [ProgressRepository, SupabaseProgressRepository])
    def test_progress_has_no_standalone_save(self, implementation):
        assert not hasattr(implementation, "save")
