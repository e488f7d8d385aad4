"""
Unit tests for block create / update / delete use cases.
"""
import pytest
from datetime import date

from application.exceptions import ForbiddenError, NotFoundError, ValidationError
from application.use_cases import CreateBlockUseCase, DeleteBlockUseCase, UpdateBlockUseCase
from domain.models import BlockSource, BlockUpdate, UserRole, Week
from tests.fakes import FakeBlockRepository, FakeUserRepository, create_block, create_user


@pytest.fixture
def user_repo():
    repo = FakeUserRepository()
    repo.seed([
        create_user("athlete-1", coach_id="coach-1"),
        create_user("coach-1", role=UserRole.COACH, athletes=["athlete-1"]),
        create_user("stranger"),
        create_user("admin-1", role=UserRole.ADMIN),
    ])
    return repo


@pytest.fixture
def block_repo():
    repo = FakeBlockRepository()
    repo.seed([
        create_block(owner_id="athlete-1", block_id="personal"),
        create_block(
            owner_id="athlete-1",
            block_id="assigned",
            source=BlockSource.ASSIGNED,
            assigned_by="Coach 1",
        ),
    ])
    return repo


@pytest.mark.unit
class TestCreateBlock:

    def test_defaults(self):
        repo = FakeBlockRepository()
        block = CreateBlockUseCase(repo).execute("athlete-1", "Off-season")

        assert block.source == BlockSource.PERSONAL
        assert block.start_date == date.today()
        assert len(block.weeks) == 1
        assert block.weeks[0].days[0].day_name == "Day 1"
        assert repo.get_by_id(block.id).title == "Off-season"

    def test_keeps_given_weeks(self):
        repo = FakeBlockRepository()
        weeks = [Week(week_number=1), Week(week_number=2)]
        block = CreateBlockUseCase(repo).execute("athlete-1", "Peak", weeks=weeks)
        assert [w.week_number for w in block.weeks] == [1, 2]

    @pytest.mark.parametrize("title", [None, "", "   "])
    def test_title_is_required(self, title):
        with pytest.raises(ValidationError) as exc_info:
            CreateBlockUseCase(FakeBlockRepository()).execute("athlete-1", title)
        assert exc_info.value.message == "Title is required"


@pytest.mark.unit
class TestUpdateBlock:

    def test_owner_updates_personal_block(self, block_repo, user_repo):
        use_case = UpdateBlockUseCase(block_repo, user_repo)
        updated = use_case.execute("personal", "athlete-1", BlockUpdate(title="Renamed"))

        assert updated.title == "Renamed"
        assert block_repo.get_by_id("personal").title == "Renamed"

    def test_owner_cannot_update_assigned_block(self, block_repo, user_repo):
        use_case = UpdateBlockUseCase(block_repo, user_repo)
        with pytest.raises(ForbiddenError) as exc_info:
            use_case.execute("assigned", "athlete-1", BlockUpdate(title="Mine now"))
        assert exc_info.value.message == "Cannot edit assigned blocks. Contact your coach for changes."
        assert block_repo.get_by_id("assigned").title == "Strength Block"

    def test_coach_updates_assigned_block(self, block_repo, user_repo):
        use_case = UpdateBlockUseCase(block_repo, user_repo)
        updated = use_case.execute("assigned", "coach-1", BlockUpdate(weeks=[Week(week_number=1)]))
        assert updated.weeks[0].days == []

    def test_stranger_is_rejected(self, block_repo, user_repo):
        use_case = UpdateBlockUseCase(block_repo, user_repo)
        with pytest.raises(ForbiddenError) as exc_info:
            use_case.execute("personal", "stranger", BlockUpdate(title="x"))
        assert exc_info.value.message == "Unauthorized"

    def test_admin_updates_any_block(self, block_repo, user_repo):
        use_case = UpdateBlockUseCase(block_repo, user_repo)
        updated = use_case.execute("assigned", "admin-1", BlockUpdate(source=BlockSource.PERSONAL))
        assert updated.source == BlockSource.PERSONAL

    def test_missing_block(self, block_repo, user_repo):
        with pytest.raises(NotFoundError) as exc_info:
            UpdateBlockUseCase(block_repo, user_repo).execute("nope", "athlete-1", BlockUpdate())
        assert exc_info.value.message == "Block not found"

    def test_only_sent_fields_change(self, block_repo, user_repo):
        use_case = UpdateBlockUseCase(block_repo, user_repo)
        updated = use_case.execute("personal", "athlete-1", BlockUpdate(start_date=date(2024, 6, 1)))

        assert updated.start_date == date(2024, 6, 1)
        assert updated.title == "Strength Block"
        assert len(updated.weeks) == 1

    def test_assigned_by_can_be_cleared(self, block_repo, user_repo):
        use_case = UpdateBlockUseCase(block_repo, user_repo)
        updated = use_case.execute("assigned", "coach-1", BlockUpdate(assigned_by=None))
        assert updated.assigned_by is None

    def test_null_title_is_ignored(self, block_repo, user_repo):
        use_case = UpdateBlockUseCase(block_repo, user_repo)
        updated = use_case.execute("personal", "athlete-1", BlockUpdate(title=None))
        assert updated.title == "Strength Block"

    def test_blank_title_is_rejected(self, block_repo, user_repo):
        use_case = UpdateBlockUseCase(block_repo, user_repo)
        with pytest.raises(ValidationError):
            use_case.execute("personal", "athlete-1", BlockUpdate(title="  "))


@pytest.mark.unit
class TestDeleteBlock:

    def test_owner_deletes_assigned_block(self, block_repo, user_repo):
        DeleteBlockUseCase(block_repo, user_repo).execute("assigned", "athlete-1")
        assert block_repo.get_by_id("assigned") is None

    def test_coach_deletes_block(self, block_repo, user_repo):
        DeleteBlockUseCase(block_repo, user_repo).execute("personal", "coach-1")
        assert block_repo.get_by_id("personal") is None

    def test_stranger_is_rejected(self, block_repo, user_repo):
        with pytest.raises(ForbiddenError) as exc_info:
            DeleteBlockUseCase(block_repo, user_repo).execute("personal", "stranger")
        assert exc_info.value.message == "Unauthorized to delete this block"
        assert block_repo.get_by_id("personal") is not None

    def test_missing_block(self, block_repo, user_repo):
        with pytest.raises(NotFoundError):
            DeleteBlockUseCase(block_repo, user_repo).execute("nope", "athlete-1")
