"""
Integration tests for the /blocks endpoints.
"""
import pytest

from domain.models import BlockSource, UserRole
from tests.fakes import create_block, create_user


@pytest.fixture(autouse=True)
def seed(user_repo, block_repo):
    user_repo.seed([
        create_user("athlete-1", coach_id="coach-1"),
        create_user("coach-1", role=UserRole.COACH, athletes=["athlete-1"]),
        create_user("stranger"),
        create_user("admin-1", role=UserRole.ADMIN),
    ])
    block_repo.seed([
        create_block(owner_id="athlete-1", block_id="personal"),
        create_block(
            owner_id="athlete-1",
            block_id="assigned",
            source=BlockSource.ASSIGNED,
            assigned_by="Coach 1",
        ),
    ])


@pytest.mark.integration
class TestListAndCreateBlocks:

    def test_list_own_blocks(self, client, as_user):
        as_user("athlete-1")
        response = client.get("/blocks")

        assert response.status_code == 200
        blocks = response.json()
        assert {b["id"] for b in blocks} == {"personal", "assigned"}
        assert blocks[0]["ownerId"] == "athlete-1"
        assert "weeks" in blocks[0]

    def test_list_is_scoped_to_caller(self, client, as_user):
        as_user("stranger")
        assert client.get("/blocks").json() == []

    def test_create_block(self, client, as_user, block_repo):
        as_user("stranger")
        response = client.post("/blocks", json={"title": "Hypertrophy", "startDate": "2024-05-06"})

        assert response.status_code == 201
        data = response.json()
        assert data["title"] == "Hypertrophy"
        assert data["source"] == "personal"
        assert data["startDate"] == "2024-05-06"
        assert data["weeks"][0]["days"][0]["dayName"] == "Day 1"
        assert block_repo.get_by_id(data["id"]).owner_id == "stranger"

    def test_create_without_title(self, client):
        response = client.post("/blocks", json={})
        assert response.status_code == 400
        assert response.json() == {"error": "Title is required"}


@pytest.mark.integration
class TestUpdateBlock:

    def test_owner_updates_personal_block(self, client, as_user):
        as_user("athlete-1")
        response = client.put("/blocks/personal", json={"title": "Renamed"})

        assert response.status_code == 200
        assert response.json()["title"] == "Renamed"

    def test_owner_cannot_update_assigned_block(self, client, as_user, block_repo):
        as_user("athlete-1")
        response = client.put("/blocks/assigned", json={"title": "Mine"})

        assert response.status_code == 403
        assert response.json() == {
            "error": "Cannot edit assigned blocks. Contact your coach for changes.",
        }
        assert block_repo.get_by_id("assigned").title == "Strength Block"

    def test_coach_updates_assigned_block(self, client, as_user):
        as_user("coach-1")
        weeks = [{"weekNumber": 1, "days": [{"dayName": "Heavy"}]}]

        response = client.put("/blocks/assigned", json={"weeks": weeks})

        assert response.status_code == 200
        assert response.json()["weeks"][0]["days"][0]["dayName"] == "Heavy"

    def test_stranger_is_rejected(self, client, as_user):
        as_user("stranger")
        response = client.put("/blocks/personal", json={"title": "x"})
        assert response.status_code == 403
        assert response.json() == {"error": "Unauthorized"}

    def test_admin_can_update(self, client, as_user):
        as_user("admin-1")
        response = client.put("/blocks/assigned", json={"source": "personal", "assignedBy": None})

        assert response.status_code == 200
        assert response.json()["source"] == "personal"
        assert response.json()["assignedBy"] is None

    def test_missing_block(self, client):
        response = client.put("/blocks/nope", json={"title": "x"})
        assert response.status_code == 404
        assert response.json() == {"error": "Block not found"}


@pytest.mark.integration
class TestDeleteBlock:

    def test_owner_deletes_assigned_block(self, client, as_user, block_repo):
        as_user("athlete-1")
        response = client.delete("/blocks/assigned")

        assert response.status_code == 200
        assert response.json() == {"success": True}
        assert block_repo.get_by_id("assigned") is None

    def test_stranger_is_rejected(self, client, as_user):
        as_user("stranger")
        response = client.delete("/blocks/personal")
        assert response.status_code == 403
        assert response.json() == {"error": "Unauthorized to delete this block"}

    def test_missing_block(self, client):
        assert client.delete("/blocks/nope").status_code == 404
