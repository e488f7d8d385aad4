"""
Integration tests for PUT /days/{day_id}.

Tests cover:
- Day completion end-to-end through the API
- Same-day progress upsert
- Scoping to the caller's blocks
- Atomic commit failure
"""
import pytest
from datetime import date

from domain.models import ProgressEntry, ProgressRecord
from tests.fakes import create_block, create_user


@pytest.fixture(autouse=True)
def seed(user_repo, block_repo):
    user_repo.seed([create_user("athlete-1"), create_user("athlete-2")])
    block_repo.seed([
        create_block(owner_id="athlete-1", block_id="b1", day_id="d1"),
        create_block(owner_id="athlete-2", block_id="b2", day_id="d2"),
    ])


def _squat_day(weight=160, reps=5, rpe=7):
    return {
        "exercises": [
            {"name": "Comp SQ", "sets": [{"weight": weight, "reps": reps, "rpe": rpe}]},
        ],
    }


@pytest.mark.integration
class TestCompleteDay:

    def test_end_to_end_squat(self, client, block_repo, progress_repo):
        response = client.put("/days/d1", json=_squat_day())

        assert response.status_code == 200
        assert response.json() == {"success": True}

        day = block_repo.get_by_id("b1").find_day("d1")
        assert day.is_completed is True
        assert day.exercises[0].name == "Comp SQ"

        record = progress_repo.get("athlete-1", "Comp SQ")
        assert record.history == [
            ProgressEntry(date=date.today(), estimated_max=203, actual_max=160),
        ]

    def test_progress_visible_through_api(self, client):
        client.put("/days/d1", json=_squat_day())

        response = client.get("/progress")

        assert response.status_code == 200
        records = response.json()
        assert len(records) == 1
        assert records[0]["exerciseName"] == "Comp SQ"
        assert records[0]["userId"] == "athlete-1"
        entry = records[0]["history"][0]
        assert entry["date"] == date.today().isoformat()
        assert entry["estimatedMax"] == 203
        assert entry["actualMax"] == 160

    def test_same_day_resubmission_keeps_best(self, client, progress_repo):
        client.put("/days/d1", json=_squat_day(weight=160))
        client.put("/days/d1", json=_squat_day(weight=100))

        history = progress_repo.get("athlete-1", "Comp SQ").history
        assert len(history) == 1
        assert history[0].estimated_max == 203
        assert history[0].actual_max == 160

    def test_non_competition_exercise(self, client, progress_repo):
        body = {"exercises": [{"name": "Leg Press", "sets": [{"weight": 300, "reps": 10}]}]}

        response = client.put("/days/d1", json=body)

        assert response.status_code == 200
        assert progress_repo.get_all() == []

    def test_string_values_and_unknown_fields_are_kept(self, client, block_repo):
        body = {
            "exercises": [{
                "name": "Comp BP",
                "notes": "paused",
                "sets": [{"weight": "100", "reps": "5", "rpe": "8", "tempo": "3-1-1"}],
            }],
            "athleteNotes": "Good session",
        }

        response = client.put("/days/d1", json=body)

        assert response.status_code == 200
        day = block_repo.get_by_id("b1").find_day("d1")
        assert day.athlete_notes == "Good session"
        dumped = day.model_dump(by_alias=True)
        assert dumped["exercises"][0]["notes"] == "paused"
        assert dumped["exercises"][0]["sets"][0]["tempo"] == "3-1-1"

    def test_existing_history_on_other_date_is_kept(self, client, progress_repo):
        progress_repo.seed([
            ProgressRecord(
                user_id="athlete-1",
                exercise_name="Comp SQ",
                history=[ProgressEntry(date=date(2020, 1, 1), estimated_max=250, actual_max=240)],
            )
        ])

        client.put("/days/d1", json=_squat_day())

        history = progress_repo.get("athlete-1", "Comp SQ").history
        assert [e.date for e in history] == [date(2020, 1, 1), date.today()]

    def test_unknown_day(self, client):
        response = client.put("/days/nope", json=_squat_day())
        assert response.status_code == 404
        assert response.json() == {"error": "Day not found"}

    def test_day_of_another_user(self, client, block_repo):
        response = client.put("/days/d2", json=_squat_day())

        assert response.status_code == 404
        assert block_repo.get_by_id("b2").find_day("d2").is_completed is False

    def test_missing_exercises_is_rejected(self, client):
        response = client.put("/days/d1", json={})
        assert response.status_code == 400
        assert response.json() == {"error": "exercises: Field required"}

    def test_malformed_exercises_is_rejected(self, client, block_repo):
        response = client.put("/days/d1", json={"exercises": "nope"})

        assert response.status_code == 400
        assert response.json()["error"].startswith("exercises:")
        assert block_repo.get_by_id("b1").find_day("d1").is_completed is False

    def test_failed_commit_returns_500_and_changes_nothing(
        self, client, block_repo, progress_repo, day_completion_repo
    ):
        day_completion_repo.fail_next_commit()

        response = client.put("/days/d1", json=_squat_day())

        assert response.status_code == 500
        assert response.json() == {"error": "Internal server error"}
        assert block_repo.get_by_id("b1").find_day("d1").is_completed is False
        assert progress_repo.get_all() == []
