"""
Integration tests for the workout tracker HTTP API.

Runs the real routers, services and engines against the in-memory fakes
(see tests/conftest.py). Sets logged through the API are stamped with the
current time, so "today" here is the real UTC day.
"""

from datetime import datetime, timedelta, timezone

import pytest

from api.deps import get_settings
from backend.core.grouping import end_of_day, start_of_day
from backend.settings import Settings
from tests.conftest import TEST_USER_ID
from tests.fakes import make_set_rows

PROGRAMS = "/api/v1/workout-program"
EXERCISES = "/api/v1/exercises"


def _create_program(client, name="Push Day", muscle_groups=("CHEST", "SHOULDERS")):
    response = client.post(f"{PROGRAMS}/add", json={
        "name": name,
        "description": "Chest and shoulders",
        "workout_days": ["MONDAY", "THURSDAY"],
        "muscle_groups": list(muscle_groups),
    })
    assert response.status_code == 201, response.text
    return response.json()["data"]


def _create_exercise(client, program, name="Bench Press", target_sets=3):
    response = client.post(f"{EXERCISES}/{program['id']}/add", json={
        "name": name,
        "target_sets": target_sets,
        "min_reps": 8,
        "max_reps": 12,
        "unit": "KG",
        "muscle_group_ids": [program["muscle_groups"][0]["id"]],
    })
    assert response.status_code == 201, response.text
    return response.json()["data"]


def _log_sets(client, exercise, pairs):
    for weight, reps in pairs:
        response = client.post(
            f"{EXERCISES}/set/add/{exercise['id']}",
            json={"weight": weight, "reps": reps},
        )
        assert response.status_code == 201, response.text


def _seed_yesterday(repos, exercise, pairs):
    start = start_of_day(datetime.now(timezone.utc)) - timedelta(days=1) + timedelta(hours=9)
    rows = make_set_rows(exercise["id"], start, pairs)
    for row in rows:
        row["valid_upto"] = end_of_day(row["created_at"])
    repos.sets.seed(rows)


@pytest.mark.integration
class TestHealthAndUsers:
    """Liveness and user sync."""

    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok"}

    def test_sync_creates_then_returns_user(self, client):
        created = client.get("/api/v1/users/sync", params={"email": "lifter@example.com"})
        assert created.status_code == 201
        body = created.json()
        assert body["success"] is True
        assert body["message"] == "User created successfully"
        assert body["data"]["external_id"] == TEST_USER_ID

        existing = client.get("/api/v1/users/sync")
        assert existing.status_code == 200
        assert existing.json()["message"] == "User already exists"
        assert existing.json()["data"]["id"] == body["data"]["id"]

    def test_unsynced_user_rejected(self, client):
        response = client.get(f"{PROGRAMS}/all")
        assert response.status_code == 401
        assert response.json() == {"detail": "No user exists in the database"}


@pytest.mark.integration
class TestWorkoutPrograms:
    """Program CRUD."""

    def test_create_and_list(self, auth_client):
        program = _create_program(auth_client)
        assert [mg["name"] for mg in program["muscle_groups"]] == ["CHEST", "SHOULDERS"]

        response = auth_client.get(f"{PROGRAMS}/all")
        assert response.status_code == 200
        assert response.json()["message"] == "Your workouts fetched successfully"
        assert [p["name"] for p in response.json()["data"]] == ["Push Day"]

    def test_duplicate_name(self, auth_client):
        _create_program(auth_client)
        response = auth_client.post(f"{PROGRAMS}/add", json={
            "name": "push day",
            "workout_days": ["FRIDAY"],
            "muscle_groups": ["CHEST"],
        })
        assert response.status_code == 400
        assert response.json()["detail"] == "You already have a workout program with this name"

    @pytest.mark.parametrize("payload", [
        {"name": "Legs", "workout_days": [], "muscle_groups": ["LEGS"]},
        {"name": "Legs", "workout_days": ["MONDAY"], "muscle_groups": ["NECK"]},
        {"name": "", "workout_days": ["MONDAY"], "muscle_groups": ["LEGS"]},
    ])
    def test_invalid_body(self, auth_client, payload):
        assert auth_client.post(f"{PROGRAMS}/add", json=payload).status_code == 422

    def test_blank_name_rejected_before_write(self, auth_client, repos):
        response = auth_client.post(f"{PROGRAMS}/add", json={
            "name": "   ",
            "workout_days": ["MONDAY"],
            "muscle_groups": ["LEGS"],
        })

        assert response.status_code == 422
        assert repos.programs.count() == 0

    def test_name_is_trimmed(self, auth_client):
        program = _create_program(auth_client, name="  Pull Day  ")
        assert program["name"] == "Pull Day"

    def test_blank_rename_rejected(self, auth_client):
        program = _create_program(auth_client)
        response = auth_client.put(f"{PROGRAMS}/rename", json={
            "workout_program_id": program["id"],
            "name": " \t ",
        })

        assert response.status_code == 422
        assert auth_client.get(f"{PROGRAMS}/{program['id']}").json()["data"]["name"] == "Push Day"

    def test_get_with_exercises(self, auth_client):
        program = _create_program(auth_client)
        _create_exercise(auth_client, program)

        response = auth_client.get(f"{PROGRAMS}/{program['id']}")
        assert response.status_code == 200
        assert [e["name"] for e in response.json()["data"]["exercises"]] == ["Bench Press"]

    def test_get_missing(self, auth_client):
        response = auth_client.get(f"{PROGRAMS}/999")
        assert response.status_code == 404
        assert response.json()["detail"] == "Workout program not found"

    def test_other_users_program_is_hidden(self, auth_client, repos):
        stranger = repos.users.create("user_other")
        theirs = repos.programs.seed_program(user_id=stranger["id"], name="Theirs")

        assert auth_client.get(f"{PROGRAMS}/{theirs['id']}").status_code == 404

    def test_rename(self, auth_client):
        program = _create_program(auth_client)
        response = auth_client.put(f"{PROGRAMS}/rename", json={
            "workout_program_id": program["id"],
            "name": "Chest Day",
        })
        assert response.status_code == 200
        assert response.json()["data"]["name"] == "Chest Day"

    def test_delete_cascades(self, auth_client, repos):
        program = _create_program(auth_client)
        exercise = _create_exercise(auth_client, program)
        _log_sets(auth_client, exercise, [(60, 10)])

        response = auth_client.request(
            "DELETE", f"{PROGRAMS}/delete", json={"workout_program_id": program["id"]},
        )

        assert response.status_code == 200
        assert response.json()["message"] == "Workout program deleted successfully"
        assert repos.programs.count() == 0
        assert repos.exercises.count() == 0
        assert repos.sets.count() == 0


@pytest.mark.integration
class TestExercises:
    """Exercise management and set logging."""

    def test_create_exercise(self, auth_client):
        program = _create_program(auth_client)
        exercise = _create_exercise(auth_client, program)

        assert exercise["workout_program_name"] == "Push Day"
        assert exercise["muscle_groups"][0]["name"] == "CHEST"

    def test_rep_range_validated(self, auth_client):
        program = _create_program(auth_client)
        response = auth_client.post(f"{EXERCISES}/{program['id']}/add", json={
            "name": "Dips",
            "target_sets": 3,
            "min_reps": 12,
            "max_reps": 8,
            "muscle_group_ids": [program["muscle_groups"][0]["id"]],
        })
        assert response.status_code == 422

    def test_duplicate_exercise(self, auth_client):
        program = _create_program(auth_client)
        _create_exercise(auth_client, program)
        response = auth_client.post(f"{EXERCISES}/{program['id']}/add", json={
            "name": "BENCH PRESS",
            "target_sets": 3,
            "min_reps": 8,
            "max_reps": 12,
            "muscle_group_ids": [program["muscle_groups"][0]["id"]],
        })
        assert response.status_code == 400

    def test_list_by_muscle_group(self, auth_client):
        program = _create_program(auth_client)
        _create_exercise(auth_client, program)
        chest_id = program["muscle_groups"][0]["id"]
        shoulders_id = program["muscle_groups"][1]["id"]

        chest = auth_client.get(f"{EXERCISES}/{program['id']}/{chest_id}")
        shoulders = auth_client.get(f"{EXERCISES}/{program['id']}/{shoulders_id}")

        assert [e["name"] for e in chest.json()["data"]] == ["Bench Press"]
        assert shoulders.json()["data"] == []

    def test_blank_exercise_name_rejected(self, auth_client, repos):
        program = _create_program(auth_client)
        response = auth_client.post(f"{EXERCISES}/{program['id']}/add", json={
            "name": "  ",
            "target_sets": 3,
            "min_reps": 8,
            "max_reps": 12,
            "muscle_group_ids": [program["muscle_groups"][0]["id"]],
        })

        assert response.status_code == 422
        assert repos.exercises.count() == 0

    def test_blank_exercise_rename_rejected(self, auth_client):
        program = _create_program(auth_client)
        exercise = _create_exercise(auth_client, program)

        response = auth_client.put(f"{EXERCISES}/rename", json={
            "exercise_id": exercise["id"],
            "name": "\t ",
        })

        assert response.status_code == 422
        details = auth_client.get(f"{EXERCISES}/details/{exercise['id']}").json()["data"]
        assert details["exercise"]["name"] == "Bench Press"

    def test_rename_and_delete(self, auth_client, repos):
        program = _create_program(auth_client)
        exercise = _create_exercise(auth_client, program)

        renamed = auth_client.put(f"{EXERCISES}/rename", json={
            "exercise_id": exercise["id"],
            "name": "Flat Bench",
        })
        assert renamed.json()["data"]["name"] == "Flat Bench"

        deleted = auth_client.request("DELETE", f"{EXERCISES}/delete", json={"exercise_id": exercise["id"]})
        assert deleted.status_code == 200
        assert repos.exercises.count() == 0

    def test_log_sets_until_target(self, auth_client):
        program = _create_program(auth_client)
        exercise = _create_exercise(auth_client, program, target_sets=2)
        _log_sets(auth_client, exercise, [(60, 10), (60, 9)])

        response = auth_client.post(f"{EXERCISES}/set/add/{exercise['id']}", json={"weight": 60, "reps": 8})

        assert response.status_code == 400
        assert response.json()["detail"] == "Target sets already reached"

    @pytest.mark.parametrize("payload", [{"weight": -5, "reps": 10}, {"weight": 60, "reps": 0}])
    def test_invalid_set(self, auth_client, payload):
        program = _create_program(auth_client)
        exercise = _create_exercise(auth_client, program)
        response = auth_client.post(f"{EXERCISES}/set/add/{exercise['id']}", json=payload)
        assert response.status_code == 422

    def test_log_set_on_missing_exercise(self, auth_client):
        response = auth_client.post(f"{EXERCISES}/set/add/999", json={"weight": 60, "reps": 10})
        assert response.status_code == 404


@pytest.mark.integration
class TestReports:
    """Details, history, reports, analytics and comparison."""

    @pytest.fixture
    def exercise(self, auth_client):
        program = _create_program(auth_client)
        return _create_exercise(auth_client, program)

    def test_details_show_todays_sets(self, auth_client, exercise):
        _log_sets(auth_client, exercise, [(60, 10), (62.5, 8)])

        response = auth_client.get(f"{EXERCISES}/details/{exercise['id']}")

        assert response.status_code == 200
        assert [s["weight"] for s in response.json()["data"]["sets"]] == [60, 62.5]

    def test_time_frame_sets(self, auth_client, exercise):
        _log_sets(auth_client, exercise, [(60, 10)])
        response = auth_client.get(f"{EXERCISES}/details/time-frame/week/{exercise['id']}")
        assert response.status_code == 200
        assert len(response.json()["data"]) == 1

    def test_time_frame_without_sets(self, auth_client, exercise):
        response = auth_client.get(f"{EXERCISES}/details/time-frame/year/{exercise['id']}")
        assert response.status_code == 404
        assert response.json()["detail"] == "No exercise data found for the selected year"

    def test_unknown_time_frame(self, auth_client, exercise):
        response = auth_client.get(f"{EXERCISES}/history/decade/{exercise['id']}")
        assert response.status_code == 422

    def test_history(self, auth_client, exercise):
        _log_sets(auth_client, exercise, [(60, 10), (60, 10), (60, 10)])

        response = auth_client.get(f"{EXERCISES}/history/month/{exercise['id']}")

        row = response.json()["data"][-1]
        assert row["total_sets"] == 3
        assert row["rep_range"] == "8-12"
        assert row["achievement_rate"] == 83

    def test_report_for_date(self, auth_client, exercise):
        _log_sets(auth_client, exercise, [(60, 10), (60, 8)])
        today = datetime.now(timezone.utc).date().isoformat()

        response = auth_client.get(f"{EXERCISES}/report/{exercise['id']}/{today}")

        metrics = response.json()["data"]["metrics"]
        assert metrics["total_sets"] == 2
        assert metrics["total_volume"] == 1080
        assert [s["set_number"] for s in metrics["sets"]] == [1, 2]

    def test_report_for_empty_date(self, auth_client, exercise):
        response = auth_client.get(f"{EXERCISES}/report/{exercise['id']}/2000-01-01")
        assert response.status_code == 404
        assert response.json()["detail"] == "No sets found for this date"

    def test_report_bad_date(self, auth_client, exercise):
        assert auth_client.get(f"{EXERCISES}/report/{exercise['id']}/15-05-2024").status_code == 422

    def test_session_report(self, auth_client, exercise):
        _log_sets(auth_client, exercise, [(100, 10)])
        response = auth_client.get(f"{EXERCISES}/session-report/{exercise['id']}")
        assert response.status_code == 200
        assert response.json()["data"]["metrics"]["estimated_one_rep_max"] == 133.3

    def test_analytics(self, auth_client, exercise):
        _log_sets(auth_client, exercise, [(60, 10), (65, 10)])

        response = auth_client.get(f"{EXERCISES}/analytics/week/{exercise['id']}")

        data = response.json()["data"]
        assert data["time_frame"] == "week"
        assert data["summary"]["max_weight"] == 65
        assert data["summary"]["total_sessions"] == 1
        assert data["personal_bests"]["max_volume"] == 650
        assert data["progress"] is None

    def test_compare_needs_history(self, auth_client, exercise):
        _log_sets(auth_client, exercise, [(60, 12)] * 3)

        response = auth_client.get(f"{EXERCISES}/compare/{exercise['id']}")

        assert response.status_code == 400
        assert response.json()["detail"] == (
            "Cannot compare as there is only one completed session available"
        )

    def test_compare_with_yesterday(self, auth_client, repos, exercise):
        _seed_yesterday(repos, exercise, [(60, 12)] * 3)
        _log_sets(auth_client, exercise, [(63.75, 12)] * 3)

        response = auth_client.get(f"{EXERCISES}/compare/{exercise['id']}")

        data = response.json()["data"]
        assert data["previous"]["total_volume"] == 2160
        assert data["today"]["total_volume"] == 2295
        assert data["improvements"]["volume_change"] == pytest.approx(6.25)

    def test_compare_before_today_is_complete(self, auth_client, repos, exercise):
        _seed_yesterday(repos, exercise, [(60, 12)] * 3)
        _log_sets(auth_client, exercise, [(60, 12)])

        data = auth_client.get(f"{EXERCISES}/compare/{exercise['id']}").json()["data"]

        assert data["previous"]["max_reps"] == 12
        assert data["today"] is None
        assert data["improvements"] is None


@pytest.mark.integration
class TestResetUserData:
    """Test-environment data reset."""

    def test_reset_deletes_programs(self, auth_client, repos):
        program = _create_program(auth_client)
        _create_exercise(auth_client, program)

        response = auth_client.post("/testing/reset-user-data")

        assert response.status_code == 200
        assert response.json()["deleted"] == {"workout_programs": 1, "exercises": 1}
        assert repos.programs.count() == 0
        assert repos.users.count() == 1

    def test_reset_checks_secret(self, app, auth_client):
        settings = Settings(environment="test", test_reset_secret="reset-me", _env_file=None)
        app.dependency_overrides[get_settings] = lambda: settings

        response = auth_client.post("/testing/reset-user-data", headers={"X-Test-Secret": "wrong"})

        assert response.status_code == 403

    def test_reset_refused_outside_test(self, app, auth_client):
        settings = Settings(environment="development", _env_file=None)
        app.dependency_overrides[get_settings] = lambda: settings

        assert auth_client.post("/testing/reset-user-data").status_code == 403
