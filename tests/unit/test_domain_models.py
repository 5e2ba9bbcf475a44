"""
Unit tests for domain models.
"""

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from domain.models import Exercise, WorkoutProgram, WorkoutSet


def _exercise(**overrides) -> Exercise:
    fields = dict(
        id=1,
        name="Bench Press",
        target_sets=3,
        min_reps=8,
        max_reps=12,
        workout_program_id=1,
    )
    fields.update(overrides)
    return Exercise(**fields)


@pytest.mark.unit
class TestExercise:
    def test_rep_range(self):
        assert _exercise().rep_range == "8-12"

    def test_single_rep_target(self):
        assert _exercise(min_reps=5, max_reps=5).rep_range == "5-5"

    def test_max_below_min_rejected(self):
        with pytest.raises(ValidationError):
            _exercise(min_reps=12, max_reps=8)

    def test_target_sets_must_be_positive(self):
        with pytest.raises(ValidationError):
            _exercise(target_sets=0)


@pytest.mark.unit
class TestWorkoutSet:
    def test_volume(self):
        workout_set = WorkoutSet(
            id=1, weight=62.5, reps=8, exercise_id=1,
            created_at=datetime(2024, 5, 15, tzinfo=timezone.utc),
        )
        assert workout_set.volume == 500

    @pytest.mark.parametrize("weight, reps", [(-1, 5), (50, 0)])
    def test_invalid_values(self, weight, reps):
        with pytest.raises(ValidationError):
            WorkoutSet(
                id=1, weight=weight, reps=reps, exercise_id=1,
                created_at=datetime(2024, 5, 15, tzinfo=timezone.utc),
            )


@pytest.mark.unit
class TestWorkoutProgram:
    def test_requires_a_training_day(self):
        with pytest.raises(ValidationError):
            WorkoutProgram(id=1, user_id=1, name="Push Day", workout_days=[])

    def test_embeds_exercises(self):
        program = WorkoutProgram(
            id=1,
            user_id=1,
            name="Push Day",
            workout_days=["MONDAY"],
            exercises=[_exercise()],
        )
        assert program.exercises[0].rep_range == "8-12"
