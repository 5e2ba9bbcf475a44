"""
Domain models for the Workout Tracker API.

This package contains pure domain models that are independent of
infrastructure concerns (database, API, external services).

These models represent the core business concepts:
- User: Local record for an authenticated Clerk subject
- WorkoutProgram: The aggregate root owning muscle groups and exercises
- MuscleGroup: A split of a program (CHEST, BACK, ...)
- Exercise: A movement with a target set count and rep range
- WorkoutSet: One logged set (weight x reps)

Usage:
    >>> from domain.models import WorkoutSet
    >>> from datetime import datetime, timezone

    >>> s = WorkoutSet(
    ...     id=1,
    ...     weight=80,
    ...     reps=10,
    ...     exercise_id=3,
    ...     created_at=datetime(2024, 1, 15, 9, 30, tzinfo=timezone.utc),
    ... )
    >>> s.volume
    800.0
"""

from domain.models.user import User
from domain.models.workout_program import (
    MuscleGroup,
    MuscleGroupName,
    WorkoutDay,
    WorkoutProgram,
)
from domain.models.exercise import Exercise, WeightUnit
from domain.models.workout_set import WorkoutSet

WorkoutProgram.model_rebuild(_types_namespace={"Exercise": Exercise})

__all__ = [
    # Main entities
    "User",
    "WorkoutProgram",
    "MuscleGroup",
    "Exercise",
    "WorkoutSet",
    # Enums
    "MuscleGroupName",
    "WorkoutDay",
    "WeightUnit",
]
