"""
Domain layer for the Workout Tracker API.

This package contains pure domain models that are independent of
infrastructure concerns (database, API, external services).
"""

from domain.models import (
    Exercise,
    MuscleGroup,
    MuscleGroupName,
    User,
    WeightUnit,
    WorkoutDay,
    WorkoutProgram,
    WorkoutSet,
)

__all__ = [
    "Exercise",
    "MuscleGroup",
    "MuscleGroupName",
    "User",
    "WeightUnit",
    "WorkoutDay",
    "WorkoutProgram",
    "WorkoutSet",
]
