"""
Repository Interfaces (Ports) for the Workout Tracker API.

This package defines abstract interfaces that decouple domain logic from
infrastructure (database, external services). Implementations are provided
in the infrastructure layer.

Architecture follows the Ports & Adapters (Hexagonal) pattern:
- Ports: Abstract interfaces defined here (what the domain needs)
- Adapters: Concrete implementations in infrastructure/ (how it's provided)

Usage:
    from application.ports import ExerciseRepository, SetRepository

    class ReportService:
        def __init__(self, exercise_repo: ExerciseRepository, set_repo: SetRepository):
            self.exercise_repo = exercise_repo
            self.set_repo = set_repo
"""

# Users
from application.ports.user_repository import UserRepository

# Programs and muscle groups
from application.ports.workout_program_repository import WorkoutProgramRepository

# Exercises
from application.ports.exercise_repository import ExerciseRepository

# Logged sets
from application.ports.set_repository import SetRepository

__all__ = [
    "UserRepository",
    "WorkoutProgramRepository",
    "ExerciseRepository",
    "SetRepository",
]
