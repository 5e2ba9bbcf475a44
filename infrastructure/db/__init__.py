"""
Infrastructure Database Layer.

This package provides Supabase-backed implementations of the repository interfaces
defined in application.ports. These implementations can be injected into services
and routers for clean separation of concerns and testability.

Usage:
    from supabase import create_client
    from infrastructure.db import (
        SupabaseUserRepository,
        SupabaseWorkoutProgramRepository,
        SupabaseExerciseRepository,
        SupabaseSetRepository,
    )

    # Create Supabase client
    client = create_client(SUPABASE_URL, SUPABASE_KEY)

    # Instantiate repositories with injected client
    user_repo = SupabaseUserRepository(client)
    program_repo = SupabaseWorkoutProgramRepository(client)
    exercise_repo = SupabaseExerciseRepository(client)
    set_repo = SupabaseSetRepository(client)
"""

from infrastructure.db.user_repository import SupabaseUserRepository
from infrastructure.db.workout_program_repository import SupabaseWorkoutProgramRepository
from infrastructure.db.exercise_repository import SupabaseExerciseRepository
from infrastructure.db.set_repository import SupabaseSetRepository

__all__ = [
    # Users
    "SupabaseUserRepository",

    # Programs and muscle groups
    "SupabaseWorkoutProgramRepository",

    # Exercises
    "SupabaseExerciseRepository",

    # Logged sets
    "SupabaseSetRepository",
]
