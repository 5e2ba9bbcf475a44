"""
API package for the Workout Tracker API.

This package contains:
- deps.py: FastAPI dependency providers for DI
- errors.py: Mapping of service errors to HTTP responses
- routers/: API route handlers
- schemas/: Request and response models
"""

# Re-export dependency providers for convenient access
from api.deps import (
    get_settings,
    get_supabase_client,
    get_supabase_client_required,
    get_user_repo,
    get_workout_program_repo,
    get_exercise_repo,
    get_set_repo,
    get_current_user,
    get_current_db_user,
)

__all__ = [
    # Settings
    "get_settings",
    # Database
    "get_supabase_client",
    "get_supabase_client_required",
    # Repositories
    "get_user_repo",
    "get_workout_program_repo",
    "get_exercise_repo",
    "get_set_repo",
    # Authentication
    "get_current_user",
    "get_current_db_user",
]
