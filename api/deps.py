"""
FastAPI Dependency Providers for the Workout Tracker API.

This module provides FastAPI dependency injection functions that return
interface types (Protocols) rather than concrete implementations. This
enables clean separation of concerns and easy testing with fake implementations.

Architecture:
- Settings and Supabase client are cached per-process (lru_cache)
- Repository and service providers create new instances per-request
- Auth providers wrap backend.auth and resolve the local user row

Usage in routers:
    from api.deps import get_current_db_user, get_report_service

    @router.get("/exercises/history/{time_frame}/{exercise_id}")
    def history(
        user: User = Depends(get_current_db_user),
        service: ReportService = Depends(get_report_service),
    ):
        return service.get_history(user.id, exercise_id, time_frame)

Testing:
    # Override dependencies in tests
    app.dependency_overrides[get_set_repo] = lambda: FakeSetRepository()
"""

from functools import lru_cache
from typing import Optional

from fastapi import Depends, Header, HTTPException
from supabase import Client, create_client

# Protocol types (interfaces)
from application.ports import (
    UserRepository,
    WorkoutProgramRepository,
    ExerciseRepository,
    SetRepository,
)

# Concrete implementations
from infrastructure import (
    SupabaseUserRepository,
    SupabaseWorkoutProgramRepository,
    SupabaseExerciseRepository,
    SupabaseSetRepository,
)

from application.exceptions import UserNotFoundError
from backend.settings import Settings, get_settings as _get_settings
from backend.auth import get_current_user as _get_current_user
from backend.core.user_service import UserService
from backend.core.program_service import ProgramService
from backend.core.exercise_service import ExerciseService
from backend.core.report_service import ReportService
from domain.models import User


# =============================================================================
# Settings Provider
# =============================================================================


def get_settings() -> Settings:
    """
    Get application settings.

    Returns cached Settings instance from backend.settings.
    Use this as a FastAPI dependency for settings access.

    Returns:
        Settings: Application settings instance
    """
    return _get_settings()


# =============================================================================
# Supabase Client Provider
# =============================================================================


@lru_cache
def get_supabase_client() -> Optional[Client]:
    """
    Get Supabase client instance (cached).

    Creates a Supabase client using credentials from settings.
    Returns None if credentials are not configured.

    Returns:
        Client: Supabase client instance, or None if not configured
    """
    settings = _get_settings()

    if not settings.supabase_url or not settings.supabase_key:
        return None

    return create_client(settings.supabase_url, settings.supabase_key)


def get_supabase_client_required() -> Client:
    """
    Get Supabase client instance, raising if not configured.

    Use this dependency when the endpoint requires database access.

    Raises:
        HTTPException: 503 if Supabase is not configured
    """
    client = get_supabase_client()
    if client is None:
        raise HTTPException(
            status_code=503,
            detail="Database not available. Supabase credentials not configured.",
        )
    return client


# =============================================================================
# Repository Providers
# =============================================================================


def get_user_repo(
    client: Client = Depends(get_supabase_client_required),
) -> UserRepository:
    """Get UserRepository implementation."""
    return SupabaseUserRepository(client)


def get_workout_program_repo(
    client: Client = Depends(get_supabase_client_required),
) -> WorkoutProgramRepository:
    """
    Get WorkoutProgramRepository implementation.

    Returns a SupabaseWorkoutProgramRepository instance with injected client.
    The return type is the Protocol to enable easy faking.

    Args:
        client: Supabase client (injected)

    Returns:
        WorkoutProgramRepository: Repository for programs and muscle groups
    """
    return SupabaseWorkoutProgramRepository(client)


def get_exercise_repo(
    client: Client = Depends(get_supabase_client_required),
) -> ExerciseRepository:
    """Get ExerciseRepository implementation."""
    return SupabaseExerciseRepository(client)


def get_set_repo(
    client: Client = Depends(get_supabase_client_required),
) -> SetRepository:
    """Get SetRepository implementation."""
    return SupabaseSetRepository(client)


# =============================================================================
# Service Providers
# =============================================================================


def get_user_service(
    user_repo: UserRepository = Depends(get_user_repo),
) -> UserService:
    """Get UserService with injected repository."""
    return UserService(user_repo)


def get_program_service(
    program_repo: WorkoutProgramRepository = Depends(get_workout_program_repo),
    exercise_repo: ExerciseRepository = Depends(get_exercise_repo),
    set_repo: SetRepository = Depends(get_set_repo),
) -> ProgramService:
    """Get ProgramService with injected repositories."""
    return ProgramService(program_repo, exercise_repo, set_repo)


def get_exercise_service(
    program_repo: WorkoutProgramRepository = Depends(get_workout_program_repo),
    exercise_repo: ExerciseRepository = Depends(get_exercise_repo),
    set_repo: SetRepository = Depends(get_set_repo),
) -> ExerciseService:
    """Get ExerciseService with injected repositories."""
    return ExerciseService(program_repo, exercise_repo, set_repo)


def get_report_service(
    exercise_repo: ExerciseRepository = Depends(get_exercise_repo),
    set_repo: SetRepository = Depends(get_set_repo),
) -> ReportService:
    """Get ReportService with injected repositories."""
    return ReportService(exercise_repo, set_repo)


# =============================================================================
# Authentication Providers
# =============================================================================


async def get_current_user(
    authorization: Optional[str] = Header(None),
    x_api_key: Optional[str] = Header(None, alias="X-API-Key"),
    x_test_auth: Optional[str] = Header(None, alias="X-Test-Auth"),
    x_test_user_id: Optional[str] = Header(None, alias="X-Test-User-Id"),
) -> str:
    """
    Get the authenticated Clerk subject.

    Wraps backend.auth.get_current_user for dependency injection.
    Supports multiple auth methods:
    - Clerk JWT (RS256 via JWKS)
    - API key authentication
    - E2E test bypass (non-production only)

    Returns:
        str: Clerk user ID

    Raises:
        HTTPException: 401 if authentication fails
    """
    return await _get_current_user(
        authorization=authorization,
        x_api_key=x_api_key,
        x_test_auth=x_test_auth,
        x_test_user_id=x_test_user_id,
    )


def get_current_db_user(
    external_id: str = Depends(get_current_user),
    user_service: UserService = Depends(get_user_service),
) -> User:
    """
    Get the local user row for the authenticated subject.

    Raises:
        HTTPException: 401 if the subject has not been synced yet
    """
    try:
        return user_service.resolve(external_id)
    except UserNotFoundError as e:
        raise HTTPException(status_code=401, detail=e.message)


# =============================================================================
# Exports
# =============================================================================

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
    # Services
    "get_user_service",
    "get_program_service",
    "get_exercise_service",
    "get_report_service",
    # Authentication
    "get_current_user",
    "get_current_db_user",
]
