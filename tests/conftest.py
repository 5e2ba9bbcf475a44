"""
Pytest fixtures for workout tracker tests.

Provides fakes sharing one in-memory store, services built on them, and a
TestClient whose repository and auth dependencies are overridden.
"""

from typing import Generator

import pytest
from fastapi.testclient import TestClient

from api.deps import (
    get_current_user,
    get_exercise_repo,
    get_set_repo,
    get_settings,
    get_user_repo,
    get_workout_program_repo,
)
from backend.core.exercise_service import ExerciseService
from backend.core.program_service import ProgramService
from backend.core.report_service import ReportService
from backend.core.user_service import UserService
from backend.main import create_app
from backend.settings import Settings
from tests.fakes import FakeRepos, create_fake_repos


# ---------------------------------------------------------------------------
# Auth Mock
# ---------------------------------------------------------------------------

TEST_USER_ID = "user_test_123"
OTHER_USER_ID = "user_other_456"


async def mock_get_current_user() -> str:
    """Mock auth dependency that returns the test subject."""
    return TEST_USER_ID


# ---------------------------------------------------------------------------
# Fakes and Services
# ---------------------------------------------------------------------------


@pytest.fixture
def repos() -> FakeRepos:
    """Fresh fakes over one empty store."""
    return create_fake_repos()


@pytest.fixture
def user_service(repos) -> UserService:
    return UserService(repos.users)


@pytest.fixture
def program_service(repos) -> ProgramService:
    return ProgramService(repos.programs, repos.exercises, repos.sets)


@pytest.fixture
def exercise_service(repos) -> ExerciseService:
    return ExerciseService(repos.programs, repos.exercises, repos.sets)


@pytest.fixture
def report_service(repos) -> ReportService:
    return ReportService(repos.exercises, repos.sets)


# ---------------------------------------------------------------------------
# Test App and Client
# ---------------------------------------------------------------------------


@pytest.fixture
def test_settings() -> Settings:
    """Test settings with minimal configuration."""
    return Settings(
        environment="test",
        supabase_url="https://test.supabase.co",
        supabase_service_role_key="test-key",
        _env_file=None,
    )


@pytest.fixture
def app(test_settings, repos):
    """Application with repositories, settings and auth overridden."""
    app = create_app(settings=test_settings)
    app.dependency_overrides[get_settings] = lambda: test_settings
    app.dependency_overrides[get_current_user] = mock_get_current_user
    app.dependency_overrides[get_user_repo] = lambda: repos.users
    app.dependency_overrides[get_workout_program_repo] = lambda: repos.programs
    app.dependency_overrides[get_exercise_repo] = lambda: repos.exercises
    app.dependency_overrides[get_set_repo] = lambda: repos.sets
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def client(app) -> Generator[TestClient, None, None]:
    """TestClient for the overridden app (user not yet synced)."""
    yield TestClient(app)


@pytest.fixture
def synced_user(repos) -> dict:
    """Local user row for TEST_USER_ID."""
    return repos.users.create(TEST_USER_ID, "lifter@example.com")


@pytest.fixture
def auth_client(client, synced_user) -> TestClient:
    """TestClient whose subject already has a local user."""
    return client
