"""
Unit tests for backend/main.py
"""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from unittest.mock import patch

from api.routers import exercises_router
from backend.main import create_app, _init_sentry, _configure_cors
from backend.settings import Settings


@pytest.mark.unit
class TestCreateApp:
    """Test the create_app() factory function."""

    def test_create_app_returns_fastapi_instance(self):
        settings = Settings(environment="test", _env_file=None)
        app = create_app(settings=settings)
        assert isinstance(app, FastAPI)

    def test_create_app_uses_default_settings_when_none_provided(self):
        with patch("backend.main.get_settings") as mock_get_settings:
            mock_get_settings.return_value = Settings(environment="test", _env_file=None)

            app = create_app(settings=None)

            mock_get_settings.assert_called_once()
            assert isinstance(app, FastAPI)

    def test_create_app_configures_app_metadata(self):
        app = create_app(settings=Settings(environment="test", _env_file=None))
        assert app.title == "Workout Tracker API"
        assert app.version == "1.0.0"

    def test_routes_registered(self):
        app = create_app(settings=Settings(environment="test", _env_file=None))
        paths = set(app.openapi()["paths"])

        assert "/health" in paths
        assert "/api/v1/users/sync" in paths
        assert "/api/v1/workout-program/add" in paths
        assert "/api/v1/exercises/compare/{exercise_id}" in paths
        assert "/api/v1/exercises/{workout_program_id}/{muscle_group_id}" in paths

    def test_listing_route_registered_after_fixed_prefix_routes(self):
        paths = [getattr(route, "path", None) for route in exercises_router.routes]

        listing = paths.index("/api/v1/exercises/{workout_program_id}/{muscle_group_id}")
        assert paths.index("/api/v1/exercises/details/{exercise_id}") < listing
        assert paths.index("/api/v1/exercises/compare/{exercise_id}") < listing

    def test_health_endpoint(self):
        client = TestClient(create_app(settings=Settings(environment="test", _env_file=None)))
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok"}


@pytest.mark.unit
class TestInitSentry:
    """Test Sentry initialization."""

    def test_init_sentry_skipped_when_no_dsn(self):
        settings = Settings(sentry_dsn=None, _env_file=None)
        with patch("backend.main.sentry_sdk.init") as mock_init:
            _init_sentry(settings)
            mock_init.assert_not_called()

    def test_init_sentry_called_with_dsn(self):
        settings = Settings(
            sentry_dsn="https://key@sentry.example.com/1",
            environment="staging",
            _env_file=None,
        )
        with patch("backend.main.sentry_sdk.init") as mock_init:
            _init_sentry(settings)
            mock_init.assert_called_once()
            kwargs = mock_init.call_args.kwargs
            assert kwargs["environment"] == "staging"
            assert kwargs["traces_sample_rate"] == 0.1


@pytest.mark.unit
class TestConfigureCors:
    """Test CORS middleware configuration."""

    def test_configured_origin_allowed(self):
        settings = Settings(cors_allowed_origins="https://app.example.com", _env_file=None)
        app = FastAPI()
        _configure_cors(app, settings)

        @app.get("/ping")
        def ping():
            return {"ok": True}

        client = TestClient(app)
        response = client.get("/ping", headers={"Origin": "https://app.example.com"})
        assert response.headers.get("access-control-allow-origin") == "https://app.example.com"

    def test_unknown_origin_not_allowed(self):
        app = FastAPI()
        _configure_cors(app, Settings(_env_file=None))

        @app.get("/ping")
        def ping():
            return {"ok": True}

        client = TestClient(app)
        response = client.get("/ping", headers={"Origin": "https://evil.example.com"})
        assert "access-control-allow-origin" not in response.headers
