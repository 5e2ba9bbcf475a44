"""
Unit tests for api/routers.

Tests that routers are correctly configured and wired into the application.
"""

import pytest
from fastapi.testclient import TestClient

from backend.main import create_app
from backend.settings import Settings


@pytest.fixture
def test_app():
    """Create a test app with routers."""
    settings = Settings(environment="test", _env_file=None)
    return create_app(settings=settings)


@pytest.mark.unit
class TestRouterInclusion:
    """Test that all routers are correctly included in the app."""

    @pytest.mark.parametrize("path,method,tag", [
        ("/health", "get", "Health"),
        ("/api/v1/users/sync", "get", "Users"),
        ("/api/v1/workout-program/add", "post", "Workout Programs"),
        ("/api/v1/exercises/analytics/{time_frame}/{exercise_id}", "get", "Exercises"),
    ])
    def test_openapi_tags(self, test_app, path, method, tag):
        operation = test_app.openapi()["paths"][path][method]
        assert tag in operation.get("tags", [])

    def test_time_frame_documented_as_enum(self, test_app):
        parameters = test_app.openapi()["paths"][
            "/api/v1/exercises/history/{time_frame}/{exercise_id}"
        ]["get"]["parameters"]
        time_frame = next(p for p in parameters if p["name"] == "time_frame")
        schema = time_frame["schema"]
        if "$ref" in schema:
            name = schema["$ref"].rsplit("/", 1)[-1]
            schema = test_app.openapi()["components"]["schemas"][name]
        assert schema["enum"] == ["week", "month", "year"]


@pytest.mark.unit
class TestHealthRouter:
    """Test health router endpoints."""

    @pytest.fixture
    def client(self, test_app):
        return TestClient(test_app)

    def test_health_returns_json(self, client):
        response = client.get("/health")
        assert "application/json" in response.headers["content-type"]

    def test_health_method_not_allowed(self, client):
        """Health endpoint should only accept GET."""
        response = client.post("/health")
        assert response.status_code == 405

    def test_protected_endpoint_requires_auth(self, client):
        response = client.get("/api/v1/workout-program/all")
        assert response.status_code == 401
