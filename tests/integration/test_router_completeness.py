"""
Integration tests for router completeness verification.

Every key endpoint must be routed: it may reject an empty body (422) or a
missing resource (404 from the handler), but it must never be absent.
"""

import pytest


# Format: (method, path, allowed_statuses)
#
# Note on 404 responses:
# - 404 can mean either "route not found" (BAD) or "resource not found" (OK)
# - Endpoints fetching a resource by ID are checked for the handler's detail
#   message in test_missing_resource_is_handled below
KEY_ENDPOINTS = [
    # Health
    ("GET", "/health", [200]),
    ("POST", "/testing/reset-user-data", [200]),
    # Users
    ("GET", "/api/v1/users/sync", [200, 201]),
    # Workout programs
    ("POST", "/api/v1/workout-program/add", [422]),
    ("GET", "/api/v1/workout-program/all", [200]),
    ("PUT", "/api/v1/workout-program/rename", [422]),
    ("DELETE", "/api/v1/workout-program/delete", [422]),
    # Exercises
    ("POST", "/api/v1/exercises/1/add", [422]),
    ("PUT", "/api/v1/exercises/rename", [422]),
    ("DELETE", "/api/v1/exercises/delete", [422]),
    ("POST", "/api/v1/exercises/set/add/1", [422]),
    ("GET", "/api/v1/exercises/1/1", [404]),
]

RESOURCE_ENDPOINTS = [
    ("/api/v1/workout-program/1", "Workout program not found"),
    ("/api/v1/exercises/details/1", "Exercise not found"),
    ("/api/v1/exercises/details/time-frame/week/1", "Exercise not found"),
    ("/api/v1/exercises/history/month/1", "Exercise not found"),
    ("/api/v1/exercises/report/1/2024-05-15", "Exercise not found"),
    ("/api/v1/exercises/session-report/1", "Exercise not found"),
    ("/api/v1/exercises/analytics/year/1", "Exercise not found"),
    ("/api/v1/exercises/compare/1", "Exercise not found"),
]


@pytest.mark.integration
class TestRouterCompleteness:
    """Test that all key endpoints are routed and respond."""

    @pytest.mark.parametrize("method,path,allowed_statuses", KEY_ENDPOINTS)
    def test_endpoint_responds(self, auth_client, method, path, allowed_statuses):
        if method == "GET":
            response = auth_client.get(path)
        elif method in ("POST", "PUT", "DELETE"):
            response = auth_client.request(method, path, json={})
        else:
            pytest.fail(f"Unsupported HTTP method: {method}")

        assert response.status_code in allowed_statuses, (
            f"Endpoint {method} {path} returned {response.status_code}, "
            f"expected one of {allowed_statuses}. "
            f"Response body: {response.text[:200]}"
        )

    @pytest.mark.parametrize("path,detail", RESOURCE_ENDPOINTS)
    def test_missing_resource_is_handled(self, auth_client, path, detail):
        response = auth_client.get(path)
        assert response.status_code == 404
        assert response.json() == {"detail": detail}


@pytest.mark.integration
class TestEndpointCoverage:
    """Additional tests for endpoint coverage verification."""

    def test_no_undefined_routes(self, auth_client):
        response = auth_client.get("/this-route-does-not-exist-at-all-12345")
        assert response.status_code == 404
        assert response.json() == {"detail": "Not Found"}

    def test_listing_route_does_not_shadow_details(self, auth_client):
        # /details/{id} also matches /{workout_program_id}/{muscle_group_id}
        response = auth_client.get("/api/v1/exercises/details/1")
        assert response.json()["detail"] == "Exercise not found"

    def test_envelope_on_success(self, auth_client):
        response = auth_client.get("/api/v1/workout-program/all")
        assert response.json() == {
            "message": "Your workouts fetched successfully",
            "success": True,
            "data": [],
        }
