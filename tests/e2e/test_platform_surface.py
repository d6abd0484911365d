"""End-to-end tests for security headers, health and admin access."""

import pytest
from fastapi.testclient import TestClient

from tests.harness import create_test_client, sign_up_and_login

ADMIN_EMAIL = "admin@example.com"


@pytest.fixture
def client():
    """Create test client."""
    return create_test_client()


class TestSecurityHeaders:
    """Every response carries the security headers."""

    @pytest.mark.parametrize("path", ["/health", "/polls", "/does-not-exist"])
    def test_headers_present(self, client: TestClient, path: str):
        response = client.get(path)

        assert response.headers["X-Frame-Options"] == "DENY"
        assert response.headers["X-Content-Type-Options"] == "nosniff"
        assert response.headers["Referrer-Policy"] == "strict-origin-when-cross-origin"
        assert response.headers["Strict-Transport-Security"] == (
            "max-age=31536000; includeSubDomains"
        )

    def test_headers_on_error_responses(self, client: TestClient):
        response = client.delete("/polls/00000000-0000-0000-0000-000000000000")

        assert response.status_code == 401
        assert response.headers["X-Frame-Options"] == "DENY"


class TestHealth:
    """Health endpoint and app lifespan."""

    def test_health(self, client: TestClient):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
        assert response.json()["environment"] == "test"

    def test_lifespan_starts_and_stops_cleanly(self, client: TestClient):
        with client:
            assert client.get("/health").status_code == 200


class TestAdmin:
    """Admin routes are restricted to allow-listed emails."""

    @pytest.fixture(autouse=True)
    def _admin_allow_list(self, monkeypatch, _test_environment_settings):
        monkeypatch.setenv("ADMIN__EMAILS", f'["{ADMIN_EMAIL}"]')

    def test_regular_user_is_forbidden(self, client: TestClient):
        sign_up_and_login(client)

        response = client.get("/admin/overview")

        assert response.status_code == 403
        assert response.json() == {"error": "Forbidden"}

    def test_unauthenticated_caller(self, client: TestClient):
        assert client.get("/admin/users").status_code == 401

    def test_admin_sees_overview_and_users(self, client: TestClient):
        sign_up_and_login(client, email=ADMIN_EMAIL, name="Admin")
        client.post("/polls", json={"question": "Admins welcome?", "options": ["Y", "N"]})

        overview = client.get("/admin/overview")
        users = client.get("/admin/users")

        assert overview.status_code == 200
        assert overview.json()["total_polls"] == 1
        assert users.status_code == 200
        assert [user["email"] for user in users.json()["users"]] == [ADMIN_EMAIL]
