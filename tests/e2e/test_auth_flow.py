"""End-to-end tests for the cookie authentication flow."""

import pytest
from fastapi.testclient import TestClient

from quest.interface.api.app import create_app
from tests.di import build_test_container


@pytest.fixture
def client():
    """Create test client with test container."""
    return TestClient(create_app(build_test_container()))


class TestAuthFlow:
    """End-to-end tests for login, session status and logout."""

    def test_login_sets_cookie_and_me_reports_user(self, client):
        """Login should set auth_token and /auth/me should see the user."""
        # Act
        response = client.post(
            "/auth/login",
            json={"open_id": "gh-1", "name": "Alice", "login_method": "github"},
        )

        # Assert
        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert "token" not in body
        assert "auth_token" in response.cookies

        me = client.get("/auth/me").json()
        assert me["authenticated"] is True
        assert me["user"]["id"] == body["user"]["id"]
        assert me["user"]["name"] == "Alice"

    def test_me_without_cookie_is_unauthenticated(self, client):
        response = client.get("/auth/me")

        assert response.status_code == 200
        assert response.json() == {"authenticated": False, "user": None}

    def test_logout_expires_cookie(self, client):
        # Arrange
        client.post("/auth/login", json={"open_id": "gh-1"})

        # Act
        response = client.post("/auth/logout")

        # Assert
        assert response.status_code == 200
        set_cookie = response.headers["set-cookie"]
        assert "auth_token" in set_cookie
        assert "Max-Age=0" in set_cookie

    def test_login_validates_open_id(self, client):
        response = client.post("/auth/login", json={"open_id": ""})

        assert response.status_code == 422


class TestProtectedRoutes:
    """Mutations require a valid session cookie."""

    @pytest.mark.parametrize(
        ("method", "path", "body"),
        [
            ("post", "/games", {"title": "Celeste"}),
            ("post", "/library", {"game_id": "00000000-0000-0000-0000-000000000001"}),
            ("get", "/feed", None),
            ("patch", "/users/me", {"bio": "hi"}),
        ],
    )
    def test_missing_cookie_is_401(self, client, method, path, body):
        response = client.request(method.upper(), path, json=body)

        assert response.status_code == 401
        assert response.json()["detail"] == "Not authenticated"

    def test_invalid_token_is_401(self, client):
        client.cookies.set("auth_token", "invalid-token")

        response = client.patch("/users/me", json={"bio": "This should fail"})

        assert response.status_code == 401


class TestDirectLoginDisabled:
    def test_login_is_forbidden(self, monkeypatch):
        monkeypatch.setenv("AUTH__ALLOW_DIRECT_LOGIN", "false")
        client = TestClient(create_app(build_test_container()))

        response = client.post("/auth/login", json={"open_id": "gh-1"})

        assert response.status_code == 403
        assert response.json()["detail"] == "Direct login is disabled"
