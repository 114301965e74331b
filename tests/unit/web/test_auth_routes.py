"""Tests for /api/auth endpoints."""

from datetime import timedelta

from eventboard.core.modules.session.models import SESSION_TTL


class TestLogin:
    def test_returns_token_on_success(self, client):
        response = client.post("/api/auth/login", json={"password": "admin"})
        assert response.status_code == 200
        token = response.json()["token"]
        assert isinstance(token, str)
        assert len(token) > 0

    def test_rejects_invalid_password(self, client):
        response = client.post("/api/auth/login", json={"password": "nope"})
        assert response.status_code == 401
        assert response.json() == {"message": "Invalid password", "type": "authentication_error"}

    def test_failed_login_creates_no_session(self, client, app):
        client.post("/api/auth/login", json={"password": "nope"})
        assert len(app._core.session_store) == 0

    def test_each_login_gets_an_independent_token(self, client):
        first = client.post("/api/auth/login", json={"password": "admin"}).json()["token"]
        second = client.post("/api/auth/login", json={"password": "admin"}).json()["token"]
        assert first != second

        client.post("/api/auth/logout", headers={"Authorization": f"Bearer {first}"})
        response = client.get("/api/auth/me", headers={"Authorization": f"Bearer {second}"})
        assert response.json() == {"authenticated": True}

    def test_malformed_json_is_a_client_error(self, client):
        response = client.post(
            "/api/auth/login", content=b"{not json", headers={"Content-Type": "application/json"}
        )
        assert response.status_code == 400
        assert response.json() == {"message": "Invalid JSON body", "type": "validation_error"}

    def test_missing_password_is_a_client_error(self, client):
        response = client.post("/api/auth/login", json={})
        assert response.status_code == 400
        assert response.json()["type"] == "validation_error"


class TestMe:
    def test_authenticated_with_valid_token(self, client, auth_headers):
        response = client.get("/api/auth/me", headers=auth_headers)
        assert response.status_code == 200
        assert response.json() == {"authenticated": True}

    def test_not_authenticated_without_token(self, client):
        response = client.get("/api/auth/me")
        assert response.status_code == 200
        assert response.json() == {"authenticated": False}

    def test_not_authenticated_with_unknown_token(self, client):
        response = client.get("/api/auth/me", headers={"Authorization": "Bearer made-up"})
        assert response.status_code == 200
        assert response.json() == {"authenticated": False}

    def test_not_authenticated_after_expiry(self, client, auth_headers, clock):
        clock.advance(SESSION_TTL + timedelta(seconds=1))
        response = client.get("/api/auth/me", headers=auth_headers)
        assert response.status_code == 200
        assert response.json() == {"authenticated": False}


class TestLogout:
    def test_login_me_logout_me(self, client):
        token = client.post("/api/auth/login", json={"password": "admin"}).json()["token"]
        headers = {"Authorization": f"Bearer {token}"}

        assert client.get("/api/auth/me", headers=headers).json() == {"authenticated": True}

        response = client.post("/api/auth/logout", headers=headers)
        assert response.status_code == 200
        assert response.json() == {"ok": True}

        assert client.get("/api/auth/me", headers=headers).json() == {"authenticated": False}

    def test_logout_without_token_succeeds(self, client):
        response = client.post("/api/auth/logout")
        assert response.status_code == 200
        assert response.json() == {"ok": True}

    def test_logout_twice_succeeds(self, client, auth_headers):
        assert client.post("/api/auth/logout", headers=auth_headers).json() == {"ok": True}
        assert client.post("/api/auth/logout", headers=auth_headers).json() == {"ok": True}

    def test_logout_with_expired_token_succeeds(self, client, auth_headers, clock):
        clock.advance(SESSION_TTL + timedelta(seconds=1))
        response = client.post("/api/auth/logout", headers=auth_headers)
        assert response.status_code == 200
        assert response.json() == {"ok": True}


class TestUnknownAuthRoutes:
    def test_unknown_path_is_not_found(self, client):
        response = client.post("/api/auth/register", json={"password": "admin"})
        assert response.status_code == 404
        assert response.json()["type"] == "not_found"

    def test_wrong_method_is_rejected(self, client):
        response = client.get("/api/auth/login")
        assert response.status_code == 405
        assert response.json()["type"] == "method_not_allowed"
