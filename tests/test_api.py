"""API endpoint tests."""

from concurrent.futures import ThreadPoolExecutor

import pytest
from fastapi.testclient import TestClient

from lead_api.main import create_app


class TestHealth:
    def test_health_check(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
        assert response.json()["environment"] == "test"

    def test_platform_probes(self, client):
        assert client.get("/").json()["status"] == "running"
        assert client.get("/healthz").text == "OK"
        assert client.get("/_health").json() == {"status": "ok"}
        assert client.get("/ping").text == "pong"
        assert "platforms" in client.get("/api/status").json()

    def test_unknown_route(self, client):
        response = client.get("/api/nope")
        assert response.status_code == 404
        assert response.json() == {"error": "Route not found", "code": "not_found"}


class TestRegister:
    def test_register_user(self, client):
        response = client.post(
            "/api/auth/register",
            json={"email": "newuser@example.com", "password": "password123", "name": "New User"},
        )
        assert response.status_code == 201
        data = response.json()
        assert data["token"]
        assert data["user"]["email"] == "newuser@example.com"
        assert data["user"]["name"] == "New User"
        assert set(data["user"]) == {"id", "email", "name"}
        assert "password" not in response.text

    def test_default_name_and_explicit_id(self, client):
        response = client.post(
            "/api/auth/register",
            json={"email": "jdoe@example.com", "password": "password123", "id": "user-7"},
        )
        assert response.status_code == 201
        assert response.json()["user"] == {
            "id": "user-7",
            "email": "jdoe@example.com",
            "name": "jdoe",
        }

    def test_missing_fields(self, client):
        response = client.post("/api/auth/register", json={"email": "a@example.com"})
        assert response.status_code == 400
        assert response.json()["code"] == "missing_required_fields"

    def test_malformed_body(self, client):
        response = client.post(
            "/api/auth/register",
            content="not json",
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 400
        assert response.json()["code"] == "invalid_request"

    def test_nul_password_is_bad_request(self, client):
        response = client.post(
            "/api/auth/register", json={"email": "nul@example.com", "password": "a\x00b"}
        )
        assert response.status_code == 400
        assert response.json() == {"error": "Invalid password", "code": "invalid_request"}
        assert client.get("/api/auth/check/nul@example.com").json()["exists"] is False

    def test_register_duplicate_email(self, client, auth_headers):
        response = client.post(
            "/api/auth/register",
            json={"email": auth_headers.email, "password": "another-password", "name": "Duplicate"},
        )
        assert response.status_code == 409
        assert response.json()["code"] == "already_exists"

    def test_register_duplicate_id(self, client, auth_headers):
        response = client.post(
            "/api/auth/register",
            json={
                "email": "other@example.com",
                "password": "password123",
                "id": auth_headers.user_id,
            },
        )
        assert response.status_code == 409
        assert response.json()["code"] == "already_exists"

    def test_concurrent_registration(self, client):
        def attempt(n):
            return client.post(
                "/api/auth/register",
                json={"email": "race@example.com", "password": f"password-{n}"},
            ).status_code

        with ThreadPoolExecutor(max_workers=6) as pool:
            codes = list(pool.map(attempt, range(10)))

        assert codes.count(201) == 1
        assert codes.count(409) == 9
        assert client.get("/api/debug/users").json()["count"] == 1


class TestLogin:
    def test_login(self, client, app, auth_headers):
        response = client.post(
            "/api/auth/login", json={"email": auth_headers.email, "password": "testpass123"}
        )
        assert response.status_code == 200
        data = response.json()
        assert data["user"]["id"] == auth_headers.user_id
        claims = app.state.auth_guard.tokens.verify(data["token"])
        assert claims.email == auth_headers.email

    def test_wrong_password_and_unknown_email_identical(self, client, auth_headers):
        wrong_password = client.post(
            "/api/auth/login", json={"email": auth_headers.email, "password": "wrongpass"}
        )
        unknown_email = client.post(
            "/api/auth/login", json={"email": "ghost@example.com", "password": "testpass123"}
        )
        assert wrong_password.status_code == unknown_email.status_code == 401
        assert wrong_password.content == unknown_email.content
        assert wrong_password.json() == {
            "error": "Invalid credentials",
            "code": "invalid_credentials",
        }

    def test_login_missing_fields(self, client):
        response = client.post("/api/auth/login", json={"password": "testpass123"})
        assert response.status_code == 400

    def test_nul_password_identical_for_known_and_unknown_email(self, client, auth_headers):
        known = client.post(
            "/api/auth/login", json={"email": auth_headers.email, "password": "a\x00b"}
        )
        unknown = client.post(
            "/api/auth/login", json={"email": "ghost@example.com", "password": "a\x00b"}
        )
        assert known.status_code == unknown.status_code == 401
        assert known.content == unknown.content


class TestProfile:
    def test_get_profile(self, client, auth_headers):
        response = client.get("/api/user/profile", headers=auth_headers)
        assert response.status_code == 200
        assert response.json() == {
            "id": auth_headers.user_id,
            "email": auth_headers.email,
            "name": "Test User",
        }

    def test_no_token(self, client):
        response = client.get("/api/user/profile")
        assert response.status_code == 401
        assert response.json() == {"error": "No token provided", "code": "unauthorized"}
        assert response.headers["www-authenticate"] == "Bearer"

    @pytest.mark.parametrize("header", ["Basic dXNlcjpwYXNz", "Bearer", "Bearer ", "Token abc"])
    def test_non_bearer_header_is_no_token(self, client, header):
        response = client.get("/api/user/profile", headers={"Authorization": header})
        assert response.status_code == 401
        assert response.json() == {"error": "No token provided", "code": "unauthorized"}

    def test_lowercase_scheme_accepted(self, client, auth_headers):
        token = auth_headers["Authorization"].split(" ", 1)[1]
        response = client.get("/api/user/profile", headers={"Authorization": f"bearer {token}"})
        assert response.status_code == 200

    def test_bad_token_same_kind_as_missing(self, client):
        response = client.get("/api/user/profile", headers={"Authorization": "Bearer garbage"})
        assert response.status_code == 401
        assert response.json() == {"error": "Invalid or expired token", "code": "unauthorized"}

    def test_user_cleared_after_token_issued(self, client, auth_headers):
        client.delete("/api/debug/users")
        response = client.get("/api/user/profile", headers=auth_headers)
        assert response.status_code == 404
        assert response.json()["code"] == "not_found"

    def test_old_token_after_email_reregistered(self, client, auth_headers):
        client.delete("/api/debug/users")
        client.post(
            "/api/auth/register",
            json={"email": auth_headers.email, "password": "newpass123", "name": "Someone Else"},
        )
        response = client.get("/api/user/profile", headers=auth_headers)
        assert response.status_code == 404


class TestCheckUser:
    def test_exists(self, client, auth_headers):
        response = client.get("/api/auth/check/test%40example.com")
        assert response.status_code == 200
        assert response.json() == {"exists": True, "email": "test@example.com", "service": "user"}

    def test_not_exists(self, client):
        response = client.get("/api/auth/check/nobody@example.com")
        assert response.json()["exists"] is False


class TestDebug:
    def test_list_users(self, client, auth_headers):
        client.post("/api/auth/register", json={"email": "second@example.com", "password": "pw"})
        data = client.get("/api/debug/users").json()
        assert data["count"] == 2
        assert [u["email"] for u in data["users"]] == ["test@example.com", "second@example.com"]
        assert set(data["users"][0]) == {"id", "email", "name", "createdAt"}

    def test_clear_users(self, client, auth_headers):
        response = client.delete("/api/debug/users")
        assert response.status_code == 200
        assert response.json() == {"message": "Cleared 1 users", "service": "user"}
        assert client.get("/api/debug/users").json()["count"] == 0

    def test_forbidden_in_production(self, settings_factory):
        settings = settings_factory(
            environment="production", jwt_secret="a-long-production-secret"
        )
        with TestClient(create_app(settings)) as client:
            for method in ("get", "delete"):
                response = getattr(client, method)("/api/debug/users")
                assert response.status_code == 403
                assert response.json()["code"] == "forbidden"


class TestCors:
    def test_development_allows_any_origin(self, client):
        response = client.get("/health", headers={"Origin": "https://anywhere.example"})
        assert response.headers["access-control-allow-origin"] == "https://anywhere.example"

    def test_production_restricts_origins(self, settings_factory):
        settings = settings_factory(
            environment="production",
            jwt_secret="a-long-production-secret",
            allowed_origins="https://app.example.com",
        )
        with TestClient(create_app(settings)) as client:
            allowed = client.get("/health", headers={"Origin": "https://app.example.com"})
            denied = client.get("/health", headers={"Origin": "https://evil.example"})
        assert allowed.headers["access-control-allow-origin"] == "https://app.example.com"
        assert "access-control-allow-origin" not in denied.headers
