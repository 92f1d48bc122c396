"""Pytest configuration and fixtures."""

import pytest
from fastapi.testclient import TestClient

from lead_api.config import Settings
from lead_api.main import create_app

TEST_JWT_SECRET = "test-secret-key"


class AuthHeaders(dict):
    """Dict subclass that also stores the registered user's id and email."""

    def __init__(self, *args, user_id: str | None = None, email: str | None = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.user_id = user_id
        self.email = email


def make_settings(tmp_path, **overrides) -> Settings:
    """Test settings: fast bcrypt, a private upload dir, no .env file."""
    values = {
        "environment": "test",
        "jwt_secret": TEST_JWT_SECRET,
        "bcrypt_rounds": 4,
        "upload_dir": str(tmp_path / "uploads"),
        "max_upload_bytes": 1024 * 1024,
        "upload_requires_auth": False,
        "frontend_dir": None,
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture
def settings_factory(tmp_path):
    """Build test settings with overrides, e.g. for a production-mode app."""

    def factory(**overrides) -> Settings:
        return make_settings(tmp_path, **overrides)

    return factory


@pytest.fixture
def settings(settings_factory):
    return settings_factory()


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    """Create a test client with a fresh, empty user store."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def auth_headers(client):
    """Create a user and return auth headers with user info."""
    response = client.post(
        "/api/auth/register",
        json={"email": "test@example.com", "password": "testpass123", "name": "Test User"},
    )
    assert response.status_code == 201
    data = response.json()
    token = data["token"]

    return AuthHeaders(
        {"Authorization": f"Bearer {token}"},
        user_id=data["user"]["id"],
        email=data["user"]["email"],
    )
