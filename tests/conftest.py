import os
import sys

import pytest

CURRENT_DIR = os.path.dirname(__file__)
SERVICE_ROOT = os.path.dirname(CURRENT_DIR)
if SERVICE_ROOT not in sys.path:
    sys.path.insert(0, SERVICE_ROOT)

from fastapi.testclient import TestClient

from students_api.config import Settings
from students_api.main import create_app
from students_api.interfaces.http.authz import authenticate, authorize_admin
from students_api.application.dto import TokenClaims
from students_api.domain.entities import Role

TEST_SECRET = "test-secret"


@pytest.fixture(autouse=True)
def setup_test_environment(monkeypatch):
    """Keep the developer's environment out of the tests."""
    monkeypatch.setenv("JWT_SECRET", TEST_SECRET)
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    monkeypatch.delenv("AUTH_ENABLED", raising=False)
    monkeypatch.delenv("SEED_DATA", raising=False)


@pytest.fixture
def app():
    return create_app(Settings(JWT_SECRET=TEST_SECRET, LOG_LEVEL="WARNING"))


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def open_app():
    """App with authentication switched off."""
    return create_app(Settings(AUTH_ENABLED=False, LOG_LEVEL="WARNING"))


@pytest.fixture
def open_client(open_app):
    return TestClient(open_app)


@pytest.fixture
def login(client):
    """Return a function logging in through the API and returning the token."""
    def _login(username: str, password: str) -> str:
        response = client.post("/auth/login", json={"username": username, "password": password})
        assert response.status_code == 200, response.text
        return response.json()["data"]["token"]
    return _login


@pytest.fixture
def admin_headers(login):
    return {"Authorization": f"Bearer {login('teacher', 'teacher123')}"}


@pytest.fixture
def user_headers(login):
    return {"Authorization": f"Bearer {login('student', 'student123')}"}


@pytest.fixture
def admin_override(app):
    """Skip token handling and act as an admin."""
    claims = TokenClaims(id=1, username="teacher", role=Role.ADMIN)
    app.dependency_overrides[authenticate] = lambda: claims
    app.dependency_overrides[authorize_admin] = lambda: claims
    yield
    app.dependency_overrides.clear()
