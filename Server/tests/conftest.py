"""
Shared fixtures for Postboard Server tests

Each test gets its own SQLite file, signing secret and a low bcrypt cost.
"""

import secrets
import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from fastapi.testclient import TestClient

from config import ServerConfig
from server import CreateApp


@pytest.fixture
def config(tmp_path):
    """Server configuration isolated to this test"""
    return ServerConfig(
        jwt_secret=secrets.token_urlsafe(32),
        database_url=f"sqlite:///{tmp_path / 'postboard.db'}",
        password_work_factor=4,
        log_dir=str(tmp_path / "logs")
    )


@pytest.fixture
def client(config):
    """TestClient running the app lifespan (database created on enter)"""
    app = CreateApp(config)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def registered_user(client):
    """Register John Doe and return the credentials used"""
    credentials = {"name": "John Doe", "email": "john@mail.com", "password": "1234"}
    response = client.post("/auth/register", json=credentials)
    assert response.status_code == 200
    return credentials


@pytest.fixture
def auth_headers(client, registered_user):
    """Authorization header carrying a token from a successful login"""
    response = client.post(
        "/auth/login",
        json={"email": registered_user["email"], "password": registered_user["password"]}
    )
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.json()['token']}"}
