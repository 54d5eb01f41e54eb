"""Pytest bootstrap for project imports and shared fixtures."""

from pathlib import Path
import sys

import pytest

# Ensure project root is on sys.path so `import conectidade` works
PROJECT_ROOT = Path(__file__).resolve().parents[1]
project_root_str = str(PROJECT_ROOT)
if project_root_str not in sys.path:
    sys.path.insert(0, project_root_str)

from conectidade.storage import MemStorage  # noqa: E402


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def storage():
    """A fresh seeded in-memory store per test."""
    return MemStorage()


@pytest.fixture
def client(storage):
    pytest.importorskip("httpx")
    from fastapi.testclient import TestClient

    from conectidade.main import create_app

    with TestClient(create_app(storage=storage)) as test_client:
        yield test_client


@pytest.fixture
def register_user(client):
    """Register through the API; returns (user json, auth headers)."""

    def _register(username: str, user_type: str = "learn", password: str = "secret123", name=None):
        response = client.post(
            "/api/register",
            json={
                "name": name or username.title(),
                "username": username,
                "password": password,
                "userType": user_type,
            },
        )
        assert response.status_code == 201, response.text
        body = response.json()
        return body["user"], {"Authorization": f"Bearer {body['accessToken']}"}

    return _register
