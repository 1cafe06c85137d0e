import os

# Must be set before stocktrack.core.config is imported anywhere
os.environ["DATABASE_URL"] = "sqlite://:memory:"
os.environ["JWT_SECRET"] = "test-secret"

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from stocktrack.core.db import init_db, close_db


@pytest_asyncio.fixture
async def db():
    """Fresh in-memory database for service level tests."""
    await init_db("sqlite://:memory:")
    yield
    await close_db()


@pytest.fixture
def client():
    """Runs the real app (lifespan included) against an in-memory database."""
    from stocktrack.main import app

    with TestClient(app) as c:
        yield c


def login(client, email="tester@example.com", password="secret123", name="Tester") -> dict:
    """Registers a user, logs in and returns Bearer headers for it."""
    client.post("/api/auth/register", json={"name": name, "email": email, "password": password})
    response = client.post("/api/auth/login", json={"email": email, "password": password})
    assert response.status_code == 200
    # Drop the session cookie so each request authenticates only through the headers it sends
    client.cookies.clear()
    return {"Authorization": f"Bearer {response.json()['access_token']}"}


@pytest.fixture
def auth_headers(client):
    return login(client)
