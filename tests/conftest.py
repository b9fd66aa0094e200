from __future__ import annotations

from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient
from mongomock_motor import AsyncMongoMockClient

from core.database import get_db
from main import app


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def db():
    """A fresh in-memory Mongo database per test."""
    return AsyncMongoMockClient()["devconnector_test"]


@pytest.fixture
def client(db) -> Generator[TestClient]:
    async def _test_db():
        yield db

    app.dependency_overrides[get_db] = _test_db
    yield TestClient(app)
    app.dependency_overrides.clear()


def register(client: TestClient, name: str = "Ada Lovelace", email: str = "ada@example.com",
             password: str = "secret123") -> dict:
    res = client.post("/api/auth/register", json={
        "name": name, "email": email, "password": password, "password2": password,
    })
    assert res.status_code == 201, res.text
    return res.json()


def login(client: TestClient, email: str = "ada@example.com", password: str = "secret123") -> str:
    res = client.post("/api/auth/login", json={"email": email, "password": password})
    assert res.status_code == 200, res.text
    return res.json()["access_token"]


@pytest.fixture
def auth_headers(client: TestClient) -> dict[str, str]:
    """Registers a user and returns a bearer header for it."""
    register(client)
    return {"Authorization": f"Bearer {login(client)}"}
