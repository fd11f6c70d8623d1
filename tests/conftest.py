import os

os.environ.setdefault("LOG_FILE", "")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import StaticPool

from tripshare.core.database import Database
from tripshare.main import create_app


@pytest.fixture
def database():
    # Use an in-memory SQLite database for testing
    db = Database("sqlite:///:memory:", poolclass=StaticPool)
    db.create_all()
    yield db
    db.drop_all()
    db.dispose()


@pytest.fixture
def client(database):
    return TestClient(create_app(database))


@pytest.fixture
def register(client):
    """Registers a user and returns ``(headers, user_id)``."""

    def _register(name="Alice", email="alice@example.com", password="password123"):
        res = client.post("/api/users", json={"name": name, "email": email, "password": password})
        assert res.status_code == 200, res.text
        headers = {"Authorization": f"Bearer {res.json()['token']}"}
        me = client.get("/api/auth", headers=headers)
        return headers, me.json()["_id"]

    return _register


@pytest.fixture
def alice(register):
    return register()


@pytest.fixture
def bob(register):
    return register(name="Bob", email="bob@example.com")


@pytest.fixture
def trip(client, alice):
    headers, _ = alice
    res = client.post(
        "/api/trips",
        json={"title": "A", "description": "B", "price": 10, "photos": "x.jpg"},
        headers=headers,
    )
    assert res.status_code == 200, res.text
    return res.json()
