"""
Shared fixtures: an in-memory SQLite database per test and an API client bound to it.
"""
import os

# Must be set before tripsplit.core.config is imported
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SECRET_KEY", "test-secret")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from tripsplit.db.session import get_db, init_db
from tripsplit.main import app


@pytest.fixture
def db_session():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(bind=engine)
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSession()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()


@pytest.fixture
def client(db_session):
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


def _register_and_login(client, username, password="secret123"):
    client.post("/api/auth/register", json={"username": username, "password": password})
    response = client.post("/api/auth/login", json={"username": username, "password": password})
    token = response.json()["access_token"]
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def login(client):
    """Register (if needed) and log in a user, returning auth headers."""
    def _login(username, password="secret123"):
        return _register_and_login(client, username, password)
    return _login


@pytest.fixture
def alice(login):
    return login("alice")


@pytest.fixture
def trip(client, alice):
    """A trip created by alice with bob and carol as members."""
    response = client.post(
        "/api/trips",
        json={"name": "Goa", "member_usernames": ["bob", "carol"], "country": "India", "budget": 1000},
        headers=alice,
    )
    assert response.status_code == 201
    return response.json()
