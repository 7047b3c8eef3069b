"""Pytest fixtures for the review workflow.

Provides reusable test fixtures for:
- Database session on an in-memory SQLite database (fresh schema per test)
- Known identities (alice, bob, carol)
- Test clients authenticated as each identity

Usage:
    def test_assigned_list(bob_client):
        response = bob_client.get("/api/v1/submissions/assigned")
        assert response.status_code == 200
"""

import os

# Set environment variables BEFORE any lectorflow imports so settings pick them up
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("JWT_SECRET", "test-jwt-secret-key-256-bits-minimum-length-required")
os.environ.setdefault("LOG_JSON", "false")
os.environ.setdefault("CELERY_BROKER_URL", "memory://")
os.environ.setdefault("CELERY_RESULT_BACKEND", "cache+memory://")

import random
from typing import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool

from lectorflow.models import Base, User
from lectorflow.auth.jwt import create_access_token
from lectorflow.database import get_db as database_get_db


# Single shared connection so the TestClient thread sees the same in-memory database
test_engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)


@pytest.fixture(scope="function")
def db_session() -> Generator[Session, None, None]:
    """Create a fresh database session for each test.

    Creates all tables before the test and drops them after.
    """
    Base.metadata.create_all(bind=test_engine)

    session = TestingSessionLocal()

    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=test_engine)


def _add_user(db_session: Session, identity: str) -> User:
    user = User(
        id=identity,
        email=f"{identity}@example.com",
        display_name=identity.capitalize(),
        status="ACTIVE",
    )
    db_session.add(user)
    db_session.commit()
    return user


@pytest.fixture(scope="function")
def alice(db_session: Session) -> User:
    """Uploader identity."""
    return _add_user(db_session, "alice")


@pytest.fixture(scope="function")
def bob(db_session: Session) -> User:
    return _add_user(db_session, "bob")


@pytest.fixture(scope="function")
def carol(db_session: Session) -> User:
    return _add_user(db_session, "carol")


@pytest.fixture(scope="function")
def known_identities(alice: User, bob: User, carol: User) -> list:
    """alice, bob and carol registered in the identity directory."""
    return [alice.id, bob.id, carol.id]


@pytest.fixture
def rng() -> random.Random:
    """Seeded random source for reproducible reviewer selection."""
    return random.Random(1234)


@pytest.fixture(scope="function")
def client(db_session: Session):
    """Create an unauthenticated test client bound to the test database."""
    from lectorflow.main import app

    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[database_get_db] = override_get_db

    yield TestClient(app)

    app.dependency_overrides.clear()


def _client_for(db_session: Session, identity: str) -> TestClient:
    from lectorflow.main import app

    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[database_get_db] = override_get_db

    token = create_access_token(identity, email=f"{identity}@example.com")

    test_client = TestClient(app)
    test_client.headers.update({"Authorization": f"Bearer {token}"})
    return test_client


@pytest.fixture(scope="function")
def alice_client(db_session: Session, alice: User):
    """Test client authenticated as alice."""
    yield _client_for(db_session, alice.id)
    _clear_overrides()


@pytest.fixture(scope="function")
def bob_client(db_session: Session, bob: User):
    """Test client authenticated as bob."""
    yield _client_for(db_session, bob.id)
    _clear_overrides()


@pytest.fixture(scope="function")
def carol_client(db_session: Session, carol: User):
    """Test client authenticated as carol."""
    yield _client_for(db_session, carol.id)
    _clear_overrides()


def _clear_overrides() -> None:
    from lectorflow.main import app
    app.dependency_overrides.clear()
