"""
Test configuration and fixtures for pytest.
"""

import os

# Required settings must exist before the application is imported
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key")
os.environ.setdefault("GOOGLE_API_KEY", "test-google-api-key")
os.environ.setdefault("DATABASE_URL", "sqlite://")

from unittest.mock import AsyncMock, MagicMock  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from serenity.core.config import get_settings  # noqa: E402
from serenity.core.security import create_access_token, get_password_hash  # noqa: E402
from serenity.db.base import Base  # noqa: E402
from serenity.db.models import User  # noqa: E402
from serenity.dependencies import db_dependency, get_gateway  # noqa: E402
from serenity.main import app  # noqa: E402
from serenity.services.llm import GeminiClient  # noqa: E402


@pytest.fixture
def test_engine():
    """Create an in-memory SQLite engine shared across threads."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)

    yield engine

    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def db_session(test_engine):
    """Create a new database session for a test."""
    session_factory = sessionmaker(bind=test_engine, autocommit=False, autoflush=False)
    session = session_factory()

    yield session

    session.close()


@pytest.fixture
def settings():
    return get_settings()


@pytest.fixture
def gateway():
    """A stand-in for the Gemini client.

    ``complete`` answers classification prompts, ``generate`` chat turns.
    """
    mock = MagicMock(spec=GeminiClient)
    mock.complete = AsyncMock(return_value="Happy")
    mock.generate = AsyncMock(return_value="I'm here for you.")
    return mock


@pytest.fixture
def client(db_session, gateway):
    """Create a test client with database and gateway overrides."""

    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[db_dependency] = override_get_db
    app.dependency_overrides[get_gateway] = lambda: gateway

    with TestClient(app) as client:
        yield client

    app.dependency_overrides.clear()


def make_user(db_session, username="testuser", email="test@example.com"):
    user = User(
        username=username,
        email=email,
        password_hash=get_password_hash("password123"),
        is_active=True,
    )
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


@pytest.fixture
def test_user(db_session):
    """Create a test user."""
    return make_user(db_session)


@pytest.fixture
def other_user(db_session):
    """Create a second user for ownership checks."""
    return make_user(db_session, username="otheruser", email="other@example.com")


@pytest.fixture
def auth_headers(test_user, settings):
    token = create_access_token(str(test_user.id), settings)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def other_auth_headers(other_user, settings):
    token = create_access_token(str(other_user.id), settings)
    return {"Authorization": f"Bearer {token}"}


# Alias for compatibility
@pytest.fixture
def db(db_session):
    """Alias for db_session."""
    return db_session
