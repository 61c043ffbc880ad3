"""Shared test fixtures and configuration."""
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.main import app
from app.db.base import Base
from app.api.deps import get_db
from app.core.identifiers import new_id
from app.services.lectures import create_lecture
from app.services.users import register_user


# Test database setup
SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"


@pytest.fixture(scope="function")
def db_engine():
    """Create a fresh database for each test."""
    engine = create_engine(
        SQLALCHEMY_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def db_session(db_engine):
    """Create a new database session for a test."""
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=db_engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture(scope="function")
def client(db_session):
    """Create a test client with a test database."""
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def make_user(db_session):
    """Register users with unique names; returns the public profile."""
    counter = {"n": 0}

    def _make_user(username=None, email=None, password="secret-pass", role=0):
        counter["n"] += 1
        n = counter["n"]
        return register_user(
            db_session,
            username or f"user{n}",
            email or f"user{n}@example.com",
            password,
            role,
        )

    return _make_user


@pytest.fixture
def make_lecture(db_session):
    """Create lectures owned by a random organizer; returns the serialized lecture."""
    def _make_lecture(topic="Distributed Systems", organizer_id=None, speaker_id=None, **kwargs):
        return create_lecture(
            db_session,
            topic=topic,
            start_time=kwargs.pop("start_time", "2025-01-01T10:00:00Z"),
            duration=kwargs.pop("duration", 60),
            organizer_id=organizer_id or new_id(),
            speaker_id=speaker_id,
            **kwargs,
        )

    return _make_lecture
