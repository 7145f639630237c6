"""Pytest configuration and fixtures."""

import os

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from src.database import Base, get_db
from src.main import app
from src.models.user import User
from src.services.auth import get_password_hash


class AuthHeaders(dict):
    """Dict subclass that also stores user_id and username."""

    def __init__(self, *args, user_id: int | None = None, username: str | None = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.user_id = user_id
        self.username = username


# Use test database - PostgreSQL in Docker, SQLite locally
if os.getenv("DATABASE_URL"):
    # Running in Docker - use PostgreSQL test database
    SQLALCHEMY_DATABASE_URL = os.getenv("DATABASE_URL").replace(
        "/habit_calendar", "/habit_calendar_test"
    )
else:
    # Running locally - use SQLite
    SQLALCHEMY_DATABASE_URL = "sqlite:///./test.db"

connect_args = {"check_same_thread": False} if "sqlite" in SQLALCHEMY_DATABASE_URL else {}
engine = create_engine(SQLALCHEMY_DATABASE_URL, connect_args=connect_args)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

TEST_PASSWORD = "testpass123"


@pytest.fixture(scope="session", autouse=True)
def setup_test_database():
    """Create test database schema once at the start of the test session."""
    if "postgresql" in SQLALCHEMY_DATABASE_URL:
        # For PostgreSQL, create the test database
        from sqlalchemy_utils import create_database, database_exists

        # Create test database if it doesn't exist
        if not database_exists(SQLALCHEMY_DATABASE_URL):
            create_database(SQLALCHEMY_DATABASE_URL)

    Base.metadata.create_all(bind=engine)
    yield
    # Don't drop database - just leave it for next run (each test cleans up after itself)


@pytest.fixture(scope="function", autouse=True)
def db():
    """Create a fresh database session for each test with cleanup."""
    session = TestingSessionLocal()

    yield session

    # Clean up all data after test
    session.rollback()
    for table in reversed(Base.metadata.sorted_tables):
        session.execute(table.delete())
    session.commit()
    session.close()


@pytest.fixture
def second_db():
    """An independent session, as another request would hold."""
    session = TestingSessionLocal()
    yield session
    session.rollback()
    session.close()


@pytest.fixture(scope="function")
def client(db):
    """Create a test client with database override."""

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def register_and_login(client, username: str, password: str = TEST_PASSWORD) -> AuthHeaders:
    """Register a user through the API and return bearer headers for it."""
    response = client.post("/register", json={"username": username, "password": password})
    assert response.status_code == 201

    response = client.post("/login", json={"username": username, "password": password})
    assert response.status_code == 200
    token = response.json()["token"]

    return AuthHeaders({"Authorization": f"Bearer {token}"}, username=username)


@pytest.fixture
def auth_headers(client, db):
    """Create a user and return auth headers with user info."""
    headers = register_and_login(client, "alice")
    headers.user_id = db.query(User.id).filter(User.username == "alice").scalar()
    return headers


@pytest.fixture
def other_auth_headers(client, db):
    """A second, unrelated user."""
    headers = register_and_login(client, "bob")
    headers.user_id = db.query(User.id).filter(User.username == "bob").scalar()
    return headers


@pytest.fixture
def user(db):
    """A user created directly in the store, for service-level tests."""
    test_user = User(username="service-user", password_hash=get_password_hash(TEST_PASSWORD))
    db.add(test_user)
    db.commit()
    db.refresh(test_user)
    return test_user


@pytest.fixture
def other_user(db):
    """A second user created directly in the store."""
    test_user = User(username="other-user", password_hash=get_password_hash(TEST_PASSWORD))
    db.add(test_user)
    db.commit()
    db.refresh(test_user)
    return test_user
