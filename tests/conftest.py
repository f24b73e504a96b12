"""Pytest configuration and fixtures."""

import os

import pytest

# Use test database - PostgreSQL in Docker, SQLite locally
if os.getenv("DATABASE_URL"):
    # Running in Docker - use PostgreSQL test database
    os.environ["DATABASE_URL"] = os.environ["DATABASE_URL"].replace(
        "/recipe_finder", "/recipe_finder_test"
    )
else:
    # Running locally - use SQLite
    os.environ["DATABASE_URL"] = "sqlite:///./test.db"

from fastapi.testclient import TestClient  # noqa: E402

from recipe_finder.database import Base, get_db, get_engine, get_session_factory  # noqa: E402
from recipe_finder.main import app  # noqa: E402

SQLALCHEMY_DATABASE_URL = os.environ["DATABASE_URL"]


class AuthHeaders(dict):
    """Dict subclass that also stores user_id and email."""

    def __init__(self, *args, user_id: str | None = None, email: str | None = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.user_id = user_id
        self.email = email


@pytest.fixture(scope="session", autouse=True)
def setup_test_database():
    """Create test database schema once at the start of the test session."""
    if "postgresql" in SQLALCHEMY_DATABASE_URL:
        # For PostgreSQL, create the test database
        from sqlalchemy_utils import create_database, database_exists

        # Create test database if it doesn't exist
        if not database_exists(SQLALCHEMY_DATABASE_URL):
            create_database(SQLALCHEMY_DATABASE_URL)

    from recipe_finder import models  # noqa: F401

    Base.metadata.create_all(bind=get_engine())
    yield
    # Don't drop database - just leave it for next run (each test cleans up after itself)


@pytest.fixture(scope="function", autouse=True)
def db():
    """Create a fresh database session for each test with cleanup."""
    session = get_session_factory()()

    yield session

    # Clean up all data after test
    session.rollback()
    for table in reversed(Base.metadata.sorted_tables):
        session.execute(table.delete())
    session.commit()
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


def _register(client, name: str, email: str) -> AuthHeaders:
    response = client.post(
        "/api/auth/register",
        json={"name": name, "email": email, "password": "testpass123"},
    )
    assert response.status_code == 201
    data = response.json()["data"]
    return AuthHeaders(
        {"Authorization": f"Bearer {data['token']}"},
        user_id=data["user"]["id"],
        email=data["user"]["email"],
    )


@pytest.fixture
def auth_headers(client):
    """Create a user and return auth headers with user info."""
    return _register(client, "Test User", "test@example.com")


@pytest.fixture
def other_auth_headers(client):
    """A second, independent user."""
    return _register(client, "Other User", "other@example.com")


@pytest.fixture
def recipe_payload():
    """Build a valid recipe body, with optional overrides."""

    def _build(**overrides):
        payload = {
            "name": "Pasta Carbonara",
            "description": "Classic Roman pasta with eggs and cheese",
            "cuisine": "Italian",
            "image": "https://example.com/carbonara.jpg",
            "ingredients": [
                {"name": "Spaghetti", "amount": "400 g"},
                {"name": "Eggs", "amount": "4"},
            ],
            "instructions": [
                {"step": 1, "instruction": "Boil the pasta"},
                {"step": 2, "instruction": "Mix with eggs off the heat"},
            ],
            "prepTime": 10,
            "cookTime": 15,
            "servings": 4,
            "difficulty": "Medium",
            "tags": ["pasta", "dinner"],
        }
        payload.update(overrides)
        return payload

    return _build


@pytest.fixture
def create_recipe(client, recipe_payload):
    """Create a recipe through the API and return its JSON data."""

    def _create(**overrides):
        response = client.post("/api/recipes", json=recipe_payload(**overrides))
        assert response.status_code == 201, response.text
        return response.json()["data"]

    return _create
