"""
Shared test fixtures for DevConnector API tests.

Provides an in-memory database, the app wired to it, a test client, and
user fixtures with ready-made tokens.
"""

from collections.abc import AsyncGenerator
from typing import Any

import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.pool import NullPool, StaticPool

from devconnector.auth.jwt import create_token
from devconnector.auth.password import hash_password
from devconnector.config import settings
from devconnector.database import Database, get_db
from devconnector.main import create_app
from devconnector.middleware.rate_limit import reset_limiter
from devconnector.models.user import User
from devconnector.routers.users import gravatar_url


def _test_database() -> Database:
    """SQLite in memory needs one shared connection; anything else gets no pooling."""
    url = settings.test_database_url
    if url.startswith("sqlite"):
        return Database(url, poolclass=StaticPool)
    return Database(url, poolclass=NullPool)


# --- Rate Limiter Reset Fixture ---


@pytest.fixture(autouse=True)
def reset_rate_limiter():
    """Reset rate limiter before each test to ensure test isolation."""
    reset_limiter()
    yield


# --- Database Fixtures ---


@pytest_asyncio.fixture(scope="function")
async def database() -> AsyncGenerator[Database, None]:
    """
    Create tables before each test function, drop after.
    Provides isolated database state per test.
    """
    db = _test_database()
    await db.create_all()
    yield db
    await db.drop_all()
    await db.dispose()


@pytest_asyncio.fixture(scope="function")
async def db_session(database: Database) -> AsyncGenerator[AsyncSession, None]:
    async with database.session_factory() as session:
        yield session
        await session.rollback()


@pytest_asyncio.fixture(scope="function")
async def app(database: Database) -> FastAPI:
    return create_app(database)


@pytest_asyncio.fixture(scope="function")
async def async_client(app: FastAPI, db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """
    Async HTTP client configured for testing.
    Overrides database dependency with test session.
    """

    async def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(
        transport=transport,
        base_url="http://test",
        follow_redirects=True,
    ) as client:
        yield client

    app.dependency_overrides.clear()


# --- Authentication Helper Fixtures ---


@pytest.fixture
def auth_headers():
    """Factory fixture for creating x-auth-token headers."""

    def _auth_headers(token: str) -> dict[str, str]:
        return {"x-auth-token": token}

    return _auth_headers


@pytest.fixture
def valid_registration_data() -> dict[str, str]:
    """Valid user registration payload."""
    return {
        "name": "New User",
        "email": "newuser@example.com",
        "password": "secret123",
    }


# --- User Fixtures ---


async def _create_user(
    db_session: AsyncSession,
    name: str,
    email: str,
    password: str,
) -> dict[str, Any]:
    """Helper to create a user directly in the database and sign a token for it."""
    user = User(
        name=name,
        email=email.lower(),
        password_hash=hash_password(password),
        avatar=gravatar_url(email),
    )
    db_session.add(user)
    await db_session.commit()

    return {
        "user_id": str(user.id),
        "name": user.name,
        "email": user.email,
        "avatar": user.avatar,
        "password": password,
        "token": create_token(user.id),
    }


@pytest_asyncio.fixture
async def test_user(db_session: AsyncSession) -> dict[str, Any]:
    """Create a standard test user. Returns dict with user data and a token."""
    return await _create_user(
        db_session,
        name="Alice",
        email="alice@example.com",
        password="alicepass",
    )


@pytest_asyncio.fixture
async def second_user(db_session: AsyncSession) -> dict[str, Any]:
    """Create a second user for testing ownership/authorization scenarios."""
    return await _create_user(
        db_session,
        name="Bob",
        email="bob@example.com",
        password="bobpass1",
    )


# --- Resource Helper Fixtures ---


@pytest.fixture
def create_post(async_client: AsyncClient, auth_headers):
    """Factory fixture that creates a post as the given user and returns its JSON."""

    async def _create_post(user: dict[str, Any], text: str = "Hello, world") -> dict[str, Any]:
        response = await async_client.post(
            "/api/posts",
            json={"text": text},
            headers=auth_headers(user["token"]),
        )
        assert response.status_code == 201
        return response.json()

    return _create_post


@pytest.fixture
def create_profile(async_client: AsyncClient, auth_headers):
    """Factory fixture that upserts a minimal profile for the given user."""

    async def _create_profile(user: dict[str, Any], **fields: Any) -> dict[str, Any]:
        payload = {"status": "Developer", "skills": "Python, SQL"}
        payload.update(fields)
        response = await async_client.post(
            "/api/profile",
            json=payload,
            headers=auth_headers(user["token"]),
        )
        assert response.status_code == 200
        return response.json()

    return _create_profile
