"""
Pytest configuration and shared fixtures for the Bookmark Manager test suite.

This module provides:
- Database fixtures (in-memory SQLite for service tests, a temporary
  SQLite file for HTTP tests)
- FastAPI test client with the `get_db` dependency overridden
- An AsyncSession-like test double for unit tests
"""

import os

# Must be set before the application modules build their engine
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("CREATE_TABLES", "false")
os.environ.setdefault("SESSION_SECRET", "test-secret")

from typing import AsyncGenerator, Generator
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.pool import NullPool, StaticPool

import bookmark_manager.models  # noqa: F401
from bookmark_manager.core.db import Base, get_db, create_tables
from bookmark_manager.main import app


# Test Database Configuration
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
async def async_engine():
    """Create async engine for testing with in-memory SQLite."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        echo=False
    )

    await create_tables(engine)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
async def async_db_session(async_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create async database session for testing."""
    session_factory = async_sessionmaker(async_engine, expire_on_commit=False)

    async with session_factory() as session:
        yield session


@pytest.fixture
def database_file(tmp_path) -> Generator[Engine, None, None]:
    """A SQLite file with the schema in place, opened through a sync engine.

    Tests use the returned engine to inspect what the app persisted.
    """
    path = tmp_path / "bookmark_manager.db"
    engine = create_engine(f"sqlite:///{path}")
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def sync_client(database_file) -> Generator[TestClient, None, None]:
    """Synchronous client against the real app, backed by `database_file`.

    The client is not entered as a context manager, so the lifespan (and
    its table creation on the configured database) does not run.
    """
    async_engine = create_async_engine(
        f"sqlite+aiosqlite:///{database_file.url.database}",
        poolclass=NullPool,
    )
    session_factory = async_sessionmaker(async_engine, expire_on_commit=False)

    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    yield TestClient(app)

    app.dependency_overrides.clear()


# Common Test Doubles
@pytest.fixture
def mock_async_session():
    """Provide a reusable AsyncSession-like test double.

    - `add` is a `MagicMock` (synchronous)
    - `flush`, `commit`, `rollback`, `get`, `execute` are `AsyncMock`
    Tests can override `side_effect` / `return_value` as needed.
    """
    session = AsyncMock()

    # `add` is synchronous on SQLAlchemy session
    session.add = MagicMock()

    # Async methods
    session.flush = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.get = AsyncMock()
    session.execute = AsyncMock()

    return session


@pytest.fixture
def register(sync_client):
    """Submit the sign-up form and follow the redirect."""
    def _register(email: str, password: str):
        return sync_client.post("/users", data={"email": email, "password": password})
    return _register
