"""
Noteful API: Test Configuration (conftest.py)
===============================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy (all function-scoped):
    ├── mock_db_session:  AsyncMock session for service unit tests
    ├── db_engine:        fresh SQLite database (aiosqlite) with the schema
    ├── session_factory:  async_sessionmaker bound to db_engine
    ├── test_client:      HTTPX AsyncClient against a fresh app whose
    │                     get_db_session dependency uses session_factory
    ├── make_folder:      inserts a folder through the API
    └── make_note:        inserts a note through the API
"""

import os
import tempfile
from typing import AsyncGenerator
from unittest.mock import AsyncMock, MagicMock

# Settings are read at import time; point them at a throwaway SQLite file
# BEFORE any noteful module is imported.
_tmp_dir = tempfile.mkdtemp(prefix="noteful_test_")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_tmp_dir}/noteful.db"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["API_PREFIX"] = ""

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy import event  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine  # noqa: E402

from noteful.database import Base, get_db_session  # noqa: E402
from noteful.main import create_app  # noqa: E402
from noteful.models.folder import Folder  # noqa: E402,F401
from noteful.models.note import Note  # noqa: E402,F401


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    """SQLite ignores REFERENCES / ON DELETE CASCADE unless asked per connection."""
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


# ══════════════════════════════════════════════════════════════════════════
# Unit-test fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def mock_db_session():
    """
    Provides a mock async database session.

    Usage:
        mock_db_session.execute.return_value.scalar_one_or_none.return_value = row
        await folder_service.lookup(mock_db_session, 1)
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.flush = AsyncMock()
    session.refresh = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    return session


# ══════════════════════════════════════════════════════════════════════════
# Integration fixtures (real SQLite database per test)
# ══════════════════════════════════════════════════════════════════════════

@pytest_asyncio.fixture
async def db_engine(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'noteful.db'}")
    event.listen(engine.sync_engine, "connect", _enable_sqlite_foreign_keys)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
def session_factory(db_engine):
    return async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def test_client(session_factory) -> AsyncGenerator[AsyncClient, None]:
    """
    HTTPX AsyncClient routed straight into a fresh app instance.

    The session override mirrors noteful.database.get_db_session
    (commit on success, rollback on error) against the test database.
    """
    app = create_app()

    async def override_get_db_session():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db_session] = override_get_db_session

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def make_folder(test_client):
    """Factory: POST a folder and return the response body."""

    async def _make_folder(name: str = "Important") -> dict:
        response = await test_client.post("/folders", json={"name": name})
        assert response.status_code == 201, response.text
        return response.json()

    return _make_folder


@pytest.fixture
def make_note(test_client):
    """Factory: POST a note and return the response body."""

    async def _make_note(folder_id: int, **fields) -> dict:
        payload = {
            "name": "Dogs",
            "content": "Corporis accusamus placeat quas non voluptas.",
            "folder_id": folder_id,
        }
        payload.update(fields)
        response = await test_client.post("/notes", json=payload)
        assert response.status_code == 201, response.text
        return response.json()

    return _make_note
