"""
QuickNotes — Test Configuration (conftest.py)
==============================================

What:  Shared pytest fixtures for the entire test suite.
How:   Each test gets its own on-disk SQLite database (aiosqlite) with the
       notes table created, and an app built around that Database.

Fixture Hierarchy (all function-scoped):
    ├── settings:        Settings pointing at tmp_path/notes.db
    ├── database:        Database with the notes table created
    ├── app:             FastAPI app wired to `database`
    ├── test_client:     HTTPX AsyncClient talking to `app` in-process
    ├── broken_client:   client for an app whose store cannot be opened
    └── mock_db:         AsyncMock standing in for Database (service tests)
"""

import os
from unittest.mock import AsyncMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

# Override settings for testing BEFORE any app imports
# quicknotes.main builds a module-level app from the environment
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///./quicknotes-test.db"
os.environ["LOG_LEVEL"] = "WARNING"

from quicknotes.config import Settings  # noqa: E402
from quicknotes.database import Database  # noqa: E402
from quicknotes.main import create_app  # noqa: E402
from quicknotes.services.schema_service import ensure_schema  # noqa: E402

UNREACHABLE_URL = "sqlite+aiosqlite:////nonexistent-quicknotes-dir/missing/notes.db"


@pytest.fixture
def settings(tmp_path):
    return Settings(
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'notes.db'}",
        log_level="WARNING",
    )


@pytest_asyncio.fixture
async def database(settings):
    """A Database with a freshly initialized (empty) notes table."""
    db = Database(settings)
    await ensure_schema(db)
    yield db
    await db.dispose()


@pytest.fixture
def app(settings, database):
    return create_app(settings, database=database)


@pytest_asyncio.fixture
async def test_client(app):
    """
    HTTPX AsyncClient configured to talk to the app without a server.

    Usage:
        async def test_list(test_client):
            response = await test_client.get("/api/notes")
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest_asyncio.fixture
async def broken_client():
    """Client for an app whose store is unreachable (every statement fails)."""
    settings = Settings(database_url=UNREACHABLE_URL, log_level="WARNING")
    database = Database(settings)
    app = create_app(settings, database=database)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    await database.dispose()


@pytest.fixture
def mock_db():
    """
    A stand-in for Database with an awaitable execute().

    Usage:
        mock_db.execute.return_value = [row]
        result = await note_service.list_notes(mock_db)
    """
    db = AsyncMock(spec=Database)
    db.execute = AsyncMock(return_value=[])
    return db
