"""
QuickNotes Backend — Data Access Layer
========================================

What:  Async SQLAlchemy engine (the connection pool), the single statement
       executor the notes API goes through, a session factory for multi-step
       work, and the FastAPI dependency for the Database.
Why:   Centralizes all database connection logic in one place.
How:   A `Database` object is constructed once at process startup, stored on
       `app.state.database`, and injected into handlers with Depends().
       Every statement is parameterized; nothing is cached beyond the pool.
Who:   Used by services (via the injected Database) and the CLI.
When:  Created in the application lifespan; disposed on shutdown.

Connection Pooling Strategy:
    pool_size:        Persistent connections for normal load
    max_overflow:     Temporary connections for traffic spikes
    pool_pre_ping:    Validates connections before use (catches stale connections)
    pool_recycle=3600: Recycles connections every hour

    SQLite URLs (tests, local experiments) keep SQLAlchemy's default pool,
    which does not accept the sizing options.
"""

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Dict, List, Mapping, Optional, Union

from fastapi import Request
from sqlalchemy import text
from sqlalchemy.engine import Row
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.sql import Executable

from quicknotes.config import Settings
from quicknotes.exceptions import DataAccessError

logger = logging.getLogger(__name__)


# ── Base Model ────────────────────────────────────────────────────────────
class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models.

    Holds the shared metadata used by the schema initializer and Alembic.
    """
    pass


def describe_error(exc: BaseException) -> str:
    """
    Human-readable message for a driver failure.

    SQLAlchemy wraps DBAPI errors and appends the statement and a docs link
    to str(exc); the API reports the driver's own message instead.
    """
    orig = getattr(exc, "orig", None)
    message = str(orig) if orig is not None else str(exc)
    return message.strip() or type(exc).__name__


def build_engine(settings: Settings) -> AsyncEngine:
    """Create the async engine (and with it the connection pool) from settings."""
    options: Dict[str, Any] = {
        # Echo SQL queries in DEBUG mode for development visibility
        "echo": settings.log_level == "DEBUG",
    }
    if not settings.is_sqlite:
        options.update(
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_max_overflow,
            pool_pre_ping=settings.db_pool_pre_ping,
            pool_recycle=3600,
        )
    return create_async_engine(settings.database_url, **options)


class Database:
    """
    Owns the connection pool for the lifetime of the process.

    Lifecycle:
        1. Constructed once (lifespan startup, CLI entry, or a test fixture)
        2. Shared by every request through the `get_database` dependency
        3. `dispose()` closes all pooled connections on shutdown

    execute() runs each statement in its own transaction; session() is for
    the few callers that need several steps committed together. Concurrent
    requests run independently and the store's row-level locking decides races.
    """

    def __init__(self, settings: Settings, engine: Optional[AsyncEngine] = None):
        self.settings = settings
        self.engine = engine or build_engine(settings)
        # expire_on_commit=False: objects stay readable after the session commits
        self.session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        """
        Unit of work spanning several statements.

        How it works:
            1. Opens a new session from the factory
            2. Yields it to the caller
            3. On success: commits
            4. On error: rolls back; driver failures become DataAccessError
            5. Always: closes the session (returns the connection to the pool)

        Example:
            async with db.session() as session:
                conn = await session.connection()
                await conn.run_sync(Base.metadata.create_all)
        """
        async with self.session_factory() as session:
            try:
                yield session
                await session.commit()
            except (SQLAlchemyError, OSError) as e:
                await session.rollback()
                raise DataAccessError(
                    message=describe_error(e),
                    context={"error_type": type(e).__name__},
                ) from e
            except Exception:
                await session.rollback()
                raise

    async def execute(
        self,
        statement: Union[str, Executable],
        params: Optional[Mapping[str, Any]] = None,
    ) -> List[Row]:
        """
        Run one parameterized statement on a pooled connection.

        Plain strings are wrapped in text() and must use :name bind
        parameters; values are always sent separately from the SQL.

        Returns:
            All result rows, or [] for statements without a result set.

        Raises:
            DataAccessError: the driver or store rejected the statement.
        """
        if isinstance(statement, str):
            statement = text(statement)
        try:
            async with self.engine.begin() as conn:
                if params:
                    result = await conn.execute(statement, dict(params))
                else:
                    result = await conn.execute(statement)
                return list(result.all()) if result.returns_rows else []
        except (SQLAlchemyError, OSError) as e:
            raise DataAccessError(
                message=describe_error(e),
                context={"error_type": type(e).__name__},
            ) from e

    async def ping(self) -> None:
        """Round-trips SELECT 1; raises DataAccessError when the store is unreachable."""
        await self.execute("SELECT 1")

    async def dispose(self) -> None:
        """Gracefully closes all connections in the pool."""
        await self.engine.dispose()
        logger.info("Database connection pool disposed")


# ── FastAPI Dependency ────────────────────────────────────────────────────
def get_database(request: Request) -> Database:
    """
    FastAPI dependency returning the process-wide Database.

    Example usage in a route:
        @router.get("/notes")
        async def list_notes(db: Database = Depends(get_database)):
            ...
    """
    return request.app.state.database
