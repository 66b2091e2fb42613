"""
QuickNotes Backend — Schema Initializer
=========================================

What:  Idempotently creates the `notes` table.
How:   MetaData.create_all with checkfirst=True, i.e. CREATE TABLE only when
       the table is absent, run inside one Database.session() so the check
       and the DDL commit together. Existing tables and rows are left untouched.
Who:   `quicknotes init-db`, GET /api/setup, and the optional startup hook.
When:  At setup time only; never on ordinary requests and never retried.
"""

import logging

from quicknotes.database import Base, Database
from quicknotes.exceptions import DataAccessError, SchemaInitError

# Registers the notes table on Base.metadata
from quicknotes.models.note import Note  # noqa: F401

logger = logging.getLogger(__name__)


async def ensure_schema(db: Database) -> None:
    """
    Create the notes table if it does not exist.

    Raises:
        SchemaInitError: the store was unreachable or refused the DDL.
    """
    try:
        async with db.session() as session:
            conn = await session.connection()
            await conn.run_sync(Base.metadata.create_all, checkfirst=True)
    except DataAccessError as e:
        logger.error("Error initializing database: %s", e.message)
        raise SchemaInitError(message=e.message, context=e.context) from e
    logger.info("Database initialized successfully")
