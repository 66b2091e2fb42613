"""
QuickNotes Backend — Note Service
===================================

What:  The four note operations, each exactly one SQL statement.
How:   Builds SQLAlchemy Core statements against the `notes` table and runs
       them through Database.execute (parameterized, autocommit per statement).
Who:   Called by the route handlers in routes/notes.py.

Statement map:
    list_notes   SELECT id, content FROM notes
    create_note  INSERT INTO notes (content) VALUES (:content) RETURNING id, content
    update_note  UPDATE notes SET content = :content WHERE id = :id RETURNING id, content
    delete_note  DELETE FROM notes WHERE id = :id

NoteService is stateless: it receives the Database on every call, so
concurrent requests share nothing except the pool. There is no locking and
no version check; two concurrent updates of one note resolve last-write-wins
in the store.
"""

import logging
from typing import List, Optional

from sqlalchemy import delete, insert, select, update

from quicknotes.database import Database
from quicknotes.exceptions import NoteNotFoundError
from quicknotes.models.note import Note
from quicknotes.schemas.note import NoteOut

logger = logging.getLogger(__name__)


class NoteService:
    """
    Business logic layer for note operations.

    Error Handling Strategy:
        Store failures surface from Database.execute as DataAccessError and
        propagate untouched to the global handler (500). The only condition
        detected here is an update that matched no row (NoteNotFoundError).
    """

    async def list_notes(self, db: Database) -> List[NoteOut]:
        """
        Return every note in the store's default order.

        No ORDER BY is applied; an empty table yields [].
        """
        rows = await db.execute(select(Note.id, Note.content))
        return [NoteOut(id=row.id, content=row.content) for row in rows]

    async def create_note(self, db: Database, content: Optional[str]) -> NoteOut:
        """
        Insert a note and return it with its store-assigned id.

        `content` is passed through as given; None violates the NOT NULL
        constraint and raises DataAccessError.
        """
        rows = await db.execute(
            insert(Note).values(content=content).returning(Note.id, Note.content)
        )
        note = rows[0]
        logger.info("Note %s created (%d chars)", note.id, len(note.content))
        return NoteOut(id=note.id, content=note.content)

    async def update_note(self, db: Database, note_id: int, content: Optional[str]) -> NoteOut:
        """
        Overwrite the content of one note; the id never changes.

        Raises:
            NoteNotFoundError: no row has this id (→ 404)
            DataAccessError: the store rejected the statement (→ 500)
        """
        rows = await db.execute(
            update(Note)
            .where(Note.id == note_id)
            .values(content=content)
            .returning(Note.id, Note.content)
        )
        if not rows:
            raise NoteNotFoundError(note_id=note_id)
        note = rows[0]
        logger.info("Note %s updated (%d chars)", note.id, len(note.content))
        return NoteOut(id=note.id, content=note.content)

    async def delete_note(self, db: Database, note_id: int) -> None:
        """Delete one note. Deleting an id that does not exist is a no-op."""
        await db.execute(delete(Note).where(Note.id == note_id))
        logger.info("Note %s deleted", note_id)


# ── Singleton Instance ────────────────────────────────────────────────────
note_service = NoteService()
