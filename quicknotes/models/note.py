"""
QuickNotes Backend — Note SQLAlchemy Model
============================================

What:  ORM model representing the `notes` table.
How:   Inherits from the shared DeclarativeBase; the schema initializer and
       Alembic both read Base.metadata from here.
Who:   Used by NoteService to build INSERT/UPDATE/DELETE/SELECT statements.

Table Design:
    - id: integer primary key assigned by the store (SERIAL on PostgreSQL,
      AUTOINCREMENT on SQLite), so ids are never reused after a delete
    - content: TEXT NOT NULL, no length limit, no uniqueness
    No other columns, no secondary indexes, no other tables.
"""

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from quicknotes.database import Base


class Note(Base):
    """
    A single text note.

    Lifecycle:
        1. Created from client-submitted content; the store assigns `id`
        2. Updated in place: only `content` changes
        3. Deleted irrevocably (no tombstone)
    """

    __tablename__ = "notes"

    # ── Primary Key ───────────────────────────────────────────────────────
    # sqlite_autoincrement: SQLite otherwise reuses the highest id after a delete
    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )

    # ── Content ───────────────────────────────────────────────────────────
    # Markdown is a client-side rendering convention, not a stored distinction
    content: Mapped[str] = mapped_column(
        Text,
        nullable=False,
    )

    __table_args__ = {"sqlite_autoincrement": True}

    def __repr__(self) -> str:
        """Developer-friendly string representation for debugging."""
        preview = (self.content or "")[:20]
        return f"<Note(id={self.id}, content={preview!r})>"
