"""
QuickNotes — Package Initializer
==================================

What: A minimal note-taking service: a REST API over one `notes` table and
      a client-side board that renders and edits the notes.

Architecture Note:
    Strictly layered, no cycles:

    ┌─────────────────────────────────────┐
    │   Client (NoteBoard, HTML page)     │  ← quicknotes.client
    ├─────────────────────────────────────┤
    │        Routes (API Layer)           │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │        Services                     │  ← one statement per operation
    ├─────────────────────────────────────┤
    │   Models & Schemas (Data)           │  ← SQLAlchemy table + Pydantic
    ├─────────────────────────────────────┤
    │   Database (connection pool)        │  ← async SQLAlchemy engine
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
