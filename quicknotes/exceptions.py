"""
QuickNotes Backend — Custom Exception Hierarchy
=================================================

What:  Defines application-specific exceptions for the few ways a request can fail.
How:   Each exception class carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return `{"error": <message>}` with the mapped HTTP status code.
Who:   Raised by the data access layer and services; caught by global handlers.

Exception Hierarchy:
    QuickNotesError (base)       → 500 Internal Server Error
    ├── DataAccessError          → 500 (message is the store/driver error)
    ├── SchemaInitError          → 500
    └── NoteNotFoundError        → 404 Not Found (update of a missing id)

Unlike most APIs, the message of a DataAccessError IS returned to the
client: the notes API reports the underlying failure verbatim and the UI
shows it in its error banner.
"""

from typing import Any, Dict, Optional


class QuickNotesError(Exception):
    """
    Base exception for all QuickNotes application errors.

    Attributes:
        message:  Error description returned in the `error` field of the response
        context:  Additional debug info (logged but NOT returned to client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class DataAccessError(QuickNotesError):
    """
    Raised when a statement fails in the store or the driver.

    When:    Store unreachable, constraint violation (e.g. NULL content),
             syntax error, connection dropped mid-query.
    HTTP:    500 Internal Server Error

    The message is the driver's own text, e.g.
    'null value in column "content" of relation "notes" violates not-null constraint'.
    """

    def __init__(
        self,
        message: str = "Data access failure",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class SchemaInitError(QuickNotesError):
    """
    Raised when the notes table cannot be created.

    When:    GET /api/setup or `quicknotes init-db` against an unreachable
             or read-only store.
    HTTP:    500 Internal Server Error
    """

    def __init__(
        self,
        message: str = "Schema initialization failed",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class NoteNotFoundError(QuickNotesError):
    """
    Raised when an update targets an id with no matching row.

    HTTP:    404 Not Found

    Delete never raises this: deleting a missing note is a successful no-op.
    """

    def __init__(
        self,
        note_id: Optional[int] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = "The requested note was not found"
        if note_id is not None:
            message = f"Note with ID '{note_id}' was not found"
        ctx = context or {}
        ctx["resource"] = "note"
        if note_id is not None:
            ctx["resource_id"] = note_id
        super().__init__(message=message, context=ctx)
        self.note_id = note_id
