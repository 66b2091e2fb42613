"""
QuickNotes Backend — Pydantic Request/Response Schemas
=======================================================

What:  Pydantic models defining the API contract between the UI and backend.
How:   FastAPI uses these models to validate request bodies, serialize
       responses, and generate the OpenAPI documentation.
Who:   Route handlers (request/response types) and the Python client
       (parsing server payloads).

Validation policy for `content`:
    The field is optional in request bodies. An absent or null `content`
    reaches the store unchanged and fails on the NOT NULL constraint, which
    the API reports as a 500 like any other data-access failure. A value of
    the wrong type (number, object) is rejected here; main.py reports that
    as a 500 as well, so the API has a single failure kind.
"""

from typing import Optional

from pydantic import BaseModel, Field


# ══════════════════════════════════════════════════════════════════════════
# Request Models
# ══════════════════════════════════════════════════════════════════════════


class NoteCreate(BaseModel):
    """Body of POST /api/notes."""
    content: Optional[str] = Field(
        default=None,
        description="Note text (Markdown allowed); required by the store",
    )


class NoteUpdate(BaseModel):
    """Body of PUT /api/notes/{id}. Replaces the note's content."""
    content: Optional[str] = Field(
        default=None,
        description="New note text; required by the store",
    )


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class NoteOut(BaseModel):
    """
    What:  A persisted note exactly as stored.
    Who:   Returned by list, create and update; one element of the list array.
    """
    id: int = Field(description="Store-assigned identifier")
    content: str = Field(description="Note text")

    model_config = {"from_attributes": True}


class MessageResponse(BaseModel):
    """Acknowledgement returned by maintenance endpoints such as GET /api/setup."""
    message: str


class ErrorResponse(BaseModel):
    """
    What:  Error body shared by every endpoint.

    Example:
        {"error": "connection refused"}
    """
    error: str = Field(description="Human-readable description of the failure")


class HealthResponse(BaseModel):
    """
    What:  Health check response showing service and store status.
    Who:   Returned by GET /health for monitoring and container health checks.
    """
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
