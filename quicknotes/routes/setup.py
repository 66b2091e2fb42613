"""
QuickNotes Backend — Setup Route
==================================

What:  GET /api/setup creates the notes table on demand.
Why:   Lets an operator initialize a fresh store from a browser when running
       `quicknotes init-db` on the host is not an option.
How:   Delegates to schema_service.ensure_schema (idempotent).
"""

from fastapi import APIRouter, Depends

from quicknotes.database import Database, get_database
from quicknotes.schemas.note import ErrorResponse, MessageResponse
from quicknotes.services.schema_service import ensure_schema

router = APIRouter(prefix="/api", tags=["Maintenance"])


@router.get(
    "/setup",
    response_model=MessageResponse,
    responses={500: {"description": "Table creation failed", "model": ErrorResponse}},
    summary="Create the notes table if absent",
)
async def setup(db: Database = Depends(get_database)) -> MessageResponse:
    await ensure_schema(db)
    return MessageResponse(message="Table created successfully")
