"""
QuickNotes Backend — Notes Route Handlers
===========================================

What:  The notes REST resource: list, create, update, delete.
How:   Each handler extracts the path id / JSON body, delegates one call to
       NoteService, and returns JSON. Failures are not caught here; the
       global handlers in main.py turn them into {"error": ...} responses.
Who:   Called by the NoteBoard client and the rendered UI.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, Response, status

from quicknotes.database import Database, get_database
from quicknotes.schemas.note import ErrorResponse, NoteCreate, NoteOut, NoteUpdate
from quicknotes.services.note_service import note_service

logger = logging.getLogger(__name__)

# ── Router Configuration ──────────────────────────────────────────────────
router = APIRouter(prefix="/api", tags=["Notes"])

_errors = {500: {"description": "Operation failed", "model": ErrorResponse}}


@router.get(
    "/notes",
    response_model=List[NoteOut],
    responses=_errors,
    summary="List all notes",
)
async def list_notes(db: Database = Depends(get_database)) -> List[NoteOut]:
    """Returns every note as an array of {id, content}; [] when the table is empty."""
    return await note_service.list_notes(db)


@router.post(
    "/notes",
    response_model=NoteOut,
    responses=_errors,
    summary="Create a note",
)
async def create_note(
    body: NoteCreate,
    db: Database = Depends(get_database),
) -> NoteOut:
    """
    Inserts a note and returns it with the id the store assigned.

    Responds 200 (not 201) with the created note.
    """
    return await note_service.create_note(db, body.content)


@router.put(
    "/notes/{note_id}",
    response_model=NoteOut,
    responses={
        404: {"description": "No note with this id", "model": ErrorResponse},
        **_errors,
    },
    summary="Replace a note's content",
)
async def update_note(
    note_id: int,
    body: NoteUpdate,
    db: Database = Depends(get_database),
) -> NoteOut:
    """Overwrites content; the id is unchanged. Unknown ids answer 404."""
    return await note_service.update_note(db, note_id, body.content)


@router.delete(
    "/notes/{note_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=_errors,
    summary="Delete a note",
)
async def delete_note(note_id: int, db: Database = Depends(get_database)) -> Response:
    """Deletes the note if it exists. Always 204 with an empty body on success."""
    await note_service.delete_note(db, note_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
