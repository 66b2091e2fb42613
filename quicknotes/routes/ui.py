"""
QuickNotes Backend — Notes Page
=================================

What:  GET / renders the notes page; the page's forms post back here.
How:   Each request mounts a NoteBoard whose API client talks to this same
       application in-process (httpx.ASGITransport), so the page reads and
       writes through the public notes API exactly as any other client would.

Routes:
    GET  /                    the page (theme=dark, edit=<id>)
    POST /notes               create from the form's `content`
    POST /notes/{id}          update from the form's `content`
    POST /notes/{id}/delete   delete

A successful form post redirects back to the page (303). A failed one
re-renders the page with the board's error banner and the form as it was.
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

import httpx
from fastapi import APIRouter, Form, Query, Request
from fastapi.responses import HTMLResponse, RedirectResponse, Response

from quicknotes.client.api import NotesApiClient
from quicknotes.client.board import NoteBoard
from quicknotes.client.render import render_board
from quicknotes.schemas.note import NoteOut

router = APIRouter(tags=["UI"])


@asynccontextmanager
async def _mounted_board(request: Request, theme: str) -> AsyncIterator[NoteBoard]:
    # Failures come back as error responses and end up in the board banner
    transport = httpx.ASGITransport(app=request.app, raise_app_exceptions=False)
    async with NotesApiClient(base_url=str(request.base_url), transport=transport) as api:
        board = NoteBoard(api, dark_mode=theme == "dark")
        await board.mount()
        yield board


def _find_note(board: NoteBoard, note_id: int) -> Optional[NoteOut]:
    return next((n for n in board.notes if n.id == note_id), None)


def _page_or_redirect(board: NoteBoard) -> Response:
    if board.error:
        return HTMLResponse(render_board(board))
    return RedirectResponse(url="/?theme=dark" if board.dark_mode else "/", status_code=303)


@router.get("/", response_class=HTMLResponse, include_in_schema=False)
async def notes_page(
    request: Request,
    theme: str = Query(default="light"),
    edit: Optional[int] = Query(default=None),
) -> HTMLResponse:
    async with _mounted_board(request, theme) as board:
        if edit is not None:
            note = _find_note(board, edit)
            if note is not None:
                board.select_for_edit(note)
            elif board.error is None:
                board.error = f"Note with ID '{edit}' was not found"

    return HTMLResponse(render_board(board))


@router.post("/notes", include_in_schema=False)
async def create_note_action(
    request: Request,
    content: str = Form(""),
    theme: str = Form("light"),
) -> Response:
    async with _mounted_board(request, theme) as board:
        board.set_draft(content)
        await board.submit()
    return _page_or_redirect(board)


@router.post("/notes/{note_id}", include_in_schema=False)
async def update_note_action(
    request: Request,
    note_id: int,
    content: str = Form(""),
    theme: str = Form("light"),
) -> Response:
    async with _mounted_board(request, theme) as board:
        # A note missing from the list still gets sent; the API reports it
        board.select_for_edit(_find_note(board, note_id) or NoteOut(id=note_id, content=content))
        board.set_draft(content)
        await board.submit()
    return _page_or_redirect(board)


@router.post("/notes/{note_id}/delete", include_in_schema=False)
async def delete_note_action(
    request: Request,
    note_id: int,
    theme: str = Form("light"),
) -> Response:
    async with _mounted_board(request, theme) as board:
        await board.delete(note_id)
    return _page_or_redirect(board)
