"""
QuickNotes Client
==================

What:  The UI side of QuickNotes: an httpx client for the notes API, the
       NoteBoard state machine, and the HTML renderer for the notes page.
"""

from quicknotes.client.api import ApiRequestError, NotesApiClient
from quicknotes.client.board import NoteBoard

__all__ = ["ApiRequestError", "NoteBoard", "NotesApiClient"]
