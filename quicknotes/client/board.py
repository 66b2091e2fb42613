"""
QuickNotes Client — Note Board State Machine
==============================================

What:  Client-side view state for the notes page and its transitions.
How:   Holds a local snapshot of the note list and reconciles it from the
       response of each mutating call instead of re-fetching the list.
Who:   Driven by the GET / page and usable from any asyncio program.

State:
    notes          local snapshot, loaded once on mount
    draft_content  text of the create/update form
    editing_note   note being edited, or None in create mode
    error          message shown in the banner, or None
    dark_mode      presentation-only theme flag

Transitions:
    mount            List        → replace notes | error + notes = []
    submit (create)  Create      → append note, clear draft + error | error
    select_for_edit  (local)     → edit mode, draft = note content
    submit (edit)    Update      → replace note, leave edit mode | error, stay in edit mode
    delete           Delete      → drop note locally | error, notes unchanged
    toggle_theme     (local)     → flip dark_mode

Nothing is polled or retried. Overlapping calls are not coordinated; each
response applies to whatever the state is when it arrives.
"""

import logging
from typing import Any, List, Optional

from pydantic import ValidationError

from quicknotes.client.api import INVALID_PAYLOAD, ApiRequestError, NotesApiClient
from quicknotes.schemas.note import NoteOut

logger = logging.getLogger(__name__)


def _note_from_payload(payload: Any) -> NoteOut:
    # A created/updated note must at least carry a truthy id
    if not isinstance(payload, dict) or not payload.get("id"):
        raise ApiRequestError(INVALID_PAYLOAD)
    try:
        return NoteOut.model_validate(payload)
    except ValidationError as e:
        raise ApiRequestError(INVALID_PAYLOAD) from e


class NoteBoard:
    """The notes page state and the API calls that change it."""

    def __init__(self, api: NotesApiClient, dark_mode: bool = False):
        self.api = api
        self.notes: List[NoteOut] = []
        self.draft_content = ""
        self.editing_note: Optional[NoteOut] = None
        self.error: Optional[str] = None
        self.dark_mode = dark_mode

    @property
    def is_editing(self) -> bool:
        return self.editing_note is not None

    def _fail(self, e: ApiRequestError) -> None:
        logger.warning("Notes board error: %s", e.message)
        self.error = e.message

    # ── Load ──────────────────────────────────────────────────────────────
    async def mount(self) -> None:
        try:
            payload = await self.api.list_notes()
            if not isinstance(payload, list):
                raise ApiRequestError(INVALID_PAYLOAD)
            notes = [NoteOut.model_validate(item) for item in payload]
        except ValidationError:
            self._fail(ApiRequestError(INVALID_PAYLOAD))
            self.notes = []
            return
        except ApiRequestError as e:
            self._fail(e)
            self.notes = []
            return
        self.notes = notes

    # ── Form ──────────────────────────────────────────────────────────────
    def set_draft(self, content: str) -> None:
        self.draft_content = content

    def select_for_edit(self, note: NoteOut) -> None:
        self.editing_note = note
        self.draft_content = note.content

    def cancel_edit(self) -> None:
        self.editing_note = None
        self.draft_content = ""

    async def submit(self) -> None:
        """Create or update depending on the current mode."""
        if self.editing_note is not None:
            await self.submit_update()
        else:
            await self.submit_create()

    async def submit_create(self) -> None:
        try:
            note = _note_from_payload(await self.api.create_note(self.draft_content))
        except ApiRequestError as e:
            self._fail(e)
            return
        self.notes = [*self.notes, note]
        self.draft_content = ""
        self.error = None

    async def submit_update(self) -> None:
        if self.editing_note is None:
            return
        try:
            note = _note_from_payload(
                await self.api.update_note(self.editing_note.id, self.draft_content)
            )
        except ApiRequestError as e:
            self._fail(e)
            return
        self.notes = [note if n.id == note.id else n for n in self.notes]
        self.editing_note = None
        self.draft_content = ""
        self.error = None

    # ── Delete ────────────────────────────────────────────────────────────
    async def delete(self, note_id: int) -> None:
        try:
            await self.api.delete_note(note_id)
        except ApiRequestError as e:
            self._fail(e)
            return
        self.notes = [n for n in self.notes if n.id != note_id]
        self.error = None

    # ── Presentation ──────────────────────────────────────────────────────
    def toggle_theme(self) -> None:
        self.dark_mode = not self.dark_mode
