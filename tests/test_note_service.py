"""
QuickNotes — Note Service Unit Tests
=======================================

What:  Tests for NoteService with a mocked Database (no real store).
How:   mock_db.execute returns prepared rows or raises DataAccessError.

What we test:
    ✅ Rows are mapped to NoteOut
    ✅ Update with no returned row raises NoteNotFoundError
    ✅ Data access errors propagate unchanged
    ✅ Every operation issues exactly one statement
"""

from types import SimpleNamespace

import pytest

from quicknotes.exceptions import DataAccessError, NoteNotFoundError
from quicknotes.schemas.note import NoteOut
from quicknotes.services.note_service import NoteService


def row(note_id, content):
    return SimpleNamespace(id=note_id, content=content)


class TestNoteServiceList:

    def setup_method(self):
        self.service = NoteService()

    @pytest.mark.asyncio
    async def test_list_notes_empty(self, mock_db):
        mock_db.execute.return_value = []

        result = await self.service.list_notes(mock_db)

        assert result == []
        mock_db.execute.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_list_notes_maps_rows(self, mock_db):
        mock_db.execute.return_value = [row(1, "a"), row(2, "b")]

        result = await self.service.list_notes(mock_db)

        assert result == [NoteOut(id=1, content="a"), NoteOut(id=2, content="b")]


class TestNoteServiceMutations:

    def setup_method(self):
        self.service = NoteService()

    @pytest.mark.asyncio
    async def test_create_returns_store_assigned_id(self, mock_db):
        mock_db.execute.return_value = [row(7, "hello")]

        result = await self.service.create_note(mock_db, "hello")

        assert result == NoteOut(id=7, content="hello")
        mock_db.execute.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_update_returns_updated_note(self, mock_db):
        mock_db.execute.return_value = [row(3, "new")]

        result = await self.service.update_note(mock_db, 3, "new")

        assert result.id == 3
        assert result.content == "new"

    @pytest.mark.asyncio
    async def test_update_without_matching_row_raises_not_found(self, mock_db):
        mock_db.execute.return_value = []

        with pytest.raises(NoteNotFoundError) as exc_info:
            await self.service.update_note(mock_db, 99, "x")

        assert exc_info.value.note_id == 99

    @pytest.mark.asyncio
    async def test_delete_is_one_statement_and_returns_none(self, mock_db):
        result = await self.service.delete_note(mock_db, 5)

        assert result is None
        mock_db.execute.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_data_access_error_propagates(self, mock_db):
        mock_db.execute.side_effect = DataAccessError(message="connection refused")

        with pytest.raises(DataAccessError, match="connection refused"):
            await self.service.create_note(mock_db, "hello")
