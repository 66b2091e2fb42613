"""
QuickNotes — Notes API Tests
==============================

What:  End-to-end tests of /api/notes against a real (SQLite) store.

What we test:
    ✅ Empty store lists []
    ✅ Create → list → delete → list round trip
    ✅ Update keeps the id and creates no duplicate
    ✅ Delete is idempotent (204 for unknown ids)
    ✅ Update of an unknown id answers 404 with an error body
    ✅ Concurrent creates get distinct ids
    ✅ The buy-milk scenario end to end
"""

import asyncio

import pytest


class TestListNotes:

    @pytest.mark.asyncio
    async def test_empty_store_returns_empty_list(self, test_client):
        response = await test_client.get("/api/notes")

        assert response.status_code == 200
        assert response.json() == []

    @pytest.mark.asyncio
    async def test_response_carries_request_id(self, test_client):
        response = await test_client.get("/api/notes", headers={"X-Request-ID": "abc123"})

        assert response.headers["X-Request-ID"] == "abc123"


class TestNoteLifecycle:

    @pytest.mark.asyncio
    async def test_create_list_delete_round_trip(self, test_client):
        created = await test_client.post("/api/notes", json={"content": "hello"})
        assert created.status_code == 200
        note = created.json()
        assert isinstance(note["id"], int)
        assert note["content"] == "hello"

        listed = (await test_client.get("/api/notes")).json()
        assert listed == [{"id": note["id"], "content": "hello"}]

        deleted = await test_client.delete(f"/api/notes/{note['id']}")
        assert deleted.status_code == 204
        assert deleted.content == b""

        assert (await test_client.get("/api/notes")).json() == []

    @pytest.mark.asyncio
    async def test_update_preserves_identity(self, test_client):
        note = (await test_client.post("/api/notes", json={"content": "old"})).json()

        response = await test_client.put(f"/api/notes/{note['id']}", json={"content": "new"})

        assert response.status_code == 200
        assert response.json() == {"id": note["id"], "content": "new"}
        listed = (await test_client.get("/api/notes")).json()
        assert listed == [{"id": note["id"], "content": "new"}]

    @pytest.mark.asyncio
    async def test_markdown_content_is_stored_verbatim(self, test_client):
        content = "# Title\n\n- [ ] task\n\n<b>not html</b> ünïcödé"
        note = (await test_client.post("/api/notes", json={"content": content})).json()

        assert note["content"] == content

    @pytest.mark.asyncio
    async def test_ids_are_not_reused_after_delete(self, test_client):
        first = (await test_client.post("/api/notes", json={"content": "a"})).json()
        await test_client.delete(f"/api/notes/{first['id']}")

        second = (await test_client.post("/api/notes", json={"content": "b"})).json()

        assert second["id"] > first["id"]


class TestDelete:

    @pytest.mark.asyncio
    async def test_delete_nonexistent_is_idempotent(self, test_client):
        response = await test_client.delete("/api/notes/999999")

        assert response.status_code == 204

    @pytest.mark.asyncio
    async def test_delete_twice(self, test_client):
        note = (await test_client.post("/api/notes", json={"content": "x"})).json()

        first = await test_client.delete(f"/api/notes/{note['id']}")
        second = await test_client.delete(f"/api/notes/{note['id']}")

        assert first.status_code == 204
        assert second.status_code == 204


class TestUpdateNotFound:

    @pytest.mark.asyncio
    async def test_update_unknown_id_returns_404(self, test_client):
        response = await test_client.put("/api/notes/424242", json={"content": "nope"})

        assert response.status_code == 404
        assert response.json() == {"error": "Note with ID '424242' was not found"}
        assert (await test_client.get("/api/notes")).json() == []


class TestConcurrency:

    @pytest.mark.asyncio
    async def test_concurrent_creates_get_distinct_ids(self, test_client):
        count = 10
        responses = await asyncio.gather(
            *(test_client.post("/api/notes", json={"content": f"note {i}"}) for i in range(count))
        )

        assert all(r.status_code == 200 for r in responses)
        ids = {r.json()["id"] for r in responses}
        assert len(ids) == count

        listed = (await test_client.get("/api/notes")).json()
        assert len(listed) == count
        assert {n["content"] for n in listed} == {f"note {i}" for i in range(count)}


class TestScenario:

    @pytest.mark.asyncio
    async def test_buy_milk(self, test_client):
        r = await test_client.post("/api/notes", json={"content": "buy milk"})
        assert r.status_code == 200
        assert r.json() == {"id": 1, "content": "buy milk"}

        r = await test_client.get("/api/notes")
        assert r.json() == [{"id": 1, "content": "buy milk"}]

        r = await test_client.put("/api/notes/1", json={"content": "buy milk and eggs"})
        assert r.status_code == 200
        assert r.json() == {"id": 1, "content": "buy milk and eggs"}

        r = await test_client.delete("/api/notes/1")
        assert r.status_code == 204

        r = await test_client.get("/api/notes")
        assert r.json() == []
