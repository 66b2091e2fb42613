"""
QuickNotes Client — HTTP API Client
=====================================

What:  Thin async wrapper over the notes REST API.
How:   httpx.AsyncClient; works against a running server (base_url) or an
       in-process app (transport=httpx.ASGITransport(app=...)).
Who:   NoteBoard (client state machine) and the GET / page.

Every method either returns the decoded JSON payload of a 2xx response or
raises ApiRequestError carrying the message the UI should display:
    - the `error` field of a JSON error body
    - "Failed to parse error response" when the error body is not JSON
    - "An error occurred: <reason>" when the JSON body has no `error`
    - the transport error text when the request never completed
"""

import logging
from typing import Any, Optional

import httpx

logger = logging.getLogger(__name__)

INVALID_PAYLOAD = "Invalid data format received from server"


class ApiRequestError(Exception):
    """A notes API call failed; `message` is shown verbatim in the error banner."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


def error_message(response: httpx.Response) -> str:
    """Extract the user-facing message from a non-2xx response."""
    try:
        body = response.json()
    except ValueError:
        return "Failed to parse error response"
    if isinstance(body, dict) and body.get("error"):
        return str(body["error"])
    return f"An error occurred: {response.reason_phrase}"


class NotesApiClient:
    """
    Client for /api/notes.

    Usage:
        async with NotesApiClient("http://localhost:8000") as api:
            notes = await api.list_notes()
    """

    def __init__(
        self,
        base_url: str = "http://localhost:8000",
        transport: Optional[httpx.AsyncBaseTransport] = None,
        timeout: Optional[float] = None,
    ):
        options = {"base_url": base_url, "transport": transport}
        # None keeps httpx's default timeout rather than disabling it
        if timeout is not None:
            options["timeout"] = timeout
        self._client = httpx.AsyncClient(**options)

    async def __aenter__(self) -> "NotesApiClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _send(self, method: str, url: str, **kwargs) -> httpx.Response:
        try:
            response = await self._client.request(method, url, **kwargs)
        except httpx.HTTPError as e:
            logger.warning("%s %s failed: %s", method, url, e)
            raise ApiRequestError(str(e) or type(e).__name__) from e
        if not response.is_success:
            raise ApiRequestError(error_message(response), status_code=response.status_code)
        return response

    @staticmethod
    def _json(response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError as e:
            raise ApiRequestError(INVALID_PAYLOAD, status_code=response.status_code) from e

    async def list_notes(self) -> Any:
        """GET /api/notes. Returns the decoded payload (normally a list)."""
        return self._json(await self._send("GET", "/api/notes"))

    async def create_note(self, content: str) -> Any:
        """POST /api/notes. Returns the decoded payload (normally the new note)."""
        return self._json(await self._send("POST", "/api/notes", json={"content": content}))

    async def update_note(self, note_id: int, content: str) -> Any:
        """PUT /api/notes/{id}. Returns the decoded payload (normally the updated note)."""
        return self._json(
            await self._send("PUT", f"/api/notes/{note_id}", json={"content": content})
        )

    async def delete_note(self, note_id: int) -> None:
        """DELETE /api/notes/{id}. Any 2xx counts as success."""
        try:
            await self._send("DELETE", f"/api/notes/{note_id}")
        except ApiRequestError as e:
            if e.status_code is not None and e.message == "Failed to parse error response":
                raise ApiRequestError("Failed to delete note", status_code=e.status_code) from e
            raise
