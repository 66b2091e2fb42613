"""
QuickNotes Backend — Request ID Middleware
============================================

What:  Assigns a short correlation id to each request and echoes it back.
How:   Reuses the client's X-Request-ID header when present, otherwise
       generates one; stores it in a ContextVar for loggers and exception
       handlers, and in request.state for route handlers.

Exceptions no registered handler claimed are answered here with
500 {"error": <message>}, so that response carries the header too.
"""

import logging
import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

logger = logging.getLogger(__name__)

# Coroutine-local: concurrent requests on one event loop each see their own id
request_id_var: ContextVar[str] = ContextVar("request_id", default="")


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Sets request_id_var and the X-Request-ID response header."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        # 8 hex chars are enough to correlate log lines
        rid = request.headers.get("X-Request-ID") or uuid.uuid4().hex[:8]

        request_id_var.set(rid)
        request.state.request_id = rid

        try:
            response = await call_next(request)
        except Exception as e:
            logger.error("[%s] Unexpected error: %s", rid, e, exc_info=True)
            response = JSONResponse(
                status_code=500,
                content={"error": str(e) or type(e).__name__},
            )

        response.headers["X-Request-ID"] = rid
        return response
