"""
QuickNotes Backend — Request Logging Middleware
=================================================

What:  One access-log line per HTTP request: method, path, status, duration.
How:   Measures time around call_next and picks the log level from the
       status class (5xx → ERROR, 4xx → WARNING, otherwise INFO).
When:  Runs inside RequestIDMiddleware, so the request id is available.

What we log vs what we DON'T log:
    ✅ Log: method, path, status, duration, client IP, request ID
    ❌ Don't log: request bodies (note content)
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from quicknotes.middleware.request_id import request_id_var

logger = logging.getLogger("quicknotes.access")

# Probed every few seconds by orchestrators
SKIPPED_PATHS = {"/health"}


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs each request with its status code and duration in milliseconds."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        path = request.url.path
        if path in SKIPPED_PATHS:
            return await call_next(request)

        start_time = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            # Answered by RequestIDMiddleware; still gets its access line
            self._log(request, 500, (time.perf_counter() - start_time) * 1000)
            raise
        self._log(request, response.status_code, (time.perf_counter() - start_time) * 1000)
        return response

    @staticmethod
    def _log(request: Request, status: int, duration_ms: float) -> None:
        path = request.url.path
        if status >= 500:
            log_level = logging.ERROR
        elif status >= 400:
            log_level = logging.WARNING
        else:
            log_level = logging.INFO

        client_ip = request.client.host if request.client else "unknown"
        rid = request_id_var.get("")

        logger.log(
            log_level,
            "%s %s %d %.1fms [%s] from %s",
            request.method,
            path,
            status,
            duration_ms,
            rid,
            client_ip,
            extra={
                "request_id": rid,
                "method": request.method,
                "path": path,
                "status": status,
                "duration_ms": round(duration_ms, 2),
                "client_ip": client_ip,
            },
        )
