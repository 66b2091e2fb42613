"""
QuickNotes Backend — Health Check Route
=========================================

What:  Health check endpoint for monitoring and container probes.
How:   Pings the store with SELECT 1 and reports the aggregate status.

Status levels:
    - healthy:   store reachable (HTTP 200)
    - unhealthy: store unreachable (HTTP 503)
"""

import logging
import time

from fastapi import APIRouter, Depends, Response, status

from quicknotes import __version__
from quicknotes.database import Database, get_database
from quicknotes.exceptions import DataAccessError
from quicknotes.schemas.note import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

# Initialized once when the module loads
_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
)
async def health_check(
    response: Response,
    db: Database = Depends(get_database),
) -> HealthResponse:
    """Checks store connectivity and reports uptime."""
    db_status = "connected"
    overall = "healthy"

    try:
        await db.ping()
    except DataAccessError as e:
        db_status = "disconnected"
        overall = "unhealthy"
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
        logger.warning("Health check: database unreachable: %s", e.message)

    return HealthResponse(
        status=overall,
        version=__version__,
        database=db_status,
        uptime_seconds=round(time.time() - _start_time, 2),
    )
