"""
QuickNotes Backend — FastAPI Application Factory
===================================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() returns a configured FastAPI instance
       wired to an explicitly constructed Database.
Who:   uvicorn (`uvicorn quicknotes.main:app`), the CLI, and the tests.

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌──────────┐ ┌──────────┐ ┌──────┐ ┌──────┐        │
    │  │  Req ID  │→│ Logging  │→│ GZip │→│ CORS │        │
    │  └──────────┘ └──────────┘ └──────┘ └──────┘        │
    │                                                     │
    │  Routes:                                            │
    │  /api/notes  /api/notes/{id}  /api/setup  /health  /│
    │                                                     │
    │  Exception Handlers:                                │
    │  NotFound→404 │ DataAccess/Schema/anything→500      │
    └─────────────────────────────────────────────────────┘

Error contract:
    Every failure is answered with `{"error": <message>}`. The message is
    derived from the underlying failure (driver text, validation detail).

Lifecycle:
    Startup:
    1. Initialize logging
    2. Optionally ensure the notes table exists (INIT_DB_ON_STARTUP)
    Shutdown:
    1. Dispose the connection pool
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse

from quicknotes import __version__
from quicknotes.config import Settings, settings as default_settings
from quicknotes.database import Database
from quicknotes.exceptions import (
    DataAccessError,
    NoteNotFoundError,
    QuickNotesError,
    SchemaInitError,
)
from quicknotes.middleware.logging import RequestLoggingMiddleware
from quicknotes.middleware.request_id import RequestIDMiddleware, request_id_var
from quicknotes.routes import health, notes, setup, ui
from quicknotes.services.schema_service import ensure_schema

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging(level: str = "INFO") -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    """
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[
            logging.StreamHandler(sys.stdout),  # Docker captures stdout
        ],
        force=True,  # Override any existing logging config
    )

    # Reduce noise from third-party libraries
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(
        logging.INFO if level == "DEBUG" else logging.WARNING
    )
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def _describe_validation_error(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()))
        parts.append(f"{loc}: {err.get('msg', 'invalid value')}" if loc else err.get("msg", ""))
    return "; ".join(p for p in parts if p) or "Invalid request"


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register global exception handlers for consistent error responses.

    Handler hierarchy:
        NoteNotFoundError       → 404
        DataAccessError         → 500 (driver message)
        SchemaInitError         → 500
        QuickNotesError (base)  → 500
        RequestValidationError  → 500 (malformed body / path id)
        Exception (fallback)    → 500 (str(exc), traceback logged)

    Route-level exceptions no handler claims are answered by
    RequestIDMiddleware; the Exception handler here only sees failures raised
    outside it.
    """

    @app.exception_handler(NoteNotFoundError)
    async def handle_not_found(request: Request, exc: NoteNotFoundError):
        """Update targeted an id with no row."""
        logger.info("[%s] %s", request_id_var.get(""), exc.message)
        return _error(status.HTTP_404_NOT_FOUND, exc.message)

    @app.exception_handler(DataAccessError)
    async def handle_data_access_error(request: Request, exc: DataAccessError):
        """Store failure: the driver's message goes back to the client verbatim."""
        rid = request_id_var.get("")
        logger.error("[%s] Data access error: %s | Context: %s", rid, exc.message, exc.context)
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, exc.message)

    @app.exception_handler(SchemaInitError)
    async def handle_schema_error(request: Request, exc: SchemaInitError):
        rid = request_id_var.get("")
        logger.error("[%s] Schema initialization error: %s", rid, exc.message)
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, exc.message)

    @app.exception_handler(QuickNotesError)
    async def handle_app_error(request: Request, exc: QuickNotesError):
        rid = request_id_var.get("")
        logger.error("[%s] %s: %s", rid, type(exc).__name__, exc.message)
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, exc.message)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(request: Request, exc: RequestValidationError):
        """
        Unparseable JSON, a non-string content, or a non-integer id.

        Reported as 500 like every other failed operation.
        """
        message = _describe_validation_error(exc)
        logger.warning("[%s] Invalid request: %s", request_id_var.get(""), message)
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, message)

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        """Last resort for errors raised outside the middleware chain."""
        logger.error(
            "[%s] Unexpected error: %s",
            request_id_var.get(""),
            str(exc),
            exc_info=True,
        )
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc) or type(exc).__name__)


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(
    settings: Optional[Settings] = None,
    database: Optional[Database] = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Configuration; defaults to the environment-derived settings.
        database: Pre-built Database (tests share one across app instances).
                  When omitted, one is built from settings. Either way it is
                  the only connection pool the app uses and is disposed at
                  shutdown.

    Returns: Fully configured FastAPI instance ready to receive requests.
    """
    settings = settings or default_settings
    database = database or Database(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        # ── Startup ───────────────────────────────────────────────────────
        setup_logging(settings.log_level)
        logger.info("QuickNotes %s starting up...", __version__)

        if settings.init_db_on_startup:
            try:
                await ensure_schema(database)
            except SchemaInitError as e:
                # Keep serving: API calls will report data-access errors
                logger.error("Startup schema initialization failed: %s", e.message)

        logger.info("Server ready at http://%s:%d", settings.backend_host, settings.backend_port)

        yield

        # ── Shutdown ──────────────────────────────────────────────────────
        logger.info("QuickNotes shutting down...")
        await database.dispose()
        logger.info("Shutdown complete.")

    app = FastAPI(
        title="QuickNotes API",
        description="Minimal note-taking service: list, create, update and delete text notes.",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.database = database

    # ── Register Middleware ───────────────────────────────────────────────
    # Middleware executes in REVERSE order of addition:
    # RequestID → Logging → GZip → CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )
    app.add_middleware(GZipMiddleware, minimum_size=500)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(notes.router)
    app.include_router(setup.router)
    app.include_router(health.router)
    app.include_router(ui.router)

    return app


# ── Application Instance ─────────────────────────────────────────────────
# uvicorn expects `quicknotes.main:app` to be importable
app = create_app()
