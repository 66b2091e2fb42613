"""
QuickNotes — Command Line Interface
=====================================

Commands:
    quicknotes init-db [--database-url URL]   create the notes table if absent
    quicknotes run [--host H] [--port P]      serve the API with uvicorn

init-db is the standalone schema initializer: it reports failure on the
console, exits non-zero, and always releases the connection pool.
"""

import argparse
import asyncio
import logging
from typing import List, Optional

import uvicorn

from quicknotes.config import Settings, load_settings
from quicknotes.database import Database
from quicknotes.exceptions import SchemaInitError
from quicknotes.main import setup_logging
from quicknotes.services.schema_service import ensure_schema

logger = logging.getLogger(__name__)


async def init_db(settings: Settings) -> bool:
    """Run the schema initializer once. Returns True on success."""
    database = Database(settings)
    try:
        await ensure_schema(database)
        return True
    except SchemaInitError:
        # ensure_schema already logged the cause
        return False
    finally:
        await database.dispose()


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="quicknotes", description="QuickNotes - minimal notes service.")
    sub = parser.add_subparsers(dest="cmd", required=True)

    init = sub.add_parser("init-db", help="Create the notes table if it does not exist")
    init.add_argument("--database-url", default=None, help="Override DATABASE_URL")

    run = sub.add_parser("run", help="Run the web server")
    run.add_argument("--host", default=None, help="Bind host (override BACKEND_HOST)")
    run.add_argument("--port", type=int, default=None, help="Bind port (override BACKEND_PORT)")

    args = parser.parse_args(argv)

    if args.cmd == "init-db":
        settings = load_settings(database_url=args.database_url)
        setup_logging(settings.log_level)
        return 0 if asyncio.run(init_db(settings)) else 1

    settings = load_settings()
    host = args.host or settings.backend_host
    port = args.port or settings.backend_port
    uvicorn.run("quicknotes.main:app", host=host, port=port, reload=False, log_level=settings.log_level.lower())
    return 0

