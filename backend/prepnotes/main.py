"""
PrepNotes Backend — FastAPI Application Factory
=================================================

What:  Creates and configures the FastAPI application instance.
How:   create_app() wires middleware, exception handlers, API routes and the
       static client mount, and returns the app.
Who:   uvicorn (`uvicorn prepnotes.main:app`) and `python -m prepnotes`.

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware: Req ID → Logging → GZip → Open → CORS  │
    │                                                     │
    │  Routes:                                            │
    │   GET /api/folders                                  │
    │   GET /api/files/{folder}                           │
    │   GET /api/file/{folder}/{file}                     │
    │   GET /health                                       │
    │   /  → static client (client/)                      │
    │                                                     │
    │  Exception Handlers:                                │
    │   ValidationError→400 │ NotFound→404 │ others→500   │
    └─────────────────────────────────────────────────────┘
"""

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from prepnotes import __version__
from prepnotes.config import settings
from prepnotes.exceptions import PrepNotesError
from prepnotes.log_config import setup_logging
from prepnotes.middleware.cors import ALLOWED_HEADERS, OpenCORSMiddleware
from prepnotes.middleware.logging import RequestLoggingMiddleware
from prepnotes.middleware.request_id import RequestIDMiddleware, request_id_var
from prepnotes.routes import health, notes

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Log where notes are served from on startup, and the shutdown."""
    setup_logging()

    notes_root = Path(settings.notes_root).resolve()
    if not notes_root.is_dir():
        logger.error("Notes root %s is not a directory", notes_root)
    logger.info("Serving notes from %s", notes_root)
    logger.info(
        "PrepNotes server running at http://%s:%d",
        settings.backend_host,
        settings.backend_port,
    )

    yield

    logger.info("PrepNotes server shutting down.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def register_exception_handlers(app: FastAPI) -> None:
    """
    Map exceptions to JSON error bodies.

    Handler hierarchy:
        PrepNotesError (and subclasses) → exc.status_code
        Exception (fallback)            → 500

    Body: {"error": message, **details, "request_id": id}. `context` is
    logged only.
    """

    @app.exception_handler(PrepNotesError)
    async def handle_app_error(request: Request, exc: PrepNotesError):
        rid = request_id_var.get("")
        if exc.status_code >= 500:
            logger.error("[%s] %s | Context: %s", rid, exc.message, exc.context)
        else:
            logger.warning("[%s] %s | Context: %s", rid, exc.message, exc.context)
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.message, **exc.details, "request_id": rid},
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        rid = request_id_var.get("")
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
        return JSONResponse(
            status_code=500,
            content={"error": "Internal server error", "request_id": rid},
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def mount_static_client(app: FastAPI) -> None:
    """Serve the static client at "/" if its directory exists."""
    static_dir = Path(settings.static_dir)
    if not static_dir.is_dir():
        logger.warning("Static directory %s not found; client not served", static_dir)
        return
    # Mounted last so /api and /health routes match first.
    app.mount("/", StaticFiles(directory=static_dir, html=True), name="client")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="PrepNotes API",
        description="Browse a tree of markdown and javascript interview-prep notes.",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # Middleware executes in REVERSE order of addition.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_methods=["GET", "OPTIONS"],
        allow_headers=[h.strip() for h in ALLOWED_HEADERS.split(",")],
        expose_headers=["X-Request-ID"],
    )
    if "*" in settings.cors_origins_list:
        app.add_middleware(OpenCORSMiddleware)
    # Snapshots and folder trees get large
    app.add_middleware(GZipMiddleware, minimum_size=500)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    register_exception_handlers(app)

    app.include_router(notes.router)
    app.include_router(health.router)

    mount_static_client(app)

    return app


app = create_app()


def run() -> None:
    """Entry point for `prepnotes-serve`."""
    import uvicorn

    setup_logging()
    uvicorn.run(
        "prepnotes.main:app",
        host=settings.backend_host,
        port=settings.backend_port,
        log_level=settings.log_level.lower(),
    )
