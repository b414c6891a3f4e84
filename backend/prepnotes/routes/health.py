"""
PrepNotes Backend — Health Check Route
========================================

What:  Liveness probe reporting whether the notes root can be served.
How:   The service is healthy when its notes root is a readable directory.
"""

import logging
import os
import time

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from prepnotes import __version__
from prepnotes.schemas.tree import HealthResponse
from prepnotes.services.notes_service import NotesService, get_notes_service

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    responses={503: {"description": "Notes root missing or unreadable", "model": HealthResponse}},
    summary="Service health check",
)
async def health_check(service: NotesService = Depends(get_notes_service)):
    root = service.notes_root
    healthy = root.is_dir() and os.access(root, os.R_OK | os.X_OK)
    if not healthy:
        logger.warning("Health check: notes root not readable: %s", root)

    body = HealthResponse(
        status="healthy" if healthy else "unhealthy",
        version=__version__,
        notes_root=str(root),
        uptime_seconds=round(time.time() - _start_time, 2),
    )
    return JSONResponse(status_code=200 if healthy else 503, content=body.model_dump())
