"""
PrepNotes Backend — Request Logging Middleware
================================================

What:  One access log line per HTTP request.
How:   Measures time from middleware entry to response, picks the level from
       the status code, and attaches the request ID from RequestIDMiddleware.
       For the notes endpoints the matched `folder` / `file` path params are
       logged as well, so a 404 line names the note that was asked for.

Example:
    GET /api/file/React/hooks 200 3.1ms [a1b2c3d4] note=React/hooks

Not logged: request or response bodies (note content can be large).

Level by status:
    5xx → ERROR
    4xx → WARNING
    else → INFO
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from prepnotes.middleware.request_id import request_id_var

logger = logging.getLogger("prepnotes.access")

# Path params of the notes routes, in the order they form a note path
NOTE_PARAMS = ("folder", "file")


def note_target(path_params: dict) -> str:
    """Join the matched folder/file params into "folder/file", or ""."""
    return "/".join(path_params[key] for key in NOTE_PARAMS if path_params.get(key))


def level_for(status: int) -> int:
    if status >= 500:
        return logging.ERROR
    if status >= 400:
        return logging.WARNING
    return logging.INFO


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs method, path, status, duration and the requested note."""

    # Probes hit these constantly
    SKIPPED_PATHS = {"/health"}

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        path = request.url.path
        if path in self.SKIPPED_PATHS:
            return await call_next(request)

        start_time = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - start_time) * 1000

        # The router fills path_params into the shared scope while matching.
        target = note_target(request.path_params)
        rid = request_id_var.get("")
        status = response.status_code

        logger.log(
            level_for(status),
            "%s %s %d %.1fms [%s]%s",
            request.method,
            path,
            status,
            duration_ms,
            rid,
            f" note={target}" if target else "",
            extra={
                "request_id": rid,
                "method": request.method,
                "path": path,
                "status": status,
                "duration_ms": round(duration_ms, 2),
                "note": target or None,
            },
        )

        return response
