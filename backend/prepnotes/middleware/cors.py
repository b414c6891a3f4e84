"""
PrepNotes Backend — Open CORS Headers Middleware
==================================================

What:  Stamps the any-origin CORS headers on every response.
How:   Runs outside the PrepNotesError handlers, so their 400/404/500 bodies
       carry the headers too. Starlette's CORSMiddleware only answers requests
       that send an Origin header; this covers the rest, static client included.
When:  Installed only when settings.cors_origins contains "*". Preflight
       OPTIONS requests are still handled by CORSMiddleware.
"""

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

ALLOWED_HEADERS = "Origin, X-Requested-With, Content-Type, Accept"


class OpenCORSMiddleware(BaseHTTPMiddleware):
    """Adds Access-Control-Allow-Origin: * and the allowed request headers."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        response = await call_next(request)
        response.headers["Access-Control-Allow-Origin"] = "*"
        response.headers["Access-Control-Allow-Headers"] = ALLOWED_HEADERS
        return response
