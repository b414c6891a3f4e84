"""
PrepNotes Backend — Custom Exception Hierarchy
================================================

What:  Application-specific exceptions for the notes API.
How:   Each exception carries a client-facing message, a `details` dict that is
       merged into the JSON error body, and a `context` dict that is only
       written to the server log.
Who:   Raised by the notes service and route handlers; caught by the global
       handlers registered in main.py.

Exception Hierarchy:
    PrepNotesError (base)
    ├── ValidationError  → 400 Bad Request
    ├── NotFoundError    → 404 Not Found
    └── TreeReadError    → 500 Internal Server Error

Error body shape:
    {"error": <message>, **details, "request_id": <id>}

The tree walker itself never raises any of these: unreadable directories
degrade to empty subtrees inside the walker.
"""

from typing import Any, Dict, Optional


class PrepNotesError(Exception):
    """
    Base exception for all PrepNotes application errors.

    Attributes:
        message:  User-facing error description (returned as `error`)
        details:  Extra fields safe to return in the response body
        context:  Debug info (logged but NOT returned to client)
    """

    status_code = 500

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        details: Optional[Dict[str, Any]] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.details = details or {}
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(PrepNotesError):
    """
    Raised when a request names a path the API refuses to serve.

    When:  A folder or file parameter resolves outside the notes root.
    HTTP:  400 Bad Request
    """

    status_code = 400

    def __init__(
        self,
        message: str = "Invalid path",
        details: Optional[Dict[str, Any]] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, details=details, context=context)


class NotFoundError(PrepNotesError):
    """
    Raised when a requested folder or note does not exist.

    HTTP:  404 Not Found

    For the single-file endpoint, `details` carries the `searched` list of
    candidate paths so clients can see what was tried.
    """

    status_code = 404

    def __init__(
        self,
        message: str = "Not found",
        details: Optional[Dict[str, Any]] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, details=details, context=context)


class TreeReadError(PrepNotesError):
    """
    Raised when the filesystem fails underneath a request handler.

    When:  Permission denied on the notes root, a note that cannot be decoded,
           a directory removed mid-request.
    HTTP:  500 Internal Server Error
    """

    status_code = 500

    def __init__(
        self,
        message: str = "Failed to read notes",
        details: Optional[Dict[str, Any]] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, details=details, context=context)
