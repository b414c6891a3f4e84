# Middleware package init
"""
PrepNotes Backend — Middleware Package
========================================

Middleware Chain:
    Request → [Request ID] → [Logging] → [GZip] → [Open CORS] → [CORS] → Route Handler

    Request ID runs first so the logging middleware can attach it to the
    access line. Open CORS stamps every response, error bodies included.
"""
