# Routes package init
"""
PrepNotes Backend — API Routes Package
========================================

Route Inventory:
    - notes.py:   GET /api/folders              (top-level categories)
                  GET /api/files/{folder}       (tree of one category)
                  GET /api/file/{folder}/{file} (content of one note)
    - health.py:  GET /health                   (service health check)

Routes stay thin: they call NotesService and let the global exception
handlers in main.py format errors.
"""
