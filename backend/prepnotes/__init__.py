"""
PrepNotes Backend — Application Package Initializer
===================================================

What: Marks the `prepnotes` directory as a Python package.
Why:  Enables module imports like `from prepnotes.config import settings`.
Who:  Used by uvicorn, the snapshot generator CLI, and pytest.

Architecture Note:
    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │   Services (Tree Walker, Notes)     │  ← Filesystem reads, ordering
    ├─────────────────────────────────────┤
    │        Schemas (Entry tree)         │  ← Pydantic response contracts
    └─────────────────────────────────────┘

    The snapshot generator (prepnotes.generate) sits beside the routes and
    talks to the same services layer.
"""

__version__ = "1.0.0"
