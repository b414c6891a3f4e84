"""
PrepNotes Backend — Test Configuration (conftest.py)
======================================================

What:  Shared pytest fixtures for the test suite.
How:   A small notes tree is built under tmp_path for each test; the API
       client talks to the FastAPI app through ASGITransport with the notes
       service dependency pointed at that tree.

Fixture Hierarchy:
    Function-scoped:
    ├── notes_tree:     Temporary notes root with categories and noise
    ├── notes_service:  NotesService rooted at notes_tree
    └── test_client:    HTTPX AsyncClient with the service overridden
"""

import os
import tempfile

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient


# ══════════════════════════════════════════════════════════════════════════
# Environment Setup
# ══════════════════════════════════════════════════════════════════════════

# Must run before any prepnotes import reads settings
os.environ["NOTES_ROOT"] = tempfile.mkdtemp(prefix="prepnotes_test_")
os.environ["STATIC_DIR"] = os.path.join(os.environ["NOTES_ROOT"], "client")
os.environ["LOG_LEVEL"] = "WARNING"


# ══════════════════════════════════════════════════════════════════════════
# Function-Scoped Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def notes_tree(tmp_path):
    """
    Builds this tree and returns its root:

        React/
            Advanced/README.md, Advanced/context.md
            Guides/a.md, Guides/b.md
            hooks.md, demo.js, diagram.png
        CSS/                   (empty)
        node_modules/pkg/index.js
        client/index.html
        .git/config
        .draft.md
        top.md
    """
    root = tmp_path / "notes"
    react = root / "React"
    (react / "Advanced").mkdir(parents=True)
    (react / "Guides").mkdir()
    (root / "CSS").mkdir()
    (root / "node_modules" / "pkg").mkdir(parents=True)
    (root / "client").mkdir()
    (root / ".git").mkdir()

    (react / "hooks.md").write_text("# Hooks\n\nuseState, useEffect\n", encoding="utf-8")
    (react / "demo.js").write_text("console.log('demo');\n", encoding="utf-8")
    (react / "diagram.png").write_bytes(b"\x89PNG")
    (react / "Advanced" / "README.md").write_text("# Advanced\n", encoding="utf-8")
    (react / "Advanced" / "context.md").write_text("# Context\n", encoding="utf-8")
    (react / "Guides" / "a.md").write_text("# A\n", encoding="utf-8")
    (react / "Guides" / "b.md").write_text("# B\n", encoding="utf-8")
    (root / "node_modules" / "pkg" / "index.js").write_text("module.exports = 1;\n")
    (root / "client" / "index.html").write_text("<html></html>\n")
    (root / ".git" / "config").write_text("[core]\n")
    (root / ".draft.md").write_text("hidden\n")
    (root / "top.md").write_text("# Top\n", encoding="utf-8")
    return root


@pytest.fixture
def notes_service(notes_tree):
    """NotesService serving the temporary notes tree."""
    from prepnotes.services.notes_service import NotesService

    return NotesService(notes_root=str(notes_tree))


@pytest_asyncio.fixture
async def test_client(notes_service):
    """
    HTTPX AsyncClient bound to the FastAPI app.

    Usage:
        async def test_folders(test_client):
            response = await test_client.get("/api/folders")
            assert response.status_code == 200
    """
    from prepnotes.main import app
    from prepnotes.services.notes_service import get_notes_service

    app.dependency_overrides[get_notes_service] = lambda: notes_service
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()
