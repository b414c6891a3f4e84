"""
PrepNotes Backend — Notes Service
===================================

What:  Filesystem logic behind the three notes endpoints.
How:   Resolves folder/file names under the notes root, runs the tree walker,
       and reads note content. Raises NotFoundError / ValidationError /
       TreeReadError for the global handlers to format.
Who:   Injected into route handlers via `get_notes_service()`; tests swap it
       for an instance rooted in a temporary directory.

Note lookup order for GET /api/file/{folder}/{file}:
    1. <folder>/<file>
    2. <folder>/<file>.md
    3. <folder>/<file>/README.md
    4. first "*.md" (by name) inside <folder>/<file>, if it is a directory
"""

import logging
import os
from pathlib import Path
from typing import Dict, List, Optional

import aiofiles
from starlette.concurrency import run_in_threadpool

from prepnotes.config import settings
from prepnotes.exceptions import NotFoundError, TreeReadError, ValidationError
from prepnotes.schemas.tree import FolderSummary, NoteContent, TreeEntry
from prepnotes.services.icons import icon_for
from prepnotes.services.tree_walker import (
    MARKDOWN_SUFFIX,
    WalkConfig,
    is_excluded,
    name_key,
    server_walk_config,
    walk,
)

logger = logging.getLogger(__name__)

README_NAME = "README.md"


class NotesService:
    """
    Serves folders, trees, and note content from one notes root.

    The service holds no per-request state; every call re-reads the disk.
    """

    def __init__(
        self,
        notes_root: Optional[str] = None,
        walk_config: Optional[WalkConfig] = None,
    ):
        """
        Args:
            notes_root:  Override the served directory (used in tests).
                         If None, uses settings.notes_root.
            walk_config: Override exclusions; defaults to the server preset.
        """
        self.notes_root = Path(notes_root or settings.notes_root).resolve()
        self.walk_config = walk_config or server_walk_config()
        logger.info("NotesService initialized with notes_root=%s", self.notes_root)

    # ── Path helpers ──────────────────────────────────────────────────────

    def _resolve(self, *parts: str) -> Path:
        """Join parts under the notes root, refusing anything that escapes it."""
        candidate = self.notes_root.joinpath(*parts).resolve()
        if candidate != self.notes_root and self.notes_root not in candidate.parents:
            raise ValidationError(
                message="Invalid path",
                context={"requested": "/".join(parts)},
            )
        return candidate

    def _display_path(self, path: Path) -> str:
        """Path relative to the notes root, "/"-prefixed, as reported to clients."""
        return "/" + path.relative_to(self.notes_root).as_posix()

    # ── Folders ───────────────────────────────────────────────────────────

    def _scan_folders(self) -> Dict[str, FolderSummary]:
        names = []
        with os.scandir(self.notes_root) as it:
            for item in it:
                if item.is_dir(follow_symlinks=False) and not is_excluded(
                    item.name, self.walk_config
                ):
                    names.append(item.name)

        names.sort(key=name_key)
        return {name: FolderSummary(icon=icon_for(name)) for name in names}

    async def list_folders(self) -> Dict[str, FolderSummary]:
        """
        Top-level categories with their icons.

        `files` is always empty here; contents come from list_files().
        """
        try:
            return await run_in_threadpool(self._scan_folders)
        except OSError as e:
            logger.error("Failed to read folders under %s: %s", self.notes_root, e)
            raise TreeReadError(
                message="Failed to read folders",
                context={"notes_root": str(self.notes_root), "os_error": str(e)},
            ) from e

    # ── Folder tree ───────────────────────────────────────────────────────

    async def list_files(self, folder: str) -> List[TreeEntry]:
        """
        Walker result for one folder, paths relative to that folder.

        Raises:
            NotFoundError if the folder does not exist.
        """
        folder_path = self._resolve(folder)

        try:
            if not folder_path.exists():
                raise NotFoundError(
                    message="Folder not found",
                    context={"folder": folder},
                )
            return await run_in_threadpool(walk, folder_path, "", self.walk_config)
        except OSError as e:
            raise TreeReadError(
                message="Failed to read files",
                context={"folder": folder, "os_error": str(e)},
            ) from e

    # ── Single note ───────────────────────────────────────────────────────

    def _candidates(self, folder: str, file: str) -> List[Path]:
        return [
            self._resolve(folder, file),
            self._resolve(folder, file + MARKDOWN_SUFFIX),
            self._resolve(folder, file, README_NAME),
        ]

    def _locate(self, candidates: List[Path], fallback_dir: Path) -> Optional[Path]:
        for candidate in candidates:
            if candidate.is_file():
                return candidate

        if fallback_dir.is_dir():
            markdown = sorted(
                p for p in fallback_dir.iterdir()
                if p.name.endswith(MARKDOWN_SUFFIX) and p.is_file()
            )
            if markdown:
                return markdown[0]

        return None

    async def read_note(self, folder: str, file: str) -> NoteContent:
        """
        Resolve and read one note.

        Returns:
            NoteContent with the raw text and the "/"-prefixed relative path.

        Raises:
            NotFoundError with `searched` details if nothing matched.
            TreeReadError with the underlying error text if reading failed.
        """
        candidates = self._candidates(folder, file)

        try:
            found = await run_in_threadpool(self._locate, candidates, candidates[0])
            if found is None:
                raise NotFoundError(
                    message="File not found",
                    details={"searched": [self._display_path(p) for p in candidates]},
                    context={"folder": folder, "file": file},
                )

            async with aiofiles.open(found, "r", encoding="utf-8") as f:
                content = await f.read()
        except (OSError, UnicodeDecodeError) as e:
            logger.error("Failed to read note %s/%s: %s", folder, file, e)
            raise TreeReadError(
                message="Failed to read file",
                details={"details": str(e)},
                context={"folder": folder, "file": file},
            ) from e

        logger.info("Served note %s (%d chars)", found.name, len(content))
        return NoteContent(content=content, file_path=self._display_path(found))


def get_notes_service() -> NotesService:
    """
    FastAPI dependency returning the process-wide notes service.

    Tests override this through `app.dependency_overrides`.
    """
    return notes_service


notes_service = NotesService()
