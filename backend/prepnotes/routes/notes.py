"""
PrepNotes Backend — Notes Route Handlers
==========================================

What:  GET /api/folders, GET /api/files/{folder}, GET /api/file/{folder}/{file}.
How:   Thin handlers; NotesService does the filesystem work and raises
       application exceptions that the global handlers turn into JSON errors.
Who:   Called by the static client in client/.

Every request re-reads the disk. The pre-generated client/data.json is
served by the static mount, never by these handlers.
"""

import logging
from typing import Dict, List

from fastapi import APIRouter, Depends

from prepnotes.schemas.tree import ErrorResponse, FolderSummary, NoteContent, TreeEntry
from prepnotes.services.notes_service import NotesService, get_notes_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Notes"])


@router.get(
    "/folders",
    response_model=Dict[str, FolderSummary],
    responses={500: {"description": "Notes root unreadable", "model": ErrorResponse}},
    summary="List note categories",
    description=(
        "Returns the top-level folders of the notes tree keyed by name, with their "
        "icons. `files` is always empty; fetch a folder's tree from /api/files."
    ),
)
async def list_folders(
    service: NotesService = Depends(get_notes_service),
) -> Dict[str, FolderSummary]:
    return await service.list_folders()


@router.get(
    "/files/{folder}",
    response_model=List[TreeEntry],
    response_model_exclude_none=True,
    responses={
        404: {"description": "Folder not found", "model": ErrorResponse},
        500: {"description": "Folder unreadable", "model": ErrorResponse},
    },
    summary="Get the tree of one folder",
)
async def list_files(
    folder: str,
    service: NotesService = Depends(get_notes_service),
) -> List[TreeEntry]:
    """
    Sorted tree of one category folder.

    Entry paths are relative to the folder itself, not to the notes root.
    """
    return await service.list_files(folder)


@router.get(
    "/file/{folder}/{file:path}",
    response_model=NoteContent,
    responses={
        400: {"description": "Path escapes the notes root", "model": ErrorResponse},
        404: {"description": "No candidate file exists", "model": ErrorResponse},
        500: {"description": "Note unreadable", "model": ErrorResponse},
    },
    summary="Get the content of one note",
    description=(
        "Tries <folder>/<file>, <folder>/<file>.md and <folder>/<file>/README.md, "
        "then the first markdown file inside <folder>/<file>."
    ),
)
async def read_note(
    folder: str,
    file: str,
    service: NotesService = Depends(get_notes_service),
) -> NoteContent:
    return await service.read_note(folder, file)
