"""
PrepNotes Backend — Notes Tree Schemas
========================================

What:  Pydantic models for the entry tree and the API payloads built on it.
Why:   One contract shared by the live API and the generated snapshot, so the
       frontend reads the same shape from both.
How:   Fields are snake_case in Python and camelCase on the wire (aliases).
       Models are frozen: a tree is built once per request or run and never
       mutated afterwards.

Wire shape of an entry:
    directory: {name, path, isDirectory: true, icon, children, hasChildren}
    file:      {name, path, isDirectory: false, icon, fileType[, content]}

Serialize with `by_alias=True, exclude_none=True` so `content` is omitted
when it was not inlined.
"""

from typing import Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

FileType = Literal["markdown", "javascript"]


class FileEntry(BaseModel):
    """A markdown or javascript leaf of the notes tree."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str = Field(description="Display name (markdown files lose the .md suffix)")
    path: str = Field(description="Path relative to the scan root")
    is_directory: Literal[False] = Field(default=False, alias="isDirectory")
    icon: str
    file_type: FileType = Field(alias="fileType")
    content: Optional[str] = Field(
        default=None, description="Raw file text, only present in snapshots"
    )


class DirectoryEntry(BaseModel):
    """A folder of the notes tree with its sorted children."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    path: str
    is_directory: Literal[True] = Field(default=True, alias="isDirectory")
    icon: str
    children: List["TreeEntry"] = Field(default_factory=list)
    has_children: bool = Field(default=False, alias="hasChildren")


TreeEntry = Union[DirectoryEntry, FileEntry]

DirectoryEntry.model_rebuild()


class FolderSummary(BaseModel):
    """
    One top-level category as advertised to the frontend.

    `files` is empty in GET /api/folders (names and icons only) and holds the
    folder's children in the generated snapshot.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    icon: str
    files: List[TreeEntry] = Field(default_factory=list)
    is_directory: Literal[True] = Field(default=True, alias="isDirectory")


class Snapshot(BaseModel):
    """The whole notes tree as written to the static data file."""

    model_config = ConfigDict(frozen=True)

    folders: Dict[str, FolderSummary]
    files: List[TreeEntry]


class NoteContent(BaseModel):
    """Response body of GET /api/file/{folder}/{file}."""

    content: str = Field(description="Raw text of the resolved note")
    file_path: str = Field(
        alias="filePath", description="Resolved path relative to the notes root, '/'-prefixed"
    )

    model_config = ConfigDict(populate_by_name=True)


class ErrorResponse(BaseModel):
    """
    Error body shared by all endpoints.

    Extra keys (`searched`, `details`) appear depending on the error.
    """

    model_config = ConfigDict(extra="allow")

    error: str = Field(description="Human-readable error message")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Returned by GET /health."""

    status: str = Field(description="healthy or unhealthy")
    version: str
    notes_root: str = Field(description="Absolute path of the served notes tree")
    uptime_seconds: float
