"""
PrepNotes Backend — Tree Walker
=================================

What:  Recursively scans a directory into an ordered tree of note entries.
Who:   Used by the live API (GET /api/files/{folder}) and by the snapshot
       generator. Both share this walker and differ only in WalkConfig.
When:  On every request / generator run. Nothing is cached.

Traversal rules:
    - Hidden names (leading ".") and names in `excluded_names` are skipped
      before anything else, so excluded subtrees are never opened.
    - Directories recurse; symlinked directories are not followed.
    - "*.md" becomes a markdown entry named without the trailing ".md".
    - "*.js" becomes a javascript entry unless it is `self_exclude`.
    - Every other file is ignored.
    - Each level is sorted: directories first, then name (case-insensitive).

Failure model:
    A directory that cannot be listed is logged and contributes an empty list.
    The walker never raises, so callers cannot tell an empty folder from an
    unreadable one by the return value.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import FrozenSet, List, Optional, Union

from prepnotes.config import settings
from prepnotes.schemas.tree import DirectoryEntry, FileEntry, TreeEntry
from prepnotes.services.icons import JAVASCRIPT_ICON, MARKDOWN_ICON, icon_for

logger = logging.getLogger(__name__)

MARKDOWN_SUFFIX = ".md"
JAVASCRIPT_SUFFIX = ".js"


@dataclass(frozen=True)
class WalkConfig:
    """
    Knobs that distinguish the live API walk from the snapshot walk.

    Attributes:
        excluded_names: Entry names pruned at every level
        inline_content: Read each note's text into `content`
        self_exclude:   One javascript file name left out of the tree
    """

    excluded_names: FrozenSet[str] = frozenset()
    inline_content: bool = False
    self_exclude: Optional[str] = None


def server_walk_config() -> WalkConfig:
    """Walk settings for the live API: no content, server exclusions."""
    return WalkConfig(excluded_names=settings.server_excluded_names)


def snapshot_walk_config() -> WalkConfig:
    """Walk settings for the generator: inline content, snapshot exclusions."""
    return WalkConfig(
        excluded_names=settings.snapshot_excluded_names,
        inline_content=True,
        self_exclude=settings.snapshot_self_exclude,
    )


def is_excluded(name: str, config: WalkConfig) -> bool:
    return name.startswith(".") or name in config.excluded_names


def name_key(name: str):
    # Case-insensitive, then raw name so the order is total. Punctuation and
    # digits keep codepoint order ("1x" < "_x"), unlike ICU collation.
    return (name.casefold(), name)


def sort_key(entry: TreeEntry):
    return (not entry.is_directory, *name_key(entry.name))


def display_name(file_name: str) -> str:
    """Strip exactly one trailing ".md" from a markdown file name."""
    if file_name.endswith(MARKDOWN_SUFFIX):
        return file_name[: -len(MARKDOWN_SUFFIX)]
    return file_name


def _join(relative_path: str, name: str) -> str:
    return f"{relative_path}/{name}" if relative_path else name


def _read_text(path: Path) -> str:
    return path.read_text(encoding="utf-8")


def _file_entry(
    entry_path: Path, name: str, relative: str, config: WalkConfig
) -> Optional[FileEntry]:
    if name.endswith(MARKDOWN_SUFFIX):
        file_type, icon, shown = "markdown", MARKDOWN_ICON, display_name(name)
    elif name.endswith(JAVASCRIPT_SUFFIX) and name != config.self_exclude:
        file_type, icon, shown = "javascript", JAVASCRIPT_ICON, name
    else:
        return None

    content = None
    if config.inline_content:
        try:
            content = _read_text(entry_path)
        except (OSError, UnicodeDecodeError) as e:
            logger.error("Error reading file %s: %s", entry_path, e)
            return None

    return FileEntry(
        name=shown,
        path=relative,
        icon=icon,
        file_type=file_type,
        content=content,
    )


def walk(
    directory: Union[str, Path],
    relative_path: str = "",
    config: Optional[WalkConfig] = None,
) -> List[TreeEntry]:
    """
    Build the sorted entry list for `directory`.

    Args:
        directory:     Absolute directory to scan
        relative_path: Prefix for the `path` of each entry ("" at the root)
        config:        Exclusion and inlining settings (defaults to none)

    Returns:
        Sorted list of DirectoryEntry / FileEntry. Empty if the directory
        could not be listed.
    """
    config = config or WalkConfig()
    directory = Path(directory)
    entries: List[TreeEntry] = []

    try:
        with os.scandir(directory) as it:
            items = list(it)
    except OSError as e:
        logger.error("Error reading directory %s: %s", directory, e)
        return entries

    for item in items:
        if is_excluded(item.name, config):
            continue

        relative = _join(relative_path, item.name)
        try:
            is_dir = item.is_dir(follow_symlinks=False)
        except OSError as e:
            logger.error("Error inspecting %s: %s", item.path, e)
            continue

        if is_dir:
            children = walk(directory / item.name, relative, config)
            entries.append(
                DirectoryEntry(
                    name=item.name,
                    path=relative,
                    icon=icon_for(item.name),
                    children=children,
                    has_children=bool(children),
                )
            )
            continue

        file_entry = _file_entry(directory / item.name, item.name, relative, config)
        if file_entry is not None:
            entries.append(file_entry)

    entries.sort(key=sort_key)
    logger.debug("Walked %s: %d entries", directory, len(entries))
    return entries
