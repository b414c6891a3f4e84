"""
PrepNotes — Static Snapshot Generator
=======================================

What:  Walks the whole notes tree once and writes it, with note contents
       inlined, to a single JSON file the static client can load.
Who:   Run by hand or in CI: `prepnotes-generate` / `python -m prepnotes.generate`.
When:  Before publishing the client without the API server.

Output shape:
    {
        "folders": {"<top-level dir>": {"icon": ..., "files": [...], "isDirectory": true}},
        "files":   [<every top-level entry>]
    }

The previous file is overwritten in place. Given an unchanged tree, two runs
produce byte-identical output.
"""

import argparse
import logging
from pathlib import Path
from typing import List, Optional

from prepnotes.config import settings
from prepnotes.log_config import setup_logging
from prepnotes.schemas.tree import DirectoryEntry, FolderSummary, Snapshot
from prepnotes.services.tree_walker import WalkConfig, snapshot_walk_config, walk

logger = logging.getLogger(__name__)


def build_snapshot(root: Path, config: Optional[WalkConfig] = None) -> Snapshot:
    """Walk `root` with content inlining and reshape it into a Snapshot."""
    config = config or snapshot_walk_config()
    entries = walk(root, "", config)

    folders = {
        entry.name: FolderSummary(icon=entry.icon, files=entry.children)
        for entry in entries
        if isinstance(entry, DirectoryEntry)
    }
    return Snapshot(folders=folders, files=entries)


def render_snapshot(snapshot: Snapshot) -> str:
    return snapshot.model_dump_json(indent=2, by_alias=True, exclude_none=True)


def write_snapshot(snapshot: Snapshot, output: Path) -> None:
    """Write the snapshot as pretty-printed UTF-8 JSON, replacing any old file."""
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(render_snapshot(snapshot), encoding="utf-8")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Snapshot the notes tree into a static JSON file."
    )
    parser.add_argument(
        "--root",
        type=Path,
        default=Path(settings.notes_root),
        help="Notes root to walk (default: settings.notes_root)",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=Path(settings.snapshot_output),
        help="JSON file to write (default: settings.snapshot_output)",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    setup_logging()

    root = args.root.resolve()
    output = args.output.resolve()

    logger.info("Generating static data from %s...", root)
    snapshot = build_snapshot(root)
    write_snapshot(snapshot, output)
    logger.info(
        "Static data generated at: %s (%d folders)", output, len(snapshot.folders)
    )


if __name__ == "__main__":
    main()
