"""
PrepNotes Backend — Logging Configuration
===========================================

What:  One logging setup shared by the server lifespan and the generator CLI.
Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s, written to stdout.
"""

import logging
import sys

from prepnotes.config import settings


def setup_logging() -> None:
    """Configure the root logger from settings.log_level."""
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # Reduce noise from third-party libraries
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)
