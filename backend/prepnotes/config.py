"""
PrepNotes Backend — Application Configuration
===============================================

What:  Centralized configuration management using Pydantic Settings.
Why:   Type-safe environment variable loading with validation on startup.
How:   Pydantic Settings reads from environment variables (or .env file),
       validates types/ranges, and provides a singleton `settings` object.
Who:   Imported by the server, the snapshot generator, and the services layer.
When:  Loaded once at module import time.

Path settings are resolved relative to the process working directory, so
running from the repository root serves the notes that live next to it.
"""

from typing import FrozenSet, List, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


def _split_names(raw: str) -> FrozenSet[str]:
    return frozenset(name.strip() for name in raw.split(",") if name.strip())


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings have defaults suitable for running from the repository root.
    Attributes are grouped by concern for readability.
    """

    # ── Notes Tree ────────────────────────────────────────────────────────
    # What: Directory whose subfolders are the note categories
    notes_root: str = Field(default=".", description="Root directory of the notes tree")

    # What: Directory names never listed by the live API (hidden names are
    # always skipped on top of these)
    server_excluded_dirs: str = Field(default="node_modules,client,server,backend")

    # What: Directory names never included in the generated snapshot
    snapshot_excluded_dirs: str = Field(
        default=".git,node_modules,client,server,backend,scripts,assets"
    )

    # What: A single file name the generator leaves out of its own snapshot
    snapshot_self_exclude: Optional[str] = Field(default=None)

    # ── Static Client ─────────────────────────────────────────────────────
    static_dir: str = Field(default="./client")
    snapshot_output: str = Field(default="./client/data.json")

    # ── CORS ──────────────────────────────────────────────────────────────
    # Format: Comma-separated URLs, or "*" for any origin
    cors_origins: str = Field(default="*")

    @property
    def cors_origins_list(self) -> List[str]:
        """Splits comma-separated CORS origins into a list."""
        return [origin.strip() for origin in self.cors_origins.split(",")]

    @property
    def server_excluded_names(self) -> FrozenSet[str]:
        return _split_names(self.server_excluded_dirs)

    @property
    def snapshot_excluded_names(self) -> FrozenSet[str]:
        return _split_names(self.snapshot_excluded_dirs)

    # ── Server ────────────────────────────────────────────────────────────
    backend_host: str = Field(default="127.0.0.1")
    backend_port: int = Field(default=3000, ge=1, le=65535)

    # Valid: DEBUG, INFO, WARNING, ERROR, CRITICAL
    log_level: str = Field(default="INFO")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensures log level is a valid Python logging level name."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid_levels:
            raise ValueError(f"Invalid log_level '{v}'. Must be one of: {valid_levels}")
        return upper

    # ── Pydantic Settings Config ──────────────────────────────────────────
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
    }


# Singleton instance — imported throughout the application
settings = Settings()
