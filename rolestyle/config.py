"""Configuration utilities for Rolestyle.

Reads environment variables and exposes configuration values for the
application.

Notes on paths:
- ROLES_PATH:
  JSON file of role definitions used by the CLI when no --roles option is
  given. Read at call time via get_roles_path().
- RESOLUTION_LOG_PATH:
  When set, `compute` in the CLI appends every resolution to this JSONL
  file unless --log-path overrides it. Unset (the default) means no
  resolution log. Read at call time via get_resolution_log_path().
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path


DEFAULT_DB_URL = "sqlite:///rolestyle.db"
DEFAULT_ROLES_PATH = "roles.json"


def _bool_from_env(name: str, default: bool = False) -> bool:
    val = os.getenv(name)
    if val is None:
        return default
    return val.strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment variables.

    Attributes:
        database_url: SQLAlchemy connection URL for the role definition store.
        echo_sql: Whether to echo SQL statements to stdout.
        log_level: Application log level string.
    """

    database_url: str = os.getenv("DATABASE_URL", DEFAULT_DB_URL)
    echo_sql: bool = _bool_from_env("ECHO_SQL", default=False)
    log_level: str = os.getenv("LOG_LEVEL", "INFO")


def get_settings() -> Settings:
    """Return a Settings instance using current environment variables."""
    return Settings(
        database_url=os.getenv("DATABASE_URL", DEFAULT_DB_URL),
        echo_sql=_bool_from_env("ECHO_SQL", default=False),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
    )


def get_roles_path() -> Path:
    return Path(os.getenv("ROLES_PATH", DEFAULT_ROLES_PATH))


def get_resolution_log_path() -> Path | None:
    """Return the JSONL resolution log path from env, or None when logging is off."""
    val = os.getenv("RESOLUTION_LOG_PATH")
    if not val or not val.strip():
        return None
    return Path(val.strip())
