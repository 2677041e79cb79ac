from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

DATA_DIR_PARTS = (".local", "share", "todo-cli")
DB_FILENAME = "todos.db"

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass(frozen=True)
class Settings:
    """
    Application settings loaded from environment variables.

    Env vars:
    - TODO_CLI_DATABASE: path to the sqlite db file. Unset means the default
      per-user location (see default_db_path)
    - TODO_CLI_LOG_LEVEL: logging level name written to stderr; 'WARNING' by default
    """

    database_path: Optional[str]
    log_level: str


def _get_env(name: str, default: str) -> str:
    value = os.getenv(name, default)
    if value is None or value == "":
        return default
    return value


def _parse_log_level(value: str, default: str = "WARNING") -> str:
    v = value.strip().upper()
    if v in _LOG_LEVELS:
        return v
    return default


# PUBLIC_INTERFACE
def get_settings() -> Settings:
    """Return application settings loaded from environment variables."""
    database = _get_env("TODO_CLI_DATABASE", "").strip()
    return Settings(
        database_path=database or None,
        log_level=_parse_log_level(_get_env("TODO_CLI_LOG_LEVEL", "WARNING")),
    )


# PUBLIC_INTERFACE
def default_db_path() -> Path:
    """
    Return the per-user database location, ~/.local/share/todo-cli/todos.db.

    The home directory is taken from $HOME; when it is unset the current
    directory stands in for it. The data directory is created on demand. A
    failure to create it is only logged, opening the database reports the
    real error afterwards.
    """
    home = _get_env("HOME", ".")
    data_dir = Path(home).joinpath(*DATA_DIR_PARTS)
    try:
        data_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        logger.debug("could not create data directory %s: %s", data_dir, e)
    return data_dir / DB_FILENAME


# PUBLIC_INTERFACE
def resolve_database_path(cli_value: Optional[str], settings: Settings) -> str:
    """
    Pick the database file for this invocation.

    Precedence: --database option, then TODO_CLI_DATABASE, then default_db_path().
    """
    if cli_value:
        return cli_value
    if settings.database_path:
        return settings.database_path
    return str(default_db_path())
