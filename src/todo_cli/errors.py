from __future__ import annotations


class TodoCliError(Exception):
    pass


class StorageError(TodoCliError):
    """Raised when the database file cannot be opened, initialized or written."""
