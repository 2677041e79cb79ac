from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Dict, List, Optional

from .models import TodoEntity
from .schemas import TodoCreate, TodoUpdate


@dataclass(frozen=True)
class ListQuery:
    """
    Query parameters for listing todos.
    completed=None selects every row; results are always ordered by id.
    """
    completed: Optional[bool] = None


# PUBLIC_INTERFACE
class Repository(ABC):
    """
    Abstract repository contract for todo storage backends.

    A repository owns its storage handle for one invocation. Use it as a
    context manager so the handle is released on every exit path.
    """

    def __enter__(self) -> "Repository":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def close(self) -> None:
        """Release the storage handle. The default backend holds none."""

    @abstractmethod
    def create(self, data: TodoCreate) -> TodoEntity:
        """Insert a pending TodoEntity and return it with its assigned id."""

    @abstractmethod
    def complete(self, todo_id: int) -> bool:
        """Mark a TodoEntity completed. Return True if the id exists, False if not found."""

    @abstractmethod
    def update(self, todo_id: int, data: TodoUpdate) -> bool:
        """Replace the description of a TodoEntity. Return True if updated, False if not found."""

    @abstractmethod
    def delete(self, todo_id: int) -> bool:
        """Delete a TodoEntity by id. Return True if deleted, False if not found."""

    @abstractmethod
    def list(self, query: Optional[ListQuery] = None) -> List[TodoEntity]:
        """Return TodoEntities matching the completed filter, ascending by id."""


class InMemoryRepository(Repository):
    """
    In-memory repository with the same id semantics as the sqlite backend:
    ids grow monotonically and are never handed out again after a delete.
    """

    def __init__(self) -> None:
        self._items: Dict[int, TodoEntity] = {}
        self._next_id = 1

    def _allocate_id(self) -> int:
        i = self._next_id
        self._next_id += 1
        return i

    def create(self, data: TodoCreate) -> TodoEntity:
        entity: TodoEntity = {
            "id": self._allocate_id(),
            "description": data.description,
            "completed": False,
            "created_at": datetime.now(timezone.utc),
        }
        self._items[entity["id"]] = entity
        return entity.copy()

    def complete(self, todo_id: int) -> bool:
        existing = self._items.get(todo_id)
        if existing is None:
            return False
        existing["completed"] = True
        return True

    def update(self, todo_id: int, data: TodoUpdate) -> bool:
        existing = self._items.get(todo_id)
        if existing is None:
            return False
        existing["description"] = data.description
        return True

    def delete(self, todo_id: int) -> bool:
        return self._items.pop(todo_id, None) is not None

    def list(self, query: Optional[ListQuery] = None) -> List[TodoEntity]:
        q = query or ListQuery()
        items = sorted(self._items.values(), key=lambda t: t["id"])
        if q.completed is not None:
            items = [t for t in items if t["completed"] == q.completed]
        # Return copies to avoid external mutation
        return [t.copy() for t in items]


# PUBLIC_INTERFACE
def open_repository(db_path: str) -> Repository:
    """
    Open the sqlite repository at db_path, creating the file and schema if needed.

    Raises StorageError when the file cannot be opened or initialized.
    """
    from .db import SQLiteRepository

    return SQLiteRepository(db_path)
