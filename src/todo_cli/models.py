from __future__ import annotations

from datetime import datetime
from typing import Optional, TypedDict


# PUBLIC_INTERFACE
class TodoEntity(TypedDict):
    """
    A lightweight record representing a Todo item as returned by storage
    backends.

    Fields:
    - id: Unique integer identifier, assigned by the store and never reused
    - description: Free text of the item (may be empty)
    - completed: Boolean completion flag
    - created_at: Creation timestamp, None when the store did not report one
    """

    id: int
    description: str
    completed: bool
    created_at: Optional[datetime]
