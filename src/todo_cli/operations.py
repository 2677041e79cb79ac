"""
The five todo operations.

Each operation takes the repository for the current invocation explicitly
and returns plain data; printing is left to todo_cli.render.
"""
from __future__ import annotations

from typing import List, Optional

from .models import TodoEntity
from .repositories import ListQuery, Repository
from .schemas import TodoCreate, TodoUpdate


# PUBLIC_INTERFACE
def resolve_completed_filter(completed: bool, pending: bool) -> Optional[bool]:
    """
    Map the --completed/--pending flags to a completion filter.

    Exactly one flag set selects that state; neither or both select every row.
    """
    if completed and not pending:
        return True
    if pending and not completed:
        return False
    return None


# PUBLIC_INTERFACE
def add_todo(repo: Repository, description: str) -> TodoEntity:
    """Create a pending todo and return it with the id assigned by the store."""
    return repo.create(TodoCreate(description=description))


# PUBLIC_INTERFACE
def list_todos(repo: Repository, completed: bool = False, pending: bool = False) -> List[TodoEntity]:
    """Return todos selected by the completion flags, ascending by id."""
    return repo.list(ListQuery(completed=resolve_completed_filter(completed, pending)))


# PUBLIC_INTERFACE
def complete_todo(repo: Repository, todo_id: int) -> bool:
    """Mark a todo completed. False means no todo has that id."""
    return repo.complete(todo_id)


# PUBLIC_INTERFACE
def delete_todo(repo: Repository, todo_id: int) -> bool:
    """Remove a todo. False means no todo has that id."""
    return repo.delete(todo_id)


# PUBLIC_INTERFACE
def update_todo(repo: Repository, todo_id: int, description: str) -> bool:
    """Replace a todo's description. False means no todo has that id."""
    return repo.update(todo_id, TodoUpdate(description=description))
