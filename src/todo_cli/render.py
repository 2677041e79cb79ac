from __future__ import annotations

from typing import List, Sequence

import typer

from .models import TodoEntity

RULE = "─" * 60


def added(todo: TodoEntity) -> str:
    return f"✓ Added todo #{todo['id']}: {todo['description']}"


def completed(todo_id: int) -> str:
    return f"✓ Marked todo #{todo_id} as complete"


def deleted(todo_id: int) -> str:
    return f"✓ Deleted todo #{todo_id}"


def updated(todo_id: int, description: str) -> str:
    return f"✓ Updated todo #{todo_id}: {description}"


def not_found(todo_id: int) -> str:
    return f"✗ Todo #{todo_id} not found"


def todo_line(todo: TodoEntity) -> str:
    """
    One list row: checkbox marker, id padded to three columns, description.
    Completed rows are dimmed.
    """
    marker = "✓" if todo["completed"] else " "
    line = f"[{marker}] #{todo['id']:<3} {todo['description']}"
    if todo["completed"]:
        return typer.style(line, fg=typer.colors.BRIGHT_BLACK)
    return line


# PUBLIC_INTERFACE
def todo_list(todos: Sequence[TodoEntity]) -> List[str]:
    """
    Render the full list block: header, one line per todo and the total footer.
    A header and a zero total are still rendered when there are no todos.
    """
    lines = ["", "📋 Todo List:", RULE]
    lines.extend(todo_line(t) for t in todos)
    lines.extend([RULE, f"Total: {len(todos)} items", ""])
    return lines
