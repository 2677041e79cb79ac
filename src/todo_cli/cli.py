from __future__ import annotations

import logging
import sys
from contextlib import contextmanager
from typing import Iterator

import typer

from . import __version__, render
from .errors import StorageError
from .operations import add_todo, complete_todo, delete_todo, list_todos, update_todo
from .repositories import Repository, open_repository
from .settings import Settings, get_settings, resolve_database_path

logger = logging.getLogger(__name__)

# Range of an sqlite INTEGER
ID_MIN = -(2**63)
ID_MAX = 2**63 - 1

app = typer.Typer(
    name="todo",
    help="A simple CLI todo application.",
    add_completion=False,
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"todo {__version__}")
        raise typer.Exit(code=0)


def _utf8_text(value: str) -> str:
    # Undecodable argv bytes arrive as lone surrogates
    try:
        value.encode("utf-8")
    except UnicodeEncodeError as e:
        raise typer.BadParameter("must be valid UTF-8 text") from e
    return value


@app.callback()
def app_callback(
    ctx: typer.Context,
    database: str | None = typer.Option(
        None,
        "--database",
        "-d",
        help="Path to the database file (defaults to ~/.local/share/todo-cli/todos.db)",
    ),
    version: bool = typer.Option(False, "--version", callback=_version_callback, is_eager=True),
) -> None:
    del version
    ctx.obj = {"database": database}


@contextmanager
def _repository(ctx: typer.Context) -> Iterator[Repository]:
    obj = ctx.obj if isinstance(ctx.obj, dict) else {}
    db_path = resolve_database_path(obj.get("database"), get_settings())
    logger.debug("using database %s", db_path)
    with open_repository(db_path) as repo:
        yield repo


@app.command("add", help="Add a new todo item.")
def add(
    ctx: typer.Context,
    description: str = typer.Argument(
        ..., callback=_utf8_text, help="Description of the todo item"
    ),
) -> None:
    with _repository(ctx) as repo:
        todo = add_todo(repo, description)
    typer.echo(render.added(todo))


@app.command("list", help="List all todo items.")
def list_cmd(
    ctx: typer.Context,
    completed: bool = typer.Option(False, "--completed", "-c", help="Show only completed items"),
    pending: bool = typer.Option(False, "--pending", "-p", help="Show only pending items"),
) -> None:
    with _repository(ctx) as repo:
        todos = list_todos(repo, completed=completed, pending=pending)
    for line in render.todo_list(todos):
        typer.echo(line)


@app.command("complete", help="Mark a todo item as complete.")
def complete(
    ctx: typer.Context,
    todo_id: int = typer.Argument(
        ..., metavar="ID", min=ID_MIN, max=ID_MAX, help="ID of the todo item to complete"
    ),
) -> None:
    with _repository(ctx) as repo:
        found = complete_todo(repo, todo_id)
    typer.echo(render.completed(todo_id) if found else render.not_found(todo_id))


@app.command("delete", help="Delete a todo item.")
def delete(
    ctx: typer.Context,
    todo_id: int = typer.Argument(
        ..., metavar="ID", min=ID_MIN, max=ID_MAX, help="ID of the todo item to delete"
    ),
) -> None:
    with _repository(ctx) as repo:
        found = delete_todo(repo, todo_id)
    typer.echo(render.deleted(todo_id) if found else render.not_found(todo_id))


@app.command("update", help="Update a todo item's description.")
def update(
    ctx: typer.Context,
    todo_id: int = typer.Argument(
        ..., metavar="ID", min=ID_MIN, max=ID_MAX, help="ID of the todo item to update"
    ),
    description: str = typer.Argument(..., callback=_utf8_text, help="New description"),
) -> None:
    with _repository(ctx) as repo:
        found = update_todo(repo, todo_id, description)
    typer.echo(render.updated(todo_id, description) if found else render.not_found(todo_id))


def _configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.WARNING),
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main(argv: list[str] | None = None) -> int:
    """
    Run one invocation and return its exit code.

    Usage errors are reported by typer itself (standalone mode) and surface
    here as SystemExit; storage failures propagate out of the command.
    """
    argv = list(sys.argv[1:] if argv is None else argv)
    _configure_logging(get_settings())
    try:
        app(args=argv, prog_name="todo")
    except SystemExit as e:
        if e.code is None:
            return 0
        if isinstance(e.code, int):
            return e.code
        typer.echo(str(e.code), err=True)
        return 1
    except StorageError as e:
        logger.debug("storage failure", exc_info=True)
        typer.echo(f"Error: {e}", err=True)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
