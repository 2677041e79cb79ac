import pytest

from todo_cli.db import SQLiteRepository
from todo_cli.repositories import InMemoryRepository


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch, tmp_path):
    # Keep tests away from the real per-user database
    monkeypatch.delenv("TODO_CLI_DATABASE", raising=False)
    monkeypatch.delenv("TODO_CLI_LOG_LEVEL", raising=False)
    monkeypatch.setenv("HOME", str(tmp_path / "home"))


@pytest.fixture
def db_path(tmp_path):
    return str(tmp_path / "todos.db")


@pytest.fixture(params=["memory", "sqlite"])
def repo(request, db_path):
    if request.param == "memory":
        r = InMemoryRepository()
    else:
        r = SQLiteRepository(db_path)
    with r:
        yield r
