import pytest

from todo_cli import render
from todo_cli.operations import (
    add_todo,
    complete_todo,
    delete_todo,
    list_todos,
    resolve_completed_filter,
    update_todo,
)
from todo_cli.repositories import InMemoryRepository


@pytest.fixture
def fake_repo():
    return InMemoryRepository()


@pytest.mark.parametrize(
    "completed,pending,expected",
    [
        (False, False, None),
        (True, False, True),
        (False, True, False),
        (True, True, None),
    ],
)
def test_resolve_completed_filter(completed, pending, expected):
    assert resolve_completed_filter(completed, pending) is expected


class TestOperations:
    def test_add_then_list(self, fake_repo):
        todo = add_todo(fake_repo, "buy milk")
        rows = list_todos(fake_repo)
        assert [(t["id"], t["description"], t["completed"]) for t in rows] == [
            (todo["id"], "buy milk", False)
        ]

    def test_list_flag_combinations(self, fake_repo):
        add_todo(fake_repo, "a")
        add_todo(fake_repo, "b")
        complete_todo(fake_repo, 1)

        everything = list_todos(fake_repo)
        done = list_todos(fake_repo, completed=True)
        open_ = list_todos(fake_repo, pending=True)
        both = list_todos(fake_repo, completed=True, pending=True)

        assert [t["id"] for t in done] == [1]
        assert [t["id"] for t in open_] == [2]
        assert both == everything
        assert all(t in everything for t in done + open_)

    def test_mutations_report_not_found(self, fake_repo):
        assert complete_todo(fake_repo, 1) is False
        assert delete_todo(fake_repo, 1) is False
        assert update_todo(fake_repo, 1, "x") is False

    def test_update_round_trip(self, fake_repo):
        add_todo(fake_repo, "old")
        assert update_todo(fake_repo, 1, "new text") is True
        (row,) = list_todos(fake_repo)
        assert (row["id"], row["description"], row["completed"]) == (1, "new text", False)


class TestRender:
    def test_messages(self):
        todo = {"id": 3, "description": "buy milk", "completed": False, "created_at": None}
        assert render.added(todo) == "✓ Added todo #3: buy milk"
        assert render.completed(3) == "✓ Marked todo #3 as complete"
        assert render.deleted(3) == "✓ Deleted todo #3"
        assert render.updated(3, "x") == "✓ Updated todo #3: x"
        assert render.not_found(3) == "✗ Todo #3 not found"

    def test_completed_line_is_dimmed(self):
        done = {"id": 1, "description": "a", "completed": True, "created_at": None}
        todo = {"id": 12, "description": "b", "completed": False, "created_at": None}
        assert render.todo_line(done) == "\x1b[90m[✓] #1   a\x1b[0m"
        assert render.todo_line(todo) == "[ ] #12  b"

    def test_empty_list_block(self):
        assert render.todo_list([]) == [
            "",
            "📋 Todo List:",
            render.RULE,
            render.RULE,
            "Total: 0 items",
            "",
        ]
