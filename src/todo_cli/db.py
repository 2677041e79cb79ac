from __future__ import annotations

import logging
import sqlite3
from dataclasses import dataclass
from datetime import datetime
from typing import Any, List, Optional, Sequence

from .errors import StorageError
from .models import TodoEntity
from .repositories import ListQuery, Repository
from .schemas import TodoCreate, TodoUpdate

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _Cols:
    table: str = "todos"
    id: str = "id"
    description: str = "description"
    completed: str = "completed"
    created_at: str = "created_at"


_COLS = _Cols()


class SQLiteRepository(Repository):
    """
    SQLite repository implementing the Repository interface.

    One connection is opened in the constructor and held until close(). Every
    mutating call is a single statement committed on its own.
    """

    def __init__(self, db_path: str) -> None:
        self._db_path = db_path
        logger.debug("opening database %s", db_path)
        try:
            self._conn = sqlite3.connect(db_path)
        except sqlite3.Error as e:
            raise StorageError(str(e)) from e
        self._conn.row_factory = sqlite3.Row
        try:
            self._init_db()
        except StorageError:
            self._conn.close()
            raise

    def close(self) -> None:
        logger.debug("closing database %s", self._db_path)
        self._conn.close()

    def _execute(self, sql: str, params: Sequence[Any] = ()) -> sqlite3.Cursor:
        try:
            with self._conn:
                return self._conn.execute(sql, params)
        except sqlite3.Error as e:
            raise StorageError(str(e)) from e

    def _init_db(self) -> None:
        self._execute(
            f"""
            CREATE TABLE IF NOT EXISTS {_COLS.table} (
                {_COLS.id} INTEGER PRIMARY KEY AUTOINCREMENT,
                {_COLS.description} TEXT NOT NULL,
                {_COLS.completed} BOOLEAN NOT NULL DEFAULT 0,
                {_COLS.created_at} DATETIME DEFAULT CURRENT_TIMESTAMP
            )
            """
        )

    def _row_to_entity(self, row: sqlite3.Row) -> TodoEntity:
        def parse_dt(s: Optional[str]) -> Optional[datetime]:
            if s is None:
                return None
            return datetime.fromisoformat(s)

        return {
            "id": int(row[_COLS.id]),
            "description": str(row[_COLS.description]),
            "completed": bool(row[_COLS.completed]),
            "created_at": parse_dt(row[_COLS.created_at]),
        }

    def create(self, data: TodoCreate) -> TodoEntity:
        cur = self._execute(
            f"INSERT INTO {_COLS.table} ({_COLS.description}, {_COLS.completed}) VALUES (?, 0)",
            (data.description,),
        )
        new_id = cur.lastrowid
        assert new_id is not None
        logger.debug("inserted todo %d", new_id)
        return {
            "id": int(new_id),
            "description": data.description,
            "completed": False,
            "created_at": None,
        }

    def complete(self, todo_id: int) -> bool:
        cur = self._execute(
            f"UPDATE {_COLS.table} SET {_COLS.completed} = 1 WHERE {_COLS.id} = ?", (todo_id,)
        )
        logger.debug("complete %d affected %d row(s)", todo_id, cur.rowcount)
        return cur.rowcount > 0

    def update(self, todo_id: int, data: TodoUpdate) -> bool:
        cur = self._execute(
            f"UPDATE {_COLS.table} SET {_COLS.description} = ? WHERE {_COLS.id} = ?",
            (data.description, todo_id),
        )
        logger.debug("update %d affected %d row(s)", todo_id, cur.rowcount)
        return cur.rowcount > 0

    def delete(self, todo_id: int) -> bool:
        cur = self._execute(f"DELETE FROM {_COLS.table} WHERE {_COLS.id} = ?", (todo_id,))
        logger.debug("delete %d affected %d row(s)", todo_id, cur.rowcount)
        return cur.rowcount > 0

    def list(self, query: Optional[ListQuery] = None) -> List[TodoEntity]:
        q = query or ListQuery()
        where_sql = ""
        params: list = []
        if q.completed is not None:
            where_sql = f"WHERE {_COLS.completed} = ?"
            params.append(1 if q.completed else 0)

        cur = self._execute(
            f"""
            SELECT {_COLS.id}, {_COLS.description}, {_COLS.completed}, {_COLS.created_at}
            FROM {_COLS.table}
            {where_sql}
            ORDER BY {_COLS.id}
            """,
            params,
        )
        try:
            rows = cur.fetchall()
        except sqlite3.Error as e:
            raise StorageError(str(e)) from e
        return [self._row_to_entity(r) for r in rows]
