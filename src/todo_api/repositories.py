from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Generator, List, Mapping

from sqlalchemy import text
from sqlalchemy.engine import Connection, Engine
from sqlalchemy.exc import SQLAlchemyError

from .db import COLS
from .errors import StorageError, TodoNotFoundError
from .models import TodoEntity
from .schemas import TodoCreate, TodoUpdate

_SELECT_ONE = text(
    f"SELECT {COLS.id}, {COLS.title}, {COLS.completed} FROM {COLS.table} WHERE {COLS.id} = :id"
)


# PUBLIC_INTERFACE
class TodoRepository:
    """
    SQLite repository for todo items.

    A single instance is shared by all in-flight requests. The only state it
    holds is the engine, whose connection pool is thread-safe.
    """

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    @property
    def engine(self) -> Engine:
        return self._engine

    @contextmanager
    def _conn(self) -> Generator[Connection, None, None]:
        try:
            with self._engine.begin() as conn:
                yield conn
        except SQLAlchemyError as exc:
            raise StorageError(str(exc)) from exc

    def _row_to_entity(self, row: Mapping[str, Any]) -> TodoEntity:
        return {
            "id": int(row[COLS.id]),
            "title": str(row[COLS.title]),
            "completed": bool(row[COLS.completed]),
        }

    def _fetch(self, conn: Connection, todo_id: int) -> TodoEntity:
        row = conn.execute(_SELECT_ONE, {"id": todo_id}).mappings().one_or_none()
        if row is None:
            raise TodoNotFoundError(todo_id)
        return self._row_to_entity(row)

    def list(self) -> List[TodoEntity]:
        """Return every todo, most recently created first."""
        with self._conn() as conn:
            rows = conn.execute(
                text(
                    f"SELECT {COLS.id}, {COLS.title}, {COLS.completed} "
                    f"FROM {COLS.table} ORDER BY {COLS.id} DESC"
                )
            ).mappings()
            return [self._row_to_entity(r) for r in rows]

    def create(self, data: TodoCreate) -> TodoEntity:
        """Insert a new, not yet completed todo and return it with its assigned id."""
        with self._conn() as conn:
            cur = conn.execute(
                text(f"INSERT INTO {COLS.table} ({COLS.title}, {COLS.completed}) VALUES (:title, 0)"),
                {"title": data.title},
            )
            return self._fetch(conn, cur.lastrowid)

    def get(self, todo_id: int) -> TodoEntity:
        """Return the todo with the given id. Raises TodoNotFoundError if there is none."""
        with self._conn() as conn:
            return self._fetch(conn, todo_id)

    def update(self, todo_id: int, data: TodoUpdate) -> TodoEntity:
        """
        Merge the provided fields into the stored todo and return the result.

        Fields that are omitted or null keep their current value. The read and
        the write are separate statements, so concurrent updates to the same
        id are last-writer-wins.
        """
        with self._conn() as conn:
            current = self._fetch(conn, todo_id)

            title = data.title if data.title is not None else current["title"]
            completed = data.completed if data.completed is not None else current["completed"]
            conn.execute(
                text(
                    f"UPDATE {COLS.table} SET {COLS.title} = :title, {COLS.completed} = :completed "
                    f"WHERE {COLS.id} = :id"
                ),
                {"title": title, "completed": 1 if completed else 0, "id": todo_id},
            )
            return self._fetch(conn, todo_id)

    def delete(self, todo_id: int) -> None:
        """Delete the todo if it exists. Deleting a missing id is not an error."""
        with self._conn() as conn:
            conn.execute(text(f"DELETE FROM {COLS.table} WHERE {COLS.id} = :id"), {"id": todo_id})
