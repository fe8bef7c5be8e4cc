"""SQLite storage for todos."""

import sqlite3
import uuid
from pathlib import Path
from typing import Any

from ..errors import NotFoundError, StoreError, ValidationError
from .models import Todo

_COLUMNS = "id, title, created_at, updated_at"


def _require_text(value: Any, message: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(message)
    return value


def _require_id(todo_id: Any) -> str:
    # Models sometimes send numeric ids
    if isinstance(todo_id, int) and not isinstance(todo_id, bool):
        todo_id = str(todo_id)
    return _require_text(todo_id, "Missing todo ID")


class TodoStore:
    """Persistent todo storage using SQLite.

    One connection is opened lazily and kept for the lifetime of the
    store. Every public operation validates its arguments, runs a single
    statement and commits.
    """

    def __init__(self, db_path: Path) -> None:
        """Initialize the store with a database path.

        Args:
            db_path: Path to the SQLite database file.
        """
        self.db_path = Path(db_path)
        self._conn: sqlite3.Connection | None = None

    def _get_connection(self) -> sqlite3.Connection:
        """Get or create the database connection."""
        if self._conn is None:
            try:
                self.db_path.parent.mkdir(parents=True, exist_ok=True)
                self._conn = sqlite3.connect(self.db_path)
            except (OSError, sqlite3.Error) as e:
                raise StoreError(f"Cannot open database at {self.db_path}: {e}") from e
            self._conn.row_factory = sqlite3.Row
        return self._conn

    def init_db(self) -> None:
        """Create the todos table if it doesn't exist."""
        try:
            conn = self._get_connection()
            conn.execute("""
                CREATE TABLE IF NOT EXISTS todos (
                    id          TEXT PRIMARY KEY,
                    title       TEXT NOT NULL,
                    created_at  TEXT NOT NULL DEFAULT (datetime('now')),
                    updated_at  TEXT NOT NULL DEFAULT (datetime('now'))
                )
            """)
            conn.commit()
        except sqlite3.Error as e:
            raise StoreError(f"Failed to initialize database: {e}") from e

    def get_all_todos(self) -> list[Todo]:
        """Get all todos in insertion order.

        Returns:
            List of stored todos, empty if there are none.
        """
        rows = self._fetch_all(f"SELECT {_COLUMNS} FROM todos ORDER BY rowid")
        return [self._row_to_todo(row) for row in rows]

    def get_todo(self, todo_id: str) -> Todo | None:
        """Get a single todo by id, or None if it doesn't exist."""
        rows = self._fetch_all(
            f"SELECT {_COLUMNS} FROM todos WHERE id = ?", (_require_id(todo_id),)
        )
        return self._row_to_todo(rows[0]) if rows else None

    def create_todo(self, title: Any) -> str:
        """Insert a new todo.

        Args:
            title: The todo title.

        Returns:
            The id assigned to the new todo.

        Raises:
            ValidationError: If title is not a non-empty string.
        """
        title = _require_text(title, "Invalid input: title must be a non-empty string")
        todo_id = uuid.uuid4().hex
        self._execute(
            "INSERT INTO todos (id, title) VALUES (?, ?)",
            (todo_id, title),
        )
        return todo_id

    def update_todo_by_id(self, todo_id: Any, title: Any) -> str:
        """Overwrite the title of an existing todo.

        Args:
            todo_id: The id of the todo to update.
            title: The new title.

        Returns:
            The id of the updated todo.

        Raises:
            ValidationError: If id or title is missing.
            NotFoundError: If no todo has this id.
        """
        todo_id = _require_id(todo_id)
        title = _require_text(title, "Invalid input: title must be a non-empty string")
        cursor = self._execute(
            """
            UPDATE todos
            SET title = ?, updated_at = datetime('now')
            WHERE id = ?
            """,
            (title, todo_id),
        )
        if cursor.rowcount == 0:
            raise NotFoundError(f"Todo {todo_id} not found")
        return todo_id

    def delete_todo_by_id(self, todo_id: Any) -> str:
        """Delete a todo.

        Args:
            todo_id: The id of the todo to delete.

        Returns:
            The id of the deleted todo.

        Raises:
            ValidationError: If id is missing.
            NotFoundError: If no todo has this id.
        """
        todo_id = _require_id(todo_id)
        cursor = self._execute("DELETE FROM todos WHERE id = ?", (todo_id,))
        if cursor.rowcount == 0:
            raise NotFoundError(f"Todo {todo_id} not found")
        return todo_id

    def search_todos(self, term: Any) -> list[Todo]:
        """Find todos whose title contains term.

        Matching is an exact, case-sensitive substring test, so LIKE
        wildcards in the term are treated literally.

        Args:
            term: The substring to look for.

        Returns:
            Matching todos, empty if none match.
        """
        term = _require_text(term, "Invalid search term")
        rows = self._fetch_all(
            f"SELECT {_COLUMNS} FROM todos WHERE instr(title, ?) > 0 ORDER BY rowid",
            (term,),
        )
        return [self._row_to_todo(row) for row in rows]

    def close(self) -> None:
        """Close the database connection."""
        if self._conn is not None:
            self._conn.close()
            self._conn = None

    def _execute(self, sql: str, params: tuple[Any, ...] = ()) -> sqlite3.Cursor:
        conn = self._get_connection()
        try:
            cursor = conn.execute(sql, params)
            conn.commit()
        except sqlite3.Error as e:
            conn.rollback()
            raise StoreError(str(e)) from e
        return cursor

    def _fetch_all(self, sql: str, params: tuple[Any, ...] = ()) -> list[sqlite3.Row]:
        conn = self._get_connection()
        try:
            return conn.execute(sql, params).fetchall()
        except sqlite3.Error as e:
            raise StoreError(str(e)) from e

    def _row_to_todo(self, row: sqlite3.Row) -> Todo:
        """Convert a database row to a Todo."""
        return Todo(
            id=row["id"],
            title=row["title"],
            created_at=row["created_at"],
            updated_at=row["updated_at"],
        )
