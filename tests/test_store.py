"""Tests for TodoStore."""

from pathlib import Path

import pytest

from todo_assistant.errors import NotFoundError, ValidationError
from todo_assistant.todos import Todo, TodoStore


class TestTodoStoreInit:
    """Tests for TodoStore initialization."""

    def test_creates_db_directory(self, tmp_path: Path):
        """Store creates parent directories if they don't exist."""
        nested_path = tmp_path / "nested" / "dir" / "todos.db"
        store = TodoStore(nested_path)
        store.init_db()
        assert nested_path.exists()
        store.close()

    def test_creates_todos_table(self, store: TodoStore):
        conn = store._get_connection()
        cursor = conn.execute(
            "SELECT name FROM sqlite_master WHERE type='table' AND name='todos'"
        )
        assert cursor.fetchone() is not None

    def test_init_db_idempotent(self, store: TodoStore):
        store.init_db()
        store.init_db()

    def test_empty_store_returns_empty_list(self, store: TodoStore):
        """An empty table is not an error."""
        assert store.get_all_todos() == []


class TestCreate:
    """Tests for creating todos."""

    def test_create_returns_fresh_id(self, store: TodoStore):
        first = store.create_todo("Buy milk")
        second = store.create_todo("Buy milk")
        assert isinstance(first, str) and first
        assert first != second

    def test_created_todo_is_listed(self, store: TodoStore):
        todo_id = store.create_todo("Buy milk")
        todos = store.get_all_todos()
        assert len(todos) == 1
        assert todos[0].id == todo_id
        assert todos[0].title == "Buy milk"

    def test_create_sets_timestamps(self, store: TodoStore):
        todo_id = store.create_todo("Buy milk")
        todo = store.get_todo(todo_id)
        assert todo is not None
        assert todo.created_at
        assert todo.updated_at

    @pytest.mark.parametrize("title", [123, None, "", "   ", ["milk"]])
    def test_invalid_title_rejected(self, store: TodoStore, title):
        """Non-string or empty titles fail and insert nothing."""
        with pytest.raises(ValidationError):
            store.create_todo(title)
        assert store.get_all_todos() == []

    def test_listing_keeps_insertion_order(self, store: TodoStore):
        titles = ["one", "two", "three"]
        for title in titles:
            store.create_todo(title)
        assert [t.title for t in store.get_all_todos()] == titles


class TestUpdate:
    """Tests for updating todos."""

    def test_update_changes_title_keeps_id(self, store: TodoStore):
        todo_id = store.create_todo("Buy milk")
        assert store.update_todo_by_id(todo_id, "Bought milk") == todo_id

        todo = store.get_todo(todo_id)
        assert todo is not None
        assert todo.id == todo_id
        assert todo.title == "Bought milk"

    def test_update_unknown_id(self, store: TodoStore):
        with pytest.raises(NotFoundError):
            store.update_todo_by_id("missing", "title")

    def test_update_missing_id(self, store: TodoStore):
        with pytest.raises(ValidationError, match="Missing todo ID"):
            store.update_todo_by_id(None, "title")

    def test_update_missing_title(self, store: TodoStore):
        todo_id = store.create_todo("Buy milk")
        with pytest.raises(ValidationError):
            store.update_todo_by_id(todo_id, None)
        assert store.get_todo(todo_id).title == "Buy milk"


class TestDelete:
    """Tests for deleting todos."""

    def test_delete_removes_todo(self, store: TodoStore):
        keep = store.create_todo("keep")
        drop = store.create_todo("drop")

        assert store.delete_todo_by_id(drop) == drop

        ids = [t.id for t in store.get_all_todos()]
        assert ids == [keep]

    def test_delete_unknown_id(self, store: TodoStore):
        with pytest.raises(NotFoundError):
            store.delete_todo_by_id("missing")

    def test_delete_missing_id(self, store: TodoStore):
        with pytest.raises(ValidationError):
            store.delete_todo_by_id(None)


class TestSearch:
    """Tests for substring search."""

    def test_returns_matching_subset(self, store: TodoStore):
        store.create_todo("Buy milk")
        store.create_todo("Walk the dog")
        store.create_todo("milkshake run")

        titles = [t.title for t in store.search_todos("milk")]
        assert titles == ["Buy milk", "milkshake run"]

    def test_no_match_returns_empty(self, store: TodoStore):
        store.create_todo("Buy milk")
        assert store.search_todos("bread") == []

    def test_wildcards_are_literal(self, store: TodoStore):
        store.create_todo("100% done")
        store.create_todo("1000 things")
        assert [t.title for t in store.search_todos("0%")] == ["100% done"]
        assert store.search_todos("_") == []

    def test_invalid_term(self, store: TodoStore):
        with pytest.raises(ValidationError, match="Invalid search term"):
            store.search_todos(42)


class TestClose:
    def test_close_then_reopen(self, tmp_path: Path):
        """Data survives closing and reopening the store."""
        db_path = tmp_path / "todos.db"
        store = TodoStore(db_path)
        store.init_db()
        todo_id = store.create_todo("persist me")
        store.close()

        reopened = TodoStore(db_path)
        todos = reopened.get_all_todos()
        reopened.close()
        assert todos == [Todo(todo_id, "persist me", todos[0].created_at, todos[0].updated_at)]
