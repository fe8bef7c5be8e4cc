"""Shared fixtures."""

from collections.abc import Iterator
from pathlib import Path

import pytest

from todo_assistant.logging import JSONLLogger, configure_logger
from todo_assistant.todos import TodoStore


@pytest.fixture(autouse=True)
def jsonl_logger(tmp_path_factory: pytest.TempPathFactory) -> JSONLLogger:
    """Keep log output inside a per-test temp directory."""
    return configure_logger(tmp_path_factory.mktemp("logs"))


@pytest.fixture
def store(tmp_path: Path) -> Iterator[TodoStore]:
    """Create a TodoStore with a temporary database."""
    store = TodoStore(tmp_path / "todos.db")
    store.init_db()
    yield store
    store.close()
