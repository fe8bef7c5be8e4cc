"""Todo persistence and the tools that expose it."""

from .models import Todo
from .store import TodoStore
from .tools import (
    CreateTodoTool,
    DeleteTodoByIdTool,
    GetAllTodosTool,
    SearchTodosTool,
    UpdateTodoByIdTool,
    build_todo_registry,
)

__all__ = [
    "CreateTodoTool",
    "DeleteTodoByIdTool",
    "GetAllTodosTool",
    "SearchTodosTool",
    "Todo",
    "TodoStore",
    "UpdateTodoByIdTool",
    "build_todo_registry",
]
