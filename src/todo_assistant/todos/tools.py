"""Todo tools exposed to the model."""

from typing import Any

from ..agent.protocol import ToolAction
from ..errors import TodoStoreError
from ..tools.base import Tool, ToolResult
from ..tools.registry import ToolRegistry
from .store import TodoStore


class _TodoTool(Tool):
    """Shared constructor for tools backed by a TodoStore."""

    def __init__(self, store: TodoStore) -> None:
        """Initialize with a todo store.

        Args:
            store: The TodoStore for persistence.
        """
        self.store = store


class GetAllTodosTool(_TodoTool):
    """Tool for listing every todo."""

    @property
    def name(self) -> str:
        return "getAllTodos"

    @property
    def description(self) -> str:
        return "Returns all the Todos from Database"

    @property
    def parameters(self) -> dict[str, Any]:
        return {"type": "object", "properties": {}, "required": []}

    async def execute(self, **kwargs: Any) -> ToolResult:
        try:
            todos = self.store.get_all_todos()
        except TodoStoreError as e:
            return ToolResult(success=False, output=None, error=f"Failed to retrieve todos: {e}")
        return ToolResult(success=True, output=[todo.to_dict() for todo in todos])


class CreateTodoTool(_TodoTool):
    """Tool for adding a todo."""

    @property
    def name(self) -> str:
        return "createTodo"

    @property
    def description(self) -> str:
        return (
            "Creates or add a new Todo in the DB and takes input todo as a string "
            "and return the id of created todo"
        )

    @property
    def parameters(self) -> dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "input": {"type": "string", "description": "Title of the new todo"},
            },
            "required": ["input"],
        }

    async def execute(self, **kwargs: Any) -> ToolResult:
        """Create a todo.

        Args:
            input: The todo title.

        Returns:
            ToolResult whose output is the new id.
        """
        try:
            todo_id = self.store.create_todo(kwargs.get("input"))
        except TodoStoreError as e:
            return ToolResult(success=False, output=None, error=f"Failed to create todo: {e}")
        return ToolResult(success=True, output=todo_id)


class UpdateTodoByIdTool(_TodoTool):
    """Tool for renaming a todo."""

    @property
    def name(self) -> str:
        return "updateTodoById"

    @property
    def description(self) -> str:
        return "Updates the todo, use ID and Input to update the todo given in the DB"

    @property
    def parameters(self) -> dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "id": {"type": "string", "description": "Id of the todo"},
                "input": {"type": "string", "description": "New title"},
            },
            "required": ["id", "input"],
        }

    def bind(self, action: ToolAction) -> dict[str, Any]:
        args: dict[str, Any] = {}
        if action.id is not None:
            args["id"] = action.id
        if action.input is not None:
            args["input"] = action.input
        return args

    async def execute(self, **kwargs: Any) -> ToolResult:
        try:
            todo_id = self.store.update_todo_by_id(kwargs.get("id"), kwargs.get("input"))
        except TodoStoreError as e:
            return ToolResult(success=False, output=None, error=f"Failed to update todo: {e}")
        return ToolResult(success=True, output=todo_id)


class DeleteTodoByIdTool(_TodoTool):
    """Tool for removing a todo."""

    @property
    def name(self) -> str:
        return "deleteTodoById"

    @property
    def description(self) -> str:
        return "Deleted the todo by ID given in the DB"

    @property
    def parameters(self) -> dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "id": {"type": "string", "description": "Id of the todo"},
            },
            "required": ["id"],
        }

    def bind(self, action: ToolAction) -> dict[str, Any]:
        # Accept the id in either slot
        todo_id = action.id if action.id is not None else action.input
        return {"id": todo_id} if todo_id is not None else {}

    async def execute(self, **kwargs: Any) -> ToolResult:
        try:
            todo_id = self.store.delete_todo_by_id(kwargs.get("id"))
        except TodoStoreError as e:
            return ToolResult(success=False, output=None, error=f"Failed to delete todo: {e}")
        return ToolResult(success=True, output=todo_id)


class SearchTodosTool(_TodoTool):
    """Tool for substring search over titles."""

    @property
    def name(self) -> str:
        return "searchTodos"

    @property
    def description(self) -> str:
        return "Searches for all todos matching the search string"

    @property
    def parameters(self) -> dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "input": {"type": "string", "description": "Text to search for"},
            },
            "required": ["input"],
        }

    async def execute(self, **kwargs: Any) -> ToolResult:
        try:
            todos = self.store.search_todos(kwargs.get("input"))
        except TodoStoreError as e:
            return ToolResult(success=False, output=None, error=f"Failed to search todos: {e}")
        return ToolResult(success=True, output=[todo.to_dict() for todo in todos])


def build_todo_registry(store: TodoStore) -> ToolRegistry:
    """Build the fixed registry of the five todo tools."""
    return ToolRegistry([
        GetAllTodosTool(store),
        CreateTodoTool(store),
        UpdateTodoByIdTool(store),
        DeleteTodoByIdTool(store),
        SearchTodosTool(store),
    ])
