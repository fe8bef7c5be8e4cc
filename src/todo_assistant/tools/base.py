"""Base tool interface."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from ..agent.protocol import ToolAction


@dataclass
class ToolResult:
    """Result from tool execution.

    ``output`` is the JSON-ready value fed back to the model as an
    observation.
    """

    success: bool
    output: Any
    error: str | None = None


class Tool(ABC):
    """Base interface for all tools."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Unique tool name, as the model spells it."""
        ...

    @property
    @abstractmethod
    def description(self) -> str:
        """Tool description for the system prompt."""
        ...

    @property
    @abstractmethod
    def parameters(self) -> dict[str, Any]:
        """JSON Schema for tool parameters."""
        ...

    @abstractmethod
    async def execute(self, **kwargs: Any) -> ToolResult:
        """Execute the tool with given arguments."""
        ...

    def bind(self, action: ToolAction) -> dict[str, Any]:
        """Map an action object onto this tool's keyword arguments.

        The default passes ``input`` when the tool declares it.
        """
        if "input" in self.parameters.get("properties", {}) and action.input is not None:
            return {"input": action.input}
        return {}

    @property
    def signature(self) -> str:
        """Call signature shown in the system prompt, e.g. ``createTodo(input: string)``."""
        properties = self.parameters.get("properties", {})
        args = ", ".join(f"{key}: {spec.get('type', 'any')}" for key, spec in properties.items())
        return f"{self.name}({args})"

    def validate_args(self, args: dict[str, Any]) -> tuple[bool, str | None]:
        """Validate arguments against schema. Returns (valid, error_message)."""
        required = self.parameters.get("required", [])
        properties = self.parameters.get("properties", {})

        for field in required:
            if field not in args:
                return False, f"Missing required argument: {field}"

        for key, value in args.items():
            if key not in properties:
                continue
            expected_type = properties[key].get("type")
            if expected_type == "string" and not isinstance(value, str):
                return False, f"Argument '{key}' must be a string"

        return True, None
