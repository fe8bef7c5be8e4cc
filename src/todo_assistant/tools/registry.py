"""Closed dispatch table from tool name to tool."""

from collections.abc import Iterable

from ..agent.protocol import ToolAction
from .base import Tool, ToolResult


class ToolRegistry:
    """Fixed set of tools the model may call.

    The table is populated once at construction and never changes.
    """

    def __init__(self, tools: Iterable[Tool]) -> None:
        self._tools: dict[str, Tool] = {}
        for tool in tools:
            if tool.name in self._tools:
                raise ValueError(f"Tool '{tool.name}' already registered")
            self._tools[tool.name] = tool

    def __contains__(self, name: object) -> bool:
        return name in self._tools

    def __len__(self) -> int:
        return len(self._tools)

    def get(self, name: str) -> Tool | None:
        """Get a tool by name."""
        return self._tools.get(name)

    def list_tools(self) -> list[str]:
        """List all registered tool names."""
        return list(self._tools.keys())

    def tools(self) -> list[Tool]:
        """All registered tools in registration order."""
        return list(self._tools.values())

    async def dispatch(self, action: ToolAction) -> ToolResult:
        """Invoke the tool named by an action object."""
        tool = self._tools.get(action.function)
        if tool is None:
            return ToolResult(
                success=False,
                output=None,
                error=f"Unknown tool: {action.function}",
            )

        args = tool.bind(action)
        valid, error = tool.validate_args(args)
        if not valid:
            return ToolResult(success=False, output=None, error=error)

        try:
            return await tool.execute(**args)
        except Exception as e:
            return ToolResult(
                success=False,
                output=None,
                error=f"Tool execution failed: {e}",
            )
