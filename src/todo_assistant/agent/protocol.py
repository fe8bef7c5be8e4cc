"""JSON action objects exchanged with the model.

Every completion must be a single JSON object tagged by ``type``::

    {"type": "plan", "plan": "I will use createTodo ..."}
    {"type": "action", "function": "createTodo", "input": "Buy milk"}
    {"type": "observation", "observation": "3f2a..."}
    {"type": "output", "output": "Your todo has been added"}

The shape is not enforced by a schema validator; anything that does not
parse is handed back to the model as a correction.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Union

from ..errors import InvalidJSONError, UnknownActionTypeError


@dataclass(frozen=True)
class UserMessage:
    user: str

    type = "user"

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type, "user": self.user}


@dataclass(frozen=True)
class Plan:
    plan: str

    type = "plan"

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type, "plan": self.plan}


@dataclass(frozen=True)
class ToolAction:
    """A request to invoke a named tool."""

    function: str
    input: Any = None
    id: str | None = None

    type = "action"

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"type": self.type, "function": self.function}
        if self.id is not None:
            data["id"] = self.id
        if self.input is not None:
            data["input"] = self.input
        return data


@dataclass(frozen=True)
class Observation:
    """The result of a tool invocation."""

    observation: Any

    type = "observation"

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type, "observation": self.observation}


@dataclass(frozen=True)
class Output:
    """Final text shown to the user; ends the turn."""

    output: str

    type = "output"

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type, "output": self.output}


Action = Union[UserMessage, Plan, ToolAction, Observation, Output]


def to_json(action: Action) -> str:
    """Serialize an action object for the conversation."""
    return json.dumps(action.to_dict(), ensure_ascii=False)


def _text(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else json.dumps(value, ensure_ascii=False)


def parse_action(text: str) -> Action:
    """Parse a completion into an action object.

    Args:
        text: Raw completion text.

    Returns:
        The matching action variant.

    Raises:
        InvalidJSONError: If text is not a JSON object.
        UnknownActionTypeError: If ``type`` is missing or unrecognized.
    """
    try:
        data = json.loads(text)
    except (ValueError, TypeError, RecursionError) as e:
        raise InvalidJSONError(f"Invalid JSON: {e}") from e

    if not isinstance(data, dict):
        raise InvalidJSONError("Expected a JSON object")

    action_type = data.get("type")

    if action_type == "output":
        return Output(output=_text(data.get("output")))
    if action_type == "action":
        raw_id = data.get("id")
        return ToolAction(
            function=_text(data.get("function")),
            input=data.get("input"),
            id=None if raw_id is None else str(raw_id),
        )
    if action_type == "plan":
        return Plan(plan=_text(data.get("plan")))
    if action_type == "observation":
        return Observation(observation=data.get("observation"))
    if action_type == "user":
        return UserMessage(user=_text(data.get("user")))

    raise UnknownActionTypeError(action_type)
