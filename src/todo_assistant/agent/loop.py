"""Dispatch loop: one user turn through model and tool round-trips."""

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any

from ..errors import InvalidJSONError, TransportError, UnknownActionTypeError
from ..logging import JSONLLogger, get_logger
from .conversation import Conversation
from .prompt import (
    INVALID_JSON_MESSAGE,
    tool_error_message,
    transport_error_message,
    unknown_function_message,
    unknown_type_message,
)
from .protocol import Observation, Output, ToolAction, parse_action, to_json

if TYPE_CHECKING:
    from ..llm import CompletionClient
    from ..tools.registry import ToolRegistry


class TurnState(Enum):
    """Where a round left the turn."""

    AWAITING_MODEL = "awaiting_model"
    GOT_ACTION = "got_action"
    PROTOCOL_ERROR = "protocol_error"
    GOT_OUTPUT = "got_output"


class StopReason(Enum):
    """Reasons for ending a turn."""

    COMPLETE = "complete"
    MAX_ROUNDS = "max_rounds"


@dataclass
class AgentConfig:
    """Configuration for the dispatch loop.

    ``max_rounds`` of None keeps asking the model until it produces an
    output message.
    """

    max_rounds: int | None = None

    def __post_init__(self) -> None:
        if self.max_rounds is not None and self.max_rounds < 1:
            raise ValueError(f"max_rounds must be at least 1, got {self.max_rounds}")


@dataclass
class TurnResult:
    """Result from running one turn."""

    output: str
    stop_reason: StopReason
    rounds: int
    tool_calls: list[dict[str, Any]] = field(default_factory=list)


class AgentLoop:
    """Send the conversation, parse the reply, act, repeat until output."""

    def __init__(
        self,
        registry: ToolRegistry,
        client: CompletionClient,
        config: AgentConfig | None = None,
        logger: JSONLLogger | None = None,
        on_transport_error: Callable[[TransportError], None] | None = None,
    ) -> None:
        self.registry = registry
        self.client = client
        self.config = config or AgentConfig()
        self.logger = logger or get_logger()
        self.on_transport_error = on_transport_error

    async def run_turn(self, conversation: Conversation) -> TurnResult:
        """Run the loop until the model emits an output message.

        The caller must already have appended the user's message. Every
        completion, observation and correction is appended to
        ``conversation`` in place.

        Args:
            conversation: The conversation to continue.

        Returns:
            TurnResult with the output text and bookkeeping.
        """
        tool_calls: list[dict[str, Any]] = []
        rounds = 0

        while self.config.max_rounds is None or rounds < self.config.max_rounds:
            rounds += 1
            state, output = await self._step(conversation, tool_calls)
            if state is TurnState.GOT_OUTPUT:
                self.logger.log_turn_complete(
                    StopReason.COMPLETE.value, rounds=rounds, tool_calls=len(tool_calls)
                )
                return TurnResult(
                    output=output or "",
                    stop_reason=StopReason.COMPLETE,
                    rounds=rounds,
                    tool_calls=tool_calls,
                )

        self.logger.log_turn_complete(
            StopReason.MAX_ROUNDS.value, rounds=rounds, tool_calls=len(tool_calls)
        )
        return TurnResult(
            output="",
            stop_reason=StopReason.MAX_ROUNDS,
            rounds=rounds,
            tool_calls=tool_calls,
        )

    async def _step(
        self,
        conversation: Conversation,
        tool_calls: list[dict[str, Any]],
    ) -> tuple[TurnState, str | None]:
        """One model round-trip and its consequences."""
        self.logger.log_llm_request(self.client.model, len(conversation))
        start_time = time.time()
        try:
            content = await self.client.complete(conversation.to_messages())
        except TransportError as e:
            self.logger.log_transport_error(str(e))
            if self.on_transport_error is not None:
                self.on_transport_error(e)
            conversation.add_system(transport_error_message(e))
            return TurnState.AWAITING_MODEL, None
        self.logger.log_llm_response(content, (time.time() - start_time) * 1000)

        # Recorded before parsing so the model can see what it got wrong
        conversation.add_assistant(content)

        try:
            action = parse_action(content)
        except InvalidJSONError as e:
            self.logger.log_protocol_error(str(e), content)
            conversation.add_system(INVALID_JSON_MESSAGE)
            return TurnState.PROTOCOL_ERROR, None
        except UnknownActionTypeError as e:
            self.logger.log_protocol_error(str(e), content)
            conversation.add_system(unknown_type_message(e.action_type))
            return TurnState.PROTOCOL_ERROR, None

        if isinstance(action, Output):
            return TurnState.GOT_OUTPUT, action.output

        if isinstance(action, ToolAction):
            return await self._invoke(action, conversation, tool_calls)

        self.logger.log_protocol_error(f"Unexpected action type: {action.type}", content)
        conversation.add_system(unknown_type_message(action.type))
        return TurnState.PROTOCOL_ERROR, None

    async def _invoke(
        self,
        action: ToolAction,
        conversation: Conversation,
        tool_calls: list[dict[str, Any]],
    ) -> tuple[TurnState, str | None]:
        """Dispatch a tool action and record its observation."""
        tool = self.registry.get(action.function)
        if tool is None:
            self.logger.log_protocol_error(f"Unknown function: {action.function}", to_json(action))
            conversation.add_system(
                unknown_function_message(action.function, self.registry.list_tools())
            )
            return TurnState.PROTOCOL_ERROR, None

        args = tool.bind(action)
        tool_calls.append({"name": action.function, "args": args})
        self.logger.log_tool_call(action.function, args)

        start_time = time.time()
        result = await self.registry.dispatch(action)
        self.logger.log_tool_result(
            action.function,
            result.success,
            duration_ms=(time.time() - start_time) * 1000,
            error=result.error,
        )

        if result.success:
            conversation.add_assistant(to_json(Observation(observation=result.output)))
        else:
            conversation.add_system(tool_error_message(action.function, result.error))
        return TurnState.GOT_ACTION, None
