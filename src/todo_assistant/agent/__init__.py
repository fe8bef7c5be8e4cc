"""Conversation state, action protocol and dispatch loop."""

from .conversation import Conversation, Message, Role
from .loop import AgentConfig, AgentLoop, StopReason, TurnResult, TurnState
from .prompt import build_system_prompt

__all__ = [
    "AgentConfig",
    "AgentLoop",
    "Conversation",
    "Message",
    "Role",
    "StopReason",
    "TurnResult",
    "TurnState",
    "build_system_prompt",
]
