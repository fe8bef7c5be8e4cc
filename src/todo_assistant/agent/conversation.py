"""Conversation state passed through each turn."""

from dataclasses import dataclass, field
from enum import Enum


class Role(Enum):
    """Message roles understood by the completion endpoint."""

    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"


@dataclass(frozen=True)
class Message:
    role: Role
    content: str

    def to_dict(self) -> dict[str, str]:
        return {"role": self.role.value, "content": self.content}


@dataclass
class Conversation:
    """Append-only ordered message history.

    The whole history is sent on every completion call; nothing is
    summarized or dropped.
    """

    messages: list[Message] = field(default_factory=list)

    @classmethod
    def start(cls, system_prompt: str) -> "Conversation":
        """Create a conversation seeded with the system prompt."""
        conversation = cls()
        conversation.add_system(system_prompt)
        return conversation

    def __len__(self) -> int:
        return len(self.messages)

    def append(self, role: Role, content: str) -> None:
        self.messages.append(Message(role=role, content=content))

    def add_system(self, content: str) -> None:
        self.append(Role.SYSTEM, content)

    def add_user(self, content: str) -> None:
        self.append(Role.USER, content)

    def add_assistant(self, content: str) -> None:
        self.append(Role.ASSISTANT, content)

    def last(self) -> Message | None:
        """The most recent message, if any."""
        return self.messages[-1] if self.messages else None

    def to_messages(self) -> list[dict[str, str]]:
        """Payload for the completion call."""
        return [message.to_dict() for message in self.messages]
