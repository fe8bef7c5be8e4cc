"""Data models for the todo list."""

from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True)
class Todo:
    """A single todo row.

    Attributes:
        id: Opaque identifier assigned by the store.
        title: Free-text title, never empty.
        created_at: Timestamp when the row was inserted.
        updated_at: Timestamp of the last title change.
    """

    id: str
    title: str
    created_at: str
    updated_at: str

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-ready dict."""
        return asdict(self)
