"""JSONL logging for observability.

Each event is one JSON object per line in ``<log_dir>/logs.jsonl``::

    {"timestamp": "...", "event": "tool_call", "session": "cli-1a2b3c4d",
     "tool": "createTodo", "args": {"input": "milk"}}

When the file grows past ``max_size_mb`` it is shifted to ``logs.1.jsonl``
and older backups move up one number; at most ``backups`` are kept.
"""

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

DEFAULT_LOG_DIR = Path.home() / ".todo_assistant" / "logs"

# Long model output is cut before it is written
MAX_CONTENT_CHARS = 2000


def build_event(event: str, session_id: str | None = None, **fields: Any) -> dict[str, Any]:
    """Assemble a log record, dropping fields that are None."""
    record: dict[str, Any] = {
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "event": event,
    }
    if session_id is not None:
        record["session"] = session_id
    record.update({k: v for k, v in fields.items() if v is not None})
    return record


class JSONLLogger:
    """Append structured events to a size-rotated JSONL file."""

    def __init__(
        self,
        log_dir: str | Path | None = None,
        max_size_mb: float = 10.0,
        backups: int = 3,
    ) -> None:
        self.log_dir = Path(log_dir) if log_dir is not None else DEFAULT_LOG_DIR
        self.log_dir.mkdir(parents=True, exist_ok=True)
        self.max_size_bytes = int(max_size_mb * 1024 * 1024)
        self.backups = backups
        self.session_id: str | None = None

    @property
    def log_path(self) -> Path:
        return self.log_dir / "logs.jsonl"

    def backup_path(self, index: int) -> Path:
        return self.log_dir / f"logs.{index}.jsonl"

    def _shift_backups(self) -> None:
        oldest = self.backup_path(self.backups)
        if oldest.exists():
            oldest.unlink()
        for index in range(self.backups - 1, 0, -1):
            path = self.backup_path(index)
            if path.exists():
                path.rename(self.backup_path(index + 1))
        self.log_path.rename(self.backup_path(1))

    def log(self, event: str, **fields: Any) -> None:
        """Write one event for the current session."""
        if self.log_path.exists() and self.log_path.stat().st_size >= self.max_size_bytes:
            self._shift_backups()

        record = build_event(event, self.session_id, **fields)
        with open(self.log_path, "a", encoding="utf-8") as f:
            f.write(json.dumps(record, ensure_ascii=False, default=str) + "\n")

    def log_llm_request(self, model: str, messages_count: int) -> None:
        self.log("llm_request", model=model, messages=messages_count)

    def log_llm_response(self, content: str, duration_ms: float) -> None:
        self.log(
            "llm_response",
            content=content[:MAX_CONTENT_CHARS],
            duration_ms=round(duration_ms, 1),
        )

    def log_tool_call(self, tool_name: str, args: dict[str, Any]) -> None:
        self.log("tool_call", tool=tool_name, args=args)

    def log_tool_result(
        self,
        tool_name: str,
        success: bool,
        *,
        duration_ms: float | None = None,
        error: str | None = None,
    ) -> None:
        """Record a tool outcome; ``error`` is kept only for failures."""
        self.log(
            "tool_result",
            tool=tool_name,
            success=success,
            duration_ms=None if duration_ms is None else round(duration_ms, 1),
            error=None if success else error,
        )

    def log_protocol_error(self, error: str, content: str) -> None:
        self.log("protocol_error", error=error, content=content[:MAX_CONTENT_CHARS])

    def log_transport_error(self, error: str) -> None:
        self.log("transport_error", error=error)

    def log_turn_complete(self, reason: str, *, rounds: int, tool_calls: int) -> None:
        self.log("turn_complete", reason=reason, rounds=rounds, tool_calls=tool_calls)


# Global logger instance
_logger: JSONLLogger | None = None


def get_logger() -> JSONLLogger:
    """Get the global logger instance."""
    global _logger
    if _logger is None:
        _logger = JSONLLogger()
    return _logger


def configure_logger(log_dir: str | Path | None = None, max_size_mb: float = 10.0) -> JSONLLogger:
    """Configure and return the global logger."""
    global _logger
    _logger = JSONLLogger(log_dir=log_dir, max_size_mb=max_size_mb)
    return _logger
