"""Tests for JSONL logging."""

import json
from pathlib import Path

import pytest

from todo_assistant.logging import JSONLLogger, build_event, configure_logger, get_logger


@pytest.fixture
def logger(tmp_path: Path) -> JSONLLogger:
    return JSONLLogger(log_dir=tmp_path / "jsonl")


def read_entries(logger: JSONLLogger) -> list[dict]:
    with open(logger.log_path) as f:
        return [json.loads(line) for line in f]


def test_build_event_drops_none():
    record = build_event("test", None, tool=None, rounds=2)
    assert set(record) == {"timestamp", "event", "rounds"}
    assert record["event"] == "test"


def test_log_creates_file(logger: JSONLLogger):
    logger.log("test_event")
    assert logger.log_path.exists()


def test_log_writes_one_line_per_event(logger: JSONLLogger):
    logger.log("event1")
    logger.log("event2")

    assert [e["event"] for e in read_entries(logger)] == ["event1", "event2"]


def test_session_id_applied(logger: JSONLLogger):
    logger.session_id = "cli-1234abcd"
    logger.log("session_start")
    assert read_entries(logger)[0]["session"] == "cli-1234abcd"


def test_fields_are_top_level(logger: JSONLLogger):
    logger.log_llm_request("model-x", 4)
    entry = read_entries(logger)[0]
    assert entry["event"] == "llm_request"
    assert entry["model"] == "model-x"
    assert entry["messages"] == 4


def test_tool_result_error_only_on_failure(logger: JSONLLogger):
    logger.log_tool_result("createTodo", True, error="ignored")
    logger.log_tool_result("createTodo", False, error="bad input")

    ok, failed = read_entries(logger)
    assert "error" not in ok
    assert failed["error"] == "bad input"
    assert failed["success"] is False
    assert failed["tool"] == "createTodo"


def test_long_content_truncated(logger: JSONLLogger):
    logger.log_protocol_error("Invalid JSON", "x" * 5000)
    assert len(read_entries(logger)[0]["content"]) == 2000


def test_rotation_keeps_numbered_backups(tmp_path: Path):
    logger = JSONLLogger(log_dir=tmp_path, max_size_mb=0.0001, backups=2)
    for _ in range(10):
        logger.log("filler", content="x" * 150)

    names = sorted(p.name for p in tmp_path.iterdir())
    assert names == ["logs.1.jsonl", "logs.2.jsonl", "logs.jsonl"]


def test_configure_replaces_global(tmp_path: Path):
    configured = configure_logger(tmp_path / "other")
    assert get_logger() is configured
    assert configured.log_dir == tmp_path / "other"
