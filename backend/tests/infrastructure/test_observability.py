"""Structured Logging — JSON formatter output and setup_logging idempotence."""

import json
import logging
import sys

from users_api.infrastructure.observability import JSONFormatter, setup_logging


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "users_api.test", logging.WARNING, __file__, 1, "user %s gone", ("u1",), None,
    )
    record.__dict__.update(extra)
    return record


def test_json_formatter_core_fields():
    log = json.loads(JSONFormatter().format(_record()))
    assert log["level"] == "WARNING"
    assert log["logger"] == "users_api.test"
    assert log["message"] == "user u1 gone"
    assert "timestamp" in log


def test_json_formatter_surfaces_known_extras_only():
    log = json.loads(JSONFormatter().format(
        _record(user_id="u1", error_code="USER_NOT_FOUND", secret="x"),
    ))
    assert log["user_id"] == "u1"
    assert log["error_code"] == "USER_NOT_FOUND"
    assert "secret" not in log


def test_json_formatter_includes_exception():
    try:
        raise ValueError("boom")
    except ValueError:
        record = _record()
        record.exc_info = sys.exc_info()
    log = json.loads(JSONFormatter().format(record))
    assert "ValueError: boom" in log["exception"]


def test_setup_logging_replaces_its_own_handler():
    before = list(logging.root.handlers)
    try:
        first = setup_logging("DEBUG", "json")
        second = setup_logging("INFO", "text")
        assert first not in logging.root.handlers
        assert second in logging.root.handlers
        assert isinstance(second.formatter, logging.Formatter)
        assert not isinstance(second.formatter, JSONFormatter)
        assert logging.root.level == logging.INFO
    finally:
        for handler in list(logging.root.handlers):
            if handler not in before:
                logging.root.removeHandler(handler)
