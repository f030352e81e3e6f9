"""Structured Logging — JSON formatter shape and extra fields."""

import json
import logging
import sys

from crave.infrastructure.observability import JSONFormatter, setup_logging


def _record(msg="hello", **extra):
    record = logging.LogRecord(
        "crave.test", logging.WARNING, __file__, 1, msg, None, None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_has_base_fields():
    payload = json.loads(JSONFormatter().format(_record()))
    assert payload["level"] == "WARNING"
    assert payload["logger"] == "crave.test"
    assert payload["message"] == "hello"
    assert "timestamp" in payload


def test_json_includes_known_extras_only():
    payload = json.loads(JSONFormatter().format(_record(
        error_code="RESOURCE_NOT_FOUND", entity="Order", entity_id=4,
        unrelated="x",
    )))
    assert payload["error_code"] == "RESOURCE_NOT_FOUND"
    assert payload["entity"] == "Order"
    assert payload["entity_id"] == 4
    assert "unrelated" not in payload


def test_json_includes_exception():
    try:
        raise RuntimeError("boom")
    except RuntimeError:
        record = _record()
        record.exc_info = sys.exc_info()
    payload = json.loads(JSONFormatter().format(record))
    assert "RuntimeError: boom" in payload["exception"]


def test_setup_logging_sets_level_and_formatter():
    before = list(logging.root.handlers)
    try:
        setup_logging("debug", "json")
        assert logging.root.level == logging.DEBUG
        added = [h for h in logging.root.handlers if h not in before]
        assert isinstance(added[0].formatter, JSONFormatter)
    finally:
        for handler in list(logging.root.handlers):
            if handler not in before:
                logging.root.removeHandler(handler)
