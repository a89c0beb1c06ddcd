from __future__ import annotations

import json
import logging
import sys

from app.logging_config import LOGGER_NAME, JSONFormatter, setup_logging


def _record(**kwargs) -> logging.LogRecord:
    record = logging.LogRecord(LOGGER_NAME, logging.INFO, __file__, 1, "Receipt stored", None, None)
    for key, value in kwargs.items():
        setattr(record, key, value)
    return record


def test_json_formatter_includes_extra_data():
    line = JSONFormatter().format(_record(extra_data={"receipt_id": "abc", "items_count": 5}))
    entry = json.loads(line)
    assert entry["level"] == "INFO"
    assert entry["logger"] == LOGGER_NAME
    assert entry["message"] == "Receipt stored"
    assert entry["receipt_id"] == "abc"
    assert entry["items_count"] == 5
    assert entry["timestamp"].endswith("Z")


def test_json_formatter_includes_exception():
    try:
        raise RuntimeError("boom")
    except RuntimeError:
        record = _record(exc_info=sys.exc_info())
    entry = json.loads(JSONFormatter().format(record))
    assert "RuntimeError: boom" in entry["exception"]


def test_setup_logging_installs_one_handler():
    logger = setup_logging("DEBUG")
    setup_logging("DEBUG")
    json_handlers = [h for h in logger.handlers if isinstance(h.formatter, JSONFormatter)]
    assert len(json_handlers) == 1
    assert logger.level == logging.DEBUG
    setup_logging("INFO")
