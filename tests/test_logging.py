"""Tests for structured logging."""

import json
import logging

from gcp_common.logging import StructuredLogger, log_info
from gcp_common.logging.logger import CloudLoggingJSONFormatter


def _record(message, level=logging.INFO):
    return logging.LogRecord("gcp_common.test", level, __file__, 1, message, None, None)


def test_formatter_emits_json_for_structured_messages():
    formatter = CloudLoggingJSONFormatter()
    line = formatter.format(
        _record(json.dumps({"message": "Created topic", "topic": "projects/p/topics/t"}))
    )

    entry = json.loads(line)
    assert entry["severity"] == "INFO"
    assert entry["message"] == "Created topic"
    assert entry["topic"] == "projects/p/topics/t"
    assert entry["timestamp"].endswith("Z")


def test_formatter_leaves_plain_messages_alone():
    formatter = CloudLoggingJSONFormatter(fmt="%(levelname)s %(message)s")

    assert formatter.format(_record("plain text")) == "INFO plain text"


def test_structured_logger_plain_message_without_fields():
    logger = StructuredLogger(logging.getLogger("gcp_common.test"))

    assert logger._format_structured_message("hello") == "hello"


def test_structured_logger_drops_none_fields_and_prefixes_correlation_id():
    logger = StructuredLogger(logging.getLogger("gcp_common.test"))

    payload = json.loads(
        logger._format_structured_message(
            "Pulled", correlation_id="c-1", subscription="s", count=None
        )
    )

    assert payload == {"message": "[c-1] Pulled", "correlation_id": "c-1", "subscription": "s"}


def test_log_info_uses_caller_module_logger(caplog):
    with caplog.at_level(logging.INFO):
        log_info("Created topic", topic="projects/p/topics/t")

    record = caplog.records[-1]
    assert record.name == __name__
    assert json.loads(record.getMessage())["topic"] == "projects/p/topics/t"
