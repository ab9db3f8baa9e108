"""Structured Logging - JSON formatter output."""

import json
import logging

from guestlist.infrastructure.observability import JSONFormatter


def _record(**extra):
    record = logging.LogRecord(
        "guestlist.services.invite_registry", logging.INFO, __file__, 1,
        "[Scanned] Jane Doe", None, None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_base_fields():
    log = json.loads(JSONFormatter().format(_record()))
    assert log["level"] == "INFO"
    assert log["logger"] == "guestlist.services.invite_registry"
    assert log["message"] == "[Scanned] Jane Doe"
    assert "timestamp" in log


def test_json_formatter_surfaces_invite_extras():
    log = json.loads(JSONFormatter().format(
        _record(invite_key="jane_doe_ab123", guest_name="Jane Doe"),
    ))
    assert log["invite_key"] == "jane_doe_ab123"
    assert log["guest_name"] == "Jane Doe"
    assert "error_code" not in log
