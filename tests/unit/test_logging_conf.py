"""
Unit tests for logging_conf.py
"""
import json
import logging

from app.logging_conf import JsonFormatter


def _record(msg, **extra):
    record = logging.LogRecord("api", logging.INFO, __file__, 1, msg, None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_formats_message_and_extras():
    out = json.loads(JsonFormatter().format(_record("request.end", status_code=200, path="/0")))
    assert out["message"] == "request.end"
    assert out["level"] == "INFO"
    assert out["logger"] == "api"
    assert out["status_code"] == 200
    assert out["path"] == "/0"
    assert "lineno" not in out


def test_dict_message_merged():
    out = json.loads(JsonFormatter().format(_record({"event": "summary", "found_pages": 4})))
    assert out["event"] == "summary"
    assert out["found_pages"] == 4
    assert "message" not in out
