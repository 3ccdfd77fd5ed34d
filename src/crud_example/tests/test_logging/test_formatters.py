# src/crud_example/tests/test_logging/test_formatters.py
import json
import sys
import logging

from crud_example.core.logging.formatters import ColorFormatter, JsonFormatter


def make_record(msg="hello %s", args=("tester",), exc_info=None):
    return logging.LogRecord("crud_example.services", logging.INFO, __file__, 10, msg, args, exc_info)


def test_json_formatter_basic_fields():
    rec = make_record()
    # simulate extra={"operation": ..., "person_id": ...}
    rec.operation = "add_person"
    rec.person_id = "8082ed0c"
    rec.request_id = "req-1"

    data = json.loads(JsonFormatter(env="testing", service="svc").format(rec))

    assert data["message"] == "hello tester"
    assert data["level"] == "INFO"
    assert data["logger"] == "crud_example.services"
    assert data["service"] == "svc"
    assert data["env"] == "testing"
    assert data["request_id"] == "req-1"
    assert data["operation"] == "add_person"
    assert data["person_id"] == "8082ed0c"
    assert "timestamp" in data
    assert "version" in data


def test_json_formatter_skips_record_internals():
    data = json.loads(JsonFormatter().format(make_record()))

    # LogRecord bookkeeping attributes are not repeated as extras
    for internal in ("args", "msg", "levelno", "thread", "processName", "created"):
        assert internal not in data
    assert data["request_id"] == "-"


def test_json_formatter_non_serializable_extra():
    rec = make_record()

    class X:
        def __str__(self):
            return "<X>"

    rec.obj = X()

    data = json.loads(JsonFormatter(env="dev", service="svc").format(rec))

    assert data["obj"] == "<X>"


def test_json_formatter_includes_exception():
    try:
        raise ValueError("boom")
    except ValueError:
        rec = make_record(msg="failed", args=None, exc_info=sys.exc_info())

    data = json.loads(JsonFormatter().format(rec))

    assert "ValueError: boom" in data["exc_info"]


def test_color_formatter_line_layout():
    rec = make_record()
    rec.request_id = "req-42"

    line = ColorFormatter().format(rec)

    parts = [p.strip() for p in line.split(" | ")]
    assert "INFO" in parts[1]
    assert parts[2] == "crud_example.services"
    assert parts[3] == "req-42"
    assert parts[4] == "hello tester"
