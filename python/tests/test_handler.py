"""
stdlib logging bridge.
"""

from __future__ import annotations

import json
import logging

import pytest

from cloudlog import CloudHandler, new, setup_logging


@pytest.fixture
def std_logger(sink):
    logger = logging.getLogger("cloudlog.tests.handler")
    handler = CloudHandler(new(sink))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False
    yield logger
    logger.removeHandler(handler)


def test_levels_map_to_severities(std_logger, sink):
    std_logger.debug("d")
    std_logger.info("i %s", "x")
    std_logger.warning("w")
    std_logger.error("e")
    std_logger.critical("c")
    got = [json.loads(line) for line in sink.getvalue().splitlines()]
    assert got == [
        {"message": "d", "severity": "DEBUG"},
        {"message": "i x", "severity": "INFO"},
        {"message": "w", "severity": "WARNING"},
        {"message": "e", "severity": "ERROR"},
        {"message": "c", "severity": "CRITICAL"},
    ]


def test_json_fields_become_payload(std_logger, sink):
    std_logger.info("order placed", extra={"json_fields": {"order_id": 7}})
    assert sink.getvalue() == '{"message":"order placed","severity":"INFO","order_id":7}\n'


def test_exception_text_in_message(std_logger, sink):
    try:
        raise KeyError("missing")
    except KeyError:
        std_logger.exception("lookup failed")
    got = json.loads(sink.getvalue())
    assert got["severity"] == "ERROR"
    assert got["message"].startswith("lookup failed\nTraceback")
    assert "KeyError: 'missing'" in got["message"]


def test_emit_errors_use_handle_error(sink, monkeypatch):
    handler = CloudHandler(new(sink))
    seen = []
    monkeypatch.setattr(handler, "handleError", seen.append)
    record = logging.LogRecord("x", logging.INFO, __file__, 1, "%d", ("not a number",), None)
    handler.emit(record)
    assert seen == [record]
    assert sink.getvalue() == ""


def test_setup_logging_installs_root_handler(capsys):
    root = logging.getLogger()
    saved = root.handlers[:], root.level
    try:
        handler = setup_logging(logging.WARNING)
        assert root.handlers == [handler]
        logging.getLogger("cloudlog.tests").warning("careful")
        logging.getLogger("cloudlog.tests").info("hidden")
        assert capsys.readouterr().out == '{"message":"careful","severity":"WARNING"}\n'
    finally:
        root.handlers, root.level = saved[0], saved[1]
