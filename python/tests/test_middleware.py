"""
ASGI middleware exposing request-scoped loggers.
"""

from __future__ import annotations

import json

import pytest
from fastapi import FastAPI, Request
from fastapi.testclient import TestClient

from cloudlog import Config, TraceMiddleware, get_logger
from cloudlog.middleware import request_logger

HEADER = "00000000000000000000000000000001/1;o=1"


@pytest.fixture
def client():
    app = FastAPI()
    app.add_middleware(TraceMiddleware, config=Config(project_id="my-project"))

    @app.get("/trace")
    def trace(request: Request):
        logger = request_logger(request)
        logger.info("handled")
        return {"trace": logger.trace, "span": logger.span_id}

    return TestClient(app)


def test_request_gets_trace(client, capsys):
    r = client.get("/trace", headers={"X-Cloud-Trace-Context": HEADER})
    assert r.status_code == 200
    body = r.json()
    assert json.loads(body["trace"]) == "projects/my-project/traces/00000000000000000000000000000001"
    assert body["span"] == "0000000000000001"
    line = json.loads(capsys.readouterr().out.splitlines()[-1])
    assert line["logging.googleapis.com/trace"].endswith("/traces/00000000000000000000000000000001")


def test_request_without_header(client):
    r = client.get("/trace")
    assert r.json() == {"trace": "", "span": ""}


def test_opted_out_request(client):
    r = client.get("/trace", headers={"X-Cloud-Trace-Context": HEADER.replace("o=1", "o=0")})
    assert r.json() == {"trace": "", "span": ""}


def test_request_logger_falls_back_to_default():
    class Bare:
        pass

    assert request_logger(Bare()) is get_logger()
