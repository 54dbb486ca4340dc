import logging

from fastapi import FastAPI, Request
from fastapi.testclient import TestClient

from starflow.core.logging import get_request_id
from starflow.core.middleware.request_id import RequestIdMiddleware


def _make_app():
    app = FastAPI()
    app.add_middleware(RequestIdMiddleware)

    @app.get("/")
    async def root(request: Request):
        return {
            "request_id": getattr(request.state, "request_id", None),
            "context_id": get_request_id(),
        }

    return app


def test_generates_request_id_when_missing():
    client = TestClient(_make_app())

    resp = client.get("/")
    assert resp.status_code == 200
    rid_header = resp.headers.get("x-request-id")
    body = resp.json()

    assert rid_header
    assert body["request_id"] == rid_header
    assert body["context_id"] == rid_header


def test_echoes_provided_request_id():
    client = TestClient(_make_app())

    provided = "test-rid-123"
    resp = client.get("/", headers={"X-Request-Id": provided})

    assert resp.headers.get("x-request-id") == provided
    assert resp.json()["request_id"] == provided


def test_context_cleared_after_request():
    client = TestClient(_make_app())
    client.get("/", headers={"X-Request-Id": "scoped"})
    assert get_request_id() is None


def test_completion_is_logged(caplog):
    client = TestClient(_make_app())
    with caplog.at_level(logging.INFO, logger="starflow"):
        client.get("/", headers={"X-Request-Id": "logged-rid"})

    records = [r for r in caplog.records if r.getMessage() == "request.complete"]
    assert records
    assert records[-1].request_id == "logged-rid"
    assert records[-1].status == 200
    assert records[-1].path == "/"
