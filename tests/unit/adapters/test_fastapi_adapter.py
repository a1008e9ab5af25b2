"""Unit tests for the FastAPI adapter."""
from __future__ import annotations

from typing import Any

from fastapi import FastAPI
from fastapi.testclient import TestClient
from starlette.routing import Route

from pipechain import build, start
from pipechain.adapters.fastapi import handler_route, mount_handler, to_endpoint
from pipechain.http import write_json
from pipechain.middlewares import require_bearer, with_correlation_id, with_headers


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def echo(writer: Any, request: Any) -> None:
    write_json(
        writer,
        200,
        {
            "method": request.method,
            "path": request.path,
            "query": dict(request.query),
            "body": request.body.decode(),
            "agent": request.header("User-Agent"),
        },
    )


def created(writer: Any, request: Any) -> None:
    writer.headers["Location"] = "/items/1"
    writer.write_header(201)


# ---------------------------------------------------------------------------
# Routing a composed handler
# ---------------------------------------------------------------------------


class TestMountHandler:
    def test_request_fields_forwarded(self) -> None:
        app = FastAPI()
        mount_handler(app, "/echo", echo, methods=["POST"])
        client = TestClient(app)
        resp = client.post("/echo?x=1", content=b"payload", headers={"User-Agent": "tests"})
        assert resp.status_code == 200
        assert resp.json() == {
            "method": "POST",
            "path": "/echo",
            "query": {"x": "1"},
            "body": "payload",
            "agent": "tests",
        }

    def test_status_and_headers_returned(self) -> None:
        app = FastAPI()
        mount_handler(app, "/items", created, methods=["POST"])
        resp = TestClient(app).post("/items")
        assert resp.status_code == 201
        assert resp.headers["location"] == "/items/1"
        assert resp.content == b""

    def test_composed_pipeline_served(self) -> None:
        handler = (
            start(echo)
            .pipe(build(with_correlation_id(), with_headers({"X-Frame-Options": "DENY"})))
            .pipe(build(require_bearer(lambda token: "svc" if token == "t" else None)))
            .handler()
        )
        app = FastAPI()
        mount_handler(app, "/secure", handler)
        client = TestClient(app)

        denied = client.get("/secure", headers={"X-Correlation-ID": "cid"})
        assert denied.status_code == 401
        assert denied.headers["x-correlation-id"] == "cid"
        assert denied.headers["x-frame-options"] == "DENY"
        assert denied.json()["code"] == "unauthorized"

        allowed = client.get("/secure", headers={"Authorization": "Bearer t"})
        assert allowed.status_code == 200
        assert allowed.json()["path"] == "/secure"

    def test_method_not_allowed(self) -> None:
        app = FastAPI()
        mount_handler(app, "/only-get", echo)
        assert TestClient(app).post("/only-get").status_code == 405

    def test_returns_route(self) -> None:
        route = mount_handler(FastAPI(), "/x", echo)
        assert isinstance(route, Route)
        assert route.path == "/x"


class TestHandlerRoute:
    def test_route_in_app_constructor(self) -> None:
        app = FastAPI(routes=[handler_route("/r", echo, name="echo")])
        resp = TestClient(app).get("/r")
        assert resp.status_code == 200
        assert resp.json()["method"] == "GET"

    def test_endpoint_named_after_handler(self) -> None:
        assert to_endpoint(echo).__name__ == "echo"
