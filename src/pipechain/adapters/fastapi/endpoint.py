"""FastAPI adapter – expose a composed handler as an ASGI endpoint.

The handler runs in Starlette's threadpool because handlers are synchronous.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Awaitable, Callable, Sequence

from pipechain.http.request import HttpRequest
from pipechain.http.response import BufferedResponse
from pipechain.http.types import Handler

if TYPE_CHECKING:
    from starlette.requests import Request
    from starlette.responses import Response
    from starlette.routing import Route


def _require_fastapi() -> None:
    try:
        import starlette  # noqa: F401
    except ImportError as exc:
        raise ImportError(
            "Install 'pipechain[fastapi]' to use the FastAPI adapter"
        ) from exc


def to_endpoint(handler: Handler) -> Callable[["Request"], Awaitable["Response"]]:
    """Wrap *handler* as a Starlette/FastAPI endpoint coroutine."""
    _require_fastapi()
    from starlette.concurrency import run_in_threadpool
    from starlette.responses import Response

    async def endpoint(request: "Request") -> "Response":
        http_request = HttpRequest(
            method=request.method,
            path=request.url.path,
            headers=dict(request.headers),
            query=dict(request.query_params),
            body=await request.body(),
        )
        writer = BufferedResponse()
        await run_in_threadpool(handler, writer, http_request)
        return Response(
            content=bytes(writer.body),
            status_code=writer.status,
            headers=writer.headers,
        )

    endpoint.__name__ = getattr(handler, "__name__", "endpoint")
    return endpoint


def handler_route(
    path: str,
    handler: Handler,
    methods: Sequence[str] | None = None,
    name: str | None = None,
) -> "Route":
    """Build a Starlette :class:`~starlette.routing.Route` serving *handler*."""
    _require_fastapi()
    from starlette.routing import Route

    return Route(path, endpoint=to_endpoint(handler), methods=list(methods or ["GET"]), name=name)


def mount_handler(
    app: Any,
    path: str,
    handler: Handler,
    methods: Sequence[str] | None = None,
) -> "Route":
    """Append a route for *handler* to a FastAPI or Starlette *app*."""
    route = handler_route(path, handler, methods)
    app.router.routes.append(route)
    return route


__all__ = ["handler_route", "mount_handler", "to_endpoint"]
