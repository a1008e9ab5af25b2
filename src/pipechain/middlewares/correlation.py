"""Middleware – correlation-ID propagation."""
from __future__ import annotations

from typing import Any

import structlog

from pipechain.http.types import Handler, Middleware
from pipechain.observability.correlation import CorrelationContext


def with_correlation_id(header_name: str = "X-Correlation-ID") -> Middleware:
    """Resolve a correlation ID for each request and echo it in the response.

    Resolution order: *header_name*, ``X-Request-ID``, the trace-id segment
    of ``traceparent``, then a generated UUID. The context is visible through
    :class:`CorrelationContext` and bound into structlog contextvars for the
    duration of the inner handler only.
    """

    def middleware(next_: Handler) -> Handler:
        def handler(writer: Any, request: Any) -> None:
            ctx = CorrelationContext.from_headers(
                getattr(request, "headers", None) or {}, header_name
            )
            writer.headers[header_name] = ctx.correlation_id
            token = CorrelationContext.set(ctx)
            try:
                with structlog.contextvars.bound_contextvars(correlation_id=ctx.correlation_id):
                    next_(writer, request)
            finally:
                CorrelationContext.reset(token)

        return handler

    middleware.__name__ = "with_correlation_id"
    return middleware


__all__ = ["with_correlation_id"]
