"""Observability – RequestContext, CorrelationContext."""
from __future__ import annotations

import dataclasses
from contextvars import ContextVar, Token
from typing import Mapping
from uuid import uuid4


@dataclasses.dataclass(frozen=True)
class RequestContext:
    """Ambient context for a single request."""
    correlation_id: str
    trace_id: str | None = None
    principal: str | None = None

    @classmethod
    def new(cls) -> "RequestContext":
        return cls(correlation_id=str(uuid4()))


_CTX_VAR: ContextVar[RequestContext | None] = ContextVar("_pipechain_request_ctx", default=None)


class CorrelationContext:
    """Ambient correlation context stored in a ``ContextVar``."""

    @staticmethod
    def set(ctx: RequestContext) -> Token[RequestContext | None]:
        return _CTX_VAR.set(ctx)

    @staticmethod
    def reset(token: Token[RequestContext | None]) -> None:
        _CTX_VAR.reset(token)

    @staticmethod
    def get() -> RequestContext | None:
        return _CTX_VAR.get()

    @staticmethod
    def require() -> RequestContext:
        ctx = _CTX_VAR.get()
        if ctx is None:
            raise RuntimeError("No RequestContext in current context")
        return ctx

    @staticmethod
    def clear() -> None:
        _CTX_VAR.set(None)

    @staticmethod
    def from_headers(
        headers: Mapping[str, str],
        header_name: str = "X-Correlation-ID",
    ) -> RequestContext:
        """Build a context from HTTP headers without storing it.

        Priority order for the correlation ID: *header_name* →
        ``X-Request-ID`` → trace-id of a W3C ``traceparent`` → generated UUID.
        Header names are matched case-insensitively.
        """
        norm: dict[str, str] = {k.lower(): v.strip() for k, v in headers.items()}

        # W3C traceparent: 00-{trace-id}-{parent-id}-{flags}
        trace_id: str | None = None
        traceparent = norm.get("traceparent")
        if traceparent:
            parts = traceparent.split("-")
            if len(parts) >= 2 and parts[1]:
                trace_id = parts[1]

        correlation_id = (
            norm.get(header_name.lower())
            or norm.get("x-request-id")
            or trace_id
            or str(uuid4())
        )
        return RequestContext(correlation_id=correlation_id, trace_id=trace_id)


__all__ = ["CorrelationContext", "RequestContext"]
