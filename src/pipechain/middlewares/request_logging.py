"""Middleware – request start/end logging with timing."""
from __future__ import annotations

import time
from typing import Any

from pipechain.http.types import Handler, Middleware
from pipechain.observability.logging import get_logger


def with_request_logging(logger: Any = None) -> Middleware:
    """Log each request's method, path, status and duration.

    Emits ``http.request.completed`` on success. When the inner handler
    raises, ``http.request.failed`` is logged and the exception propagates.
    """
    log = logger if logger is not None else get_logger(__name__)

    def middleware(next_: Handler) -> Handler:
        def handler(writer: Any, request: Any) -> None:
            method = getattr(request, "method", "-")
            path = getattr(request, "path", "-")
            start = time.perf_counter()
            try:
                next_(writer, request)
            except Exception:
                duration = (time.perf_counter() - start) * 1000
                log.exception(
                    "http.request.failed",
                    method=method,
                    path=path,
                    duration_ms=round(duration, 2),
                )
                raise
            duration = (time.perf_counter() - start) * 1000
            log.info(
                "http.request.completed",
                method=method,
                path=path,
                status=getattr(writer, "status", None),
                duration_ms=round(duration, 2),
            )

        return handler

    middleware.__name__ = "with_request_logging"
    return middleware


__all__ = ["with_request_logging"]
