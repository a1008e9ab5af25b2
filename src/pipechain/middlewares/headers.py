"""Middleware – static response header injection."""
from __future__ import annotations

from typing import Any, Mapping

from pipechain.http.types import Handler, Middleware


def with_headers(headers: Mapping[str, str]) -> Middleware:
    """Set *headers* on every response before the inner handler runs.

    The inner handler may still overwrite them.
    """
    fixed = dict(headers)

    def middleware(next_: Handler) -> Handler:
        def handler(writer: Any, request: Any) -> None:
            writer.headers.update(fixed)
            next_(writer, request)

        return handler

    middleware.__name__ = "with_headers"
    return middleware


__all__ = ["with_headers"]
