"""HTTP – handler/middleware aliases and collaborator protocols."""
from __future__ import annotations

from typing import Any, Callable, Mapping, MutableMapping, Protocol, runtime_checkable

Handler = Callable[[Any, Any], None]
Middleware = Callable[[Handler], Handler]


@runtime_checkable
class Request(Protocol):
    """What the built-in middleware read from an incoming request."""

    method: str
    path: str
    headers: Mapping[str, str]


@runtime_checkable
class ResponseWriter(Protocol):
    """What the built-in middleware write to.

    Mirrors the classic response-writer shape: headers are mutable until the
    status line is committed by :meth:`write_header` or the first
    :meth:`write`.
    """

    headers: MutableMapping[str, str]

    def write_header(self, status: int) -> None: ...

    def write(self, data: bytes) -> int: ...


def header_value(request: Any, name: str, default: str | None = None) -> str | None:
    """Case-insensitive header lookup on any :class:`Request`-shaped object.

    Middleware are handed whatever request type the host framework uses, so
    they cannot rely on :meth:`HttpRequest.header`; that method delegates
    here.
    """
    headers = getattr(request, "headers", None) or {}
    wanted = name.lower()
    for key, value in headers.items():
        if key.lower() == wanted:
            return value
    return default


__all__ = ["Handler", "Middleware", "Request", "ResponseWriter", "header_value"]
