"""Root of the pipechain error hierarchy."""

from __future__ import annotations

from typing import Any, Mapping

from pipechain.http.response import write_json


class BaseError(Exception):
    """An error that knows how it is answered over HTTP.

    ``code`` is the machine-readable slug and ``status`` the response status
    used by :meth:`render`. Subclasses add response headers by overriding
    :meth:`headers`.
    """

    code: str = "error"
    status: int = 500

    def __init__(self, message: str, *, detail: Mapping[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.detail: dict[str, Any] = dict(detail or {})

    def __repr__(self) -> str:
        return f"{type(self).__name__}(status={self.status}, message={self.message!r})"

    def headers(self) -> dict[str, str]:
        return {}

    def to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {"code": self.code, "message": self.message}
        if self.detail:
            body["detail"] = self.detail
        return body

    def render(self, writer: Any) -> None:
        """Answer the request on *writer* with this error as a JSON body."""
        writer.headers.update(self.headers())
        write_json(writer, self.status, self.to_dict())


__all__ = ["BaseError"]
