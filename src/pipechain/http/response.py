"""HTTP – in-memory response writer."""
from __future__ import annotations

import json
from typing import Any


class BufferedResponse:
    """Collects status, headers and body written by a handler.

    The first call to :meth:`write_header` wins; later calls are ignored.
    Writing a body without an explicit status commits ``200``.
    """

    def __init__(self) -> None:
        self.headers: dict[str, str] = {}
        self.status: int = 200
        self.body = bytearray()
        self._committed = False

    @property
    def committed(self) -> bool:
        return self._committed

    def write_header(self, status: int) -> None:
        if self._committed:
            return
        self.status = status
        self._committed = True

    def write(self, data: bytes) -> int:
        if not self._committed:
            self.write_header(200)
        self.body.extend(data)
        return len(data)

    def __repr__(self) -> str:
        return f"BufferedResponse(status={self.status}, bytes={len(self.body)})"


def write_json(writer: Any, status: int, payload: Any) -> None:
    """Serialise *payload* as the JSON body of a response with *status*."""
    body = json.dumps(payload, ensure_ascii=False, default=str).encode()
    writer.headers["Content-Type"] = "application/json"
    writer.headers["Content-Length"] = str(len(body))
    writer.write_header(status)
    writer.write(body)


__all__ = ["BufferedResponse", "write_json"]
