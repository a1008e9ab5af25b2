"""HTTP – immutable request value."""
from __future__ import annotations

import dataclasses
import json
from types import MappingProxyType
from typing import Any, Mapping

from pipechain.http.types import header_value


@dataclasses.dataclass(frozen=True)
class HttpRequest:
    """A received request.

    Header names are stored lower-cased so lookups are case-insensitive.
    """

    method: str
    path: str
    headers: Mapping[str, str] = dataclasses.field(default_factory=dict)
    query: Mapping[str, str] = dataclasses.field(default_factory=dict)
    body: bytes = b""

    def __post_init__(self) -> None:
        object.__setattr__(self, "method", self.method.upper())
        object.__setattr__(
            self,
            "headers",
            MappingProxyType({k.lower(): v for k, v in self.headers.items()}),
        )
        object.__setattr__(self, "query", MappingProxyType(dict(self.query)))

    def header(self, name: str, default: str | None = None) -> str | None:
        return header_value(self, name, default)

    def json(self) -> Any:
        return json.loads(self.body or b"null")


__all__ = ["HttpRequest"]
