"""Config settings – library settings read by the built-in middleware."""
from __future__ import annotations

import dataclasses
import logging
import re
from typing import ClassVar

from pipechain.config.errors import InvalidSettingValueError

_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")

# a comma only separates entries when the next entry opens with "Name:";
# "://" after a token is a URL inside a value, not a header name
_ENTRY_BOUNDARY = re.compile(r"\s*(?:\n|,(?=\s*[!#$%&'*+.^_`|~0-9A-Za-z-]+\s*:(?!//)))\s*")


def split_header_entries(raw: str) -> list[str]:
    """Split ``Name: value`` entries separated by newlines or commas.

    Commas inside a value are kept, so
    ``"Cache-Control: no-store, no-cache,X-Frame-Options: DENY"`` gives two
    entries.
    """
    return [entry.strip() for entry in _ENTRY_BOUNDARY.split(raw) if entry.strip()]


@dataclasses.dataclass
class PipechainSettings:
    """Defaults for :func:`pipechain.middlewares.standard_pipeline`.

    Load with ``EnvSettingsLoader().load(PipechainSettings)``;
    ``PIPECHAIN_DEFAULT_HEADERS`` holds ``Name: value`` entries separated by
    newlines or commas.
    """

    _prefix: ClassVar[str] = "PIPECHAIN"

    log_level: str = "INFO"
    correlation_header: str = "X-Correlation-ID"
    request_logging: bool = True
    default_headers: list[str] = dataclasses.field(
        default_factory=list, metadata={"parse": split_header_entries}
    )

    def __post_init__(self) -> None:
        self.log_level = self.log_level.upper()
        if self.log_level not in _LEVELS:
            raise InvalidSettingValueError(
                "log_level", self.log_level, f"expected one of {', '.join(_LEVELS)}"
            )
        if not self.correlation_header.strip():
            raise InvalidSettingValueError(
                "correlation_header", self.correlation_header, "must not be blank"
            )
        for entry in self.default_headers:
            name, sep, _ = entry.partition(":")
            if not sep or not name.strip():
                raise InvalidSettingValueError(
                    "default_headers", entry, "expected 'Name: value'"
                )

    @property
    def level(self) -> int:
        return logging.getLevelName(self.log_level)

    def header_map(self) -> dict[str, str]:
        headers: dict[str, str] = {}
        for entry in self.default_headers:
            name, _, value = entry.partition(":")
            headers[name.strip()] = value.strip()
        return headers


__all__ = ["PipechainSettings", "split_header_entries"]
