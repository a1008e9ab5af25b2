"""Config settings – environment variable loader for dataclass settings."""
from __future__ import annotations

import dataclasses
import os
from typing import Any, Mapping, TypeVar

from pipechain.config.errors import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

T = TypeVar("T")


class EnvSettingsLoader:
    """Build a settings dataclass from environment variables.

    Each field is read from ``<_prefix>_<FIELD>``, so
    ``PipechainSettings.log_level`` comes from ``PIPECHAIN_LOG_LEVEL``.
    A field can carry its own parser in ``metadata["parse"]``; otherwise the
    raw string is coerced from the annotation (``bool``, ``int``, ``float``,
    comma-separated ``list``).
    """

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ = environ

    def load(self, settings_class: type[T]) -> T:
        environ = os.environ if self._environ is None else self._environ
        prefix = getattr(settings_class, "_prefix", "")
        values: dict[str, Any] = {}

        for field in dataclasses.fields(settings_class):  # type: ignore[arg-type]
            env_key = "_".join(p for p in (prefix, field.name) if p).upper()
            if env_key not in environ:
                if (
                    field.default is dataclasses.MISSING
                    and field.default_factory is dataclasses.MISSING  # type: ignore[misc]
                ):
                    raise MissingRequiredSettingError(env_key)
                continue

            raw = environ[env_key]
            parse = field.metadata.get("parse")
            try:
                values[field.name] = parse(raw) if parse else _coerce(raw, field.type)
            except ValueError as exc:
                raise InvalidSettingValueError(env_key, raw, str(exc)) from exc

        try:
            return settings_class(**values)
        except ConfigError:
            raise
        except TypeError as exc:
            raise ConfigError(f"cannot build {settings_class.__name__}: {exc}") from exc


def _coerce(raw: str, hint: Any) -> Any:
    # postponed annotations arrive as strings
    name = hint if isinstance(hint, str) else getattr(hint, "__name__", "")
    if getattr(hint, "__origin__", None) is list or name.startswith("list"):
        return [item.strip() for item in raw.split(",") if item.strip()]
    if name == "bool":
        return raw.strip().lower() in ("1", "true", "yes", "on")
    if name == "int":
        return int(raw)
    if name == "float":
        return float(raw)
    return raw


__all__ = ["EnvSettingsLoader"]
