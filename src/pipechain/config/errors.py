"""Config – errors raised while loading or validating settings."""
from __future__ import annotations

from pipechain.kernel.errors import BaseError


class ConfigError(BaseError):
    """Settings could not be loaded."""

    code = "config_error"


class MissingRequiredSettingError(ConfigError):
    """An environment variable backing a field without default is unset."""

    code = "missing_required_setting"

    def __init__(self, env_key: str) -> None:
        super().__init__(f"{env_key} is required", detail={"setting": env_key})

    @property
    def setting_name(self) -> str:
        return self.detail["setting"]


class InvalidSettingValueError(ConfigError):
    """A setting is present but unusable."""

    code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(
            f"{setting_name}={value!r}: {reason}",
            detail={"setting": setting_name, "value": value, "reason": reason},
        )

    @property
    def setting_name(self) -> str:
        return self.detail["setting"]


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
