"""Config – settings loaded from the environment and their errors."""

from pipechain.config.errors import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)
from pipechain.config.settings import EnvSettingsLoader, PipechainSettings, split_header_entries

__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "PipechainSettings",
    "split_header_entries",
]
