"""Config settings – environment loader and library settings."""
from pipechain.config.settings.defaults import PipechainSettings, split_header_entries
from pipechain.config.settings.loaders import EnvSettingsLoader

__all__ = ["EnvSettingsLoader", "PipechainSettings", "split_header_entries"]
