"""Config settings – env-based configuration."""
from flowware.config.settings.base import Settings
from flowware.config.settings.flow import FlowSettings
from flowware.config.settings.loaders import EnvSettingsLoader, SettingsLoader

__all__ = ["EnvSettingsLoader", "FlowSettings", "Settings", "SettingsLoader"]
