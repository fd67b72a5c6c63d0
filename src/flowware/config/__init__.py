"""Config – 12-factor settings and validation errors."""

from flowware.config.settings import EnvSettingsLoader, FlowSettings, Settings, SettingsLoader
from flowware.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "FlowSettings",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
]
