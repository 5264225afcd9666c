"""Config – 12-factor settings and loaders."""

from valkit.config.runtime import ValkitSettings, get_settings, reset_settings
from valkit.config.settings import EnvSettingsLoader, Settings, SettingsLoader
from valkit.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
    "ValkitSettings",
    "get_settings",
    "reset_settings",
]
