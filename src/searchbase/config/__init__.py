"""Config – env-based settings and their validation errors."""

from searchbase.config.settings import EnvSettingsLoader, SearchbaseSettings, Settings, SettingsLoader
from searchbase.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "SearchbaseSettings",
    "Settings",
    "SettingsLoader",
]
