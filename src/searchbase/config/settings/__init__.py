"""Config settings – env-based configuration."""
from searchbase.config.settings.base import Settings
from searchbase.config.settings.loaders import EnvSettingsLoader, SettingsLoader
from searchbase.config.settings.searchbase import (
    DEFAULT_BASE_URL,
    DEFAULT_BATCH_SIZE,
    SearchbaseSettings,
)

__all__ = [
    "DEFAULT_BASE_URL",
    "DEFAULT_BATCH_SIZE",
    "EnvSettingsLoader",
    "SearchbaseSettings",
    "Settings",
    "SettingsLoader",
]
