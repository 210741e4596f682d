"""Config – settings, loaders and validation errors."""

from sp_export.config.settings import EnvSettingsLoader, ExportSettings, Settings, SettingsLoader
from sp_export.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "ExportSettings",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
]
