"""Config settings – environment-based configuration."""
from sp_export.config.settings.base import Settings
from sp_export.config.settings.export import ExportSettings
from sp_export.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader

__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "ExportSettings", "Settings", "SettingsLoader"]
