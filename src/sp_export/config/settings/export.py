"""Config settings – ExportSettings for the desktop client."""
from __future__ import annotations

import dataclasses
import logging
from pathlib import Path

from sp_export.config.settings.base import Settings
from sp_export.config.validation import InvalidSettingValueError


@dataclasses.dataclass
class ExportSettings(Settings):
    """Where exported files land and where user preferences are kept.

    Read from ``SPX_*`` environment variables by
    :class:`~sp_export.config.settings.loaders.EnvSettingsLoader`.
    """

    _prefix = "SPX"

    download_dir: str = "~/Downloads"
    preferences_path: str = "~/.sp-export/preferences.json"
    log_level: str = "INFO"
    json_logs: bool = False

    def _validate(self) -> None:
        level = self.log_level.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise InvalidSettingValueError("log_level", self.log_level, "unknown logging level")
        self.log_level = level

    @property
    def download_path(self) -> Path:
        return Path(self.download_dir).expanduser()

    @property
    def preferences_file(self) -> Path:
        return Path(self.preferences_path).expanduser()

    @property
    def level(self) -> int:
        return logging.getLevelName(self.log_level)


__all__ = ["ExportSettings"]
