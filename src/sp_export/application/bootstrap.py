"""Application bootstrap – wire settings, preferences and services together."""
from __future__ import annotations

from dataclasses import dataclass

from sp_export.application.delivery import (
    Backend,
    DeliveryModeStore,
    DownloadTarget,
    SaveDeliveryService,
)
from sp_export.application.export import ExportService
from sp_export.application.preferences import (
    CsvModeSetting,
    JsonFilePreferenceStore,
    PreferenceStore,
)
from sp_export.config.settings import (
    DotenvSettingsLoader,
    EnvSettingsLoader,
    ExportSettings,
    SettingsLoader,
)
from sp_export.observability.logging import configure_logging, get_logger

__all__ = ["ExportApp", "build_app"]

_log = get_logger(__name__)


@dataclass
class ExportApp:
    """Everything the UI needs, with a lifetime tied to application startup."""

    settings: ExportSettings
    preferences: PreferenceStore
    delivery_mode: DeliveryModeStore
    csv_mode: CsvModeSetting
    delivery: SaveDeliveryService
    exports: ExportService


def build_app(
    backend: Backend,
    settings: ExportSettings | None = None,
    *,
    preferences: PreferenceStore | None = None,
    env_file: str | None = None,
    configure_logs: bool = False,
) -> ExportApp:
    """Build the export stack.

    Without explicit *settings* they are read from ``SPX_*`` environment
    variables, after loading *env_file* when one is given (variables already
    set in the environment win over the file).
    """
    if settings is None:
        loader: SettingsLoader = (
            DotenvSettingsLoader(env_file) if env_file else EnvSettingsLoader()
        )
        settings = loader.load(ExportSettings)
    if configure_logs:
        configure_logging(settings.level, json=settings.json_logs)
    prefs = preferences or JsonFilePreferenceStore(settings.preferences_file)
    delivery_mode = DeliveryModeStore(prefs)
    csv_mode = CsvModeSetting(prefs)
    delivery = SaveDeliveryService(backend, delivery_mode, DownloadTarget(settings.download_path))
    _log.info(
        "app.ready",
        download_dir=str(settings.download_path),
        delivery_mode=delivery_mode.get().value,
        csv_mode=csv_mode.get().value,
    )
    return ExportApp(
        settings=settings,
        preferences=prefs,
        delivery_mode=delivery_mode,
        csv_mode=csv_mode,
        delivery=delivery,
        exports=ExportService(delivery, csv_mode),
    )
