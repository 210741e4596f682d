"""Application – export use cases, delivery and preferences."""

from sp_export.application.bootstrap import ExportApp, build_app
from sp_export.application.delivery import (
    Backend,
    DeliveryMode,
    DeliveryModeStore,
    DownloadTarget,
    Payload,
    SaveDeliveryService,
    SaveOutcome,
)
from sp_export.application.errors import normalize_error
from sp_export.application.export import ExportService

__all__ = [
    "Backend",
    "DeliveryMode",
    "DeliveryModeStore",
    "DownloadTarget",
    "ExportApp",
    "ExportService",
    "Payload",
    "SaveDeliveryService",
    "SaveOutcome",
    "build_app",
    "normalize_error",
]
