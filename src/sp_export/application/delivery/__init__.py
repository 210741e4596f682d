"""Application delivery – getting bytes onto the user's disk."""
from sp_export.application.delivery.backend import Backend
from sp_export.application.delivery.mode import DeliveryMode, DeliveryModeStore
from sp_export.application.delivery.service import (
    OCTET_STREAM,
    Payload,
    SaveDeliveryService,
    SaveOutcome,
    suggested_filename,
)
from sp_export.application.delivery.target import DEFAULT_FILENAME, DownloadTarget

__all__ = [
    "DEFAULT_FILENAME",
    "OCTET_STREAM",
    "Backend",
    "DeliveryMode",
    "DeliveryModeStore",
    "DownloadTarget",
    "Payload",
    "SaveDeliveryService",
    "SaveOutcome",
    "suggested_filename",
]
