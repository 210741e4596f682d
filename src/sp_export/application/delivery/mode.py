"""Application delivery – DeliveryMode and its process-wide store."""
from __future__ import annotations

import enum

from sp_export.application.preferences import ObservableSetting

__all__ = ["DeliveryMode", "DeliveryModeStore"]


class DeliveryMode(str, enum.Enum):
    """How a finished export reaches the user's disk."""

    AUTO = "auto"      # immediate save into the download directory
    DIALOG = "dialog"  # native save-location prompt via the backend


class DeliveryModeStore(ObservableSetting[DeliveryMode]):
    """Persisted ``auto`` / ``dialog`` toggle, ``auto`` when unset or invalid.

    Delivery operations call :meth:`snapshot` once, before their first
    ``await``; a concurrent :meth:`set` only affects later operations.
    """

    key = "sp_dl_mode"
    choices = DeliveryMode
    default = DeliveryMode.AUTO
