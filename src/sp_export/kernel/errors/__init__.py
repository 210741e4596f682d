"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── ApplicationError     (application.py)
    │   └── ExportError
    └── InfrastructureError  (infrastructure.py)
        ├── BackendError
        └── DeliveryError

Configuration errors live in :mod:`sp_export.config.validation` and derive
from :class:`ApplicationError`.
"""

from sp_export.kernel.errors.application import ApplicationError, ExportError
from sp_export.kernel.errors.base import BaseError
from sp_export.kernel.errors.infrastructure import (
    BackendError,
    DeliveryError,
    InfrastructureError,
)

__all__ = [
    "ApplicationError",
    "BackendError",
    "BaseError",
    "DeliveryError",
    "ExportError",
    "InfrastructureError",
]
