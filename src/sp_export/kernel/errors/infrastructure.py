"""Infrastructure errors — backend boundary and local file-system failures."""

from __future__ import annotations

from typing import Any

from sp_export.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """Infrastructure / I/O failure that is not a user decision."""

    default_code = "infrastructure_error"


class BackendError(InfrastructureError):
    """A call across the native backend boundary failed.

    The message is kept verbatim from the backend so that
    :func:`~sp_export.application.errors.normalize_error` can recognise
    cancellation and deadline signals.
    """

    default_code = "backend_error"

    def __init__(
        self,
        operation: str,
        message: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message or f"Backend operation '{operation}' failed", **kwargs)
        self.operation = operation


class DeliveryError(InfrastructureError):
    """The local download target could not write the file."""

    default_code = "delivery_error"

    def __init__(
        self,
        filename: str,
        message: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message or f"Could not deliver '{filename}'", **kwargs)
        self.filename = filename


__all__ = ["BackendError", "DeliveryError", "InfrastructureError"]
