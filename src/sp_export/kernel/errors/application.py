"""Application-layer errors — raised by export use cases."""

from __future__ import annotations

from typing import Any

from sp_export.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


class ExportError(ApplicationError):
    """An encoder could not build a payload from its input."""

    default_code = "export_error"

    def __init__(
        self,
        message: str,
        *,
        export_format: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.export_format = export_format


__all__ = ["ApplicationError", "ExportError"]
