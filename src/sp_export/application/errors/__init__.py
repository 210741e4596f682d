"""Application errors – user-facing error text."""
from sp_export.application.errors.normalizer import (
    OPERATION_CANCELLED,
    OPERATION_TIMED_OUT,
    normalize_error,
)

__all__ = ["OPERATION_CANCELLED", "OPERATION_TIMED_OUT", "normalize_error"]
