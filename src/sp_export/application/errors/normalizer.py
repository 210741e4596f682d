"""Application errors – turn backend failures into display text."""
from __future__ import annotations

import re

from sp_export.kernel.errors import BaseError

__all__ = ["OPERATION_CANCELLED", "OPERATION_TIMED_OUT", "normalize_error"]

OPERATION_CANCELLED = "Operação cancelada."
OPERATION_TIMED_OUT = "Operação cancelada (timeout)."

_CANCELLED = re.compile(r"context (canceled|cancelled)", re.IGNORECASE)
_DEADLINE = re.compile(r"deadline exceeded", re.IGNORECASE)


def _message(error: object) -> str:
    if error is None:
        return ""
    if isinstance(error, BaseError):
        return error.message
    message = getattr(error, "message", None)
    if isinstance(message, str) and message:
        return message
    return str(error)


def normalize_error(error: object) -> str:
    """Message to show the user for *error*; never retries anything."""
    msg = _message(error)
    if _CANCELLED.search(msg):
        return OPERATION_CANCELLED
    if _DEADLINE.search(msg):
        return OPERATION_TIMED_OUT
    return msg
