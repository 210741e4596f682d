"""Observability – structured logging helpers."""
from sp_export.observability.logging.factory import configure_logging
from sp_export.observability.logging.processors import get_logger

__all__ = ["configure_logging", "get_logger"]
