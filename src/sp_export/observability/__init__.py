"""Observability – structured logging."""
from sp_export.observability.logging import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger"]
