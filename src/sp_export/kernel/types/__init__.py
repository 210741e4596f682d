"""Kernel types – shared value types."""
from sp_export.kernel.types.byte_source import ByteSource, to_bytes, to_transport_buffer

__all__ = ["ByteSource", "to_bytes", "to_transport_buffer"]
