"""Kernel types – byte payload normalisation.

The native backend hands binary content over in one of two shapes: a
sequence of integer byte values, or a base64 string.  Both are resolved
here, once, so that everything downstream works with plain ``bytes``.
"""
from __future__ import annotations

import base64
from typing import Sequence, Union

__all__ = ["ByteSource", "to_bytes", "to_transport_buffer"]

ByteSource = Union[str, bytes, bytearray, memoryview, Sequence[int]]


def to_bytes(source: ByteSource | None) -> bytes:
    """Return the canonical ``bytes`` for *source*.

    Strings are decoded as strict base64; a malformed string raises
    :class:`binascii.Error`.  Integer sequences are copied, and a value
    outside ``0..255`` raises :class:`ValueError`.  ``None`` yields ``b""``.
    """
    if source is None:
        return b""
    if isinstance(source, str):
        return base64.b64decode(source, validate=True)
    if isinstance(source, bytes):
        return source
    if isinstance(source, (bytearray, memoryview)):
        return bytes(source)
    return bytes(list(source))


def to_transport_buffer(buffer: bytes | bytearray | memoryview) -> bytes:
    """Return an independently owned copy of *buffer*.

    Views over shared or pooled memory are never handed to the backend.
    """
    return memoryview(buffer).tobytes()
