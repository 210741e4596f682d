"""Application delivery – Backend port (native host boundary)."""
from __future__ import annotations

import abc

from sp_export.kernel.types import ByteSource

__all__ = ["Backend"]


class Backend(abc.ABC):
    """Port: file operations performed by the native host.

    Every ``native_*`` method returns the chosen path, or ``""`` when the
    user dismissed the dialog.  Failures are raised (typically as
    :class:`~sp_export.kernel.errors.BackendError`) and are not retried.
    """

    @abc.abstractmethod
    async def fetch_attachment_bytes(self, list_name: str, item_id: int, filename: str) -> ByteSource: ...

    @abc.abstractmethod
    async def fetch_url_bytes(self, url_or_path: str) -> ByteSource: ...

    @abc.abstractmethod
    async def native_save_bytes(self, filename: str, data: bytes, mime: str) -> str: ...

    @abc.abstractmethod
    async def native_save_attachment(self, list_name: str, item_id: int, filename: str) -> str: ...

    @abc.abstractmethod
    async def native_save_by_url(self, url_or_path: str) -> str: ...

    @abc.abstractmethod
    async def native_open_file_dialog(self) -> str: ...
