"""Application delivery – SaveDeliveryService.

Every entry point follows the same shape: snapshot the delivery mode, then
either hand the job to the native backend (``dialog``) or write the bytes
into the download directory (``auto``).  The result is always a
:class:`SaveOutcome`; user cancellation is a value, not an exception.
"""
from __future__ import annotations

import enum
import json
from dataclasses import dataclass
from typing import Any

from sp_export.application.delivery.backend import Backend
from sp_export.application.delivery.mode import DeliveryMode, DeliveryModeStore
from sp_export.application.delivery.target import DEFAULT_FILENAME, DownloadTarget
from sp_export.kernel.types import ByteSource, to_bytes, to_transport_buffer
from sp_export.observability.logging import get_logger

__all__ = ["OCTET_STREAM", "Payload", "SaveDeliveryService", "SaveOutcome", "suggested_filename"]

OCTET_STREAM = "application/octet-stream"

_log = get_logger(__name__)


class SaveOutcome(str, enum.Enum):
    SAVED = "saved"
    CANCELLED = "cancelled"


@dataclass(frozen=True)
class Payload:
    """Bytes plus the MIME type they should be saved with."""

    data: bytes
    mime: str = OCTET_STREAM

    @classmethod
    def from_text(cls, text: str, mime: str = "text/plain") -> "Payload":
        return cls(text.encode("utf-8"), mime)


def suggested_filename(url_or_path: str) -> str:
    """Final path segment of *url_or_path* with any query suffix removed."""
    name = url_or_path.rsplit("/", 1)[-1].split("?", 1)[0]
    return name or DEFAULT_FILENAME


def _outcome(path: str) -> SaveOutcome:
    return SaveOutcome.SAVED if path else SaveOutcome.CANCELLED


class SaveDeliveryService:
    """Delivers payloads according to the current :class:`DeliveryMode`."""

    def __init__(
        self,
        backend: Backend,
        mode_store: DeliveryModeStore,
        target: DownloadTarget,
    ) -> None:
        self._backend = backend
        self._modes = mode_store
        self._target = target

    @property
    def mode_store(self) -> DeliveryModeStore:
        return self._modes

    # ------------------------------------------------------------------
    # Payload entry points
    # ------------------------------------------------------------------

    async def save_blob(self, filename: str, payload: Payload) -> SaveOutcome:
        mode = self._modes.snapshot()
        if mode is DeliveryMode.DIALOG:
            path = await self._backend.native_save_bytes(
                filename,
                to_transport_buffer(payload.data),
                payload.mime or OCTET_STREAM,
            )
            outcome = _outcome(path)
        else:
            self._download(filename, payload.data)
            outcome = SaveOutcome.SAVED
        _log.info(
            "delivery.blob",
            filename=filename,
            mode=mode.value,
            mime=payload.mime,
            size=len(payload.data),
            outcome=outcome.value,
        )
        return outcome

    async def save_text(self, filename: str, text: str, mime: str = "text/plain") -> SaveOutcome:
        return await self.save_blob(filename, Payload.from_text(text, mime))

    async def save_json(self, filename: str, obj: Any, pretty: bool = True) -> SaveOutcome:
        if pretty:
            text = json.dumps(obj, indent=2, ensure_ascii=False, default=str)
        else:
            text = json.dumps(obj, separators=(",", ":"), ensure_ascii=False, default=str)
        return await self.save_text(filename, text, "application/json")

    async def save_bytes(
        self,
        filename: str,
        data: ByteSource,
        mime: str = OCTET_STREAM,
    ) -> SaveOutcome:
        return await self.save_blob(filename, Payload(to_bytes(data), mime))

    # ------------------------------------------------------------------
    # Backend-sourced entry points
    # ------------------------------------------------------------------

    async def save_attachment(self, list_name: str, item_id: int, filename: str) -> SaveOutcome:
        mode = self._modes.snapshot()
        if mode is DeliveryMode.DIALOG:
            outcome = _outcome(
                await self._backend.native_save_attachment(list_name, item_id, filename)
            )
        else:
            data = to_bytes(await self._backend.fetch_attachment_bytes(list_name, item_id, filename))
            self._download(filename, data)
            outcome = SaveOutcome.SAVED
        _log.info(
            "delivery.attachment",
            list=list_name,
            item_id=item_id,
            filename=filename,
            mode=mode.value,
            outcome=outcome.value,
        )
        return outcome

    async def save_by_url(self, url_or_path: str) -> SaveOutcome:
        mode = self._modes.snapshot()
        if mode is DeliveryMode.DIALOG:
            outcome = _outcome(await self._backend.native_save_by_url(url_or_path))
        else:
            data = to_bytes(await self._backend.fetch_url_bytes(url_or_path))
            self._download(suggested_filename(url_or_path), data)
            outcome = SaveOutcome.SAVED
        _log.info("delivery.url", url=url_or_path, mode=mode.value, outcome=outcome.value)
        return outcome

    async def pick_file(self) -> str | None:
        """Ask the backend for a file to open; ``None`` when dismissed."""
        path = await self._backend.native_open_file_dialog()
        return path or None

    def _download(self, filename: str, data: bytes) -> None:
        self._target.deliver(filename or DEFAULT_FILENAME, data)
