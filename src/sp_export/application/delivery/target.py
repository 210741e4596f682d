"""Application delivery – DownloadTarget (immediate local save)."""
from __future__ import annotations

import os
import tempfile
from pathlib import Path, PurePosixPath, PureWindowsPath

from sp_export.kernel.errors import DeliveryError
from sp_export.observability.logging import get_logger

__all__ = ["DEFAULT_FILENAME", "DownloadTarget"]

DEFAULT_FILENAME = "download.bin"

_log = get_logger(__name__)


class DownloadTarget:
    """Writes payloads straight into a download directory.

    Each delivery stages the bytes in a hidden temporary file (the transient
    handle), moves it to its final name and then revokes the handle.  An
    existing file is never overwritten: ``report.csv`` becomes
    ``report (1).csv``, ``report (2).csv`` and so on.
    """

    def __init__(self, directory: str | Path) -> None:
        self._directory = Path(directory)

    @property
    def directory(self) -> Path:
        return self._directory

    def open_handle(self, data: bytes) -> Path:
        self._directory.mkdir(parents=True, exist_ok=True)
        fd, name = tempfile.mkstemp(prefix=".download-", suffix=".part", dir=self._directory)
        with os.fdopen(fd, "wb") as fh:
            fh.write(data)
        return Path(name)

    def trigger(self, handle: Path, filename: str) -> Path:
        destination = self._claim(self._safe_name(filename))
        try:
            os.replace(handle, destination)
        except OSError:
            destination.unlink(missing_ok=True)
            raise
        return destination

    def revoke(self, handle: Path) -> None:
        handle.unlink(missing_ok=True)

    def deliver(self, filename: str, data: bytes) -> Path:
        """Save *data* as *filename*; the handle is revoked on every path."""
        handle: Path | None = None
        try:
            handle = self.open_handle(data)
            destination = self.trigger(handle, filename)
        except OSError as exc:
            raise DeliveryError(filename, f"Could not save '{filename}': {exc}", cause=exc) from exc
        finally:
            if handle is not None:
                self.revoke(handle)
        _log.debug("download.written", path=str(destination), size=len(data))
        return destination

    @staticmethod
    def _safe_name(filename: str) -> str:
        name = PureWindowsPath(PurePosixPath(filename or "").name).name.strip()
        if name in ("", ".", ".."):
            return DEFAULT_FILENAME
        return name

    def _claim(self, name: str) -> Path:
        """Create an empty placeholder under the first free name and return it."""
        stem, suffix = os.path.splitext(name)
        candidate = self._directory / name
        n = 0
        while True:
            try:
                with open(candidate, "x"):
                    return candidate
            except FileExistsError:
                n += 1
                candidate = self._directory / f"{stem} ({n}){suffix}"
