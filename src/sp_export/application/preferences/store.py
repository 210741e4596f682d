"""Application preferences – PreferenceStore port and its implementations."""
from __future__ import annotations

import abc
import json
import os
import tempfile
from pathlib import Path

from sp_export.observability.logging import get_logger

__all__ = ["InMemoryPreferenceStore", "JsonFilePreferenceStore", "PreferenceStore"]

_log = get_logger(__name__)


class PreferenceStore(abc.ABC):
    """Port: string-keyed, string-valued persisted key-value state."""

    @abc.abstractmethod
    def get(self, key: str) -> str | None: ...

    @abc.abstractmethod
    def set(self, key: str, value: str) -> None:
        """Persist *value*; raises :class:`OSError` when the write fails."""


class InMemoryPreferenceStore(PreferenceStore):
    """Dict-backed store for tests and throwaway sessions."""

    def __init__(self, values: dict[str, str] | None = None) -> None:
        self._values: dict[str, str] = dict(values or {})

    def get(self, key: str) -> str | None:
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        self._values[key] = value

    def snapshot(self) -> dict[str, str]:
        return dict(self._values)


class JsonFilePreferenceStore(PreferenceStore):
    """Keeps all preferences in one JSON object on disk.

    A missing, unreadable or corrupt file reads as empty.  Writes go to a
    temporary sibling file which then replaces the original, so a crash never
    leaves a half-written file behind.
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def _read(self) -> dict[str, str]:
        try:
            raw = self._path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return {}
        except OSError as exc:
            _log.warning("preferences.read_failed", path=str(self._path), error=str(exc))
            return {}
        try:
            data = json.loads(raw)
        except ValueError:
            _log.warning("preferences.corrupt", path=str(self._path))
            return {}
        if not isinstance(data, dict):
            return {}
        return {str(k): v for k, v in data.items() if isinstance(v, str)}

    def get(self, key: str) -> str | None:
        return self._read().get(key)

    def set(self, key: str, value: str) -> None:
        data = self._read()
        data[key] = value
        self._path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp = tempfile.mkstemp(prefix=".prefs-", suffix=".tmp", dir=self._path.parent)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                json.dump(data, fh, ensure_ascii=False, indent=2, sort_keys=True)
            os.replace(tmp, self._path)
        except BaseException:
            Path(tmp).unlink(missing_ok=True)
            raise
