"""Application preferences – ObservableSetting and CsvModeSetting.

A setting is a small owned state object: explicit accessors, a list of
subscriber callbacks for UI display, and best-effort persistence through a
:class:`~sp_export.application.preferences.store.PreferenceStore`.
"""
from __future__ import annotations

import enum
from typing import Any, Callable, ClassVar, Generic, TypeVar

from sp_export.application.preferences.store import PreferenceStore
from sp_export.config.validation import InvalidSettingValueError
from sp_export.observability.logging import get_logger

__all__ = ["CsvMode", "CsvModeSetting", "ObservableSetting", "Subscriber"]

_log = get_logger(__name__)

E = TypeVar("E", bound=enum.Enum)
Subscriber = Callable[[Any], None]


class ObservableSetting(Generic[E]):
    """A persisted, enum-valued preference.

    Subclasses set :attr:`key`, :attr:`choices` and :attr:`default`.  The
    value is read from the store once, at construction; an absent or
    unrecognised stored value falls back to :attr:`default`.
    """

    key: ClassVar[str]
    choices: ClassVar[type[enum.Enum]]
    default: ClassVar[Any]

    def __init__(self, preferences: PreferenceStore) -> None:
        self._preferences = preferences
        self._subscribers: list[Subscriber] = []
        self._value: E = self._load()

    def _load(self) -> E:
        try:
            raw = self._preferences.get(self.key)
        except OSError as exc:
            _log.warning("setting.load_failed", key=self.key, error=str(exc))
            raw = None
        parsed = self._parse(raw)
        return parsed if parsed is not None else self.default

    def _parse(self, raw: object) -> E | None:
        if isinstance(raw, self.choices):
            return raw  # type: ignore[return-value]
        try:
            return self.choices(raw)  # type: ignore[return-value]
        except (TypeError, ValueError):
            return None

    def get(self) -> E:
        return self._value

    def snapshot(self) -> E:
        """Return the value to use for the whole of one operation.

        Values are immutable enum members, so the snapshot cannot be torn by
        a later :meth:`set`.
        """
        return self._value

    def set(self, value: E | str) -> None:
        parsed = self._parse(value)
        if parsed is None:
            allowed = ", ".join(m.value for m in self.choices)
            raise InvalidSettingValueError(self.key, value, f"expected one of: {allowed}")
        self._value = parsed
        self._notify(parsed)
        self._persist(parsed)

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Register *callback* for value changes; returns an unsubscribe function."""
        self._subscribers.append(callback)

        def _unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return _unsubscribe

    def _notify(self, value: E) -> None:
        for callback in list(self._subscribers):
            try:
                callback(value)
            except Exception:  # noqa: BLE001
                _log.exception("setting.subscriber_failed", key=self.key)

    def _persist(self, value: E) -> None:
        # Best-effort: a failed write only loses the preference for the next start.
        try:
            self._preferences.set(self.key, value.value)
        except OSError as exc:
            _log.warning("setting.persist_failed", key=self.key, value=value.value, error=str(exc))


class CsvMode(str, enum.Enum):
    STANDARD = "standard"
    PT = "pt"


class CsvModeSetting(ObservableSetting[CsvMode]):
    """Locale preference for CSV exports: ``standard`` (``,``) or ``pt`` (``;``)."""

    key = "sp_csv_mode"
    choices = CsvMode
    default = CsvMode.STANDARD

    @property
    def delimiter(self) -> str:
        return ";" if self._value is CsvMode.PT else ","
