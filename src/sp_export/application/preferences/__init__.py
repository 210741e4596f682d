"""Application preferences – persisted user settings."""
from sp_export.application.preferences.setting import (
    CsvMode,
    CsvModeSetting,
    ObservableSetting,
    Subscriber,
)
from sp_export.application.preferences.store import (
    InMemoryPreferenceStore,
    JsonFilePreferenceStore,
    PreferenceStore,
)

__all__ = [
    "CsvMode",
    "CsvModeSetting",
    "InMemoryPreferenceStore",
    "JsonFilePreferenceStore",
    "ObservableSetting",
    "PreferenceStore",
    "Subscriber",
]
