"""Settings package - persisted key-value fields."""

from .files import SETTINGS_FILE_ENV, iter_settings_candidates, locate_settings_file
from .setting import Setting
from .store import (
    FileSettingsStore,
    InMemorySettingsStore,
    SettingsStore,
    get_default_store,
    set_default_store,
)

__all__ = [
    "SETTINGS_FILE_ENV",
    "FileSettingsStore",
    "InMemorySettingsStore",
    "Setting",
    "SettingsStore",
    "get_default_store",
    "iter_settings_candidates",
    "locate_settings_file",
    "set_default_store",
]
