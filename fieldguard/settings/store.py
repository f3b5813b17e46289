# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Key-value settings stores."""

from __future__ import annotations

import logging
import os
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from ..exceptions import ConfigurationError
from .files import locate_settings_file

logger = logging.getLogger(__name__)


class SettingsStore(ABC):
    """Persisted key-value storage consumed by :class:`fieldguard.Setting`."""

    @abstractmethod
    def get(self, key: str) -> Optional[Any]:
        """Return the stored value for *key*, or ``None`` when unset."""

    @abstractmethod
    def set(self, key: str, value: Any) -> None:
        """Persist *value* under *key*."""

    @abstractmethod
    def delete(self, key: str) -> None:
        """Remove *key*; a missing key is not an error."""


class InMemorySettingsStore(SettingsStore):
    def __init__(self, initial: Optional[Dict[str, Any]] = None):
        self._data: Dict[str, Any] = dict(initial or {})

    def get(self, key: str) -> Optional[Any]:
        return self._data.get(key)

    def set(self, key: str, value: Any) -> None:
        self._data[key] = value

    def delete(self, key: str) -> None:
        self._data.pop(key, None)


class FileSettingsStore(SettingsStore):
    """Settings persisted as a YAML mapping.

    The file is read on first access and rewritten atomically on every
    change. A missing file behaves as an empty mapping.
    """

    def __init__(self, path: Optional[Union[str, Path]] = None):
        self.path = locate_settings_file(path)
        self._data: Optional[Dict[str, Any]] = None

    def _load(self) -> Dict[str, Any]:
        if self._data is not None:
            return self._data

        if not self.path.exists():
            self._data = {}
            return self._data

        try:
            content = yaml.safe_load(self.path.read_text(encoding="utf-8"))
        except yaml.YAMLError as exc:
            raise ConfigurationError(f"Settings file {self.path} is not valid YAML: {exc}") from exc

        if content is None:
            content = {}
        if not isinstance(content, dict):
            raise ConfigurationError(
                f"Settings file {self.path} must contain a mapping, got {type(content).__name__}"
            )

        logger.debug("Loaded %d settings from %s", len(content), self.path)
        self._data = content
        return self._data

    def _flush(self, data: Dict[str, Any]) -> None:
        """Write *data* to disk, then make it the cached mapping."""

        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(prefix=".settings-", suffix=".yaml", dir=self.path.parent)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                yaml.safe_dump(data, handle, default_flow_style=False, sort_keys=True)
            os.replace(tmp_name, self.path)
        except BaseException:
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise
        self._data = data

    def reload(self) -> None:
        """Discard the cached mapping so the next access re-reads the file."""

        self._data = None

    def get(self, key: str) -> Optional[Any]:
        return self._load().get(key)

    def set(self, key: str, value: Any) -> None:
        data = dict(self._load())
        data[key] = value
        self._flush(data)

    def delete(self, key: str) -> None:
        if key not in self._load():
            return
        data = dict(self._load())
        del data[key]
        self._flush(data)


_DEFAULT_STORE: Optional[SettingsStore] = None


def get_default_store() -> SettingsStore:
    """Return the process-wide store, creating a file-backed one on first use."""

    global _DEFAULT_STORE
    if _DEFAULT_STORE is None:
        _DEFAULT_STORE = FileSettingsStore()
    return _DEFAULT_STORE


def set_default_store(store: Optional[SettingsStore]) -> None:
    """Replace the process-wide store; ``None`` restores lazy file-backed creation."""

    global _DEFAULT_STORE
    _DEFAULT_STORE = store


__all__ = [
    "FileSettingsStore",
    "InMemorySettingsStore",
    "SettingsStore",
    "get_default_store",
    "set_default_store",
]
