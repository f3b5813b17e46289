# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""A typed field backed by a settings store."""

from __future__ import annotations

import logging
from typing import Generic, Optional, TypeVar

from .store import SettingsStore, get_default_store

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Setting(Generic[T]):
    """Read and write one settings key, falling back to *default*.

    A stored value whose type does not match the default's type is ignored
    on read. Without an explicit *store* the process-wide default store is
    resolved on every access, so swapping it with ``set_default_store`` takes
    effect immediately.
    """

    def __init__(self, key: str, default: T, store: Optional[SettingsStore] = None):
        self.key = key
        self.default = default
        self._store = store

    @property
    def store(self) -> SettingsStore:
        return self._store if self._store is not None else get_default_store()

    def read(self) -> T:
        value = self.store.get(self.key)
        if value is None:
            return self.default
        expected_type = type(self.default)
        if not isinstance(value, expected_type) or (
            isinstance(value, bool) and expected_type is not bool
        ):
            logger.debug(
                "Ignoring setting '%s': stored %s, expected %s",
                self.key,
                type(value).__name__,
                type(self.default).__name__,
            )
            return self.default
        return value

    def write(self, new_value: T) -> None:
        self.store.set(self.key, new_value)

    def reset(self) -> None:
        self.store.delete(self.key)

    def __repr__(self) -> str:
        return f"Setting(key={self.key!r}, default={self.default!r})"


__all__ = ["Setting"]
