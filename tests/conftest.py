"""Shared pytest fixtures for the fieldguard test-suite.

Every test runs with an isolated configuration directory and an in-memory
default settings store, so nothing reads or writes the developer's real
``~/.config/fieldguard`` settings file.
"""
from __future__ import annotations

import pytest

from fieldguard.settings import InMemorySettingsStore, set_default_store
from fieldguard.settings.files import SETTINGS_FILE_ENV


@pytest.fixture(autouse=True)
def _isolated_config(tmp_path, monkeypatch):
    """Point XDG_CONFIG_HOME at a temp dir and drop any settings override."""

    config_root = tmp_path / "xdg-config"
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_root))
    monkeypatch.delenv(SETTINGS_FILE_ENV, raising=False)
    yield config_root


@pytest.fixture(autouse=True)
def memory_store():
    """Install a fresh in-memory default store for each test."""

    store = InMemorySettingsStore()
    set_default_store(store)
    yield store
    set_default_store(None)


@pytest.fixture
def anyio_backend():
    return "asyncio"
