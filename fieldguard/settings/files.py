# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Locate the settings file used by the default settings store."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterator, List, Optional, Union

from ..exceptions import ConfigurationError

logger = logging.getLogger(__name__)

SETTINGS_FILE_ENV = "FIELDGUARD_SETTINGS_FILE"
DEFAULT_FILENAMES = ("settings.yaml", "settings.yml")


def _config_home() -> Path:
    xdg = os.getenv("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg).expanduser()
    return Path.home() / ".config"


def _default_candidates() -> List[Path]:
    base = _config_home() / "fieldguard"
    return [base / filename for filename in DEFAULT_FILENAMES]


def iter_settings_candidates() -> Iterator[Path]:
    """Yield settings file locations in priority order."""

    override = os.getenv(SETTINGS_FILE_ENV)
    if override:
        yield Path(override).expanduser()

    yield from _default_candidates()


def locate_settings_file(settings_path: Optional[Union[str, Path]] = None) -> Path:
    """Return the settings file to use.

    An explicit *settings_path* wins, then ``FIELDGUARD_SETTINGS_FILE``. Among
    the default locations exactly one file may exist; when none exists the
    first default is returned so the store can create it.
    """

    if settings_path is not None:
        return Path(settings_path).expanduser()

    override = os.getenv(SETTINGS_FILE_ENV)
    if override:
        path = Path(override).expanduser()
        logger.debug("Using settings file from %s: %s", SETTINGS_FILE_ENV, path)
        return path

    defaults = _default_candidates()
    existing = [path for path in defaults if path.is_file()]
    if len(existing) > 1:
        raise ConfigurationError(
            "Multiple settings files found: "
            + ", ".join(str(p) for p in existing)
            + ". Keep only one, or set "
            + SETTINGS_FILE_ENV
            + "."
        )
    if existing:
        logger.debug("Using settings file %s", existing[0])
        return existing[0]

    logger.debug("No settings file found; defaulting to %s", defaults[0])
    return defaults[0]


__all__ = [
    "DEFAULT_FILENAMES",
    "SETTINGS_FILE_ENV",
    "iter_settings_candidates",
    "locate_settings_file",
]
