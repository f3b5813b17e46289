# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Exception hierarchy for fieldguard.

Routine validation rejections are *not* exceptions: they are reported as
:class:`fieldguard.validation.ValidationViolation` records inside the
``ValidationResult`` returned by a write. Only the conditions below raise.
"""

from __future__ import annotations

from typing import Any, Optional


class FieldGuardError(Exception):
    """Base class for every error raised by fieldguard."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class PreconditionViolation(FieldGuardError, ValueError):
    """A holder was constructed in a state that breaks its invariant."""


class HardValidationFailure(FieldGuardError, AssertionError):
    """A write was rejected by a holder configured to fail hard.

    This signals a programmer error rather than bad user input. It derives
    from ``AssertionError`` so generic assertion handling treats it as fatal,
    while callers that want to recover can still catch it by name.
    """

    def __init__(self, message: str, *, field: Optional[str] = None, value: Any = None):
        self.field = field
        self.value = value
        prefix = f"Validation failed for field '{field}': " if field else "Validation failed: "
        super().__init__(prefix + message)
        self.message = message


class ConfigurationError(FieldGuardError):
    """Invalid holder, predicate, settings or endpoint configuration."""


class FetchError(FieldGuardError):
    """A GET request failed; carried inside a ``FetchResult``, never raised by ``fetch``."""

    def __init__(self, message: str, *, url: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.url = url
        self.status_code = status_code


__all__ = [
    "FieldGuardError",
    "PreconditionViolation",
    "HardValidationFailure",
    "ConfigurationError",
    "FetchError",
]
