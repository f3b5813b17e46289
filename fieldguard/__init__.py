# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""fieldguard - explicit value holders that enforce a constraint on every write."""

from .exceptions import (
    ConfigurationError,
    FetchError,
    FieldGuardError,
    HardValidationFailure,
    PreconditionViolation,
)
from .holders import ClampHolder, TrimmedHolder, ValidatedHolder, ValidationPolicy
from .net import FetchResult, GetEndpoint
from .settings import (
    FileSettingsStore,
    InMemorySettingsStore,
    Setting,
    SettingsStore,
    get_default_store,
    set_default_store,
)
from .validation import ValidationResult, ValidationViolation, predicates

__version__ = "0.1.0"

__all__ = [
    "ClampHolder",
    "ConfigurationError",
    "FetchError",
    "FetchResult",
    "FieldGuardError",
    "FileSettingsStore",
    "GetEndpoint",
    "HardValidationFailure",
    "InMemorySettingsStore",
    "PreconditionViolation",
    "Setting",
    "SettingsStore",
    "TrimmedHolder",
    "ValidatedHolder",
    "ValidationPolicy",
    "ValidationResult",
    "ValidationViolation",
    "get_default_store",
    "predicates",
    "set_default_store",
]
