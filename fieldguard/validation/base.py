# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Result types shared by every validating holder."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Optional


@dataclass
class ValidationViolation:
    """A single rejected write.

    ``field`` is the holder name (``None`` for anonymous holders), ``operator``
    names the predicate that rejected the value and ``expected`` is its
    configured operand.
    """

    field: Optional[str]
    operator: str
    expected: Any
    actual: Any
    message: str


@dataclass
class ValidationResult:
    allowed: bool = True
    violations: List[ValidationViolation] = field(default_factory=list)

    def add(self, violation: ValidationViolation) -> None:
        self.allowed = False
        self.violations.append(violation)

    def merge(self, other: "ValidationResult") -> "ValidationResult":
        """Fold *other* into this result and return ``self``."""

        if not other.allowed:
            self.allowed = False
        self.violations.extend(other.violations)
        return self

    def __bool__(self) -> bool:
        return self.allowed


__all__ = ["ValidationResult", "ValidationViolation"]
