# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Constrained value holders.

A holder owns one field of a record and enforces its constraint on every
write. Records embed holders by composition and call ``read()`` / ``write()``
explicitly:

    @dataclass
    class Rating:
        score: ClampHolder[float] = field(
            default_factory=lambda: ClampHolder(0.0, (0.0, 5.0))
        )

    rating = Rating()
    rating.score.write(10.0)
    rating.score.read()  # 5.0

Holders are plain in-memory state machines. They are not thread-safe; a
holder shared between threads must be guarded by its owner.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Generic, Optional, Tuple, TypeVar

from .exceptions import HardValidationFailure, PreconditionViolation
from .telemetry.metrics import (
    clamp_applied_total,
    record_write,
    validation_hard_failure_total,
    validation_rejected_total,
)
from .validation.base import ValidationResult, ValidationViolation

logger = logging.getLogger(__name__)

T = TypeVar("T")


# ==============================================================================
# Clamp holder
# ==============================================================================


class ClampHolder(Generic[T]):
    """Hold a comparable value that always lies within an inclusive range.

    Construction requires the initial value to already be in range; every
    later write is coerced to ``min(max(lower, value), upper)`` and never
    fails.
    """

    def __init__(self, initial: T, bounds: Tuple[T, T], *, name: Optional[str] = None):
        lower, upper = bounds
        try:
            inverted = lower > upper
        except TypeError as exc:
            raise PreconditionViolation(f"Clamp bounds are not comparable: {lower!r}, {upper!r}") from exc
        if inverted:
            raise PreconditionViolation(
                f"Clamp range is empty: lower bound {lower!r} is greater than upper bound {upper!r}"
            )
        if not lower <= initial <= upper:
            raise PreconditionViolation(
                f"Initial value {initial!r} is outside the range [{lower!r}, {upper!r}]"
            )

        self.name = name
        self._lower = lower
        self._upper = upper
        self._value = initial

    @property
    def lower(self) -> T:
        return self._lower

    @property
    def upper(self) -> T:
        return self._upper

    @property
    def bounds(self) -> Tuple[T, T]:
        return (self._lower, self._upper)

    def contains(self, value: T) -> bool:
        return self._lower <= value <= self._upper

    def read(self) -> T:
        return self._value

    def write(self, new_value: T) -> None:
        # NaN fails every comparison and is stored as the lower bound.
        if not new_value >= self._lower:
            bound = "lower"
        elif new_value > self._upper:
            bound = "upper"
        else:
            bound = None

        self._value = min(max(self._lower, new_value), self._upper)

        if bound is not None:
            logger.debug(
                "Clamped write to %s: %r -> %r (%s bound)",
                self.name or "clamp holder",
                new_value,
                self._value,
                bound,
            )
            clamp_applied_total.add(1, {"bound": bound})
            record_write("clamp", "clamped")
        else:
            record_write("clamp", "accepted")

    def __repr__(self) -> str:
        return f"ClampHolder(value={self._value!r}, bounds=({self._lower!r}, {self._upper!r}))"


# ==============================================================================
# Validated holder
# ==============================================================================


def _default_message(value: Any) -> str:
    return f"{value!r} is invalid"


@dataclass(frozen=True)
class ValidationPolicy:
    """How a :class:`ValidatedHolder` reacts to writes.

    ``retain_last_valid`` makes reads fall back to the most recent accepted
    value while the field is absent. ``hard_fail_on_invalid`` raises
    :class:`HardValidationFailure` for every rejected write. The two flags are
    independent.

    When no ``message_builder`` is given, predicates from
    :mod:`fieldguard.validation.predicates` describe their own rejections.
    """

    predicate: Callable[[Any], bool]
    retain_last_valid: bool = False
    hard_fail_on_invalid: bool = False
    message_builder: Optional[Callable[[Any], str]] = None

    def describe(self, value: Any) -> str:
        if self.message_builder is not None:
            return self.message_builder(value)
        builder = getattr(self.predicate, "message", None)
        if callable(builder):
            return builder(value)
        return _default_message(value)

    @property
    def operator(self) -> str:
        return getattr(self.predicate, "operator", None) or getattr(self.predicate, "__name__", "predicate")

    @property
    def expected(self) -> Any:
        return getattr(self.predicate, "expected", None)


class ValidatedHolder(Generic[T]):
    """Hold a value that passed its predicate, or ``None``.

    ``None`` is the absent marker: writing it clears the field and is never
    a rejection. A value failing the predicate is discarded and the field
    becomes absent; the returned :class:`ValidationResult` describes the
    rejection. With ``retain_last_valid`` reads fall back to the last accepted
    value. With ``hard_fail_on_invalid`` the rejection is also raised as
    :class:`HardValidationFailure` once the state has been updated.

    The holder starts absent; nothing is validated at construction.
    """

    def __init__(
        self,
        predicate: Callable[[Any], bool],
        *,
        hard_fail_on_invalid: bool = False,
        retain_last_valid: bool = False,
        message_builder: Optional[Callable[[Any], str]] = None,
        name: Optional[str] = None,
    ):
        self.policy = ValidationPolicy(
            predicate=predicate,
            retain_last_valid=retain_last_valid,
            hard_fail_on_invalid=hard_fail_on_invalid,
            message_builder=message_builder,
        )
        self.name = name
        self._current: Optional[T] = None
        self._last_valid: Optional[T] = None

    @classmethod
    def from_policy(cls, policy: ValidationPolicy, *, name: Optional[str] = None) -> "ValidatedHolder[T]":
        return cls(
            policy.predicate,
            hard_fail_on_invalid=policy.hard_fail_on_invalid,
            retain_last_valid=policy.retain_last_valid,
            message_builder=policy.message_builder,
            name=name,
        )

    @property
    def current(self) -> Optional[T]:
        return self._current

    @property
    def last_valid(self) -> Optional[T]:
        return self._last_valid

    def read(self) -> Optional[T]:
        if self.policy.retain_last_valid and self._current is None:
            return self._last_valid
        return self._current

    def write(self, new_value: Optional[T]) -> ValidationResult:
        result = ValidationResult()

        if new_value is None:
            self._current = None
            record_write("validated", "cleared")
            return result

        if self.policy.predicate(new_value):
            self._current = new_value
            if self.policy.retain_last_valid:
                self._last_valid = new_value
            record_write("validated", "accepted")
            return result

        self._current = None

        operator = self.policy.operator
        message = self.policy.describe(new_value)
        result.add(
            ValidationViolation(
                field=self.name,
                operator=operator,
                expected=self.policy.expected,
                actual=new_value,
                message=message,
            )
        )
        validation_rejected_total.add(1, {"operator": operator})
        record_write("validated", "rejected")
        logger.debug("Rejected write to %s (%s): %s", self.name or "validated holder", operator, message)

        if self.policy.hard_fail_on_invalid:
            validation_hard_failure_total.add(1, {"operator": operator})
            logger.error("Hard validation failure on %s: %s", self.name or "validated holder", message)
            raise HardValidationFailure(message, field=self.name, value=new_value)

        return result

    def __repr__(self) -> str:
        return (
            f"ValidatedHolder(current={self._current!r}, last_valid={self._last_valid!r}, "
            f"operator={self.policy.operator!r})"
        )


# ==============================================================================
# Trimmed holder
# ==============================================================================


class TrimmedHolder:
    """Hold a string with leading and trailing whitespace removed."""

    def __init__(self, initial: str = ""):
        self._value = ""
        self.write(initial)

    def read(self) -> str:
        return self._value

    def write(self, new_value: str) -> None:
        self._value = new_value.strip()

    def __repr__(self) -> str:
        return f"TrimmedHolder({self._value!r})"


__all__ = [
    "ClampHolder",
    "TrimmedHolder",
    "ValidatedHolder",
    "ValidationPolicy",
]
