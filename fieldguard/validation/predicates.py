# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Convenience predicates for :class:`fieldguard.ValidatedHolder`.

Each constructor returns a :class:`Predicate`: a plain callable
``value -> bool`` that also knows its operator name, its configured operand
and how to describe a rejected value. Holders use the description as their
default message builder.

    from fieldguard import ValidatedHolder
    from fieldguard.validation import predicates

    username = ValidatedHolder(predicates.not_equals("admin"))
    password = ValidatedHolder(predicates.matches(r"^[a-z]{5,10}$"))
    name = ValidatedHolder(predicates.length_between(3, 20))

Configuration mistakes (a malformed regex, inverted bounds) are reported
when the predicate is built, never on the first write.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Any, Callable, Collection, Union

from ..exceptions import ConfigurationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Predicate:
    operator: str
    expected: Any
    check: Callable[[Any], bool]
    describe: Callable[[Any], str]

    def __call__(self, value: Any) -> bool:
        # Values the predicate cannot compare are rejected rather than raised.
        try:
            return bool(self.check(value))
        except TypeError as exc:
            logger.debug("Predicate '%s' could not evaluate %r: %s", self.operator, value, exc)
            return False

    def message(self, value: Any) -> str:
        return self.describe(value)


def _check_bounds(operator: str, lower: Any, upper: Any) -> None:
    try:
        inverted = lower > upper
    except TypeError as exc:
        raise ConfigurationError(f"Bounds for '{operator}' are not comparable: {lower!r}, {upper!r}") from exc
    if inverted:
        raise ConfigurationError(
            f"Invalid bounds for '{operator}': minimum {lower!r} is greater than maximum {upper!r}"
        )


def equals(expected: Any) -> Predicate:
    return Predicate(
        operator="equals",
        expected=expected,
        check=lambda value: value == expected,
        describe=lambda value: f"{value!r} is not equal to {expected!r}",
    )


def not_equals(expected: Any) -> Predicate:
    return Predicate(
        operator="not_equals",
        expected=expected,
        check=lambda value: value != expected,
        describe=lambda value: f"{value!r} is equal to {expected!r}",
    )


def less_than(bound: Any) -> Predicate:
    return Predicate(
        operator="lt",
        expected=bound,
        check=lambda value: value < bound,
        describe=lambda value: f"{value!r} is not less than {bound!r}",
    )


def greater_than(bound: Any) -> Predicate:
    return Predicate(
        operator="gt",
        expected=bound,
        check=lambda value: value > bound,
        describe=lambda value: f"{value!r} is not greater than {bound!r}",
    )


def is_empty(expected: bool = True) -> Predicate:
    """Accept empty collections, and only when *expected* is true.

    With ``expected=False`` nothing is ever accepted.
    """

    return Predicate(
        operator="is_empty",
        expected=expected,
        check=lambda value: expected and len(value) == 0,
        describe=lambda value: f"{value!r} is not empty",
    )


def matches(pattern: Union[str, "re.Pattern[str]"]) -> Predicate:
    """Accept strings in which *pattern* is found.

    The search is unanchored; anchor the pattern with ``^...$`` to require a
    full match.
    """

    if isinstance(pattern, str):
        try:
            compiled = re.compile(pattern)
        except re.error as exc:
            raise ConfigurationError(f"Invalid regex pattern {pattern!r}: {exc}") from exc
    else:
        compiled = pattern

    return Predicate(
        operator="matches",
        expected=compiled.pattern,
        check=lambda value: compiled.search(value) is not None,
        describe=lambda value: f"{value!r} doesn't match regex {compiled.pattern!r}",
    )


def length_between(minimum: int, maximum: int) -> Predicate:
    """Accept sized values whose length lies in ``[minimum, maximum]``."""

    _check_bounds("length_between", minimum, maximum)
    return Predicate(
        operator="length_between",
        expected=(minimum, maximum),
        check=lambda value: minimum <= len(value) <= maximum,
        describe=lambda value: f"{value!r} length is not between {minimum} and {maximum}",
    )


def is_blank(expected: bool = True) -> Predicate:
    """Accept strings that are empty after trimming, and only when *expected* is true."""

    return Predicate(
        operator="is_blank",
        expected=expected,
        check=lambda value: expected and isinstance(value, str) and not value.strip(),
        describe=lambda value: f"{value!r} is not blank" if expected else f"{value!r} is blank",
    )


def numeric_range(minimum: Any, maximum: Any) -> Predicate:
    """Accept values in the inclusive range ``[minimum, maximum]``."""

    _check_bounds("numeric_range", minimum, maximum)
    return Predicate(
        operator="numeric_range",
        expected=(minimum, maximum),
        check=lambda value: minimum <= value <= maximum,
        describe=lambda value: f"{value!r} is not between {minimum!r} and {maximum!r}",
    )


def one_of(choices: Collection[Any]) -> Predicate:
    allowed = list(choices)
    if not allowed:
        raise ConfigurationError("'one_of' requires at least one choice")
    return Predicate(
        operator="in",
        expected=allowed,
        check=lambda value: value in allowed,
        describe=lambda value: f"{value!r} must be one of {allowed!r}",
    )


__all__ = [
    "Predicate",
    "equals",
    "not_equals",
    "less_than",
    "greater_than",
    "is_empty",
    "matches",
    "length_between",
    "is_blank",
    "numeric_range",
    "one_of",
]
