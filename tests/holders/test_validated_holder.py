# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Tests for ValidatedHolder - accept, reject, retain and hard-fail modes.

Key concepts:
- Absent (None) writes always succeed and never count as rejections
- A rejected value never stays in the holder
- retain_last_valid makes reads fall back to the last accepted value
- hard_fail_on_invalid raises HardValidationFailure once per invalid write
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field

import pytest

from fieldguard import (
    HardValidationFailure,
    ValidatedHolder,
    ValidationPolicy,
    ValidationResult,
    ValidationViolation,
)
from fieldguard.validation import predicates


@dataclass
class User:
    first_name: ValidatedHolder = field(
        default_factory=lambda: ValidatedHolder(predicates.length_between(3, 20), name="first_name")
    )
    username: ValidatedHolder = field(
        default_factory=lambda: ValidatedHolder(predicates.not_equals("admin"), name="username")
    )
    password: ValidatedHolder = field(
        default_factory=lambda: ValidatedHolder(predicates.matches(r"^[a-z]{5,10}$"), name="password")
    )


# ---------------------------------------------------------------------------
# Default mode
# ---------------------------------------------------------------------------


def test_holder_starts_absent_without_validating():
    calls = []

    def predicate(value):
        calls.append(value)
        return True

    holder = ValidatedHolder(predicate)

    assert holder.read() is None
    assert holder.current is None
    assert calls == []


def test_username_rejects_admin():
    user = User()

    user.username.write("admin")
    assert user.username.read() is None

    user.username.write("alice")
    assert user.username.read() == "alice"


def test_password_must_be_lowercase_letters_only():
    user = User()

    user.password.write("abc123456")
    assert user.password.read() is None

    user.password.write("abcdef")
    assert user.password.read() == "abcdef"


def test_name_length_between_three_and_twenty():
    user = User()

    user.first_name.write("ab")
    assert user.first_name.read() is None

    user.first_name.write("roger")
    assert user.first_name.read() == "roger"


def test_rejected_write_discards_previous_value():
    """
    GIVEN: A holder that currently holds an accepted value
    WHEN: A value failing the predicate is written
    THEN: The holder becomes absent instead of keeping the old value
    """
    holder = ValidatedHolder(predicates.not_equals("admin"))
    holder.write("alice")

    holder.write("admin")

    assert holder.read() is None
    assert holder.last_valid is None


def test_absent_write_clears_and_is_allowed():
    holder = ValidatedHolder(predicates.not_equals("admin"))
    holder.write("alice")

    result = holder.write(None)

    assert holder.read() is None
    assert result.allowed is True
    assert result.violations == []


def test_absent_write_skips_the_predicate():
    def predicate(value):
        raise AssertionError("predicate must not run for absent writes")

    holder = ValidatedHolder(predicate)
    holder.write(None)

    assert holder.read() is None


def test_rejection_is_reported_in_result():
    holder = ValidatedHolder(predicates.not_equals("admin"), name="username")

    result = holder.write("admin")

    assert isinstance(result, ValidationResult)
    assert result.allowed is False
    assert not result
    [violation] = result.violations
    assert isinstance(violation, ValidationViolation)
    assert violation.field == "username"
    assert violation.operator == "not_equals"
    assert violation.expected == "admin"
    assert violation.actual == "admin"
    assert violation.message == "'admin' is equal to 'admin'"


def test_accepted_write_returns_allowed_result():
    holder = ValidatedHolder(predicates.not_equals("admin"))

    result = holder.write("alice")

    assert result.allowed is True
    assert bool(result) is True


def test_rejection_is_logged_at_debug(caplog):
    holder = ValidatedHolder(predicates.length_between(3, 20), name="first_name")

    with caplog.at_level(logging.DEBUG, logger="fieldguard.holders"):
        holder.write("ab")

    assert "first_name" in caplog.text
    assert "length_between" in caplog.text


def test_plain_callable_predicate_uses_generic_message():
    def is_even(value):
        return value % 2 == 0

    holder = ValidatedHolder(is_even)

    result = holder.write(3)

    assert result.violations[0].operator == "is_even"
    assert result.violations[0].message == "3 is invalid"


def test_custom_message_builder_overrides_predicate_message():
    holder = ValidatedHolder(
        predicates.less_than(10),
        message_builder=lambda value: f"{value} is too large",
    )

    result = holder.write(12)

    assert result.violations[0].message == "12 is too large"


# ---------------------------------------------------------------------------
# Retention mode
# ---------------------------------------------------------------------------


def test_retention_falls_back_to_last_valid_value():
    """
    GIVEN: A holder with retain_last_valid enabled
    WHEN: An accepted write of v1 is followed by a rejected write of v2
    THEN: read() returns v1 while the current slot is absent
    """
    holder = ValidatedHolder(predicates.length_between(3, 20), retain_last_valid=True)

    holder.write("roger")
    holder.write("ab")

    assert holder.read() == "roger"
    assert holder.current is None
    assert holder.last_valid == "roger"


def test_retention_absent_write_keeps_last_valid():
    holder = ValidatedHolder(predicates.length_between(3, 20), retain_last_valid=True)
    holder.write("roger")

    holder.write(None)

    assert holder.current is None
    assert holder.last_valid == "roger"
    assert holder.read() == "roger"


def test_retention_tracks_most_recent_accepted_value():
    holder = ValidatedHolder(predicates.length_between(3, 20), retain_last_valid=True)

    holder.write("roger")
    holder.write("alice")
    holder.write("x")

    assert holder.read() == "alice"


def test_retention_before_any_accepted_write_reads_absent():
    holder = ValidatedHolder(predicates.length_between(3, 20), retain_last_valid=True)

    holder.write("ab")

    assert holder.read() is None


def test_last_valid_not_tracked_without_retention():
    holder = ValidatedHolder(predicates.length_between(3, 20))

    holder.write("roger")
    holder.write("ab")

    assert holder.last_valid is None
    assert holder.read() is None


# ---------------------------------------------------------------------------
# Hard-fail mode
# ---------------------------------------------------------------------------


def test_hard_fail_raises_with_builder_message():
    holder = ValidatedHolder(
        predicates.not_equals("admin"),
        hard_fail_on_invalid=True,
        name="username",
    )

    with pytest.raises(HardValidationFailure) as exc_info:
        holder.write("admin")

    error = exc_info.value
    assert error.field == "username"
    assert error.value == "admin"
    assert error.message == "'admin' is equal to 'admin'"
    assert "username" in str(error)
    assert isinstance(error, AssertionError)
    assert holder.read() is None


def test_hard_fail_raises_once_per_invalid_write():
    holder = ValidatedHolder(predicates.numeric_range(0, 10), hard_fail_on_invalid=True)
    failures = 0

    for value in (5, 11, None, -1, 3):
        try:
            holder.write(value)
        except HardValidationFailure:
            failures += 1

    assert failures == 2
    assert holder.read() == 3


def test_hard_fail_never_triggers_on_absent_write():
    holder = ValidatedHolder(predicates.not_equals("admin"), hard_fail_on_invalid=True)

    result = holder.write(None)

    assert result.allowed is True


def test_hard_fail_with_retention_keeps_last_valid():
    holder = ValidatedHolder(
        predicates.length_between(3, 20),
        hard_fail_on_invalid=True,
        retain_last_valid=True,
    )
    holder.write("roger")

    with pytest.raises(HardValidationFailure):
        holder.write("ab")

    assert holder.current is None
    assert holder.read() == "roger"


def test_hard_fail_is_logged_at_error(caplog):
    holder = ValidatedHolder(predicates.equals(1), hard_fail_on_invalid=True, name="flag")

    with caplog.at_level(logging.ERROR, logger="fieldguard.holders"):
        with pytest.raises(HardValidationFailure):
            holder.write(2)

    assert "Hard validation failure on flag" in caplog.text


# ---------------------------------------------------------------------------
# Policy struct
# ---------------------------------------------------------------------------


def test_from_policy_copies_configuration():
    policy = ValidationPolicy(
        predicate=predicates.greater_than(0),
        retain_last_valid=True,
        hard_fail_on_invalid=False,
    )

    holder = ValidatedHolder.from_policy(policy, name="quantity")
    holder.write(4)
    holder.write(-2)

    assert holder.policy == policy
    assert holder.name == "quantity"
    assert holder.read() == 4


def test_policy_describe_prefers_message_builder():
    policy = ValidationPolicy(predicate=predicates.equals(1), message_builder=lambda v: "nope")
    assert policy.describe(2) == "nope"
    assert ValidationPolicy(predicate=predicates.equals(1)).describe(2) == "2 is not equal to 1"
