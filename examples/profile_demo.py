# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Wire every fieldguard holder into a few small records.

Run with ``python examples/profile_demo.py``. The first-launch flag is kept
in memory so the demo never touches your real settings file; set
``FIELDGUARD_DEMO_PERSIST=1`` to use the default file-backed store instead.
"""

import logging
import os
from dataclasses import dataclass, field

from fieldguard import (
    ClampHolder,
    FetchResult,
    GetEndpoint,
    InMemorySettingsStore,
    Setting,
    TrimmedHolder,
    ValidatedHolder,
    ValidationResult,
    set_default_store,
)
from fieldguard.validation import predicates

logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")

WEATHER_URL = (
    "https://samples.openweathermap.org/data/2.5/weather"
    "?id=2172797&appid=b6907d289e10d714a6e88b30761fae22"
)


# --- Records embedding holders ---


class Post:
    def __init__(self, title: str, body: str):
        self.title = TrimmedHolder(title)
        self.body = TrimmedHolder(body)


class AppSettings:
    is_first_launch = Setting("isFirstLaunch", default=True)


class APIManager:
    get_current_weather = GetEndpoint(WEATHER_URL)


@dataclass
class Rating:
    value: ClampHolder = field(default_factory=lambda: ClampHolder(0.0, (0.0, 5.0), name="rating"))


@dataclass
class User:
    first_name: ValidatedHolder = field(
        default_factory=lambda: ValidatedHolder(predicates.length_between(3, 20), name="first_name")
    )
    last_name: ValidatedHolder = field(
        default_factory=lambda: ValidatedHolder(
            predicates.length_between(3, 20), retain_last_valid=True, name="last_name"
        )
    )
    username: ValidatedHolder = field(
        default_factory=lambda: ValidatedHolder(predicates.not_equals("admin"), name="username")
    )
    password: ValidatedHolder = field(
        default_factory=lambda: ValidatedHolder(predicates.matches(r"^[a-z]{5,10}$"), name="password")
    )

    def update(self, **values) -> ValidationResult:
        """Write several fields at once and collect every rejection."""

        combined = ValidationResult()
        for field_name, value in values.items():
            combined.merge(getattr(self, field_name).write(value))
        return combined

    @property
    def description(self) -> str:
        return (
            f"{self.first_name.read()} {self.last_name.read()} "
            f"- username: {self.username.read()} - password: {self.password.read()}"
        )


def print_weather(result: FetchResult) -> None:
    if result.ok:
        print(f"  -> Weather: {result.text[:120]}")
    else:
        print(f"  -> Weather request failed: {result.error}")


def main():
    if os.getenv("FIELDGUARD_DEMO_PERSIST", "0") in ("", "0", "false", "no"):
        set_default_store(InMemorySettingsStore())

    print("\n--- Trimmed post ---")
    post = Post(title="    A title to trim     ", body="    A body to trim      ")
    print(f"  -> {post.title.read()} - {post.body.read()}")

    print("\n--- First launch setting ---")
    print(f"  -> before: {AppSettings.is_first_launch.read()}")
    AppSettings.is_first_launch.write(False)
    print(f"  -> after: {AppSettings.is_first_launch.read()}")

    print("\n--- Weather GET ---")
    APIManager.get_current_weather.fetch_blocking(print_weather)

    print("\n--- Clamped rating ---")
    rating = Rating()
    rating.value.write(10.0)
    print(f"  -> rating after writing 10.0: {rating.value.read()}")

    print("\n--- Validated user ---")
    user = User()
    result = user.update(first_name="roger", last_name="last", username="notAdmin", password="abc123456")
    for violation in result.violations:
        print(f"  -> rejected {violation.field}: {violation.message}")
    print(f"  -> {user.description}")


if __name__ == "__main__":
    main()
