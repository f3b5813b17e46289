# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Metric instrument definitions for fieldguard."""

from __future__ import annotations

from .runtime import meter

holder_write_total = meter.create_counter(
    name="fieldguard.holder.write.total",
    description="Counts writes to holders, partitioned by holder kind and outcome.",
    unit="1",
)

validation_rejected_total = meter.create_counter(
    name="fieldguard.validation.rejected.total",
    description="Counts writes rejected by a validated holder's predicate.",
    unit="1",
)

validation_hard_failure_total = meter.create_counter(
    name="fieldguard.validation.hard_failure.total",
    description="Counts rejected writes that raised HardValidationFailure.",
    unit="1",
)

clamp_applied_total = meter.create_counter(
    name="fieldguard.clamp.applied.total",
    description="Counts writes coerced to the lower or upper bound of a clamp holder.",
    unit="1",
)

fetch_latency_ms = meter.create_histogram(
    name="fieldguard.fetch.latency.ms",
    description="Time taken by a GET endpoint fetch, tagged by outcome.",
    unit="ms",
)


def record_write(holder: str, outcome: str) -> None:
    """Count one holder write, tagged by holder kind and outcome."""

    holder_write_total.add(1, {"holder": holder, "outcome": outcome})


__all__ = [
    "holder_write_total",
    "validation_rejected_total",
    "validation_hard_failure_total",
    "clamp_applied_total",
    "fetch_latency_ms",
    "record_write",
]
