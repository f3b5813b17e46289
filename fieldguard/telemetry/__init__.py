"""Telemetry package - OpenTelemetry instruments for holder activity."""

from .metrics import (
    clamp_applied_total,
    fetch_latency_ms,
    holder_write_total,
    record_write,
    validation_hard_failure_total,
    validation_rejected_total,
)
from .runtime import METER_NAME, meter

__all__ = [
    "METER_NAME",
    "meter",
    "clamp_applied_total",
    "fetch_latency_ms",
    "holder_write_total",
    "record_write",
    "validation_hard_failure_total",
    "validation_rejected_total",
]
