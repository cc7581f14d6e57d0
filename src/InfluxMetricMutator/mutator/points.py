"""Construction of the four metric points emitted for each check result."""

from __future__ import annotations

from typing import List, Sequence

from .models import Check, MetricPoint, MetricTag
from .tags import is_critical

TYPE_PREFIX = "integerType"
DURATION_SUFFIX = f"{TYPE_PREFIX}.duration"
INTERVAL_SUFFIX = f"{TYPE_PREFIX}.interval"
STATUS_INT_SUFFIX = f"{TYPE_PREFIX}.status_int"
VALUE_SUFFIX = f"{TYPE_PREFIX}.value"

POINT_SUFFIXES = (DURATION_SUFFIX, INTERVAL_SUFFIX, STATUS_INT_SUFFIX, VALUE_SUFFIX)


def duration_ms(check: Check) -> int:
    """Check duration in whole milliseconds, truncated toward zero."""

    return int(check.duration * 1000)


def status_int(check: Check) -> int:
    """Status code, doubled for checks labelled critical."""

    if is_critical(check):
        return check.status * 2
    return check.status


def build_points(
    base_name: str,
    check: Check,
    timestamp: int,
    tags: Sequence[MetricTag],
) -> List[MetricPoint]:
    shared_tags = tuple(tags)
    values = (
        float(duration_ms(check)),
        float(check.interval),
        float(status_int(check)),
        1.0,
    )
    return [
        MetricPoint(
            name=f"{base_name}.{suffix}",
            value=value,
            timestamp=timestamp,
            tags=shared_tags,
        )
        for suffix, value in zip(POINT_SUFFIXES, values)
    ]


__all__ = [
    "DURATION_SUFFIX",
    "INTERVAL_SUFFIX",
    "POINT_SUFFIXES",
    "STATUS_INT_SUFFIX",
    "VALUE_SUFFIX",
    "build_points",
    "duration_ms",
    "status_int",
]
