"""Tag derivation for metric points built from a check result."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Optional, Tuple

from .models import Check, MetricTag

CRITICAL_LABEL = "critical"
# Only this exact spelling marks a check as critical; "true" or "TRUE" do not.
CRITICAL_VALUE = "True"

METRICS_SOURCE = "sensu"
DEPLOYMENT_UID = "none"


def coalesce(primary: str, fallback: str) -> str:
    """Return ``primary`` unless it is empty, in which case return ``fallback``."""

    return primary if primary else fallback


def label(labels: Optional[Mapping[str, str]], key: str) -> str:
    """Look up a label, treating a missing key as an empty string."""

    if not labels:
        return ""
    return labels.get(key, "") or ""


def is_critical(check: Check) -> bool:
    return label(check.labels, CRITICAL_LABEL) == CRITICAL_VALUE


def build_tags(check: Check, hostname: str) -> Tuple[MetricTag, ...]:
    """Build the ordered tag set shared by every point of one event."""

    labels = check.labels
    status = str(check.status)
    pairs = (
        ("critical", "True" if is_critical(check) else "False"),
        ("deployment_uid", DEPLOYMENT_UID),
        ("host", hostname),
        ("metrics_source", METRICS_SOURCE),
        ("name", coalesce(label(labels, "display_name"), check.name)),
        ("product_id", label(labels, "product")),
        ("ret_code", status),
        ("status", status),
        ("target_alias", label(labels, "service")),
        ("type", METRICS_SOURCE),
        ("subproduct", coalesce(label(labels, "subproduct"), label(labels, "product"))),
        ("app_name", coalesce(label(labels, "app_name"), label(labels, "service"))),
    )
    return tuple(MetricTag(name=name, value=value) for name, value in pairs)


__all__ = ["build_tags", "coalesce", "is_critical", "label"]
