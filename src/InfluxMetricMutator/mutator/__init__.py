"""Check event to metric point mutation."""

from .exceptions import (
    ConfigError,
    EventDecodeError,
    EventValidationError,
    MutatorError,
    TemplateError,
)
from .models import Check, Entity, Event, MetricPoint, Metrics, MetricTag, ObjectMeta, System
from .pipeline import DEFAULT_METRIC_NAME_TEMPLATE, MetricMutator
from .points import POINT_SUFFIXES, build_points
from .tags import build_tags, coalesce, label
from .templates import render_template

__all__ = [
    "Check",
    "ConfigError",
    "DEFAULT_METRIC_NAME_TEMPLATE",
    "Entity",
    "Event",
    "EventDecodeError",
    "EventValidationError",
    "MetricMutator",
    "MetricPoint",
    "MetricTag",
    "Metrics",
    "MutatorError",
    "ObjectMeta",
    "POINT_SUFFIXES",
    "System",
    "TemplateError",
    "build_points",
    "build_tags",
    "coalesce",
    "label",
    "render_template",
]
