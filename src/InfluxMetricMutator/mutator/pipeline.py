"""Event mutation: validate, name, tag and append metric points."""

from __future__ import annotations

import logging

from .exceptions import EventValidationError, TemplateError
from .models import Event, Metrics
from .points import build_points
from .tags import build_tags
from .templates import render_template

logger = logging.getLogger(__name__)

DEFAULT_METRIC_NAME_TEMPLATE = "{{.Check.Name}}.status"


class MetricMutator:
    """Appends duration, interval, status and value points to check events."""

    def __init__(self, template: str = DEFAULT_METRIC_NAME_TEMPLATE) -> None:
        self.template = template

    def mutate(self, event: Event) -> Event:
        """Append four metric points to ``event`` and return the same instance.

        The event is left untouched when validation or template evaluation
        fails. Calling this twice on one event appends a second batch.
        """

        if not event.has_check():
            raise EventValidationError("event has no check")
        check = event.check

        try:
            base_name = render_template(self.template, event)
        except TemplateError as exc:
            raise TemplateError(f"failed to evaluate template: {exc}") from exc

        tags = build_tags(check, event.hostname)
        points = build_points(base_name, check, event.timestamp, tags)

        if not event.has_metrics():
            event.metrics = Metrics()
        event.metrics.points.extend(points)

        logger.debug(
            "Appended metric points",
            extra={
                "check": check.name,
                "metric_name": base_name,
                "points": len(points),
                "total_points": len(event.metrics.points),
            },
        )
        return event


__all__ = ["DEFAULT_METRIC_NAME_TEMPLATE", "MetricMutator"]
