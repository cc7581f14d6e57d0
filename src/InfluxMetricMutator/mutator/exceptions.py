"""Exceptions raised while turning check events into metric points."""

from __future__ import annotations


class MutatorError(RuntimeError):
    """Base exception for mutator failures."""


class ConfigError(MutatorError):
    """Raised when the mutator configuration is missing or invalid."""


class EventDecodeError(MutatorError):
    """Raised when the input document is not a valid Sensu event."""


class EventValidationError(MutatorError):
    """Raised when an event cannot be mutated, e.g. it carries no check."""


class TemplateError(MutatorError):
    """Raised when the metric name template cannot be evaluated."""
