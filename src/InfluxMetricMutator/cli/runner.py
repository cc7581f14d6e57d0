"""Plugin runner: read an event, apply the mutator, write the event back."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import IO

from pydantic import ValidationError

from InfluxMetricMutator.mutator.exceptions import EventDecodeError
from InfluxMetricMutator.mutator.models import Event
from InfluxMetricMutator.mutator.pipeline import MetricMutator

from .config import MutatorConfig, validate_config


@dataclass(frozen=True)
class CommandRuntime:
    """Holds context required during a mutator invocation."""

    config: MutatorConfig
    logger: logging.Logger


def decode_event(payload: str | bytes) -> Event:
    if isinstance(payload, bytes):
        try:
            payload = payload.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise EventDecodeError(f"failed to read event: {exc}") from exc
    if not payload or not payload.strip():
        raise EventDecodeError("failed to read event: stdin is empty")
    try:
        return Event.model_validate_json(payload)
    except ValidationError as exc:
        raise EventDecodeError(f"failed to unmarshal event: {exc}") from exc


def encode_event(event: Event) -> str:
    return event.model_dump_json(exclude_none=True)


class MutatorRunner:
    """Drives one mutator invocation the way Sensu's plugin SDK does."""

    def __init__(self, runtime: CommandRuntime) -> None:
        self._runtime = runtime

    def run(self, stdin: IO[str] | IO[bytes], stdout: IO[str]) -> Event:
        """Validate config, mutate the event read from ``stdin`` and write it out.

        Raises a :class:`MutatorError` on failure; nothing is written to
        ``stdout`` in that case.
        """

        logger = self._runtime.logger
        logger.debug(
            "Mutator configuration resolved",
            extra={
                "config_path": str(self._runtime.config.config_path)
                if self._runtime.config.config_path
                else None,
                "metric_name_template": self._runtime.config.metric_name_template,
            },
        )
        validate_config(self._runtime.config)

        # Raw bytes so invalid UTF-8 surfaces as a decode error.
        event = decode_event(getattr(stdin, "buffer", stdin).read())
        config = self._runtime.config.with_annotations(event)
        if config is not self._runtime.config:
            logger.debug(
                "Template overridden by event annotation",
                extra={"metric_name_template": config.metric_name_template},
            )
            validate_config(config)

        mutated = MetricMutator(config.metric_name_template).mutate(event)
        stdout.write(encode_event(mutated))
        stdout.write("\n")
        logger.info(
            "Event mutated",
            extra={
                "check": mutated.check.name if mutated.check else None,
                "entity": mutated.entity.metadata.name,
                "points": len(mutated.metrics.points) if mutated.metrics else 0,
            },
        )
        return mutated


__all__ = [
    "CommandRuntime",
    "MutatorRunner",
    "decode_event",
    "encode_event",
]
