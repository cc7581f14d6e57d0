"""Pydantic models for the Sensu event wire format."""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Status and interval are uint32 on the wire.
UINT32_MAX = 2**32 - 1


class _SensuModel(BaseModel):
    """Base model that keeps fields it does not know about."""

    model_config = ConfigDict(extra="allow", allow_inf_nan=False)


class ObjectMeta(_SensuModel):
    """Name, namespace, labels and annotations of a Sensu resource."""

    name: str = ""
    namespace: Optional[str] = None
    labels: Dict[str, str] = Field(default_factory=dict)
    annotations: Dict[str, str] = Field(default_factory=dict)

    @field_validator("labels", "annotations", mode="before")
    @classmethod
    def empty_when_null(cls, value: object) -> object:
        return {} if value is None else value


class System(_SensuModel):
    hostname: str = ""


class Entity(_SensuModel):
    """The agent entity that produced the event."""

    metadata: ObjectMeta = Field(default_factory=ObjectMeta)
    system: System = Field(default_factory=System)

    @property
    def name(self) -> str:
        return self.metadata.name

    @property
    def labels(self) -> Dict[str, str]:
        return self.metadata.labels

    @property
    def annotations(self) -> Dict[str, str]:
        return self.metadata.annotations


class Check(_SensuModel):
    """Result of a single check execution."""

    metadata: ObjectMeta = Field(default_factory=ObjectMeta)
    status: int = Field(default=0, ge=0, le=UINT32_MAX)
    duration: float = 0.0
    interval: int = Field(default=0, ge=0, le=UINT32_MAX)

    @property
    def name(self) -> str:
        return self.metadata.name

    @property
    def labels(self) -> Dict[str, str]:
        return self.metadata.labels

    @property
    def annotations(self) -> Dict[str, str]:
        return self.metadata.annotations


class MetricTag(_SensuModel):
    """A name/value pair attached to a metric point. Read-only once built."""

    model_config = ConfigDict(extra="allow", frozen=True)

    name: str
    value: str


class MetricPoint(_SensuModel):
    name: str
    value: float
    timestamp: int = 0
    tags: Tuple[MetricTag, ...] = ()

    @field_validator("tags", mode="before")
    @classmethod
    def empty_when_null(cls, value: object) -> object:
        return () if value is None else value


class Metrics(_SensuModel):
    """Metric points carried by an event towards a metrics handler."""

    handlers: Optional[List[str]] = None
    points: List[MetricPoint] = Field(default_factory=list)

    @field_validator("points", mode="before")
    @classmethod
    def empty_when_null(cls, value: object) -> object:
        return [] if value is None else value


class Event(_SensuModel):
    """A Sensu event: an entity, an optional check result and optional metrics."""

    timestamp: int = 0
    entity: Entity = Field(default_factory=Entity)
    check: Optional[Check] = None
    metrics: Optional[Metrics] = None

    def has_check(self) -> bool:
        return self.check is not None

    def has_metrics(self) -> bool:
        return self.metrics is not None

    @property
    def hostname(self) -> str:
        return self.entity.system.hostname


__all__ = [
    "Check",
    "Entity",
    "Event",
    "MetricPoint",
    "MetricTag",
    "Metrics",
    "ObjectMeta",
    "System",
]
