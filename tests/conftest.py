from __future__ import annotations

import sys
from pathlib import Path
from typing import Any, Dict, Optional

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

import pytest  # noqa: E402

from InfluxMetricMutator.mutator.models import Event  # noqa: E402


def event_payload(
    *,
    name: str = "disk",
    status: int = 2,
    duration: float = 1.5,
    interval: int = 60,
    labels: Optional[Dict[str, str]] = None,
    hostname: str = "h1",
    timestamp: int = 1700000000,
) -> Dict[str, Any]:
    return {
        "timestamp": timestamp,
        "entity": {
            "entity_class": "agent",
            "metadata": {"name": "web-01", "namespace": "default"},
            "system": {"hostname": hostname, "os": "linux"},
        },
        "check": {
            "metadata": {"name": name, "namespace": "default", "labels": labels or {}},
            "status": status,
            "duration": duration,
            "interval": interval,
            "output": "DISK OK",
        },
        "id": "3a5f1b0c-0000-4000-8000-000000000000",
    }


@pytest.fixture
def make_event():
    def factory(**kwargs: Any) -> Event:
        return Event.model_validate(event_payload(**kwargs))

    return factory


@pytest.fixture
def critical_event(make_event) -> Event:
    return make_event(labels={"critical": "True", "product": "svcA"})


@pytest.fixture
def make_payload():
    return event_payload
