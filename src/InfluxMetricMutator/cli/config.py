"""Configuration loading utilities for the metric mutator CLI."""

from __future__ import annotations

import json
import os
import tomllib
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from InfluxMetricMutator.mutator.exceptions import ConfigError
from InfluxMetricMutator.mutator.models import Event
from InfluxMetricMutator.mutator.pipeline import DEFAULT_METRIC_NAME_TEMPLATE

PLUGIN_NAME = "sensu-influxdb-metric-mutator"
KEYSPACE = f"sensu.io/plugins/{PLUGIN_NAME}/config"
TEMPLATE_OPTION_PATH = "metric-name-template"
TEMPLATE_ANNOTATION = f"{KEYSPACE}/{TEMPLATE_OPTION_PATH}"

TEMPLATE_ENV = "METRIC_NAME_TEMPLATE"
CONFIG_ENV = "MUTATOR_CONFIG"
LOG_FORMAT_ENV = "MUTATOR_LOG_FORMAT"
VERBOSE_ENV = "MUTATOR_VERBOSE"
LOG_PATH_ENV = "MUTATOR_LOG_PATH"

LOG_FORMATS = {"text", "json"}


def _expand(path: Optional[str | Path], base: Optional[Path]) -> Optional[Path]:
    if path is None:
        return None
    candidate = Path(path).expanduser()
    if not candidate.is_absolute() and base is not None:
        candidate = (base / candidate).resolve()
    return candidate


def _truthy(value: object) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class MutatorConfig:
    """Final configuration used during one mutator invocation."""

    metric_name_template: str = DEFAULT_METRIC_NAME_TEMPLATE
    log_format: str = "text"
    verbose: bool = False
    log_path: Optional[Path] = None
    config_path: Optional[Path] = None

    def with_annotations(self, event: Event) -> "MutatorConfig":
        """Apply per-event overrides from entity, then check, annotations."""

        template = self.metric_name_template
        sources = [event.entity.metadata.annotations]
        if event.check is not None:
            sources.append(event.check.annotations)
        for annotations in sources:
            if TEMPLATE_ANNOTATION in annotations:
                template = annotations[TEMPLATE_ANNOTATION]
        if template == self.metric_name_template:
            return self
        return replace(self, metric_name_template=template)


def validate_config(config: MutatorConfig) -> None:
    """Reject configurations that cannot produce a metric name."""

    if not config.metric_name_template:
        raise ConfigError(
            f"--{TEMPLATE_OPTION_PATH} or {TEMPLATE_ENV} environment variable is required"
        )


def _load_file_config(path: Path) -> Dict[str, Any]:
    suffix = path.suffix.lower()
    try:
        content = path.read_bytes()
    except OSError as exc:
        raise ConfigError(f"Unable to read config file {path}: {exc}") from exc
    try:
        if suffix == ".json":
            data = json.loads(content)
        elif suffix in {".toml", ".tml"}:
            data = tomllib.loads(content.decode("utf-8"))
        else:
            raise ConfigError(f"Unsupported config format: {path.suffix}")
    except (json.JSONDecodeError, tomllib.TOMLDecodeError, UnicodeDecodeError) as exc:
        raise ConfigError(f"Invalid config file {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a table/object")
    return data


def _apply_mapping(config: MutatorConfig, data: Mapping[str, Any], base: Optional[Path]) -> MutatorConfig:
    updated = config
    if data.get("metric_name_template") is not None:
        updated = replace(updated, metric_name_template=str(data["metric_name_template"]))
    if data.get("log_format"):
        updated = replace(updated, log_format=str(data["log_format"]).lower())
    if data.get("verbose") is not None:
        updated = replace(updated, verbose=_truthy(data["verbose"]))
    if data.get("log_path"):
        updated = replace(updated, log_path=_expand(data["log_path"], base))
    return updated


def _apply_env_overrides(config: MutatorConfig, env: Mapping[str, str]) -> MutatorConfig:
    values: Dict[str, Any] = {}
    if TEMPLATE_ENV in env:
        values["metric_name_template"] = env[TEMPLATE_ENV]
    if env.get(LOG_FORMAT_ENV):
        values["log_format"] = env[LOG_FORMAT_ENV]
    if env.get(VERBOSE_ENV):
        values["verbose"] = env[VERBOSE_ENV]
    if env.get(LOG_PATH_ENV):
        values["log_path"] = env[LOG_PATH_ENV]
    return _apply_mapping(config, values, None)


def load_mutator_config(
    config_path: Optional[Path] = None,
    env: Optional[Mapping[str, str]] = None,
    overrides: Optional[Mapping[str, Any]] = None,
) -> MutatorConfig:
    """Resolve defaults, config file, environment and flag overrides."""

    env = os.environ if env is None else env
    overrides = {k: v for k, v in (overrides or {}).items() if v is not None}

    path = config_path
    if path is None and env.get(CONFIG_ENV):
        path = Path(env[CONFIG_ENV])

    config = MutatorConfig()
    if path is not None:
        path = path.expanduser()
        if not path.exists():
            raise ConfigError(f"Config file not found: {path}")
        config = _apply_mapping(config, _load_file_config(path), path.parent)
        config = replace(config, config_path=path)

    config = _apply_env_overrides(config, env)
    config = _apply_mapping(config, overrides, None)

    if config.log_format not in LOG_FORMATS:
        raise ConfigError("log_format must be 'text' or 'json'")
    return config


__all__ = [
    "KEYSPACE",
    "MutatorConfig",
    "PLUGIN_NAME",
    "TEMPLATE_ANNOTATION",
    "TEMPLATE_ENV",
    "load_mutator_config",
    "validate_config",
]
