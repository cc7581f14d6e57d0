"""CLI package exports."""

from .app import app, main
from .config import MutatorConfig, load_mutator_config, validate_config
from .runner import CommandRuntime, MutatorRunner

__all__ = [
    "app",
    "main",
    "CommandRuntime",
    "MutatorConfig",
    "MutatorRunner",
    "load_mutator_config",
    "validate_config",
]
