"""CLI application entrypoint built with Typer."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

import typer

from InfluxMetricMutator import __version__
from InfluxMetricMutator.mutator.exceptions import MutatorError
from InfluxMetricMutator.mutator.pipeline import DEFAULT_METRIC_NAME_TEMPLATE

from .config import PLUGIN_NAME, load_mutator_config
from .logging import configure_logging
from .runner import CommandRuntime, MutatorRunner

app = typer.Typer(
    help="Sensu InfluxDB Metric Mutator: turn check results into metric points.",
    add_completion=False,
)


def _handle_error(exc: Exception) -> None:
    typer.echo(f"[error] {exc}", err=True)
    raise typer.Exit(code=1)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"{PLUGIN_NAME} {__version__}")
        raise typer.Exit()


@app.command()
def mutate(
    metric_name_template: Optional[str] = typer.Option(
        None,
        "--metric-name-template",
        "-t",
        help=(
            "Template for naming the metric point for the check status "
            f"[default: {DEFAULT_METRIC_NAME_TEMPLATE}]."
        ),
        show_default=False,
    ),
    config: Optional[Path] = typer.Option(
        None, "--config", help="Path to mutator configuration file (TOML or JSON)."
    ),
    log_format: Optional[str] = typer.Option(
        None, "--log-format", help="Log format for stderr and file output (text or json)."
    ),
    log_file: Optional[Path] = typer.Option(
        None, "--log-file", help="Also append logs to this file."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logging."),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    """Read a Sensu event on stdin and write it to stdout with metric points added."""

    overrides = {
        "metric_name_template": metric_name_template,
        "log_format": log_format,
        "log_path": log_file,
        "verbose": verbose or None,
    }
    try:
        resolved = load_mutator_config(config, overrides=overrides)
    except MutatorError as exc:
        _handle_error(exc)

    logger = configure_logging(resolved.log_format, resolved.verbose, resolved.log_path)
    runner = MutatorRunner(CommandRuntime(config=resolved, logger=logger))
    try:
        runner.run(sys.stdin, sys.stdout)
    except MutatorError as exc:
        logger.error(
            "Mutator failed",
            extra={"error": str(exc), "error_type": type(exc).__name__},
        )
        _handle_error(exc)


def main() -> None:
    """Entrypoint for the CLI."""

    app(prog_name=PLUGIN_NAME)


__all__ = ["app", "main"]
