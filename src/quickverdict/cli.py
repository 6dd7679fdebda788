# src/quickverdict/cli.py
"""quickverdict Command Line Interface.

Runs one property from an importable module and turns the Report into an
exit code:

    0  PASSED
    1  FAILED
    2  GAVE_UP
    3  the property or the configuration could not be loaded
"""

from __future__ import annotations

import importlib
import json
import sys
from pathlib import Path
from typing import Any, Literal

import typer
import yaml
from pydantic import ValidationError

from quickverdict import __version__
from quickverdict.contracts.enums import ReportStatus
from quickverdict.contracts.errors import QuickverdictError
from quickverdict.contracts.report import Report
from quickverdict.core.config import RunConfig, load_config
from quickverdict.core.events import EventBus, LoggingObserver
from quickverdict.core.logging import configure_logging
from quickverdict.engine.runner import run

__all__ = ["app"]

EXIT_CODES: dict[ReportStatus, int] = {
    ReportStatus.PASSED: 0,
    ReportStatus.FAILED: 1,
    ReportStatus.GAVE_UP: 2,
}
EXIT_LOAD_ERROR = 3

app = typer.Typer(
    name="quickverdict",
    help="quickverdict: property-based testing with shrinking.",
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"quickverdict version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    """quickverdict: property-based testing with shrinking."""


def _load_property(target: str, app_dir: Path) -> Any:
    """Import ``module:attribute`` (attribute may be dotted)."""
    module_name, sep, attribute = target.partition(":")
    if not sep or not module_name or not attribute:
        raise ValueError(f"expected MODULE:ATTR, got {target!r}")

    search_path = str(app_dir.resolve())
    if search_path not in sys.path:
        sys.path.insert(0, search_path)

    obj: Any = importlib.import_module(module_name)
    for part in attribute.split("."):
        obj = getattr(obj, part)
    return obj


def _load_run_config(config_file: Path | None, **overrides: Any) -> RunConfig:
    try:
        return load_config(config_file, **overrides)
    except FileNotFoundError:
        typer.echo(f"Error: Config file not found: {config_file}", err=True)
        raise typer.Exit(EXIT_LOAD_ERROR) from None
    except yaml.YAMLError as e:
        typer.echo(f"YAML syntax error in {config_file}: {e}", err=True)
        raise typer.Exit(EXIT_LOAD_ERROR) from None
    except ValidationError as e:
        typer.echo("Configuration errors:", err=True)
        for error in e.errors():
            loc = ".".join(str(x) for x in error["loc"])
            typer.echo(f"  - {loc}: {error['msg']}", err=True)
        raise typer.Exit(EXIT_LOAD_ERROR) from None
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(EXIT_LOAD_ERROR) from None


def _echo_report(report: Report, output_format: str) -> None:
    if output_format == "json":
        typer.echo(json.dumps(report.to_dict(), indent=2))
        return
    color = {
        ReportStatus.PASSED: typer.colors.GREEN,
        ReportStatus.FAILED: typer.colors.RED,
        ReportStatus.GAVE_UP: typer.colors.YELLOW,
    }[report.status]
    typer.secho(report.render(), fg=color)


@app.command()
def check(
    target: str = typer.Argument(
        ...,
        help="Property to check, as MODULE:ATTR (e.g. tests.props:reverse_twice).",
    ),
    trials: int | None = typer.Option(
        None,
        "--trials",
        "-n",
        help="Trials that must pass (default 100).",
    ),
    max_size: int | None = typer.Option(
        None,
        "--max-size",
        help="Largest size magnitude for generated values (default 100).",
    ),
    max_discard_ratio: float | None = typer.Option(
        None,
        "--max-discard-ratio",
        help="Give up once discards exceed this ratio times the trial count (default 10).",
    ),
    seed: int | None = typer.Option(
        None,
        "--seed",
        "-s",
        help="Seed for a reproducible run.",
    ),
    config_file: Path | None = typer.Option(
        None,
        "--config",
        "-c",
        help="YAML file with run settings; command-line options take precedence.",
    ),
    app_dir: Path = typer.Option(
        Path("."),
        "--app-dir",
        help="Directory added to the import path before loading the property.",
    ),
    log_level: str = typer.Option(
        "WARNING",
        "--log-level",
        help="Log level for run events (DEBUG shows every trial and shrink step).",
    ),
    json_logs: bool = typer.Option(
        False,
        "--json-logs",
        help="Output structured JSON logs (for machine processing).",
    ),
    output_format: Literal["console", "json"] = typer.Option(
        "console",
        "--format",
        "-f",
        help="Report format: 'console' (human-readable) or 'json' (structured JSON).",
    ),
) -> None:
    """Check a property and exit with its verdict.

    Exit code 0 when the property passed, 1 when it was falsified, 2 when too
    many inputs were discarded, 3 when it could not be loaded.
    """
    try:
        configure_logging(json_output=json_logs, level=log_level)
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(EXIT_LOAD_ERROR) from None

    config = _load_run_config(
        config_file,
        max_trials=trials,
        max_size=max_size,
        max_discard_ratio=max_discard_ratio,
        seed=seed,
    )

    try:
        prop = _load_property(target, app_dir)
    except (ImportError, AttributeError, ValueError) as e:
        typer.echo(f"Error loading property {target}: {e}", err=True)
        raise typer.Exit(EXIT_LOAD_ERROR) from None

    bus = EventBus()
    LoggingObserver().attach(bus)

    try:
        report = run(prop, config, events=bus)
    except QuickverdictError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(EXIT_LOAD_ERROR) from None

    _echo_report(report, output_format)
    raise typer.Exit(EXIT_CODES[report.status])
