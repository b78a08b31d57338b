import logging
import typer
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import List, Optional

from .config.loader import ConfigManager, resolve_config_file
from .core.comparator import canonicalize
from .core.reporter import Reporter
from .core.tester import XmlTester
from .logging_utils import setup_logging

app = typer.Typer(help="Helpers for XML regression tests.")


class LogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


@dataclass
class GlobalOptions:
    log_level: LogLevel
    config_file: Optional[Path]
    override_configs: Optional[List[str]]


@app.callback()
def main_callback(
    ctx: typer.Context,
    log_level: LogLevel = typer.Option(LogLevel.WARNING, "--log-level", help="Set the log level for console output."),
    config_file: Optional[Path] = typer.Option(None, "--config", "-c", help="Path to the configuration TOML file. Defaults to xmltester.toml in CWD or XDG config home."),
    override_configs: List[str] = typer.Option(None, "--set", help="Override configuration settings using path.to.key=value format. Can be used multiple times."),
):
    """xmltester CLI"""
    setup_logging(verbose=False, level=getattr(logging, log_level.value))
    ctx.obj = GlobalOptions(log_level=log_level, config_file=config_file, override_configs=override_configs)


@app.command("canonicalize")
def canonicalize_file(
    input_file: Path = typer.Argument(..., exists=True, dir_okay=False, readable=True, help="XML file to normalize."),
):
    """Print the whitespace-normalized form used for comparisons."""
    typer.echo(canonicalize(input_file.read_text(encoding="utf-8")))


@app.command()
def compare(
    actual_file: Path = typer.Argument(..., exists=True, dir_okay=False, readable=True, help="XML produced by the code under test."),
    expected_file: Path = typer.Argument(..., exists=True, dir_okay=False, readable=True, help="Expected XML."),
    label: Optional[str] = typer.Option(None, "--label", "-l", help="Label used in the report."),
):
    """Compare two XML files ignoring layout whitespace."""
    tester = XmlTester(reporter=Reporter(strict=False))
    result = tester.compare_xml(
        actual_file.read_text(encoding="utf-8"),
        expected_file.read_text(encoding="utf-8"),
        label or f"{actual_file.name} vs {expected_file.name}",
    )
    if result.equal:
        typer.echo(f"OK {result.label}")
        return
    typer.echo(f"MISMATCH {result.label}")
    typer.echo(f"     got: {result.actual}")
    typer.echo(f"expected: {result.expected}")
    raise typer.Exit(code=1)


@app.command()
def show_config(ctx: typer.Context):
    """Print the effective tester settings as JSON."""
    global_opts: GlobalOptions = ctx.obj
    config = ConfigManager(resolve_config_file(global_opts.config_file))
    try:
        settings = config.get_settings(global_opts.override_configs)
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)
    typer.echo(settings.model_dump_json(indent=2))


if __name__ == "__main__":
    app()
