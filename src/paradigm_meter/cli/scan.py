"""Scan command: count OOP and FP constructs under a directory."""

import os
from pathlib import Path
from typing import Optional

import typer
from rich.markup import escape

from .. import __version__
from ..analysis.engine import ParadigmAnalyzer
from ..config import load_config
from ..exceptions import FileAccessError, ParadigmMeterError
from ..formatters import JsonFormatter, get_formatter
from ..logging_config import get_logger, setup_logging
from . import app
from ._common import err_console, split_patterns, status

logger = get_logger(__name__)


@app.command()
def scan(
    directory: Path = typer.Argument(
        Path("."),
        help="Directory to scan (default: current directory)",
        file_okay=False,
        dir_okay=True,
    ),
    exclude: Optional[str] = typer.Option(
        None,
        "--exclude",
        "-e",
        help="Comma-separated path substrings to exclude",
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Print a single JSON object instead of the text summary",
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Also write the JSON report to this file",
        dir_okay=False,
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Configuration file path (TOML format)",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose (DEBUG) logging",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Suppress all but ERROR logging",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit",
    ),
):
    """
    Report the ratio of OOP to FP constructs in .ts/.tsx files.

    [bold cyan]Examples:[/bold cyan]

      paradigm-meter ./src

      paradigm-meter . --exclude generated,__tests__

      paradigm-meter . --json | jq .ratio
    """
    if version:
        print(f"paradigm-meter {__version__}")
        raise typer.Exit(0)

    if verbose and quiet:
        err_console.print("[red]Error:[/red] --verbose and --quiet are mutually exclusive")
        raise typer.Exit(1)

    try:
        settings = load_config(config_file=config, verbose=verbose, quiet=quiet)
        setup_logging(settings.verbosity, log_file=settings.log_file)
        logger.debug(f"Loaded settings: {settings}")

        analyzer = ParadigmAnalyzer(settings)
        target = Path(os.path.abspath(directory))
        patterns = analyzer.resolve_exclusions(split_patterns(exclude))

        if not json_output:
            status(f"Scanning: {target}")
            if patterns:
                status(f"Excluding: {', '.join(patterns)}")

        def _files_found(count: int) -> None:
            if not json_output:
                status(f"Found {count} .ts/.tsx files")

        report = analyzer.analyze(target, exclude_patterns=patterns, on_files_found=_files_found)

        formatter = get_formatter("json" if json_output else "text")
        formatter.render(report)

        if output is not None:
            try:
                output.write_text(JsonFormatter(indent=2).format(report) + "\n", encoding="utf-8")
            except OSError as e:
                raise FileAccessError(output, f"Cannot write report: {e}")

    except typer.Exit:
        raise

    except ParadigmMeterError as e:
        logger.debug(f"{e.__class__.__name__}: {e}")
        err_console.print(f"[red]Error:[/red] {escape(str(e))}", highlight=False)
        raise typer.Exit(e.exit_code)

    except KeyboardInterrupt:
        logger.info("Scan interrupted by user")
        err_console.print("\n[yellow]Scan interrupted[/yellow]")
        raise typer.Exit(130)

    except Exception as e:
        logger.exception("Unexpected error during scan")
        err_console.print(f"[red]Unexpected error:[/red] {escape(str(e))}", highlight=False)
        raise typer.Exit(1)
