"""CLI entry point: registers the scan command."""

import typer

app = typer.Typer(
    name="paradigm-meter",
    help="paradigm-meter - OOP vs FP construct ratio for TypeScript codebases",
    add_completion=False,
    rich_markup_mode="rich",
)


# Import the command module to register it
from .scan import scan as _scan  # noqa: F401, E402
