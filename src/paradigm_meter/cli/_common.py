"""Shared CLI helpers."""

from typing import Optional

from rich.console import Console

# Status and errors go to stderr so piped stdout stays clean.
err_console = Console(stderr=True)


def status(message: str) -> None:
    """Print a plain status line to stderr."""
    err_console.print(message, markup=False, highlight=False, soft_wrap=True)


def split_patterns(raw: Optional[str]) -> list[str]:
    """Split a comma-separated ``--exclude`` value, dropping empty items."""
    if not raw:
        return []
    return [part for part in raw.split(",") if part]
