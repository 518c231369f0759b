"""Shared utility functions for the Helix templating engine.

Provides path comparison helpers, command line token parsing, and Rich-based
console reporting.
"""

from __future__ import annotations

import os
from pathlib import Path

from rich.console import Console
from rich.table import Table

console = Console()

# ---------------------------------------------------------------------------
# Path helpers
# ---------------------------------------------------------------------------


def path_key(path: str | Path) -> str:
    """Return a normalised, case-folded key for case-insensitive comparison.

    Examples::

        path_key("/Tmpl/Foo/../Bar.TXT") -> "/tmpl/bar.txt"
    """
    return os.path.normpath(str(path)).casefold()


def same_path(first: str | Path | None, second: str | Path | None) -> bool:
    """Compare two full paths case-insensitively.

    ``None`` never matches anything, including another ``None``.
    """
    if first is None or second is None:
        return False
    return path_key(first) == path_key(second)


def ensure_dir(path: str | Path) -> Path:
    """Create a directory (and parents) if it does not exist."""
    dir_path = Path(path)
    dir_path.mkdir(parents=True, exist_ok=True)
    return dir_path


# ---------------------------------------------------------------------------
# Token helpers
# ---------------------------------------------------------------------------


def parse_token_assignments(assignments: list[str] | None) -> dict[str, str]:
    """Parse ``KEY=VALUE`` strings into a mapping.

    Only the first ``=`` separates key from value, so values may contain
    ``=`` themselves.  Later assignments override earlier ones.

    Raises:
        ValueError: If an assignment has no ``=`` or an empty key.
    """
    tokens: dict[str, str] = {}
    for assignment in assignments or []:
        key, sep, value = assignment.partition("=")
        key = key.strip()
        if not sep or not key:
            raise ValueError(f"Invalid token assignment '{assignment}', expected KEY=VALUE")
        tokens[key] = value
    return tokens


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_summary_table(data: dict[str, str], title: str = "Summary") -> None:
    """Print a two-column key/value summary table."""
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Item", style="dim", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(key, str(value))

    console.print(table)
    console.print()


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{message}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{message}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{message}[/bold yellow]")
