"""Rich table rendering of classification reports.

Presentation only: the verdicts are computed by
:func:`useful_value.core.report.classify` before they reach this module.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from useful_value.cli.console import stdout_console
from useful_value.core.report import CATEGORIES, Classification
from useful_value.exceptions import EnvironmentError

USEFUL_MARK: str = "✓"
USELESS_MARK: str = "✗"


def _import_rich_table() -> tuple[type[Any], type[Any]]:
    """Import rich ``Table`` and ``Text`` lazily for report rendering."""
    try:
        from rich.table import Table
        from rich.text import Text
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "rich is not installed.",
            hint="Install with: pip install rich",
        ) from exc
    return Table, Text


# ---------------------------------------------------------------------------
# Presentation helpers (pure transforms — no I/O themselves)
# ---------------------------------------------------------------------------

def format_value(value: object) -> str:
    """Render a value with its type, e.g. ``"'42' (str)"`` or ``"42 (int)"``."""
    return f"{value!r} ({type(value).__name__})"


def format_verdict(verdict: bool) -> str:
    """Render a verdict as a coloured check or cross mark."""
    if verdict:
        return f"[green]{USEFUL_MARK}[/green]"
    return f"[red]{USELESS_MARK}[/red]"


def _column_title(category: str) -> str:
    return category.replace("_", " ")


# ---------------------------------------------------------------------------
# Rich table display
# ---------------------------------------------------------------------------

def build_report_table(reports: Sequence[Classification]) -> Any:
    """Build a Rich table with one row per value and one column per category.

    Values are shown as plain text; brackets in them are not markup.
    """
    table_class, text_class = _import_rich_table()

    table = table_class(
        title="Value Classification",
        show_header=True,
        header_style="bold magenta",
        border_style="dim",
    )
    table.add_column("Value", justify="left", min_width=10)
    for category in CATEGORIES:
        table.add_column(_column_title(category), justify="center")

    for report in reports:
        table.add_row(
            text_class(format_value(report.value)),
            *(format_verdict(verdict) for verdict in report.verdicts().values()),
        )
    return table


def print_report_table(reports: Sequence[Classification]) -> None:
    """Print the classification table to stdout."""
    table = build_report_table(reports)
    stdout_console.rich().print(table)
