"""Rich table rendering helpers."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from rich.table import Table


def cell(value: Any) -> str:
    """Render one table cell: ``None`` is blank, booleans read yes/no."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "yes" if value else "no"
    return str(value)


def make_table(
    title: str | None,
    columns: Sequence[str],
    rows: Sequence[Sequence[Any]],
    *,
    show_lines: bool = False,
) -> Table:
    """Build a Rich Table from column headers and row data.

    Paths and class names are long; columns fold instead of truncating.
    """
    table = Table(title=title, show_lines=show_lines)
    for col in columns:
        table.add_column(col, overflow="fold")
    for row in rows:
        table.add_row(*(cell(value) for value in row))
    return table


def kv_table(data: dict[str, Any], *, title: str | None = None) -> Table:
    """Render a key-value dict as a two-column table."""
    table = Table(title=title, show_header=False, show_lines=False)
    table.add_column("Key", style="bold cyan", no_wrap=True)
    table.add_column("Value", overflow="fold")
    for key, value in data.items():
        table.add_row(key, cell(value))
    return table
