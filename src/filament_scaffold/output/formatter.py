"""Output dispatcher: renders command results as Rich tables, JSON, YAML or CSV.

Two shapes reach the terminal: a flat mapping (``config show``) through
:func:`output`, and a summary plus titled sections (``resource plan``)
through :func:`output_report`.
"""

from __future__ import annotations

import csv
import io
import json
from collections.abc import Mapping, Sequence
from typing import Any, NamedTuple

import yaml
from rich.console import Console

from filament_scaffold.output.tables import kv_table, make_table

console = Console()


class Section(NamedTuple):
    """One titled table of a multi-table report."""

    title: str
    columns: Sequence[str]
    rows: Sequence[Sequence[Any]]


def _plain(data: Any) -> Any:
    if hasattr(data, "model_dump"):
        return data.model_dump(mode="json")
    return data


def _print_raw(text: str) -> None:
    console.print(text, end="", markup=False, highlight=False, soft_wrap=True)


def output_json(data: Any) -> None:
    console.print_json(json.dumps(_plain(data), indent=2, default=str))


def output_yaml(data: Any) -> None:
    _print_raw(yaml.safe_dump(_plain(data), default_flow_style=False, sort_keys=False))


def output_csv(columns: Sequence[str], rows: Sequence[Sequence[Any]]) -> None:
    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator="\n")
    writer.writerow(columns)
    writer.writerows(["" if v is None else str(v) for v in row] for row in rows)
    _print_raw(buf.getvalue())


def output(data: Any, fmt: str = "table", *, title: str | None = None) -> None:
    """Render a flat mapping, or a pydantic model dumped to one.

    Tables and CSV show one ``key, value`` row per entry.
    """
    mapping: Mapping[str, Any] = _plain(data)
    if fmt == "json":
        output_json(mapping)
    elif fmt == "yaml":
        output_yaml(mapping)
    elif fmt == "csv":
        output_csv(["key", "value"], list(mapping.items()))
    else:
        console.print(kv_table(dict(mapping), title=title))


def output_report(
    data: Any,
    fmt: str = "table",
    *,
    summary: dict[str, Any] | None = None,
    summary_title: str | None = None,
    sections: Sequence[Section] = (),
) -> None:
    """Render a summary plus several tables, or *data* as one JSON/YAML document.

    CSV prints each section as its own block, separated by a blank line.
    """
    if fmt == "json":
        output_json(data)
    elif fmt == "yaml":
        output_yaml(data)
    elif fmt == "csv":
        for i, section in enumerate(sections):
            if i:
                console.print()
            output_csv(section.columns, section.rows)
    else:
        if summary is not None:
            console.print(kv_table(summary, title=summary_title))
        for section in sections:
            console.print(make_table(section.title, section.columns, section.rows))
