"""Rendering of command results as a table, JSON, YAML or CSV."""

from __future__ import annotations

import csv
import io
import json
from collections.abc import Sequence
from enum import Enum
from typing import Any

import yaml
from pydantic import BaseModel
from rich.console import Console

from bonusly_cli.output.tables import format_cell, kv_table, make_table

console = Console()


class OutputFormat(str, Enum):
    TABLE = "table"
    JSON = "json"
    YAML = "yaml"
    CSV = "csv"


def to_data(data: Any) -> Any:
    """Convert models (or lists of models) into JSON-compatible data."""
    if isinstance(data, BaseModel):
        return data.model_dump(mode="json")
    if isinstance(data, (list, tuple)):
        return [to_data(item) for item in data]
    return data


def output_json(data: Any) -> None:
    console.print_json(json.dumps(to_data(data), default=str))


def output_yaml(data: Any) -> None:
    text = yaml.safe_dump(to_data(data), sort_keys=False, allow_unicode=True)
    console.print(text, end="", markup=False, highlight=False, soft_wrap=True)


def output_csv(columns: Sequence[str], rows: Sequence[Sequence[Any]]) -> None:
    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator="\n")
    writer.writerow(columns)
    for row in rows:
        writer.writerow(format_cell(cell) for cell in row)
    console.print(buf.getvalue(), end="", markup=False, highlight=False, soft_wrap=True)


def output_table(
    data: Any,
    *,
    columns: Sequence[str] | None = None,
    rows: Sequence[Sequence[Any]] | None = None,
    title: str | None = None,
) -> None:
    """Print rows as a table, or a single record as key/value pairs."""
    if columns and rows is not None:
        renderable: Any = make_table(title, columns, rows)
    elif isinstance(data, (BaseModel, dict)):
        renderable = kv_table(dict(data), title=title)
    else:
        renderable = data
    console.print(renderable)


def output(
    data: Any,
    fmt: OutputFormat | str = OutputFormat.TABLE,
    *,
    columns: Sequence[str] | None = None,
    rows: Sequence[Sequence[Any]] | None = None,
    title: str | None = None,
) -> None:
    """Print *data* in the requested format.

    JSON and YAML print *data* itself; table and CSV print *columns* and
    *rows* when given. CSV without rows falls back to JSON.
    """
    fmt = OutputFormat(fmt)
    if fmt is OutputFormat.JSON or (fmt is OutputFormat.CSV and rows is None):
        output_json(data)
    elif fmt is OutputFormat.YAML:
        output_yaml(data)
    elif fmt is OutputFormat.CSV:
        output_csv(columns or [], rows or [])
    else:
        output_table(data, columns=columns, rows=rows, title=title)
