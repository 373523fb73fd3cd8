"""Rich tables and the cell formatting they share with CSV output."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel
from rich.table import Table


def format_cell(value: Any) -> str:
    """Render one field value as plain text."""
    if value is None:
        return ""
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, datetime):
        # Date-only fields are normalized to midnight
        if value.time() == datetime.min.time():
            return value.date().isoformat()
        return value.isoformat(timespec="seconds")
    if isinstance(value, BaseModel):
        value = dict(value)
    if isinstance(value, Mapping):
        return ", ".join(f"{k}={format_cell(v)}" for k, v in value.items() if v)
    if isinstance(value, (list, tuple)):
        return "; ".join(format_cell(v) for v in value)
    return str(value)


def make_table(
    title: str | None,
    columns: Sequence[str],
    rows: Iterable[Sequence[Any]],
) -> Table:
    table = Table(*columns, title=title)
    for row in rows:
        table.add_row(*map(format_cell, row))
    return table


def kv_table(data: Mapping[str, Any], *, title: str | None = None) -> Table:
    """Two columns, field name and value, without a header."""
    table = Table(title=title, show_header=False)
    table.add_column(style="bold cyan", no_wrap=True)
    table.add_column()
    for key, value in data.items():
        table.add_row(key, format_cell(value))
    return table
