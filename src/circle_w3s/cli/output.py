"""Rendering of API results for the terminal."""

from __future__ import annotations

import json
from enum import Enum
from typing import Any, Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from circle_w3s.codec import WireModel

# Widest table the text renderer produces; remaining fields are dropped.
_MAX_COLUMNS = 8


class OutputFormat(str, Enum):
    json = "json"
    text = "text"


def _is_scalar(value: Any) -> bool:
    return not isinstance(value, (dict, list))


def _cell(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if _is_scalar(value):
        return escape(str(value))
    return escape(json.dumps(value, separators=(",", ":")))


def render_json(result: WireModel, console: Console) -> None:
    """Pretty-print *result* as its wire JSON."""
    console.print_json(json.dumps(result.encode()))


def _render_table(rows: list[dict[str, Any]], title: Optional[str], console: Console) -> None:
    if not rows:
        console.print("[dim]No results.[/dim]")
        return

    columns: list[str] = []
    for row in rows:
        for key, value in row.items():
            if key not in columns and _is_scalar(value):
                columns.append(key)
    columns = columns[:_MAX_COLUMNS]

    table = Table(title=title)
    for i, column in enumerate(columns):
        table.add_column(column, style="cyan" if i == 0 else None)
    for row in rows:
        table.add_row(*(_cell(row[c]) if c in row else "" for c in columns))
    console.print(table)


def _render_panel(obj: dict[str, Any], title: Optional[str], console: Console) -> None:
    lines = [f"[bold]{escape(key)}:[/bold] {_cell(value)}" for key, value in obj.items()]
    console.print(Panel("\n".join(lines) or "[dim]empty[/dim]", title=title))


def render_text(result: WireModel, console: Console, title: Optional[str] = None) -> None:
    """Render *result* for humans.

    Payloads wrapping a single list (``{"wallets": [...]}``) become a table;
    payloads wrapping a single object (``{"wallet": {...}}``) and bare
    objects become a key/value panel.
    """
    data = result.encode()
    if len(data) == 1:
        key, inner = next(iter(data.items()))
        if isinstance(inner, list) and all(isinstance(r, dict) for r in inner):
            _render_table(inner, title or key, console)
            return
        if isinstance(inner, dict):
            _render_panel(inner, title or key, console)
            return
    _render_panel(data, title, console)


def render(
    result: WireModel,
    fmt: str,
    console: Console,
    title: Optional[str] = None,
) -> None:
    if fmt == OutputFormat.text.value:
        render_text(result, console, title)
    else:
        render_json(result, console)
