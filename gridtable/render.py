"""Rendering a whole table into lines of text."""

from __future__ import annotations

from collections.abc import Iterator

from gridtable.arrangement import arrange_content
from gridtable.borders import draw_borders
from gridtable.content_format import format_content
from gridtable.model import Table


def build_table(table: Table) -> Iterator[str]:
    """Yield the lines of the rendered table, top to bottom."""
    table.discover_columns()
    display_info = arrange_content(table)
    content = format_content(table, display_info)
    return iter(draw_borders(table, content, display_info))


def render_table(table: Table) -> str:
    """The rendered table as one string, lines separated by newlines."""
    return "\n".join(build_table(table))