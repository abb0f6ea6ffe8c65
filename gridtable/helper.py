"""Small helpers shared by the column width arrangement steps."""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from gridtable.borders import (
    should_draw_left_border,
    should_draw_right_border,
    should_draw_vertical_lines,
)
from gridtable.model import Cell, Column, ColumnDisplayInfo, Table


def absolute_width_with_padding(column: Column, width: int) -> int:
    """Content width left once the column's padding is taken from width; at least 1."""
    return max(width - column.padding[0] - column.padding[1], 0) or 1


def count_visible_columns(columns: Iterable[Column]) -> int:
    return sum(1 for column in columns if not column.is_hidden())


def count_remaining_columns(
    column_count: int, infos: Mapping[int, ColumnDisplayInfo]
) -> int:
    """Visible columns whose width has not been decided yet."""
    return column_count - sum(1 for info in infos.values() if not info.is_hidden)


def count_border_columns(table: Table, visible_columns: int) -> int:
    """Number of terminal columns taken up by borders and vertical lines."""
    lines = 0
    if should_draw_left_border(table):
        lines += 1
    if should_draw_right_border(table):
        lines += 1
    if should_draw_vertical_lines(table):
        lines += max(visible_columns - 1, 0)
    return lines


def delimiter(table: Table, column: Column, cell: Cell) -> str:
    """The delimiter for a cell: cell, then column, then table, then a space."""
    for candidate in (cell.delimiter, column.delimiter, table.delimiter):
        if candidate is not None:
            return candidate
    return " "