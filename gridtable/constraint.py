"""Resolving column constraints to concrete widths."""

from __future__ import annotations

from typing import Optional

from gridtable.helper import absolute_width_with_padding, count_border_columns
from gridtable.model import (
    Absolute,
    Boundaries,
    Column,
    ColumnConstraint,
    ColumnDisplayInfo,
    ContentWidth,
    Fixed,
    Hidden,
    LowerBoundary,
    Percentage,
    Table,
    UpperBoundary,
    Width,
)

_MAX_WIDTH = 0xFFFF


def evaluate(
    table: Table,
    visible_columns: int,
    infos: dict[int, ColumnDisplayInfo],
    column: Column,
    max_content_width: int,
) -> None:
    """Fix the width of column in infos if its constraint already decides it."""
    constraint = column.constraint
    if isinstance(constraint, ContentWidth):
        infos[column.index] = ColumnDisplayInfo.from_column(column, max_content_width)
    elif isinstance(constraint, Absolute):
        width = absolute_value_from_width(table, constraint.width, visible_columns)
        if width is not None:
            infos[column.index] = ColumnDisplayInfo.from_column(
                column, absolute_width_with_padding(column, width)
            )
    elif isinstance(constraint, Hidden):
        info = ColumnDisplayInfo.from_column(column, max_content_width)
        info.is_hidden = True
        infos[column.index] = info

    lower = min_width(table, constraint, visible_columns)
    if lower is not None:
        # Content narrower than the lower boundary: the boundary decides the width.
        if max_content_width + column.padding_width() <= lower:
            infos[column.index] = ColumnDisplayInfo.from_column(
                column, absolute_width_with_padding(column, lower)
            )


def min_width(
    table: Table, constraint: Optional[ColumnConstraint], visible_columns: int
) -> Optional[int]:
    """The lower boundary of a constraint in terminal columns, if it has one."""
    if isinstance(constraint, LowerBoundary):
        return absolute_value_from_width(table, constraint.width, visible_columns)
    if isinstance(constraint, Boundaries):
        return absolute_value_from_width(table, constraint.lower, visible_columns)
    return None


def max_width(
    table: Table, constraint: Optional[ColumnConstraint], visible_columns: int
) -> Optional[int]:
    """The upper boundary of a constraint in terminal columns, if it has one."""
    if isinstance(constraint, UpperBoundary):
        return absolute_value_from_width(table, constraint.width, visible_columns)
    if isinstance(constraint, Boundaries):
        return absolute_value_from_width(table, constraint.upper, visible_columns)
    return None


def absolute_value_from_width(
    table: Table, width: Width, visible_columns: int
) -> Optional[int]:
    """Resolve a width to terminal columns.

    Percentages are taken of the table width without borders, capped at 100%,
    and give None when the table width is unknown.
    """
    if isinstance(width, Fixed):
        return width.width
    if isinstance(width, Percentage):
        if table.width is None:
            return None
        percent = min(width.percent, 100)
        available = max(table.width - count_border_columns(table, visible_columns), 0)
        return min(available * percent // 100, _MAX_WIDTH)
    raise TypeError(f"not a width: {width!r}")