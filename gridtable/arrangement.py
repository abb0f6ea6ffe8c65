"""Deciding the width of every column for one rendering of a table."""

from __future__ import annotations

from collections.abc import Sequence

from gridtable import constraint, dynamic
from gridtable.helper import absolute_width_with_padding, count_visible_columns
from gridtable.model import ColumnDisplayInfo, ContentArrangement, Table


def arrange_disabled(
    table: Table,
    infos: dict[int, ColumnDisplayInfo],
    visible_columns: int,
    max_content_widths: Sequence[int],
) -> None:
    """Give every undecided column its content width, capped by an upper boundary."""
    for column in table.columns:
        if column.index in infos:
            continue

        width = max_content_widths[column.index]
        upper = constraint.max_width(table, column.constraint, visible_columns)
        if upper is not None and upper < width:
            width = absolute_width_with_padding(column, upper)

        infos[column.index] = ColumnDisplayInfo.from_column(column, width)


def arrange_content(table: Table) -> list[ColumnDisplayInfo]:
    """Resolve the display info of every column, ordered by column index."""
    infos: dict[int, ColumnDisplayInfo] = {}
    max_content_widths = table.column_max_content_widths()
    visible_columns = count_visible_columns(table.columns)

    for column in table.columns:
        if column.constraint is not None:
            constraint.evaluate(
                table,
                visible_columns,
                infos,
                column,
                max_content_widths[column.index],
            )

    if table.width is None or table.arrangement is ContentArrangement.DISABLED:
        arrange_disabled(table, infos, visible_columns, max_content_widths)
    else:
        dynamic.arrange(table, infos, table.width, max_content_widths)

    return [infos[index] for index in sorted(infos)]