"""Dynamic arrangement: fitting column widths into a given table width."""

from __future__ import annotations

from collections.abc import Sequence

from gridtable import constraint
from gridtable.helper import (
    absolute_width_with_padding,
    count_border_columns,
    count_remaining_columns,
    count_visible_columns,
    delimiter,
)
from gridtable.model import Column, ColumnDisplayInfo, ContentArrangement, Table
from gridtable.split import split_line
from gridtable.text import measure_text_width

_MAX_WIDTH = 0xFFFF

DisplayInfos = dict[int, ColumnDisplayInfo]


def _cap(value: int) -> int:
    return min(value, _MAX_WIDTH)


def arrange(
    table: Table,
    infos: DisplayInfos,
    table_width: int,
    max_content_widths: Sequence[int],
) -> None:
    """Decide the width of every undecided column so the table fits table_width.

    Columns narrower than the average free space keep their content width,
    boundary constraints are enforced, and the remaining space is shared out
    evenly (left to right for any excess). Results are written into infos.
    """
    visible_columns = count_visible_columns(table.columns)

    remaining_width = _available_content_width(table, infos, visible_columns, table_width)
    remaining_columns = count_remaining_columns(visible_columns, infos)

    if remaining_columns > 0:
        remaining_width, remaining_columns = _enforce_lower_boundary_constraints(
            table, infos, remaining_width, remaining_columns, visible_columns
        )

    remaining_width, remaining_columns = _find_columns_that_fit_into_average(
        table,
        infos,
        remaining_width,
        remaining_columns,
        visible_columns,
        max_content_widths,
    )

    if remaining_columns > 0:
        remaining_width, remaining_columns = _optimize_space_after_split(
            table, table.columns, infos, remaining_width, remaining_columns
        )

    if remaining_columns == 0:
        if (
            remaining_width > 0
            and table.arrangement is ContentArrangement.DYNAMIC_FULL_WIDTH
        ):
            _use_full_width(infos, remaining_width)
        return

    # Every remaining column gets at least one character.
    remaining_width = max(remaining_width, remaining_columns)
    _distribute_remaining_space(table.columns, infos, remaining_width, remaining_columns)


def _available_content_width(
    table: Table, infos: DisplayInfos, visible_columns: int, width: int
) -> int:
    """Table width minus borders, paddings of open columns and already fixed columns."""
    width = max(width - count_border_columns(table, visible_columns), 0)

    for column in table.columns:
        if column.index in infos:
            continue
        width = max(width - column.padding_width(), 0)

    for info in infos.values():
        if info.is_hidden:
            continue
        width = max(width - info.width(), 0)

    return width


def _find_columns_that_fit_into_average(
    table: Table,
    infos: DisplayInfos,
    remaining_width: int,
    remaining_columns: int,
    visible_columns: int,
    max_content_widths: Sequence[int],
) -> tuple[int, int]:
    """Fix columns whose content (or upper boundary) fits the average free space."""
    found_smaller = True
    while found_smaller:
        found_smaller = False
        if remaining_columns == 0:
            break

        average_space = remaining_width // remaining_columns
        if average_space == 0:
            break

        for column in table.columns:
            if column.index in infos:
                continue

            max_column_width = max_content_widths[column.index]

            upper = constraint.max_width(table, column.constraint, visible_columns)
            if upper is not None:
                # Boundaries always include padding.
                average_with_padding = average_space + column.padding_width()
                width_with_padding = max_column_width + column.padding_width()
                if upper <= average_with_padding and width_with_padding >= upper:
                    width = absolute_width_with_padding(column, upper)
                    infos[column.index] = ColumnDisplayInfo.from_column(column, width)
                    remaining_width = max(remaining_width - width, 0)
                    remaining_columns -= 1
                    if remaining_columns == 0:
                        break
                    average_space = remaining_width // remaining_columns
                    found_smaller = True
                    continue

            if max_column_width <= average_space:
                infos[column.index] = ColumnDisplayInfo.from_column(
                    column, max_column_width
                )
                remaining_width = max(remaining_width - max_column_width, 0)
                remaining_columns -= 1
                if remaining_columns == 0:
                    break
                average_space = remaining_width // remaining_columns
                found_smaller = True

    return remaining_width, remaining_columns


def _enforce_lower_boundary_constraints(
    table: Table,
    infos: DisplayInfos,
    remaining_width: int,
    remaining_columns: int,
    visible_columns: int,
) -> tuple[int, int]:
    """Fix columns whose lower boundary exceeds the average free space."""
    average_space = remaining_width // remaining_columns
    for column in table.columns:
        if column.index in infos:
            continue

        lower = constraint.min_width(table, column.constraint, visible_columns)
        if lower is None or average_space >= lower:
            continue

        width = absolute_width_with_padding(column, lower)
        infos[column.index] = ColumnDisplayInfo.from_column(column, width)

        remaining_width = max(remaining_width - width, 0)
        remaining_columns -= 1
        if remaining_columns == 0:
            break
        average_space = remaining_width // remaining_columns

    return remaining_width, remaining_columns


def _optimize_space_after_split(
    table: Table,
    columns: Sequence[Column],
    infos: DisplayInfos,
    remaining_width: int,
    remaining_columns: int,
) -> tuple[int, int]:
    """Shrink columns whose wrapped content ends up clearly narrower than the average."""
    average_space = remaining_width // remaining_columns
    found_smaller = True
    while found_smaller:
        found_smaller = False
        for column in columns:
            if column.index in infos:
                continue

            longest_line = _longest_line_after_split(average_space, column, table)
            if max(average_space - longest_line, 0) >= 3:
                infos[column.index] = ColumnDisplayInfo.from_column(
                    column, _cap(longest_line)
                )
                remaining_width = max(remaining_width - longest_line, 0)
                remaining_columns -= 1
                if remaining_columns == 0:
                    break
                average_space = remaining_width // remaining_columns
                found_smaller = True

    return remaining_width, remaining_columns


def _longest_line_after_split(average_space: int, column: Column, table: Table) -> int:
    """Width of the widest line of the column once wrapped to average_space."""
    info = ColumnDisplayInfo.from_column(column, _cap(average_space))
    longest = 0
    for cell in table.column_cells_with_header(column.index):
        if cell is None:
            continue
        cell_delimiter = delimiter(table, column, cell)
        for line in cell.content:
            if measure_text_width(line) > average_space:
                parts = split_line(line, info, cell_delimiter, table.ansi)
            else:
                parts = [line]
            longest = max([longest, *(measure_text_width(part) for part in parts)])
    return longest


def _use_full_width(infos: DisplayInfos, remaining_width: int) -> None:
    """Share leftover space among all visible columns, excess going left first."""
    visible = [infos[index] for index in sorted(infos) if not infos[index].is_hidden]
    if not visible:
        return

    average_space, excess = divmod(remaining_width, len(visible))
    for info in visible:
        if excess > 0:
            excess -= 1
            info.content_width += _cap(average_space + 1)
        else:
            info.content_width += _cap(average_space)


def _distribute_remaining_space(
    columns: Sequence[Column],
    infos: DisplayInfos,
    remaining_width: int,
    remaining_columns: int,
) -> None:
    """Give every undecided column an equal share, excess going left first."""
    average_space, excess = divmod(remaining_width, remaining_columns)
    for column in columns:
        if column.index in infos:
            continue
        if excess > 0:
            excess -= 1
            width = _cap(average_space + 1)
        else:
            width = _cap(average_space)
        infos[column.index] = ColumnDisplayInfo.from_column(column, width)