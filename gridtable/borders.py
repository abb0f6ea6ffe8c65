"""Framing formatted table content with borders and separator lines."""

from __future__ import annotations

from collections.abc import Sequence

from gridtable.model import ColumnDisplayInfo, Table, TableComponent

TC = TableComponent


def draw_borders(
    table: Table,
    rows: Sequence[Sequence[Sequence[str]]],
    display_info: Sequence[ColumnDisplayInfo],
) -> list[str]:
    """Turn formatted rows (row -> line -> column part) into the final table lines."""
    lines: list[str] = []
    if _should_draw_top_border(table):
        lines.append(
            _draw_rule(
                table,
                display_info,
                TC.TOP_LEFT_CORNER,
                TC.TOP_BORDER,
                TC.TOP_BORDER_INTERSECTIONS,
                TC.TOP_RIGHT_CORNER,
            )
        )
    lines.extend(_draw_rows(rows, table, display_info))
    if _should_draw_bottom_border(table):
        lines.append(
            _draw_rule(
                table,
                display_info,
                TC.BOTTOM_LEFT_CORNER,
                TC.BOTTOM_BORDER,
                TC.BOTTOM_BORDER_INTERSECTIONS,
                TC.BOTTOM_RIGHT_CORNER,
            )
        )
    return lines


def _draw_rows(
    rows: Sequence[Sequence[Sequence[str]]],
    table: Table,
    display_info: Sequence[ColumnDisplayInfo],
) -> list[str]:
    lines: list[str] = []
    last_index = len(rows) - 1
    for row_index, row in enumerate(rows):
        lines.extend(_embed_line(parts, table) for parts in row)

        if row_index == 0 and table.header is not None:
            if _should_draw_header(table):
                lines.append(
                    _draw_rule(
                        table,
                        display_info,
                        TC.LEFT_HEADER_INTERSECTION,
                        TC.HEADER_LINES,
                        TC.MIDDLE_HEADER_INTERSECTIONS,
                        TC.RIGHT_HEADER_INTERSECTION,
                    )
                )
            continue

        if row_index < last_index and _should_draw_horizontal_lines(table):
            lines.append(
                _draw_rule(
                    table,
                    display_info,
                    TC.LEFT_BORDER_INTERSECTIONS,
                    TC.HORIZONTAL_LINES,
                    TC.MIDDLE_INTERSECTIONS,
                    TC.RIGHT_BORDER_INTERSECTIONS,
                )
            )
    return lines


def _embed_line(parts: Sequence[str], table: Table) -> str:
    """Join the parts of one line, adding vertical lines and side borders."""
    vertical = table.style_or_default(TC.VERTICAL_LINES)
    draw_vertical = should_draw_vertical_lines(table)
    draw_right = should_draw_right_border(table)

    line = table.style_or_default(TC.LEFT_BORDER) if should_draw_left_border(table) else ""
    last = len(parts) - 1
    for position, part in enumerate(parts):
        line += part
        if draw_vertical and position < last:
            line += vertical
        elif draw_right and position == last:
            line += table.style_or_default(TC.RIGHT_BORDER)
    return line


def _draw_rule(
    table: Table,
    display_info: Sequence[ColumnDisplayInfo],
    left: TableComponent,
    fill: TableComponent,
    middle: TableComponent,
    right: TableComponent,
) -> str:
    """Draw a full-width horizontal line out of the given components."""
    fill_char = table.style_or_default(fill)
    segments = (fill_char * info.width() for info in display_info if not info.is_hidden)
    line = table.style_or_default(middle).join(segments)
    if should_draw_left_border(table):
        line = table.style_or_default(left) + line
    if should_draw_right_border(table):
        line += table.style_or_default(right)
    return line


def _any_exists(table: Table, *components: TableComponent) -> bool:
    return any(table.style_exists(component) for component in components)


def _should_draw_top_border(table: Table) -> bool:
    return _any_exists(
        table,
        TC.TOP_LEFT_CORNER,
        TC.TOP_BORDER,
        TC.TOP_BORDER_INTERSECTIONS,
        TC.TOP_RIGHT_CORNER,
    )


def _should_draw_bottom_border(table: Table) -> bool:
    return _any_exists(
        table,
        TC.BOTTOM_LEFT_CORNER,
        TC.BOTTOM_BORDER,
        TC.BOTTOM_BORDER_INTERSECTIONS,
        TC.BOTTOM_RIGHT_CORNER,
    )


def should_draw_left_border(table: Table) -> bool:
    return _any_exists(
        table,
        TC.TOP_LEFT_CORNER,
        TC.LEFT_BORDER,
        TC.LEFT_BORDER_INTERSECTIONS,
        TC.LEFT_HEADER_INTERSECTION,
        TC.BOTTOM_LEFT_CORNER,
    )


def should_draw_right_border(table: Table) -> bool:
    return _any_exists(
        table,
        TC.TOP_RIGHT_CORNER,
        TC.RIGHT_BORDER,
        TC.RIGHT_BORDER_INTERSECTIONS,
        TC.RIGHT_HEADER_INTERSECTION,
        TC.BOTTOM_RIGHT_CORNER,
    )


def _should_draw_horizontal_lines(table: Table) -> bool:
    return _any_exists(
        table,
        TC.LEFT_BORDER_INTERSECTIONS,
        TC.HORIZONTAL_LINES,
        TC.MIDDLE_INTERSECTIONS,
        TC.RIGHT_BORDER_INTERSECTIONS,
    )


def should_draw_vertical_lines(table: Table) -> bool:
    return _any_exists(
        table,
        TC.TOP_BORDER_INTERSECTIONS,
        TC.MIDDLE_HEADER_INTERSECTIONS,
        TC.VERTICAL_LINES,
        TC.MIDDLE_INTERSECTIONS,
        TC.BOTTOM_BORDER_INTERSECTIONS,
    )


def _should_draw_header(table: Table) -> bool:
    return _any_exists(
        table,
        TC.LEFT_HEADER_INTERSECTION,
        TC.HEADER_LINES,
        TC.MIDDLE_HEADER_INTERSECTIONS,
        TC.RIGHT_HEADER_INTERSECTION,
    )