"""Wrapping, truncating, aligning and padding the content of every cell."""

from __future__ import annotations

from collections.abc import Sequence

from gridtable import ansi as _ansi
from gridtable import text as _text
from gridtable.model import Cell, CellAlignment, ColumnDisplayInfo, Row, Table
from gridtable.split import split_line


def delimiter(cell: Cell, info: ColumnDisplayInfo, table: Table) -> str:
    """The delimiter for a cell: cell, then column, then table, then a space."""
    for candidate in (cell.delimiter, info.delimiter, table.delimiter):
        if candidate is not None:
            return candidate
    return " "


def format_content(
    table: Table, display_info: Sequence[ColumnDisplayInfo]
) -> list[list[list[str]]]:
    """Format the header (if any) and all rows: row -> line -> column part."""
    rows = ([table.header] if table.header is not None else []) + table.rows
    return [format_row(row, display_info, table) for row in rows]


def format_row(
    row: Row, display_infos: Sequence[ColumnDisplayInfo], table: Table
) -> list[list[str]]:
    """Format one row into lines, each holding one padded part per visible column."""
    cells = iter(row.cells)
    visible: list[ColumnDisplayInfo] = []
    columns: list[list[str]] = []

    for info in display_infos:
        cell = next(cells, None)
        if info.is_hidden:
            continue
        visible.append(info)
        if cell is None:
            columns.append([" " * info.width()])
        else:
            columns.append(_format_cell(cell, row, info, table))

    max_lines = max((len(lines) for lines in columns), default=0)
    return [
        [
            lines[index] if index < len(lines) else " " * info.width()
            for info, lines in zip(visible, columns)
        ]
        for index in range(max_lines)
    ]


def _measure(table: Table, line: str) -> int:
    backend = _ansi if table.ansi else _text
    return backend.measure_text_width(line)


def _format_cell(cell: Cell, row: Row, info: ColumnDisplayInfo, table: Table) -> list[str]:
    cell_delimiter = delimiter(cell, info, table)
    lines: list[str] = []
    for line in cell.content:
        if _measure(table, line) > info.content_width:
            lines.extend(split_line(line, info, cell_delimiter, table.ansi))
        else:
            lines.append(line)

    if row.max_height is not None and len(lines) > row.max_height:
        if row.max_height < 1:
            raise ValueError("max_height must be at least 1")
        lines = lines[: row.max_height]
        lines[-1] = _truncate(lines[-1], info.content_width, table)

    return [_align_line(table, info, cell, line) for line in lines]


def _truncate(line: str, max_width: int, table: Table) -> str:
    """Cut line so that it plus the truncation indicator fits max_width, then mark it."""
    if table.ansi:
        # Cutting could break escape sequences, so styles are dropped here.
        line = _ansi.strip_ansi(line)

    indicator = table.truncation_indicator
    accumulated = _text.measure_text_width(indicator)
    clusters = _text.graphemes(line)
    taken = 0
    for cluster in clusters:
        width = _text.measure_text_width(cluster)
        if accumulated + width > max_width:
            break
        accumulated += width
        taken += 1
    return "".join(clusters[:taken]) + indicator


def _align_line(table: Table, info: ColumnDisplayInfo, cell: Cell, line: str) -> str:
    """Align line within the content width and add the column's padding."""
    remaining = max(info.content_width - _measure(table, line), 0)
    alignment = cell.alignment or info.cell_alignment or CellAlignment.LEFT

    if alignment is CellAlignment.RIGHT:
        line = " " * remaining + line
    elif alignment is CellAlignment.CENTER:
        line = " " * ((remaining + 1) // 2) + line + " " * (remaining // 2)
    else:
        line += " " * remaining

    left, right = info.padding
    return " " * left + line + " " * right