"""Wrapping of a single line of cell content into a column's width."""

from __future__ import annotations

from collections.abc import Callable

from gridtable import ansi as _ansi
from gridtable import text as _text
from gridtable.model import ColumnDisplayInfo

# Minimum free space needed before another element is appended to a line.
MIN_FREE_CHARS = 2


def _check_if_full(
    lines: list[str], content_width: int, current: str, measure: Callable[[str], int]
) -> str:
    if measure(current) > max(content_width - MIN_FREE_CHARS, 0):
        lines.append(current)
        return ""
    return current


def split_line(
    line: str, info: ColumnDisplayInfo, delimiter: str, ansi: bool = False
) -> list[str]:
    """Wrap line into pieces at most info.content_width wide, preferring the delimiter.

    Words are only broken in the middle when they do not fit on a line of their own.
    """
    backend = _ansi if ansi else _text
    measure = backend.measure_text_width
    content_width = info.content_width

    lines: list[str] = []
    elements = backend.split_line_by_delimiter(line, delimiter)
    elements.reverse()

    current = ""
    while elements:
        element = elements.pop()
        current_length = measure(current)
        element_length = measure(element)

        added_length = element_length + current_length + (1 if current else 0)
        remaining_width = max(content_width - current_length, 0)
        if current:
            remaining_width = max(remaining_width - 1, 0)

        if added_length <= content_width:
            if current:
                current += delimiter
            current += element
            current = _check_if_full(lines, content_width, current, measure)
            continue

        if current and remaining_width <= MIN_FREE_CHARS:
            elements.append(element)
            lines.append(current)
            current = ""
            continue

        if element_length > content_width:
            new_line = not current
            if not new_line:
                current += delimiter
            head, rest = backend.split_long_word(remaining_width, element)
            # A glyph wider than the column can never be split; place it anyway.
            if new_line and not head:
                head, rest = rest[:1], rest[1:]
            current += head
            elements.append(rest)
            lines.append(current)
            current = ""
            continue

        lines.append(current)
        current = _check_if_full(lines, content_width, element, measure)

    if current:
        lines.append(current)
    return lines