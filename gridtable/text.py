"""Plain-text measuring and splitting helpers."""

from __future__ import annotations

import regex
from wcwidth import wcswidth

_GRAPHEME = regex.compile(r"\X")


def _is_control(ch: str) -> bool:
    code = ord(ch)
    return code < 0x20 or 0x7F <= code < 0xA0


def graphemes(text: str) -> list[str]:
    """Split text into extended grapheme clusters."""
    return _GRAPHEME.findall(text)


def measure_text_width(text: str) -> int:
    """Display width of text in terminal columns; control characters count zero."""
    printable = "".join(ch for ch in text if not _is_control(ch))
    return max(wcswidth(printable), 0)


def split_line_by_delimiter(line: str, delimiter: str) -> list[str]:
    return line.split(delimiter)


def split_long_word(allowed_width: int, word: str) -> tuple[str, str]:
    """Split word so that the head is at most allowed_width columns wide."""
    clusters = graphemes(word)
    current_width = 0
    taken = 0
    for cluster in clusters:
        width = measure_text_width(cluster)
        if current_width + width > allowed_width:
            break
        current_width += width
        taken += 1
    return "".join(clusters[:taken]), "".join(clusters[taken:])