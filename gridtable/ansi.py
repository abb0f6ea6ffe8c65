"""ANSI-escape-aware measuring and splitting helpers."""

from __future__ import annotations

import re
from collections.abc import Iterator

from gridtable.text import graphemes
from gridtable.text import measure_text_width as _plain_width

ANSI_RESET = "\x1b[0m"

_ESCAPE = re.compile(
    r"\x1b\[[0-?]*[ -/]*[@-~]"
    r"|\x1b\][^\x07\x1b]*(?:\x07|\x1b\\)"
    r"|\x1b[@-Z\\-_]"
)


def ansi_segments(text: str) -> Iterator[tuple[str, bool]]:
    """Yield (piece, is_escape) pairs covering the whole text in order."""
    position = 0
    for match in _ESCAPE.finditer(text):
        if match.start() > position:
            yield text[position:match.start()], False
        yield match.group(), True
        position = match.end()
    if position < len(text):
        yield text[position:], False


def strip_ansi(text: str) -> str:
    return "".join(piece for piece, is_esc in ansi_segments(text) if not is_esc)


def measure_text_width(text: str) -> int:
    """Printed width of text, ignoring escape sequences."""
    return _plain_width(strip_ansi(text))


def split_line_by_delimiter(line: str, delimiter: str) -> list[str]:
    """Split on delimiter without breaking escape sequences, carrying styles over."""
    lines: list[str] = []
    current = ""
    for piece, is_esc in ansi_segments(line):
        if is_esc:
            current += piece
            continue
        first, *rest = piece.split(delimiter)
        current += first
        for part in rest:
            lines.append(current)
            current = part
    lines.append(current)
    return fix_style_in_split_str(lines)


def split_long_word(allowed_width: int, word: str) -> tuple[str, str]:
    """Split a styled word at allowed_width, keeping styles active on both halves."""
    head = ""
    head_len = 0
    head_len_last = 0
    escape_count_last = 0
    escapes: list[str] = []

    segments = iter(ansi_segments(word))
    for piece, is_esc in segments:
        if is_esc:
            escapes.append(piece)
            if piece == ANSI_RESET:
                escapes.clear()

        piece_len = 0 if is_esc else _plain_width(piece)
        if head_len + piece_len <= allowed_width:
            head += piece
            head_len += piece_len
            if not is_esc:
                head_len_last = len(head)
                escape_count_last = len(escapes)
            continue

        clusters = graphemes(piece)
        taken = 0
        for cluster in clusters:
            width = _plain_width(cluster)
            if head_len + width > allowed_width:
                break
            head_len += width
            head += cluster
            head_len_last = len(head)
            escape_count_last = len(escapes)
            taken += 1

        head = head[:head_len_last]
        if escape_count_last:
            head += ANSI_RESET
        rest = "".join(p for p, _ in segments)
        tail = "".join(escapes) + "".join(clusters[taken:]) + rest
        return head, tail

    return head, ""


def fix_style_in_split_str(words: list[str]) -> list[str]:
    """Reset styles at the end of each piece and reopen them at the start of the next."""
    escapes: list[str] = []
    fixed: list[str] = []
    for word in words:
        prepend = "".join(escapes)
        for piece, is_esc in ansi_segments(word):
            if not is_esc:
                continue
            if piece == ANSI_RESET:
                escapes.clear()
            else:
                escapes.append(piece)
        word = prepend + word
        if escapes:
            word += ANSI_RESET
        fixed.append(word)
    return fixed