"""Table data model: cells, rows, columns, constraints and per-column display info."""

from __future__ import annotations

import enum
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Optional, Union

from gridtable import ansi as _ansi
from gridtable import text as _text


@dataclass(frozen=True)
class Fixed:
    """An absolute width in terminal columns."""

    width: int


@dataclass(frozen=True)
class Percentage:
    """A width relative to the table width, in percent."""

    percent: int


Width = Union[Fixed, Percentage]


@dataclass(frozen=True)
class ContentWidth:
    """The column is always as wide as its widest content."""


@dataclass(frozen=True)
class Absolute:
    """The column always has exactly this width (padding included)."""

    width: Width


@dataclass(frozen=True)
class Hidden:
    """The column is not displayed."""


@dataclass(frozen=True)
class LowerBoundary:
    """The column is at least this wide (padding included)."""

    width: Width


@dataclass(frozen=True)
class UpperBoundary:
    """The column is at most this wide (padding included)."""

    width: Width


@dataclass(frozen=True)
class Boundaries:
    """Both a lower and an upper width limit."""

    lower: Width
    upper: Width


ColumnConstraint = Union[
    ContentWidth, Absolute, Hidden, LowerBoundary, UpperBoundary, Boundaries
]


class CellAlignment(enum.Enum):
    LEFT = "left"
    RIGHT = "right"
    CENTER = "center"


class ContentArrangement(enum.Enum):
    DISABLED = "disabled"
    DYNAMIC = "dynamic"
    DYNAMIC_FULL_WIDTH = "dynamic_full_width"


class TableComponent(enum.Enum):
    """Every drawable part of a table, in preset-string order."""

    LEFT_BORDER = enum.auto()
    RIGHT_BORDER = enum.auto()
    TOP_BORDER = enum.auto()
    BOTTOM_BORDER = enum.auto()
    LEFT_HEADER_INTERSECTION = enum.auto()
    HEADER_LINES = enum.auto()
    MIDDLE_HEADER_INTERSECTIONS = enum.auto()
    RIGHT_HEADER_INTERSECTION = enum.auto()
    VERTICAL_LINES = enum.auto()
    HORIZONTAL_LINES = enum.auto()
    MIDDLE_INTERSECTIONS = enum.auto()
    LEFT_BORDER_INTERSECTIONS = enum.auto()
    RIGHT_BORDER_INTERSECTIONS = enum.auto()
    TOP_BORDER_INTERSECTIONS = enum.auto()
    BOTTOM_BORDER_INTERSECTIONS = enum.auto()
    TOP_LEFT_CORNER = enum.auto()
    TOP_RIGHT_CORNER = enum.auto()
    BOTTOM_LEFT_CORNER = enum.auto()
    BOTTOM_RIGHT_CORNER = enum.auto()


_DEFAULT_PRESET = "||--+==+|-+||++++++"


def _parse_preset(preset: str) -> dict[TableComponent, str]:
    components = list(TableComponent)
    if len(preset) != len(components):
        raise ValueError(
            f"a preset needs {len(components)} characters, got {len(preset)}"
        )
    return {comp: ch for comp, ch in zip(components, preset) if ch != " "}


@dataclass
class Cell:
    """A single cell; its text may span several lines."""

    text: str = ""
    delimiter: Optional[str] = None
    alignment: Optional[CellAlignment] = None

    @property
    def content(self) -> list[str]:
        return self.text.split("\n")


def _to_cell(value: object) -> Cell:
    return value if isinstance(value, Cell) else Cell(str(value))


@dataclass
class Row:
    """A row of cells, optionally capped to a maximum number of lines."""

    cells: list[Cell] = field(default_factory=list)
    max_height: Optional[int] = None

    def __post_init__(self) -> None:
        self.cells = [_to_cell(cell) for cell in self.cells]


def _to_row(value: object) -> Row:
    if isinstance(value, Row):
        return value
    if isinstance(value, str):
        return Row([value])
    if isinstance(value, Iterable):
        return Row(list(value))
    raise TypeError(f"cannot build a row from {type(value).__name__}")


@dataclass
class Column:
    """Formatting settings of one column."""

    index: int
    padding: tuple[int, int] = (1, 1)
    delimiter: Optional[str] = None
    cell_alignment: Optional[CellAlignment] = None
    constraint: Optional[ColumnConstraint] = None

    def padding_width(self) -> int:
        return self.padding[0] + self.padding[1]

    def is_hidden(self) -> bool:
        return isinstance(self.constraint, Hidden)


@dataclass
class Table:
    """A table: optional header, rows, column settings and border style.

    ``style`` may be given as a preset string with one character per
    ``TableComponent`` (a space meaning "not drawn") or as a mapping.
    """

    rows: list[Row] = field(default_factory=list)
    header: Optional[Row] = None
    columns: list[Column] = field(default_factory=list)
    style: Union[str, dict[TableComponent, str]] = _DEFAULT_PRESET
    arrangement: ContentArrangement = ContentArrangement.DISABLED
    width: Optional[int] = None
    delimiter: Optional[str] = None
    truncation_indicator: str = "..."
    ansi: bool = False

    def __post_init__(self) -> None:
        if isinstance(self.style, str):
            self.style = _parse_preset(self.style)
        else:
            self.style = dict(self.style)
        self.rows = [_to_row(row) for row in self.rows]
        if self.header is not None:
            self.header = _to_row(self.header)
        self.discover_columns()

    def discover_columns(self) -> None:
        """Add columns for any cells that lie beyond the known columns."""
        all_rows = ([self.header] if self.header is not None else []) + self.rows
        needed = max((len(row.cells) for row in all_rows), default=0)
        self.columns.extend(Column(index) for index in range(len(self.columns), needed))

    def style_or_default(self, component: TableComponent) -> str:
        return self.style.get(component, " ")

    def style_exists(self, component: TableComponent) -> bool:
        return component in self.style

    def _measure(self, line: str) -> int:
        measure = _ansi.measure_text_width if self.ansi else _text.measure_text_width
        return measure(line)

    def column_max_content_widths(self) -> list[int]:
        """The widest line of every column, header included."""
        widths = [0] * len(self.columns)
        all_rows = ([self.header] if self.header is not None else []) + self.rows
        for row in all_rows:
            for index, cell in enumerate(row.cells):
                width = max(self._measure(line) for line in cell.content)
                widths[index] = max(widths[index], width)
        return widths

    def column_cells_with_header(self, index: int) -> Iterator[Optional[Cell]]:
        """Yield the cell at ``index`` of the header and each row, or None where missing."""
        all_rows = ([self.header] if self.header is not None else []) + self.rows
        for row in all_rows:
            yield row.cells[index] if index < len(row.cells) else None


@dataclass
class ColumnDisplayInfo:
    """Resolved layout of one column for a single rendering."""

    content_width: int
    padding: tuple[int, int] = (1, 1)
    delimiter: Optional[str] = None
    cell_alignment: Optional[CellAlignment] = None
    is_hidden: bool = False

    @classmethod
    def from_column(cls, column: Column, content_width: int) -> "ColumnDisplayInfo":
        return cls(
            content_width=max(content_width, 1),
            padding=column.padding,
            delimiter=column.delimiter,
            cell_alignment=column.cell_alignment,
            is_hidden=column.is_hidden(),
        )

    def width(self) -> int:
        return self.content_width + self.padding[0] + self.padding[1]