# gridtable

Render tables as plain text with borders, column alignment, width constraints
and automatic wrapping of long content. Widths are measured in terminal
columns, so wide characters and multi-codepoint emoji (grapheme clusters) are
laid out correctly. Content that carries ANSI escape codes can be measured and
split without breaking the codes.

## Installation

```
pip install gridtable
```

## Quick start

```python
from gridtable.model import Table
from gridtable.render import render_table

table = Table(header=["Hello", "there"], rows=[["a", "b"], ["c", "d"]])
print(render_table(table))
```

```
+-------+-------+
| Hello | there |
+===============+
| a     | b     |
|-------+-------|
| c     | d     |
+-------+-------+
```

`render_table(table)` returns the whole table as one string with lines joined
by newlines. `build_table(table)` returns an iterator over the same lines.

## The model

Everything lives in `gridtable.model`.

- `Cell(text, delimiter=None, alignment=None)`: the text may contain
  newlines, and each newline starts a new line in the cell.
- `Row(cells, max_height=None)`: the cells may be `Cell` objects or any other
  values, which are turned into text with `str()`. If `max_height` is set, lines
  beyond it are cut off and the last line kept ends with the table's truncation
  indicator. A `max_height` below 1 raises `ValueError` when truncation is needed.
- `Column(index, padding=(1, 1), delimiter=None, cell_alignment=None, constraint=None)`.
- `Table(rows, header, columns, style, arrangement, width, delimiter, truncation_indicator, ansi)`.
  - Rows and the header may be given as `Row` objects, as plain iterables, or
    as a single string.
  - Columns are added for every cell position found. After changing rows by
    hand, call `table.discover_columns()`. Rendering also calls it.
  - `truncation_indicator` defaults to `"..."`.
  - `ansi=True` makes measuring and splitting ignore ANSI escape codes.

### Alignment

`CellAlignment.LEFT`, `RIGHT` or `CENTER`. The cell's alignment is used first,
then the column's, and left otherwise. For centred text any odd leftover space
goes to the left.

### Delimiters

Long lines are split at the cell's delimiter. If the cell has none, the
column's delimiter is used, then the table's, and a space otherwise. A word
wider than its column is broken between grapheme clusters.

### Constraints

Set `column.constraint` to one of:

- `ContentWidth()`: as wide as the content.
- `Absolute(width)`: exactly this wide, padding included.
- `Hidden()`: the column is not shown.
- `LowerBoundary(width)`: at least this wide, padding included.
- `UpperBoundary(width)`: at most this wide, padding included.
- `Boundaries(lower, upper)`: both limits.

A width is either `Fixed(n)` terminal columns or `Percentage(p)` of the table
width minus its borders, capped at 100 %. A percentage is only resolved when
`table.width` is set.

### Arrangement

`table.arrangement` takes a `ContentArrangement`:

- `DISABLED` (the default): every column is as wide as its content, or as its
  upper boundary if that is smaller.
- `DYNAMIC`: columns are fitted into `table.width` and content is wrapped.
- `DYNAMIC_FULL_WIDTH`: as `DYNAMIC`, and any space left over is spread across
  the visible columns from left to right.

If `table.width` is `None`, the table is laid out as with `DISABLED`. Constraints
that need more space than `table.width` allows are still honoured, so the table
then comes out wider than asked for.

### Border style

`table.style` is a string with one character for each `TableComponent`, in the
order the enum lists them. A space means that component is not drawn. The
string must have exactly 19 characters, or `ValueError` is raised. The default
is `"||--+==+|-+||++++++"`, which draws the table shown above. A mapping from
`TableComponent` to a string is accepted as well. A border line, vertical line
or separator is drawn only if at least one of its components is present.

## Lower-level pieces

- `gridtable.text`: `graphemes`, `measure_text_width`,
  `split_line_by_delimiter`, `split_long_word` for plain text.
- `gridtable.ansi`: `ansi_segments`, `strip_ansi`, `measure_text_width`,
  `split_line_by_delimiter`, `split_long_word`, `fix_style_in_split_str`. These
  are aware of escape codes: styles that are active when a line is split are
  closed with a reset and opened again on the next piece.
- `gridtable.split.split_line`: wraps one line to a column's content width.
- `gridtable.constraint`, `gridtable.dynamic`, `gridtable.helper`: width
  resolution.
- `gridtable.arrangement.arrange_content`: computes a `ColumnDisplayInfo` for
  every column.
- `gridtable.content_format.format_content`: wraps, truncates, aligns and pads
  the cells.
- `gridtable.borders.draw_borders`: assembles the final lines.

## What it does not do

- Cells have no colours or text attributes of their own. The package does not
  add styling. ANSI codes that are already in the text are passed through
  unchanged when `ansi=True`, except on a truncated last line, where they are
  removed.
- There are no named style presets beyond the default string, and the
  terminal width is not detected. Set `table.width` yourself.
- There is no command-line tool. This is a library only.