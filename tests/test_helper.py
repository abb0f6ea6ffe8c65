import pytest

from gridtable.helper import (
    absolute_width_with_padding,
    count_border_columns,
    count_remaining_columns,
    count_visible_columns,
    delimiter,
)
from gridtable.model import Cell, Column, ColumnDisplayInfo, Hidden, Table


@pytest.mark.parametrize("width", [3, 5, 10, 40])
def test_absolute_width_subtracts_padding(width):
    column = Column(0)
    assert absolute_width_with_padding(column, width) + column.padding_width() == width


@pytest.mark.parametrize("width", [0, 1, 2])
def test_absolute_width_is_at_least_one(width):
    assert absolute_width_with_padding(Column(0), width) == 1


def test_absolute_width_custom_padding():
    column = Column(0, padding=(0, 1))
    assert absolute_width_with_padding(column, 6) == 5


def test_count_visible_columns():
    columns = [Column(0), Column(1, constraint=Hidden()), Column(2)]
    assert count_visible_columns(columns) == 2
    assert count_visible_columns([]) == 0


def test_count_remaining_columns_ignores_hidden_infos():
    shown = Column(0)
    hidden = Column(1, constraint=Hidden())
    infos = {
        0: ColumnDisplayInfo.from_column(shown, 4),
        1: ColumnDisplayInfo.from_column(hidden, 4),
    }
    assert count_remaining_columns(3, infos) == 2
    assert count_remaining_columns(3, {}) == 3


@pytest.mark.parametrize("visible", [1, 2, 3, 7])
def test_count_border_columns_default_style(visible):
    table = Table()
    assert count_border_columns(table, visible) == visible + 1


@pytest.mark.parametrize("visible", [0, 1, 5])
def test_count_border_columns_without_style(visible):
    assert count_border_columns(Table(style={}), visible) == 0


def test_count_border_columns_zero_visible_keeps_sides():
    assert count_border_columns(Table(), 0) == 2


def test_delimiter_priority():
    table = Table(delimiter="-")
    column = Column(0, delimiter="_")
    assert delimiter(table, column, Cell("x", delimiter="/")) == "/"
    assert delimiter(table, column, Cell("x")) == "_"
    assert delimiter(table, Column(0), Cell("x")) == "-"
    assert delimiter(Table(), Column(0), Cell("x")) == " "