from gridtable.constraint import evaluate
from gridtable.dynamic import arrange
from gridtable.helper import count_border_columns, count_visible_columns
from gridtable.model import (
    ContentArrangement,
    Fixed,
    Hidden,
    LowerBoundary,
    Table,
    UpperBoundary,
)


def _arrange(table: Table) -> dict:
    infos: dict = {}
    widths = table.column_max_content_widths()
    visible = count_visible_columns(table.columns)
    for column in table.columns:
        if column.constraint is not None:
            evaluate(table, visible, infos, column, widths[column.index])
    arrange(table, infos, table.width, widths)
    return infos


def _total_width(table: Table, infos: dict) -> int:
    visible = count_visible_columns(table.columns)
    content = sum(info.width() for info in infos.values() if not info.is_hidden)
    return content + count_border_columns(table, visible)


def _long_table(width: int) -> Table:
    return Table(
        header=["a", "b", "c"],
        rows=[["x" * 100, "y" * 100, "z" * 100]],
        arrangement=ContentArrangement.DYNAMIC,
        width=width,
    )


def test_small_content_keeps_content_width():
    table = Table(
        rows=[["ab", "abcd"]], arrangement=ContentArrangement.DYNAMIC, width=80
    )
    infos = _arrange(table)
    assert infos[0].content_width == len("ab")
    assert infos[1].content_width == len("abcd")


def test_long_content_fills_table_width():
    table = _long_table(40)
    infos = _arrange(table)
    assert sorted(infos) == [0, 1, 2]
    assert _total_width(table, infos) == 40


def test_excess_goes_left_first():
    table = _long_table(41)
    infos = _arrange(table)
    widths = [infos[i].content_width for i in range(3)]
    assert max(widths) - min(widths) <= 1
    assert widths == sorted(widths, reverse=True)
    assert _total_width(table, infos) == 41


def test_full_width_uses_all_space():
    table = Table(
        rows=[["ab", "cd"]],
        arrangement=ContentArrangement.DYNAMIC_FULL_WIDTH,
        width=50,
    )
    infos = _arrange(table)
    assert _total_width(table, infos) == 50


def test_plain_dynamic_does_not_stretch():
    table = Table(rows=[["ab", "cd"]], arrangement=ContentArrangement.DYNAMIC, width=50)
    infos = _arrange(table)
    assert _total_width(table, infos) < 50
    assert [infos[0].content_width, infos[1].content_width] == [2, 2]


def test_tiny_width_gives_every_column_one_char():
    table = _long_table(5)
    infos = _arrange(table)
    assert [infos[i].content_width for i in range(3)] == [1, 1, 1]


def test_lower_boundary_enforced():
    table = _long_table(40)
    table.columns[0].constraint = LowerBoundary(Fixed(20))
    infos = _arrange(table)
    assert infos[0].width() == 20
    assert _total_width(table, infos) == 40


def test_upper_boundary_enforced():
    table = _long_table(80)
    table.columns[1].constraint = UpperBoundary(Fixed(8))
    infos = _arrange(table)
    assert infos[1].width() == 8
    assert _total_width(table, infos) == 80


def test_hidden_column_takes_no_space():
    table = _long_table(40)
    table.columns[2].constraint = Hidden()
    infos = _arrange(table)
    assert infos[2].is_hidden
    assert _total_width(table, infos) == 40
    assert not infos[0].is_hidden and not infos[1].is_hidden


def test_split_optimization_shrinks_column():
    table = Table(
        rows=[["sometest sometest", "x" * 200]],
        arrangement=ContentArrangement.DYNAMIC,
        width=30,
    )
    infos = _arrange(table)
    assert infos[0].content_width == len("sometest")
    assert _total_width(table, infos) == 30
    assert infos[1].content_width > infos[0].content_width


def test_all_columns_decided():
    table = Table(
        header=["h1", "h2", "h3", "h4"],
        rows=[["a" * 50, "b", "c c c c c c c c c c c c", "d" * 30]],
        arrangement=ContentArrangement.DYNAMIC,
        width=60,
    )
    infos = _arrange(table)
    assert sorted(infos) == [0, 1, 2, 3]
    assert all(info.content_width >= 1 for info in infos.values())
    assert _total_width(table, infos) <= 60