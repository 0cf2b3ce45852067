import pytest

from slidedeck.tables import column_widths, format_table, format_table_row, table_separator


def test_table_from_source():
    lines = format_table(["key", "value", "other"], [["potato", "bar", "yes"]])
    assert lines == [
        "key    │ value │ other",
        "───────┼───────┼──────",
        "potato │ bar   │ yes  ",
    ]


def test_column_widths_take_widest_cell():
    widths = column_widths(["a", "bb"], [["cccc", "d"], ["e", "fff"]])
    assert widths == [4, 3]


def test_column_widths_ignore_missing_cells():
    assert column_widths(["ab", "c"], [["x"]]) == [2, 1]


def test_column_widths_use_display_width():
    assert column_widths(["日本"], []) == [4]


def test_format_row_pads_cells():
    assert format_table_row(["a", "b"], [3, 2]) == "a   │ b "


def test_format_row_rejects_extra_cells():
    with pytest.raises(ValueError):
        format_table_row(["a", "b", "c"], [1, 1])


def test_separator_single_column():
    assert table_separator([3]) == "────"


def test_separator_two_columns():
    assert table_separator([2, 2]) == "───┼───"


def test_all_lines_have_same_width():
    lines = format_table(["name", "n"], [["x", "12345"], ["longer", "1"]])
    assert len({len(line) for line in lines}) == 1