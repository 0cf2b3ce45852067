import pytest

from slidedeck.lists import (
    IndexedListItem,
    ListItem,
    ListItemKind,
    iterate_list,
    list_block_length,
    list_item_prefix,
    text_width,
)


def test_iterate_list():
    items = [
        ListItem(0, "0"),
        ListItem(0, "1"),
        ListItem(1, "00"),
        ListItem(1, "01"),
        ListItem(1, "02"),
        ListItem(2, "001"),
        ListItem(0, "2"),
    ]
    indexes = [indexed.index for indexed in iterate_list(items, 0)]
    assert indexes == [0, 1, 0, 1, 2, 0, 2]


def test_iterate_list_starting_from_other():
    items = [ListItem(0, "0"), ListItem(0, "1")]
    indexes = [indexed.index for indexed in iterate_list(items, 3)]
    assert indexes == [3, 4]


def test_iterate_list_keeps_items():
    items = [ListItem(0, "a"), ListItem(1, "b")]
    assert list(iterate_list(items)) == [IndexedListItem(0, items[0]), IndexedListItem(0, items[1])]


def _line(item, font_size=1):
    return list_item_prefix(item, font_size) + item.contents


def test_ordered_list_lines():
    items = [
        ListItem(0, "one", ListItemKind.ORDERED_PERIOD, 1),
        ListItem(1, "one_one", ListItemKind.ORDERED_PERIOD, 1),
        ListItem(1, "one_two", ListItemKind.ORDERED_PERIOD, 2),
        ListItem(0, "two", ListItemKind.ORDERED_PERIOD, 2),
    ]
    assert [_line(item) for item in items] == [
        "   1. one",
        "      1. one_one",
        "      2. one_two",
        "   2. two",
    ]


def test_ordered_parens_prefix():
    assert list_item_prefix(ListItem(0, "x", ListItemKind.ORDERED_PARENS, 7)) == "   7) "


@pytest.mark.parametrize(
    "font_size, expected",
    [
        (2, ["  •  0", "    ◦  00"]),
        (3, [" •  0", "    ◦  00"]),
        (4, [" •  0", "    ◦  00"]),
    ],
)
def test_list_font_size(font_size, expected):
    items = [ListItem(0, "0"), ListItem(1, "00")]
    assert [_line(item, font_size) for item in items] == expected


def test_unordered_delimiters_by_depth():
    assert list_item_prefix(ListItem(0, "")) == "   •  "
    assert list_item_prefix(ListItem(1, "")) == "      ◦  "
    assert list_item_prefix(ListItem(2, "")) == "         ▪  "


def test_text_width():
    assert text_width("abc") == 3
    assert text_width("•") == 1
    assert text_width("日本") == 4


def test_list_block_length():
    items = [ListItem(0, "one"), ListItem(1, "two")]
    # "      ◦  two" is the widest at 12 columns.
    assert list_block_length(items) == 12
    assert list_block_length(items, 2) == 2 * len("    ◦  two")


def test_list_block_length_empty():
    assert list_block_length([]) == 0