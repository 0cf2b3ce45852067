"""List items: their indexes, prefixes and widths."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional

from wcwidth import wcswidth, wcwidth


class ListItemKind(enum.Enum):
    """How a list item is marked."""

    UNORDERED = "unordered"
    ORDERED_PARENS = "ordered_parens"
    ORDERED_PERIOD = "ordered_period"


@dataclass(frozen=True)
class ListItem:
    """One item of a list."""

    depth: int
    contents: str
    kind: ListItemKind = ListItemKind.UNORDERED
    number: Optional[int] = None


@dataclass(frozen=True)
class IndexedListItem:
    """A list item together with its index among its siblings."""

    index: int
    item: ListItem


def text_width(text: str) -> int:
    """Number of terminal columns a piece of text takes."""
    width = wcswidth(text)
    if width >= 0:
        return width
    return sum(max(wcwidth(char), 0) for char in text)


def iterate_list(items: Iterable[ListItem], start_index: int = 0) -> Iterator[IndexedListItem]:
    """Number the items, restarting at each deeper level and resuming on the way out."""
    next_index = start_index
    current_depth = 0
    saved_indexes: List[int] = []
    for item in items:
        if item.depth > current_depth:
            saved_indexes.append(next_index)
            next_index = 0
        elif item.depth < current_depth:
            for _ in range(item.depth, current_depth):
                next_index = saved_indexes.pop() if saved_indexes else 0
        current_depth = item.depth
        yield IndexedListItem(next_index, item)
        next_index += 1


def list_item_prefix(item: ListItem, font_size: int = 1) -> str:
    """The indentation and marker written before a list item."""
    if item.depth == 0:
        spaces_per_indent = -(-3 // font_size)
    else:
        spaces_per_indent = 3 if font_size == 1 else 2
    prefix = " " * ((item.depth + 1) * spaces_per_indent)
    if item.kind is ListItemKind.UNORDERED:
        delimiter = {0: "•", 1: "◦"}.get(item.depth, "▪")
        return f"{prefix}{delimiter}  "
    suffix = ") " if item.kind is ListItemKind.ORDERED_PARENS else ". "
    return f"{prefix}{item.number}{suffix}"


def list_block_length(items: Iterable[ListItem], font_size: int = 1) -> int:
    """Width of the widest item, prefix included, scaled by the font size."""
    widest = max(
        (text_width(list_item_prefix(item, font_size)) + text_width(item.contents) for item in items),
        default=0,
    )
    return widest * font_size