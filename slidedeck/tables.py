"""Laying out markdown tables as lines of text."""

from __future__ import annotations

from typing import List, Sequence

from slidedeck.lists import text_width

_CELL_SEPARATOR = " │ "
_RULE = "─"
_CROSS = "┼"


def column_widths(header: Sequence[str], rows: Sequence[Sequence[str]]) -> List[int]:
    """Width of each column: the widest cell in it, header included."""
    widths = []
    for column in range(len(header)):
        cells = [header[column]]
        cells.extend(row[column] for row in rows if column < len(row))
        widths.append(max((text_width(cell) for cell in cells), default=0))
    return widths


def format_table_row(row: Sequence[str], widths: Sequence[int]) -> str:
    """Join the cells of a row, padding each to its column's width."""
    if len(row) > len(widths):
        raise ValueError(f"row has {len(row)} cells but the table has {len(widths)} columns")
    cells = []
    for cell, width in zip(row, widths):
        padding = max(width - text_width(cell), 0)
        cells.append(cell + " " * padding)
    return _CELL_SEPARATOR.join(cells)


def table_separator(widths: Sequence[int]) -> str:
    """The rule drawn between a table's header and its rows."""
    pieces = []
    last = len(widths) - 1
    for index, width in enumerate(widths):
        margin = 1
        prefix = ""
        if index > 0:
            prefix = _CROSS
            # One extra dash gives a column of margin on both sides.
            if index < last:
                margin += 1
        pieces.append(prefix + _RULE * (width + margin))
    return "".join(pieces)


def format_table(header: Sequence[str], rows: Sequence[Sequence[str]]) -> List[str]:
    """Lay out a whole table: header, separator and then every row."""
    widths = column_widths(header, rows)
    lines = [format_table_row(header, widths), table_separator(widths)]
    lines.extend(format_table_row(row, widths) for row in rows)
    return lines