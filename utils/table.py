# utils/table.py
# Plain-text table helpers used to lay out the ticket.
from enum import Enum
from typing import Iterable, Sequence


class Align(Enum):
    LEFT = -1
    CENTER = 0
    RIGHT = 1


def column_widths(rows: Iterable[Sequence[str]], columns: int) -> list[int]:
    # width of each column = longest cell found in that column
    widths = [0] * columns
    for row in rows:
        for i in range(columns):
            widths[i] = max(widths[i], len(row[i]))
    return widths


def separator_length(widths: Sequence[int]) -> int:
    return len(widths) - 1 + sum(widths)


def separator(widths: Sequence[int], char: str = "-") -> str:
    return char * separator_length(widths)


def format_cell(value: str, align: Align, width: int) -> str:
    """
    Pad value to width according to align, followed by one space.
    A value longer than width is cut down to its leftmost characters.
    """
    if len(value) > width:
        value = value[:width]

    if align is Align.CENTER:
        before = (width - len(value)) // 2
    elif align is Align.LEFT:
        before = 0
    else:
        before = width - len(value)
    after = width - len(value) - before

    return " " * before + value + " " * after + " "


def format_row(row: Sequence[str], aligns: Sequence[Align], widths: Sequence[int]) -> str:
    return "".join(
        format_cell(value, align, width)
        for value, align, width in zip(row, aligns, widths)
    )
