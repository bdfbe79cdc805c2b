"""Horizontal alignment of wrapped lines within a column."""

from __future__ import annotations

from tty_table.config import Alignment
from tty_table.width import visible_width


def pad_counts(
    line_width: int,
    column_width: int,
    align: Alignment | str,
    padding_left: int = 0,
    padding_right: int = 0,
) -> tuple[int, int]:
    """Return the ``(left, right)`` space counts that fill *column_width*.

    For centered text an odd remainder goes to the right.
    """
    empty_space = column_width - line_width
    if empty_space <= 0:
        return (0, 0)

    if align == "center":
        half = empty_space // 2
        return (half, half + empty_space % 2)
    if align == "right":
        left = max(empty_space - padding_right, 0)
        return (left, empty_space - left)
    left = min(padding_left, empty_space)
    return (left, empty_space - left)


def align_line(
    line: str,
    column_width: int,
    align: Alignment | str = "left",
    padding_left: int = 0,
    padding_right: int = 0,
) -> str:
    """Pad *line* with spaces to exactly *column_width* visible columns.

    Lines already at least that wide are returned unchanged.
    """
    line_width = visible_width(line)
    if line_width >= column_width:
        return line
    left, right = pad_counts(line_width, column_width, align, padding_left, padding_right)
    return " " * left + line + " " * right
