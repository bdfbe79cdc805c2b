"""Single-line truncation with a suffix marker."""

from __future__ import annotations

from tty_table.width import split_at_width, visible_width
from tty_table.wrap import wrap_plain


def truncate(text: str, max_width: int, suffix: str = "") -> str:
    """Truncate *text* to fit within *max_width* visible columns.

    Text that already fits is returned unchanged. Otherwise the text is
    word-wrapped to ``max_width`` minus the suffix width, the first line is
    kept, and *suffix* is appended (the suffix counts towards the width).
    """
    if visible_width(text) <= max_width:
        return text
    if max_width <= 0:
        return ""

    target_width = max_width - visible_width(suffix)
    if target_width <= 0:
        # Suffix alone exceeds max_width -- just truncate the suffix
        head, _rest = split_at_width(suffix, max_width)
        return head if visible_width(head) <= max_width else ""

    head = wrap_plain(text, target_width)[0]
    if visible_width(head) > target_width:
        # A single grapheme wider than the budget
        head = ""
    return head + suffix
