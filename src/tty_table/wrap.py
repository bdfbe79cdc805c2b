"""Line wrapping for cell content.

Two strategies, picked by :func:`classify`:

* ``WIDE`` walks the text grapheme by grapheme and breaks before any
  grapheme that would overflow. Word boundaries are ignored.
* ``PLAIN`` wraps at spaces, breaking words that are longer than the
  width, and trims the whitespace around each line.

Neither strategy pads its lines. Escape sequences inside the text count as
zero width and travel with the characters around them. Styling that is
still active at a line break is reset at the end of the line and reopened
at the start of the next one.
"""

from __future__ import annotations

import enum
import unicodedata
from dataclasses import dataclass, field
from typing import Callable

from tty_table.ansi import ESC, carry_styles, strip_ansi, tokenize
from tty_table.width import char_width, graphemes, split_at_width, visible_width


class WrapStrategy(enum.Enum):
    WIDE = "wide"
    PLAIN = "plain"


@dataclass
class WrapResult:
    lines: list[str] = field(default_factory=list)
    inner_width: int = 0


def classify(text: str) -> WrapStrategy:
    """Pick ``WIDE`` when *text* holds anything outside the single-width range."""
    for ch in strip_ansi(text):
        cp = ord(ch)
        if cp < 0x7F:
            continue
        # Astral plane (emoji) and lone surrogates
        if cp > 0xFFFF or 0xD800 <= cp <= 0xDFFF:
            return WrapStrategy.WIDE
        if unicodedata.east_asian_width(ch) in ("W", "F"):
            return WrapStrategy.WIDE
    return WrapStrategy.PLAIN


def _close_lines(text: str, lines: list[str]) -> list[str]:
    if ESC not in text:
        return lines
    return carry_styles(lines)


# ---------------------------------------------------------------------------
# Wide strategy
# ---------------------------------------------------------------------------


def _wrap_wide_line(line: str, width: int) -> list[str]:
    lines: list[str] = []
    current: list[str] = []
    count = 0

    for tok in tokenize(line):
        if tok.is_escape:
            current.append(tok.text)
            continue
        for g in graphemes(tok.text):
            w = char_width(g)
            if count + w > width and count > 0:
                lines.append("".join(current))
                current = []
                count = 0
            current.append(g)
            count += w

    lines.append("".join(current))
    return lines


def wrap_wide(text: str, width: int) -> list[str]:
    """Break *text* character-wise so no line is wider than *width*.

    A width below 1 is treated as 1.
    """
    width = max(width, 1)
    result: list[str] = []
    for physical_line in text.split("\n"):
        result.extend(_wrap_wide_line(physical_line, width))
    return _close_lines(text, result)


# ---------------------------------------------------------------------------
# Plain strategy
# ---------------------------------------------------------------------------


def _wrap_plain_line(line: str, width: int) -> list[str]:
    lines: list[str] = []
    current: str | None = None
    current_width = 0

    for word in line.split(" "):
        word_width = visible_width(word)

        if current is not None and current_width + 1 + word_width <= width:
            current += " " + word
            current_width += 1 + word_width
            continue

        if current is not None:
            lines.append(current)
            current = None

        if word_width > width:
            # Long word: break it, keep the tail open for the next words
            while word_width > width:
                head, word = split_at_width(word, width)
                lines.append(head)
                word_width = visible_width(word)
            if not word:
                continue

        current = word
        current_width = word_width

    if current is not None:
        lines.append(current)
    if not lines:
        return [""]
    return [piece.strip() for piece in lines]


def wrap_plain(text: str, width: int) -> list[str]:
    """Word-wrap *text* to *width* columns, breaking over-long words.

    A width below 1 is treated as 1.
    """
    width = max(width, 1)
    result: list[str] = []
    for physical_line in text.split("\n"):
        result.extend(_wrap_plain_line(physical_line, width))
    return _close_lines(text, result)


_WRAPPERS: dict[WrapStrategy, Callable[[str, int], list[str]]] = {
    WrapStrategy.WIDE: wrap_wide,
    WrapStrategy.PLAIN: wrap_plain,
}


def wrap_text(
    text: str, inner_width: int, strategy: WrapStrategy | None = None
) -> WrapResult:
    """Wrap *text* with the given strategy, or the one :func:`classify` picks."""
    if strategy is None:
        strategy = classify(text)
    return WrapResult(lines=_WRAPPERS[strategy](text, inner_width), inner_width=inner_width)
