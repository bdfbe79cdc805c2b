"""Display width measurement.

The width of a string is the number of terminal columns it occupies, not its
length: styling escape sequences count 0, wide characters (CJK ideographs,
most emoji) count 2, everything else usually counts 1.
"""

from __future__ import annotations

import logging
import unicodedata

import grapheme
import wcwidth as _wcwidth

from tty_table.ansi import strip_ansi, tokenize

logger = logging.getLogger(__name__)

TAB_WIDTH = 3


def _is_surrogate(cp: int) -> bool:
    return 0xD800 <= cp <= 0xDFFF


def _codepoint_width(ch: str) -> int:
    cp = ord(ch)
    # Control characters
    if cp < 0x20 or (0x7F <= cp <= 0x9F):
        return 0
    if _is_surrogate(cp):
        logger.debug("Unpaired surrogate U+%04X measured as width 1", cp)
        return 1
    w = _wcwidth.wcwidth(ch)
    if w < 0:
        logger.debug("Unmeasurable code point U+%04X measured as width 1", cp)
        return 1
    return w


def char_width(g: str) -> int:
    """Return the display width of a single grapheme cluster.

    Rules:
    1. Tabs -> 3, control characters -> 0
    2. Emoji sequences (VS16, ZWJ, skin tone modifiers, flags) -> 2
    3. Otherwise the width of the first meaningful codepoint.
    """
    if not g:
        return 0

    if len(g) == 1:
        if g == "\t":
            return TAB_WIDTH
        return _codepoint_width(g)

    for ch in g:
        cp = ord(ch)
        if cp in (0xFE0F, 0x200D):  # VS16, ZWJ
            return 2
        if 0x1F3FB <= cp <= 0x1F3FF:  # Skin tone modifiers
            return 2
        if 0x1F1E6 <= cp <= 0x1F1FF:  # Regional indicators
            return 2

    first = g[0]
    first_cp = ord(first)
    if first_cp >= 0x1F000 and not _is_surrogate(first_cp):
        return 2
    # Miscellaneous symbols, dingbats
    if 0x2600 <= first_cp <= 0x27BF:
        return 2

    cat = unicodedata.category(first)
    if cat.startswith("M") or cat == "Cf":
        return 0
    return _codepoint_width(first)


def graphemes(text: str) -> list[str]:
    """Segment *text* into grapheme clusters."""
    return list(grapheme.graphemes(text))


def visible_width(text: object) -> int:
    """Calculate the visible terminal width of *text*.

    Non-string values are coerced with ``str()``. Escape sequences are
    stripped first; printable ASCII takes a fast path.
    """
    if text is None:
        return 0
    if not isinstance(text, str):
        text = str(text)
    if not text:
        return 0

    stripped = strip_ansi(text)
    if not stripped:
        return 0

    if stripped.isascii() and stripped.isprintable():
        return len(stripped)

    return sum(char_width(g) for g in grapheme.graphemes(stripped))


def split_at_width(text: str, max_cols: int) -> tuple[str, str]:
    """Split *text* after the longest prefix that fits in *max_cols* columns.

    Escape sequences are zero width and stay with the prefix; the cut only
    falls on grapheme boundaries. A leading grapheme wider than *max_cols*
    is still taken so that the prefix is never empty for non-empty text.
    """
    cols = 0
    pos = 0
    for tok in tokenize(text):
        if tok.is_escape:
            pos += len(tok.text)
            continue
        for g in grapheme.graphemes(tok.text):
            w = char_width(g)
            if cols + w > max_cols and cols > 0:
                return text[:pos], text[pos:]
            cols += w
            pos += len(g)
    return text, ""
