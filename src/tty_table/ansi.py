"""ANSI escape handling: tokenizing, stripping, and guarding styling runs.

Cell content may carry terminal styling. Styling sequences occupy no columns,
so they are stripped before measuring, and the runs anchored at the very start
and very end of a cell are lifted off before wrapping and put back afterwards.
"""

from __future__ import annotations

import enum
from typing import NamedTuple

ESC = "\x1b"
BEL = "\x07"

# Second character of the sequences we recognize: CSI, OSC, APC
_INTRODUCERS = "[]_"


class _State(enum.Enum):
    OUTSIDE = "outside-escape"
    INSIDE = "inside-escape"


class AnsiToken(NamedTuple):
    text: str
    is_escape: bool


class AnsiSplit(NamedTuple):
    """A string decomposed into its leading run, body, and trailing run."""

    leading: str
    body: str
    trailing: str

    def join(self) -> str:
        return reattach(self.leading, self.body, self.trailing)


# ---------------------------------------------------------------------------
# Scanner
# ---------------------------------------------------------------------------


def _is_csi_param(ch: str) -> bool:
    # Parameter bytes 0x30-0x3F and intermediate bytes 0x20-0x2F
    return "\x20" <= ch <= "\x3f"


def _is_csi_final(ch: str) -> bool:
    return "\x40" <= ch <= "\x7e"


def tokenize(text: str) -> list[AnsiToken]:
    """Split *text* into plain runs and complete escape sequences.

    Recognizes CSI (``ESC[`` params final byte, e.g. SGR ``ESC[1;31m``),
    OSC (``ESC]`` ... ``BEL`` / ``ESC\\``) and APC (``ESC_`` ... ``BEL`` /
    ``ESC\\``). A sequence that is malformed or never terminated is kept
    as plain text.
    """
    tokens: list[AnsiToken] = []
    if ESC not in text:
        if text:
            tokens.append(AnsiToken(text, False))
        return tokens

    n = len(text)
    state = _State.OUTSIDE
    plain_start = 0
    esc_start = 0
    kind = ""
    i = 0

    while i < n or state is _State.INSIDE:
        if i >= n:
            # Unterminated sequence: rescan it as plain text
            state = _State.OUTSIDE
            plain_start = esc_start
            i = esc_start + 1
            continue

        ch = text[i]

        if state is _State.OUTSIDE:
            if ch == ESC and i + 1 < n and text[i + 1] in _INTRODUCERS:
                if i > plain_start:
                    tokens.append(AnsiToken(text[plain_start:i], False))
                esc_start = i
                kind = text[i + 1]
                state = _State.INSIDE
                i += 2
            else:
                i += 1
            continue

        end: int | None = None
        if kind == "[":
            if _is_csi_final(ch):
                end = i + 1
            elif not _is_csi_param(ch):
                # Malformed CSI: the ESC is an ordinary character
                state = _State.OUTSIDE
                plain_start = esc_start
                i = esc_start + 1
                continue
        elif ch == BEL:
            end = i + 1
        elif ch == ESC and i + 1 < n and text[i + 1] == "\\":
            end = i + 2

        if end is None:
            i += 1
            continue

        tokens.append(AnsiToken(text[esc_start:end], True))
        state = _State.OUTSIDE
        plain_start = end
        i = end

    if plain_start < n:
        tokens.append(AnsiToken(text[plain_start:], False))
    return tokens


def strip_ansi(text: str) -> str:
    """Remove every recognized escape sequence from *text*."""
    if ESC not in text:
        return text
    return "".join(tok.text for tok in tokenize(text) if not tok.is_escape)


# ---------------------------------------------------------------------------
# Leading / trailing runs
# ---------------------------------------------------------------------------


def extract(text: str) -> AnsiSplit:
    """Lift the escape runs anchored at the start and end of *text*.

    Interior sequences stay in the body. When *text* consists only of escape
    sequences the whole run is treated as leading.
    """
    tokens = tokenize(text)
    start = 0
    while start < len(tokens) and tokens[start].is_escape:
        start += 1
    stop = len(tokens)
    while stop > start and tokens[stop - 1].is_escape:
        stop -= 1

    return AnsiSplit(
        "".join(tok.text for tok in tokens[:start]),
        "".join(tok.text for tok in tokens[start:stop]),
        "".join(tok.text for tok in tokens[stop:]),
    )


def reattach(leading: str, body: str, trailing: str) -> str:
    return leading + body + trailing


# ---------------------------------------------------------------------------
# Styling state across line breaks
# ---------------------------------------------------------------------------

RESET = ESC + "[0m"

# SGR parameter -> attribute slot it switches on
_ATTR_ON: dict[int, str] = {
    1: "bold",
    2: "dim",
    3: "italic",
    4: "underline",
    5: "blink",
    7: "inverse",
    8: "hidden",
    9: "strike",
}
# SGR parameter -> attribute slots it switches off
_ATTR_OFF: dict[int, tuple[str, ...]] = {
    22: ("bold", "dim"),
    23: ("italic",),
    24: ("underline",),
    25: ("blink",),
    27: ("inverse",),
    28: ("hidden",),
    29: ("strike",),
    39: ("fg",),
    49: ("bg",),
}


class AnsiCodeTracker:
    """Track which SGR attributes are active while walking styled text.

    Only ``ESC[...m`` sequences change the state; anything else passed to
    :meth:`process` is ignored.
    """

    def __init__(self) -> None:
        self._active: dict[str, str] = {}

    def process(self, code: str) -> None:
        if not code.startswith(ESC + "[") or not code.endswith("m"):
            return
        params = code[2:-1].split(";")
        i = 0
        while i < len(params):
            try:
                val = int(params[i]) if params[i] else 0
            except ValueError:
                # Colon sub-parameters and private modes are not tracked
                i += 1
                continue

            if val == 0:
                self._active.clear()
            elif val in _ATTR_ON:
                self._active[_ATTR_ON[val]] = f"{ESC}[{val}m"
            elif val in _ATTR_OFF:
                for slot in _ATTR_OFF[val]:
                    self._active.pop(slot, None)
            elif 30 <= val <= 37 or 90 <= val <= 97:
                self._active["fg"] = f"{ESC}[{val}m"
            elif 40 <= val <= 47 or 100 <= val <= 107:
                self._active["bg"] = f"{ESC}[{val}m"
            elif val in (38, 48) and i + 1 < len(params):
                # 5;N for 256 colors, 2;R;G;B for true color
                span = {"5": 2, "2": 4}.get(params[i + 1], 1)
                if span > 1 and i + span < len(params):
                    slot = "fg" if val == 38 else "bg"
                    self._active[slot] = f"{ESC}[{';'.join(params[i:i + span + 1])}m"
                i += span
            i += 1

    def active_codes(self) -> str:
        """Codes that turn the current attributes back on."""
        return "".join(self._active.values())

    def line_end_reset(self) -> str:
        return RESET if self._active else ""


def carry_styles(lines: list[str]) -> list[str]:
    """Close styling left open at the end of each line and reopen it on the next.

    The lines are treated as consecutive pieces of one styled text, so a
    style that spans a line break is reset before the break and repeated
    after it.
    """
    tracker = AnsiCodeTracker()
    carried: list[str] = []
    for line in lines:
        prefix = tracker.active_codes()
        for tok in tokenize(line):
            if tok.is_escape:
                tracker.process(tok.text)
        carried.append(prefix + line + tracker.line_end_reset())
    return carried


def close_styles(line: str) -> str:
    """Append a reset to *line* if it leaves any styling switched on."""
    return carry_styles([line])[0]
