"""Ambient terminal size lookup."""

from __future__ import annotations

import os
import sys


def terminal_columns() -> int | None:
    """Return the width of the terminal attached to stdout, or ``None``.

    ``None`` (no terminal, or a zero-width pseudo terminal) tells the width
    planner to skip shrinking.
    """
    try:
        columns = os.get_terminal_size(sys.stdout.fileno()).columns
    except (AttributeError, ValueError, OSError):
        return None
    return columns or None
