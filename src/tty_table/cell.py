"""Per-cell layout: color, guard styling, wrap or truncate, align, restore styling."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Sequence

import click

from tty_table.align import align_line
from tty_table.ansi import carry_styles, close_styles, extract
from tty_table.config import CellOptions, RowRole, TableConfig
from tty_table.truncate import truncate
from tty_table.wrap import wrap_text


@dataclass
class CellOutput:
    """Laid-out lines of one cell and the inner width they were fitted to."""

    output: list[str] = field(default_factory=list)
    width: int = 0


def _suffix(mode: bool | str) -> str | None:
    """Map a truncate option to its suffix, or ``None`` when not truncating."""
    if mode is True:
        return ""
    if isinstance(mode, str):
        return mode
    return None


def _colorize(text: str, color: str | None) -> str:
    if color is None or not text:
        return text
    return click.style(text, fg=color)


def format_cell(
    config: TableConfig,
    value: Any,
    column_index: int,
    options: CellOptions,
    role: RowRole | str,
    column_widths: Sequence[int],
) -> CellOutput:
    text = "" if value is None else str(value)
    leading, body, trailing = extract(_colorize(text, options.color_for(role)))

    align = options.align_for(role)
    if align == "center":
        options = options.equalized()

    column_width = column_widths[column_index]
    inner_width = column_width - options.padding_left - options.padding_right - config.gutter
    # The gutter column belongs to the border, lines fill the rest
    line_width = column_width - config.gutter

    suffix = _suffix(options.truncate)
    if suffix is not None:
        lines = carry_styles(truncate(body, inner_width, suffix).split("\n"))
    else:
        lines = wrap_text(body, inner_width).lines

    output = [
        align_line(line.strip(), line_width, align, options.padding_left, options.padding_right)
        for line in lines
    ]
    if not output:
        output = [" " * max(line_width, 0)]

    # Every line carries the cell's styling and leaves nothing switched on
    output = [close_styles(leading + line + trailing) for line in output]
    return CellOutput(output=output, width=inner_width)
