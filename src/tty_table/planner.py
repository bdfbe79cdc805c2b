"""Column width planning.

Widths are fixed once per render pass from the initial header and row data,
then optionally shrunk in proportion to fit the viewport.
"""

from __future__ import annotations

import logging
from typing import Any, Sequence

from tty_table.config import ColumnOptions, TableConfig
from tty_table.width import visible_width

logger = logging.getLogger(__name__)


def _column_count(header: Sequence[Any] | None, rows: Sequence[Sequence[Any]]) -> int:
    if header:
        return len(header)
    if rows:
        return len(rows[0])
    return 0


def infer_column_width(
    rows: Sequence[Sequence[Any]],
    column_index: int,
    header_value: Any = None,
) -> int:
    """Return the widest display width found in one column.

    When *header_value* is given it is measured through an extra probe row,
    leaving the caller's rows untouched.
    """
    probe: list[Sequence[Any]] = list(rows)
    if header_value is not None and header_value != "":
        row: list[Any] = [None] * (column_index + 1)
        row[column_index] = header_value
        probe.append(row)

    widest = 0
    for row in probe:
        if column_index >= len(row):
            continue
        value = row[column_index]
        if value is None:
            continue
        widest = max(widest, visible_width(str(value)))
    return widest


def shrink_to_viewport(
    widths: Sequence[int], total_width: int, viewport_width: int | None
) -> list[int]:
    """Scale *widths* down proportionally when *total_width* overflows.

    The ratio is the viewport/total ratio floored to two decimals, minus
    0.01. Nothing changes when the viewport is unknown or the ratio is not
    positive.
    """
    widths = list(widths)
    if not viewport_width or viewport_width <= 0 or total_width <= viewport_width:
        return widths

    # Integer percent keeps the arithmetic exact
    percent = (100 * viewport_width) // total_width - 1
    if percent <= 0:
        logger.debug(
            "Skipping shrink: viewport %d too narrow for total width %d",
            viewport_width,
            total_width,
        )
        return widths

    logger.debug(
        "Shrinking columns to %d%% to fit viewport %d (total %d)",
        percent,
        viewport_width,
        total_width,
    )
    return [(percent * w) // 100 for w in widths]


def plan_column_widths(
    config: TableConfig,
    header: Sequence[Any] | None,
    rows: Sequence[Sequence[Any]],
) -> list[int]:
    """Resolve one width per column.

    Priority: a width declared on the header column, then a fixed global
    width, then the widest value in the column plus padding. Every column
    also gets the gutter.
    """
    count = _column_count(header, rows)
    widths: list[int] = []

    for index in range(count):
        column = ColumnOptions.coerce(header[index]) if header else ColumnOptions()

        if column.has_width:
            result = int(column.width)  # type: ignore[arg-type]
        elif config.width != "auto":
            result = int(config.width)
        else:
            result = infer_column_width(rows, index, column.value)
            # Center alignment reconciles unequal padding when the cell is formatted
            result += config.padding_left + config.padding_right

        widths.append(result + config.gutter)

    if not widths:
        return widths

    total_width = sum(widths) + config.margin_left
    return shrink_to_viewport(widths, total_width, config.viewport_width)
