"""Table object: plans widths, lays out every cell, draws a simple frame.

Layout is a pure read of the header, rows, and footer, so a table can be
rendered any number of times with identical output.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Sequence

from tty_table.cell import CellOutput, format_cell
from tty_table.config import CellOptions, ColumnOptions, RowRole, TableConfig, resolve_cell_options
from tty_table.planner import plan_column_widths

logger = logging.getLogger(__name__)

# (left, junction, horizontal, right) for top, separator, and bottom lines
_BORDER_TOP = ("┌", "┬", "─", "┐")
_BORDER_MID = ("├", "┼", "─", "┤")
_BORDER_BOTTOM = ("└", "┴", "─", "┘")
_VERTICAL = "│"


@dataclass
class TableLayout:
    """Laid-out cells of every band, plus the column widths they fit."""

    column_widths: list[int] = field(default_factory=list)
    header: list[list[CellOutput]] = field(default_factory=list)
    body: list[list[CellOutput]] = field(default_factory=list)
    footer: list[list[CellOutput]] = field(default_factory=list)

    def rows(self) -> list[list[CellOutput]]:
        return [*self.header, *self.body, *self.footer]


class Table:
    """A header, body rows, and an optional footer row rendered as text."""

    def __init__(
        self,
        header: Sequence[Any] | None = None,
        rows: Sequence[Sequence[Any]] | None = None,
        footer: Sequence[Any] | None = None,
        config: TableConfig | None = None,
        **options: Any,
    ) -> None:
        self.config = (config or TableConfig()).merge(options)
        self.header: list[Any] = list(header) if header else []
        self.rows: list[list[Any]] = [list(row) for row in rows or []]
        self.footer: list[Any] = list(footer) if footer else []

    # -- layout -------------------------------------------------------------

    @property
    def header_empty(self) -> bool:
        return not self.header

    def _columns(self) -> list[ColumnOptions]:
        if not self.header_empty:
            return [ColumnOptions.coerce(col) for col in self.header]
        # No header: default column options, count taken from the first row
        count = len(self.rows[0]) if self.rows else len(self.footer)
        return [ColumnOptions() for _ in range(count)]

    def _formatted_rows(self, columns: list[ColumnOptions]) -> list[list[Any]]:
        """Body rows with each column's formatter applied."""
        return [
            [
                columns[index].format_value(value) if index < len(columns) else value
                for index, value in enumerate(row)
            ]
            for row in self.rows
        ]

    def _layout_row(
        self,
        values: Sequence[Any],
        role: RowRole,
        options: list[CellOptions],
        widths: list[int],
    ) -> list[CellOutput]:
        cells: list[CellOutput] = []
        for index, column_options in enumerate(options):
            value = values[index] if index < len(values) else ""
            cells.append(format_cell(self.config, value, index, column_options, role, widths))
        return cells

    def layout(self) -> TableLayout:
        """Plan column widths and lay out every cell."""
        columns = self._columns()
        header = None if self.header_empty else columns
        body = self._formatted_rows(columns)
        rows = body if body else [[col.value for col in columns]]
        widths = plan_column_widths(self.config, header, rows)
        logger.debug("Planned column widths %s", widths)

        options = [resolve_cell_options(self.config, col) for col in columns]
        layout = TableLayout(column_widths=widths)
        if not self.header_empty:
            values = [col.value for col in columns]
            layout.header.append(self._layout_row(values, "header", options, widths))
        for row in body:
            layout.body.append(self._layout_row(row, "body", options, widths))
        if self.footer:
            layout.footer.append(self._layout_row(self.footer, "footer", options, widths))
        return layout

    # -- frame --------------------------------------------------------------

    def _border(self, widths: list[int], chars: tuple[str, str, str, str]) -> str:
        left, junction, horizontal, right = chars
        segments = [horizontal * max(w - self.config.gutter, 0) for w in widths]
        return left + junction.join(segments) + right

    def _row_lines(self, cells: list[CellOutput], widths: list[int]) -> list[str]:
        height = max((len(cell.output) for cell in cells), default=0)
        columns: list[list[str]] = []
        for cell, width in zip(cells, widths):
            blank = " " * max(width - self.config.gutter, 0)
            columns.append(cell.output + [blank] * (height - len(cell.output)))
        return [
            _VERTICAL + _VERTICAL.join(parts) + _VERTICAL
            for parts in zip(*columns)
        ]

    def render(self) -> str:
        """Render the table to a string."""
        layout = self.layout()
        widths = layout.column_widths
        if not widths:
            return ""

        margin = " " * self.config.margin_left
        lines = [self._border(widths, _BORDER_TOP)]
        separator = self._border(widths, _BORDER_MID)
        for index, cells in enumerate(layout.rows()):
            if index:
                lines.append(separator)
            lines.extend(self._row_lines(cells, widths))
        lines.append(self._border(widths, _BORDER_BOTTOM))

        return "\n" * self.config.margin_top + "\n".join(margin + line for line in lines)

    def __str__(self) -> str:
        return self.render()
