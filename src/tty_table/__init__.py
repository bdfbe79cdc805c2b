"""tty-table: lay out text, ANSI styling, and wide characters in terminal tables."""

from tty_table.align import align_line, pad_counts
from tty_table.ansi import (
    AnsiCodeTracker,
    AnsiSplit,
    AnsiToken,
    carry_styles,
    close_styles,
    extract,
    reattach,
    strip_ansi,
    tokenize,
)
from tty_table.cell import CellOutput, format_cell
from tty_table.config import (
    GUTTER,
    CellOptions,
    ColumnOptions,
    TableConfig,
    resolve_cell_options,
)
from tty_table.planner import infer_column_width, plan_column_widths, shrink_to_viewport
from tty_table.table import Table, TableLayout
from tty_table.truncate import truncate
from tty_table.width import char_width, split_at_width, visible_width
from tty_table.wrap import WrapResult, WrapStrategy, classify, wrap_plain, wrap_text, wrap_wide

__all__ = [
    # Width
    "char_width",
    "split_at_width",
    "visible_width",
    # ANSI
    "AnsiCodeTracker",
    "AnsiSplit",
    "AnsiToken",
    "carry_styles",
    "close_styles",
    "extract",
    "reattach",
    "strip_ansi",
    "tokenize",
    # Configuration
    "GUTTER",
    "CellOptions",
    "ColumnOptions",
    "TableConfig",
    "resolve_cell_options",
    # Layout
    "infer_column_width",
    "plan_column_widths",
    "shrink_to_viewport",
    "WrapResult",
    "WrapStrategy",
    "classify",
    "wrap_plain",
    "wrap_text",
    "wrap_wide",
    "truncate",
    "align_line",
    "pad_counts",
    "CellOutput",
    "format_cell",
    # Table
    "Table",
    "TableLayout",
]
