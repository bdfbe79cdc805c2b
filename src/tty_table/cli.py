"""CLI entry point for tty-table. Uses Click for argument parsing."""

from __future__ import annotations

import csv
import json
import logging
from typing import Any, TextIO

import click

from tty_table.config import ALIGNMENTS, TableConfig
from tty_table.table import Table
from tty_table.terminal import terminal_columns

logger = logging.getLogger(__name__)


def _parse_width(value: str) -> int | str:
    if value == "auto":
        return value
    try:
        return int(value)
    except ValueError:
        raise click.BadParameter(f"expected 'auto' or an integer, got {value!r}") from None


def _check_list(what: str, value: Any) -> None:
    if not isinstance(value, list):
        raise click.ClickException(f"JSON {what} must be a list, got {type(value).__name__}")


def _read_rows(stream: TextIO, fmt: str) -> dict[str, Any]:
    """Read a table from *stream* as ``{"rows": [...], "header": ..., "footer": ...}``."""
    if fmt == "csv":
        return {"rows": [row for row in csv.reader(stream)]}

    try:
        data = json.load(stream)
    except json.JSONDecodeError as e:
        raise click.ClickException(f"Invalid JSON input: {e}") from e
    if isinstance(data, list):
        data = {"rows": data}
    elif not isinstance(data, dict) or not isinstance(data.get("rows", []), list):
        raise click.ClickException("JSON input must be a list of rows or an object with 'rows'")

    for index, row in enumerate(data.get("rows") or []):
        _check_list(f"row {index}", row)
    for key in ("header", "footer"):
        if data.get(key) is not None:
            _check_list(key, data[key])
    return data


@click.command()
@click.argument("file", type=click.File("r"), default="-")
@click.option(
    "--format", "fmt", type=click.Choice(["csv", "json"]), default="csv", help="Input format"
)
@click.option("--no-header", is_flag=True, help="Treat the first row as data, not a header")
@click.option("--width", default="auto", help="Column width: 'auto' or an integer")
@click.option("--align", type=click.Choice(ALIGNMENTS), default=None, help="Body alignment")
@click.option(
    "--header-align", type=click.Choice(ALIGNMENTS), default=None, help="Header alignment"
)
@click.option("--padding-left", type=int, default=None, help="Spaces left of cell text")
@click.option("--padding-right", type=int, default=None, help="Spaces right of cell text")
@click.option("--truncate", "truncate_suffix", default=None, help="Truncate cells, ending with SUFFIX")
@click.option(
    "--viewport-width",
    type=int,
    default=None,
    help="Width to shrink the table to (default: terminal width)",
)
@click.option(
    "--log-level",
    type=click.Choice(["debug", "info", "warning", "error"]),
    default="warning",
)
def main(
    file,
    fmt,
    no_header,
    width,
    align,
    header_align,
    padding_left,
    padding_right,
    truncate_suffix,
    viewport_width,
    log_level,
):
    """Render CSV or JSON rows from FILE (default: stdin) as a terminal table."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    data = _read_rows(file, fmt)
    rows = [list(row) for row in data.get("rows") or []]
    header = data.get("header")
    if header is None and not no_header and rows:
        header = rows.pop(0)

    options: dict[str, Any] = {
        "width": _parse_width(width),
        "align": align,
        "header_align": header_align,
        "padding_left": padding_left,
        "padding_right": padding_right,
        "truncate": truncate_suffix,
        "viewport_width": viewport_width if viewport_width is not None else terminal_columns(),
    }
    # Unset options keep their defaults
    options = {k: v for k, v in options.items() if v is not None}
    logger.debug("Rendering %d rows with options %s", len(rows), options)

    # Bad global or column options surface as ValueError
    try:
        config = TableConfig.from_dict(options)
        table = Table(header, rows, footer=data.get("footer"), config=config)
        output = table.render()
    except ValueError as e:
        raise click.ClickException(str(e)) from e

    click.echo(output)


if __name__ == "__main__":
    main()
