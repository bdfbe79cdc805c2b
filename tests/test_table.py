"""Tests for tty_table.table -- table layout and frame assembly."""

from __future__ import annotations

import copy

import pytest

from tty_table.config import TableConfig
from tty_table.table import Table
from tty_table.width import visible_width

TIGHT = {"padding_left": 0, "padding_right": 0, "margin_left": 0}


class TestTableLayout:
    def test_scenario_widths_without_header(self) -> None:
        table = Table(rows=[["ab", "x"]], padding_left=0, padding_right=0, gutter=0)
        assert table.layout().column_widths == [2, 1]

    def test_headerless_table_has_no_header_band(self) -> None:
        layout = Table(rows=[["ab", "x"]], **TIGHT).layout()
        assert layout.header == []
        assert len(layout.body) == 1
        assert layout.column_widths == [3, 2]

    def test_bands(self) -> None:
        layout = Table(["h"], [["x"], ["y"]], footer=["f"]).layout()
        assert len(layout.header) == 1
        assert len(layout.body) == 2
        assert len(layout.footer) == 1
        assert len(layout.rows()) == 4

    def test_short_rows_padded_with_empty_cells(self) -> None:
        layout = Table(["a", "b"], [["only"]]).layout()
        assert len(layout.body[0]) == 2

    def test_extra_cells_ignored(self) -> None:
        layout = Table(["a"], [["x", "extra"]]).layout()
        assert len(layout.body[0]) == 1

    def test_header_options_apply_to_column(self) -> None:
        header = [{"value": "name", "align": "left", "width": 8}]
        layout = Table(header, [["ab"]], **TIGHT).layout()
        # Declared widths still get the gutter
        assert layout.column_widths == [9]
        assert layout.body[0][0].output == ["ab      "]

    def test_header_only(self) -> None:
        layout = Table(["name", "qty"], [], **TIGHT).layout()
        assert layout.column_widths == [5, 4]
        assert layout.body == []

    def test_formatter_applied_to_body_values(self) -> None:
        header = [{"value": "price", "formatter": lambda v: f"{v} USD"}]
        rows = [[3], [12]]
        table = Table(header, rows, **TIGHT)
        layout = table.layout()
        # Widths are planned from the formatted values
        assert layout.column_widths == [7]
        assert layout.header[0][0].output == ["price "]
        assert layout.body[0][0].output == ["3 USD "]
        assert layout.body[1][0].output == ["12 USD"]
        assert table.rows == [[3], [12]]

    def test_formatter_skips_footer(self) -> None:
        header = [{"value": "n", "formatter": lambda v: v * 2}]
        layout = Table(header, [[2]], footer=["z"], **TIGHT).layout()
        assert layout.body[0][0].output == ["4"]
        assert layout.footer[0][0].output == ["z"]

    def test_invalid_column_width(self) -> None:
        with pytest.raises(ValueError, match="column width"):
            Table([{"value": "a", "width": 0}], [["x"]]).layout()

    def test_config_object_and_options(self) -> None:
        table = Table(["a"], [["b"]], config=TableConfig(padding_left=3), paddingRight=0)
        assert table.config.padding_left == 3
        assert table.config.padding_right == 0


class TestTableRender:
    def test_simple_frame(self) -> None:
        table = Table(["a", "b"], [["1", "2"]], **TIGHT)
        assert table.render() == "\n".join(
            [
                "┌─┬─┐",
                "│a│b│",
                "├─┼─┤",
                "│1│2│",
                "└─┴─┘",
            ]
        )

    def test_headerless_frame(self) -> None:
        table = Table(rows=[["1", "2"]], **TIGHT)
        assert table.render().split("\n") == ["┌─┬─┐", "│1│2│", "└─┴─┘"]

    def test_footer_separated(self) -> None:
        lines = Table(["h"], [["x"]], footer=["f"], **TIGHT).render().split("\n")
        assert lines == ["┌─┐", "│h│", "├─┤", "│x│", "├─┤", "│f│", "└─┘"]

    def test_margins(self) -> None:
        output = Table(["a"], [["b"]], padding_left=0, padding_right=0, margin_left=2, margin_top=1).render()
        assert output.startswith("\n")
        assert all(line.startswith("  ") for line in output.split("\n")[1:])

    def test_cells_in_a_row_share_height(self) -> None:
        header = [{"value": "a", "width": 6, "align": "left"}, "b"]
        lines = Table(header, [["one two three", "x"]], **TIGHT).render().split("\n")
        body = lines[3:-1]
        assert len(body) == 3
        assert body[0] == "│one   │x│"
        assert body[1] == "│two   │ │"
        assert body[2] == "│three │ │"

    def test_wrapped_styled_cell_does_not_bleed_into_frame(self) -> None:
        header = [{"value": "a", "width": 6, "align": "left"}]
        rows = [["\x1b[31mone two three\x1b[0m"]]
        lines = Table(header, rows, **TIGHT).render().split("\n")
        assert lines[3:-1] == [
            "│\x1b[31mone   \x1b[0m│",
            "│\x1b[31mtwo   \x1b[0m│",
            "│\x1b[31mthree \x1b[0m│",
        ]
        for line in lines:
            assert line.count("\x1b[31m") == line.count("\x1b[0m")

    def test_column_colors(self) -> None:
        header = [{"value": "a", "color": "red", "footerColor": "green"}]
        lines = Table(header, [["x"]], footer=["f"], **TIGHT).render().split("\n")
        assert lines[1] == "│a│"
        assert lines[3] == "│\x1b[31mx\x1b[0m│"
        assert lines[5] == "│\x1b[32mf\x1b[0m│"

    def test_all_lines_same_width(self) -> None:
        rows = [["\x1b[31mred text\x1b[0m", "中文字", "\U0001f600 emoji here"], ["plain", "x", "y"]]
        output = Table(["col", "wide", "emoji"], rows).render()
        widths = {visible_width(line) for line in output.split("\n")}
        assert len(widths) == 1

    def test_shrinks_to_viewport(self) -> None:
        table = Table(rows=[["a" * 50]], viewport_width=30, **TIGHT)
        lines = table.render().split("\n")
        assert max(visible_width(line) for line in lines) <= 30
        assert len(lines) == 4

    def test_render_is_repeatable(self) -> None:
        header = [{"value": "name", "align": "left"}, "qty"]
        rows = [["apple", 3], ["kiwi", 12]]
        footer = ["total", 15]
        snapshot = copy.deepcopy((header, rows, footer))

        table = Table(header, rows, footer=footer)
        first = table.render()
        second = table.render()

        assert first == second
        assert (header, rows, footer) == snapshot
        assert table.layout() == table.layout()

    def test_str(self) -> None:
        table = Table(["a"], [["b"]])
        assert str(table) == table.render()

    def test_empty_table(self) -> None:
        assert Table().render() == ""
