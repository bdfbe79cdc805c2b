"""Tests for tty_table.wrap -- wide and plain wrapping strategies."""

from __future__ import annotations

import random

import pytest

from tty_table.ansi import close_styles
from tty_table.width import visible_width
from tty_table.wrap import WrapResult, WrapStrategy, classify, wrap_plain, wrap_text, wrap_wide

EMOJI_TEXT = "\U0001f600\U0001f603 hello world this is long"


# ---------------------------------------------------------------------------
# classify
# ---------------------------------------------------------------------------


class TestClassify:
    def test_ascii_is_plain(self) -> None:
        assert classify("hello world") is WrapStrategy.PLAIN

    def test_accented_latin_is_plain(self) -> None:
        assert classify("café naïve") is WrapStrategy.PLAIN

    def test_ansi_only_styling_is_plain(self) -> None:
        assert classify("\x1b[31mred\x1b[0m") is WrapStrategy.PLAIN

    def test_emoji_is_wide(self) -> None:
        assert classify("hi \U0001f600") is WrapStrategy.WIDE

    def test_cjk_is_wide(self) -> None:
        assert classify("中文") is WrapStrategy.WIDE

    def test_lone_surrogate_is_wide(self) -> None:
        assert classify("a\ud83d") is WrapStrategy.WIDE


# ---------------------------------------------------------------------------
# Wide strategy
# ---------------------------------------------------------------------------


class TestWrapWide:
    def test_emoji_text_breaks_by_character(self) -> None:
        lines = wrap_wide(EMOJI_TEXT, 8)
        assert lines == ["\U0001f600\U0001f603 hel", "lo world", " this is", " long"]

    def test_no_line_exceeds_width(self) -> None:
        for line in wrap_wide(EMOJI_TEXT, 8):
            assert visible_width(line) <= 8

    def test_emoji_never_split(self) -> None:
        lines = wrap_wide(EMOJI_TEXT, 3)
        assert "".join(lines) == EMOJI_TEXT
        assert lines[0] == "\U0001f600"
        assert lines[1] == "\U0001f603 "

    def test_breaks_before_offending_wide_char(self) -> None:
        assert wrap_wide("ab中", 3) == ["ab", "中"]

    def test_interior_escape_codes_travel_with_text(self) -> None:
        lines = wrap_wide("中\x1b[31m文\x1b[0m字", 2)
        # Red is closed before the first break and reopened after it
        assert lines == ["中\x1b[31m\x1b[0m", "\x1b[31m文\x1b[0m", "字"]

    def test_style_spanning_break_is_reopened(self) -> None:
        lines = wrap_wide("\x1b[31m中文字\x1b[0m", 4)
        assert lines == ["\x1b[31m中文\x1b[0m", "\x1b[31m字\x1b[0m"]

    def test_embedded_newlines(self) -> None:
        assert wrap_wide("中\n文", 10) == ["中", "文"]

    def test_zero_width_breaks_every_character(self) -> None:
        assert wrap_wide("中文", 0) == ["中", "文"]
        assert wrap_wide("ab", -2) == ["a", "b"]

    def test_fits(self) -> None:
        assert wrap_wide("中文", 4) == ["中文"]


# ---------------------------------------------------------------------------
# Plain strategy
# ---------------------------------------------------------------------------


class TestWrapPlain:
    def test_short_text_no_wrap(self) -> None:
        assert wrap_plain("hello world", 11) == ["hello world"]

    def test_wraps_at_word_boundary(self) -> None:
        assert wrap_plain("hello world", 6) == ["hello", "world"]

    def test_fills_lines_greedily(self) -> None:
        assert wrap_plain("the quick brown fox", 10) == ["the quick", "brown fox"]

    def test_long_word_forced_break(self) -> None:
        assert wrap_plain("abcdefghij", 4) == ["abcd", "efgh", "ij"]

    def test_tail_of_broken_word_continues_line(self) -> None:
        assert wrap_plain("abcdef g", 4) == ["abcd", "ef g"]

    def test_exact_multiple_leaves_no_empty_line(self) -> None:
        assert wrap_plain("abcdefgh", 4) == ["abcd", "efgh"]

    def test_whitespace_trimmed(self) -> None:
        assert wrap_plain("  hello  ", 20) == ["hello"]

    def test_preserves_embedded_newlines(self) -> None:
        assert wrap_plain("one\ntwo", 10) == ["one", "two"]

    def test_empty_string(self) -> None:
        assert wrap_plain("", 10) == [""]

    def test_zero_width_breaks_every_character(self) -> None:
        assert wrap_plain("ab cd", 0) == ["a", "b", "c", "d"]

    def test_ansi_codes_are_zero_width(self) -> None:
        lines = wrap_plain("\x1b[1mbold\x1b[22m text", 9)
        assert lines == ["\x1b[1mbold\x1b[22m text"]

    def test_style_spanning_break_is_reopened(self) -> None:
        lines = wrap_plain("a \x1b[31mfew red words\x1b[0m here", 8)
        assert lines == [
            "a \x1b[31mfew\x1b[0m",
            "\x1b[31mred\x1b[0m",
            "\x1b[31mwords\x1b[0m",
            "here",
        ]

    def test_style_carried_across_newline(self) -> None:
        assert wrap_plain("\x1b[1ma\nb\x1b[0m", 5) == ["\x1b[1ma\x1b[0m", "\x1b[1mb\x1b[0m"]


# ---------------------------------------------------------------------------
# wrap_text
# ---------------------------------------------------------------------------


class TestWrapText:
    def test_picks_wide_strategy(self) -> None:
        result = wrap_text("中文字", 4)
        assert result == WrapResult(lines=["中文", "字"], inner_width=4)

    def test_picks_plain_strategy(self) -> None:
        assert wrap_text("a b", 1).lines == ["a", "b"]

    def test_explicit_strategy(self) -> None:
        # Plain wrapping keeps whole words even when the text is wide
        assert wrap_text("中 文字", 4, WrapStrategy.PLAIN).lines == ["中", "文字"]
        assert wrap_text("中 文字", 4, WrapStrategy.WIDE).lines == ["中 ", "文字"]


_WORDS = ["a", "abc", "hello", "中", "中文字", "\U0001f600", "x\x1b[31my\x1b[0m", "", "supercalifragilistic"]


class TestNoOverflow:
    """No wrapped line is wider than the budget or leaves styling open."""

    @pytest.mark.parametrize("seed", range(40))
    def test_random_text(self, seed: int) -> None:
        rng = random.Random(seed)
        text = " ".join(rng.choice(_WORDS) for _ in range(rng.randint(1, 15)))
        width = rng.randint(2, 20)

        for strategy in WrapStrategy:
            for line in wrap_text(text, width, strategy).lines:
                assert visible_width(line) <= width
                assert close_styles(line) == line
