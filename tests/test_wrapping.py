"""Tests for the shared token packing primitive."""

from __future__ import annotations

from resume_layout.layout.wrapping import pack_tokens, wrap_text


def _chars(token: str) -> float:
    return float(len(token))


class TestPackTokens:
    def test_empty_input_yields_no_lines(self) -> None:
        assert pack_tokens([], _chars, 10) == []

    def test_fills_greedily(self) -> None:
        lines = pack_tokens(["aa", "bb", "cc", "dd"], _chars, 5, gap=1)
        assert lines == [["aa", "bb"], ["cc", "dd"]]

    def test_exact_fit_stays_on_line(self) -> None:
        assert pack_tokens(["abc", "de"], _chars, 6, gap=1) == [["abc", "de"]]

    def test_overflowing_token_starts_new_line(self) -> None:
        assert pack_tokens(["abc", "def"], _chars, 6, gap=1) == [["abc"], ["def"]]

    def test_oversized_token_sits_alone(self) -> None:
        lines = pack_tokens(["a", "abcdefghijkl", "b"], _chars, 5, gap=1)
        assert lines == [["a"], ["abcdefghijkl"], ["b"]]

    def test_preserves_order(self) -> None:
        tokens = [str(i) for i in range(30)]
        lines = pack_tokens(tokens, _chars, 8, gap=1)
        assert [t for line in lines for t in line] == tokens


class TestWrapText:
    def test_respects_width(self) -> None:
        lines = wrap_text("one two three four five", _chars, 9, 1)
        assert lines == ["one two", "three", "four five"]
        assert all(len(line) <= 9 for line in lines)

    def test_explicit_newlines_start_new_lines(self) -> None:
        assert wrap_text("alpha\nbeta", _chars, 100, 1) == ["alpha", "beta"]

    def test_blank_lines_dropped(self) -> None:
        assert wrap_text("alpha\n\n   \nbeta", _chars, 100, 1) == ["alpha", "beta"]

    def test_long_word_never_split(self) -> None:
        word = "x" * 40
        lines = wrap_text(f"short {word} tail", _chars, 10, 1)
        assert lines == ["short", word, "tail"]

    def test_collapses_whitespace(self) -> None:
        assert wrap_text("a    b\tc", _chars, 100, 1) == ["a b c"]
