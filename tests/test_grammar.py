"""Tests for shared grammar primitives (groups, options, command names)."""
from __future__ import annotations

import pytest

from glsexpand.grammar import (
    GrammarError,
    compute_line_starts,
    line_and_column,
    parse_group,
    parse_groups,
    parse_options,
    scan_command_name,
)


class TestParseGroup:
    def test_simple_group(self) -> None:
        assert parse_group("{abc}rest", 0, grammar="t") == ("abc", 5)

    def test_empty_group(self) -> None:
        assert parse_group("{}", 0, grammar="t") == ("", 2)

    def test_nested_groups_keep_inner_braces(self) -> None:
        content, end = parse_group("{A{B}C}", 0, grammar="t")
        assert content == "A{B}C"
        assert end == 7

    def test_deep_nesting(self) -> None:
        text = "{" * 50 + "x" + "}" * 50
        content, end = parse_group(text, 0, grammar="t")
        assert content == "{" * 49 + "x" + "}" * 49
        assert end == len(text)

    def test_offset_start(self) -> None:
        assert parse_group("ab{cd}", 2, grammar="t") == ("cd", 6)

    def test_unbalanced_raises(self) -> None:
        with pytest.raises(GrammarError, match="unbalanced") as info:
            parse_group("{a{b}", 0, grammar="glossary")
        assert info.value.grammar == "glossary"
        assert info.value.position == 0

    def test_missing_open_brace_raises(self) -> None:
        with pytest.raises(GrammarError, match="expected '\\{'"):
            parse_group("abc", 0, grammar="t")

    def test_at_end_of_text_raises(self) -> None:
        with pytest.raises(GrammarError):
            parse_group("abc", 3, grammar="t")


class TestParseGroups:
    def test_three_adjacent_groups(self) -> None:
        contents, end = parse_groups("{a}{b}{c}!", 0, 3, grammar="t")
        assert contents == ["a", "b", "c"]
        assert end == 9

    def test_whitespace_between_groups_rejected(self) -> None:
        with pytest.raises(GrammarError):
            parse_groups("{a} {b}", 0, 2, grammar="t")


class TestParseOptions:
    def test_options_bracket(self) -> None:
        assert parse_options("[new, id=3]{x}", 0, grammar="t") == ("new, id=3", 11)

    def test_empty_options(self) -> None:
        assert parse_options("[]", 0, grammar="t") == ("", 2)

    def test_unterminated_options(self) -> None:
        with pytest.raises(GrammarError, match="unterminated options"):
            parse_options("[new{x}", 0, grammar="t")


def test_scan_command_name_stops_at_non_letter() -> None:
    assert scan_command_name("\\glspl{x}", 0) == ("glspl", 6)
    assert scan_command_name("\\gls2", 0) == ("gls", 4)
    assert scan_command_name("\\{", 0) == ("", 1)


def test_line_and_column_are_one_based() -> None:
    text = "first\nsecond\nthird"
    assert compute_line_starts(text) == [0, 6, 13]
    assert line_and_column(text, 0) == (1, 1)
    assert line_and_column(text, 8) == (2, 3)
    assert line_and_column(text, len(text)) == (3, 6)


def test_grammar_error_locate() -> None:
    text = "line one\n\\gls{cpu"
    try:
        parse_group(text, 13, grammar="glossary")
    except GrammarError as exc:
        assert exc.locate(text) == (2, 5)
    else:
        pytest.fail("expected GrammarError")


def test_grammar_error_defaults_to_scanned_text() -> None:
    with pytest.raises(GrammarError) as info:
        parse_options("a\n[open", 2, grammar="addition")
    assert info.value.source == "a\n[open"
    assert info.value.locate() == (2, 1)


def test_grammar_error_without_source_cannot_locate() -> None:
    with pytest.raises(ValueError, match="no source text"):
        GrammarError("glossary", 0, "boom").locate()
