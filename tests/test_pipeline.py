"""End-to-end tests for the four-pass expansion pipeline."""
from __future__ import annotations

import pytest

from glsexpand.addition import Addition
from glsexpand.expander import UndefinedReferenceError
from glsexpand.grammar import GrammarError
from glsexpand.pipeline import expand_text


def test_acronym_scenario() -> None:
    text = (
        "\\newacronym{cpu}{CPU}{Central Processing Unit} "
        "\\gls{cpu} and \\gls{cpu} again \\Glspl{cpu}."
    )
    result = expand_text(text)
    assert result.text == " Central Processing Unit (CPU) and CPU again CPUs."
    assert result.dictionary["cpu"].used is True


def test_addition_scenario() -> None:
    text = (
        "\\newacronym{cpu}{CPU}{Central Processing Unit}"
        "The \\gls{cpu}. \\addition[new]{Central fact}"
    )
    result = expand_text(text)
    assert result.text == "The Central Processing Unit (CPU). Central fact"
    assert result.additions[0].options == "new"


def test_addition_may_wrap_resolved_references() -> None:
    text = "\\newacronym{gpu}{GPU}{graphics unit}\\addition[rev2]{The \\Gls{gpu} {x}}"
    result = expand_text(text)
    assert result.text == "The Graphics unit (GPU) {x}"
    assert result.additions == (
        Addition("rev2", "The Graphics unit (GPU) {x}", result.additions[0].span),
    )


def test_literal_only_document_is_unchanged() -> None:
    text = "Plain text with {braces}, \\emph{markup} and\nnewlines.\n"
    result = expand_text(text)
    assert result.text == text
    assert result.dictionary == {}
    assert result.additions == ()


def test_reference_may_precede_definition() -> None:
    text = "\\glspl{os} run. \\newacronym{os}{OS}{operating system}\\gls{os}."
    assert expand_text(text).text == "operating systems (OSs) run. OS."


def test_last_definition_wins_across_document() -> None:
    text = "\\newacronym{x}{X}{old}\\gls{x} \\newacronym{x}{Y}{new}"
    assert expand_text(text).text == "new (Y) "


def test_glsfirst_then_plain() -> None:
    text = "\\newacronym{api}{API}{application interface}\\Glsfirst{api}, \\gls{api}"
    assert expand_text(text).text == "Application interface (API), API"


def test_unused_names() -> None:
    text = "\\newacronym{a}{A}{ay}\\newacronym{b}{B}{bee}\\gls{b}"
    assert expand_text(text).unused_names() == ["a"]


def test_unterminated_group_fails() -> None:
    with pytest.raises(GrammarError) as info:
        expand_text("\\gls{cpu")
    assert info.value.grammar == "glossary"


def test_undefined_reference_fails() -> None:
    with pytest.raises(UndefinedReferenceError) as info:
        expand_text("Use \\gls{widget} here.")
    assert info.value.name == "widget"


def test_addition_failure_after_expansion() -> None:
    text = "\\newacronym{a}{A}{ay}\\addition[x]{\\gls{a}"
    with pytest.raises(GrammarError) as info:
        expand_text(text)
    assert info.value.grammar == "addition"


def test_addition_error_position_refers_to_expanded_text() -> None:
    text = "\\newacronym{a}{A}{x\ny}\n\\addition[o]{\\gls{a}"
    with pytest.raises(GrammarError) as info:
        expand_text(text)
    assert info.value.source == "\n\\addition[o]{x\ny (A)"
    assert info.value.locate() == (2, 13)
