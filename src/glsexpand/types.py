"""Core types for glossary tokenizing and expansion."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias
from enum import Flag


class RefFlag(Flag):
    """Modifiers carried by a glossary reference."""

    NONE = 0
    PLURAL = 1
    UPPERCASE = 2
    FIRST = 4


# Only these two bits select the rendered form; FIRST only affects used-state.
FORM_MASK = RefFlag.PLURAL | RefFlag.UPPERCASE


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Absolute source span in the parsed text."""

    char_start: int
    char_end: int

    def __post_init__(self) -> None:
        if self.char_start < 0:
            raise ValueError(f"char_start must be >= 0, got {self.char_start}")
        if self.char_end < self.char_start:
            raise ValueError(
                f"char_end must be >= char_start, got {self.char_end} < {self.char_start}",
            )


@dataclass(frozen=True, slots=True)
class LiteralText:
    """Run of source text copied verbatim."""

    text: str
    span: SourceSpan | None = None


@dataclass(frozen=True, slots=True)
class Definition:
    """Abbreviation introduced by ``\\newacronym{name}{short}{long}``."""

    name: str
    short_form: str
    long_form: str
    span: SourceSpan | None = None


@dataclass(frozen=True, slots=True)
class ReferenceMark:
    """Request to substitute a defined abbreviation."""

    name: str
    flags: RefFlag = RefFlag.NONE
    span: SourceSpan | None = None


Entry: TypeAlias = LiteralText | Definition | ReferenceMark
Document: TypeAlias = tuple[Entry, ...]


@dataclass(slots=True)
class GlossaryEntry:
    """Dictionary slot: the winning definition plus its used-state."""

    definition: Definition
    used: bool = False


Dictionary: TypeAlias = dict[str, GlossaryEntry]
