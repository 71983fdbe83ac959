"""Addition grammar: unwrap ``\\addition[options]{content}`` blocks.

Runs on already-expanded text. Each block is replaced by its content with
one level of braces removed; the options bracket is dropped unread.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TypeAlias

from glsexpand.grammar import GrammarError, parse_group, parse_options, scan_command_name
from glsexpand.types import SourceSpan


GRAMMAR_NAME = "addition"

ADDITION_COMMAND = "addition"

_KEYWORD_RE = re.compile(r"\\addition")


@dataclass(frozen=True, slots=True)
class Addition:
    """One editorial addition block."""

    options: str | None
    content: str
    span: SourceSpan


Segment: TypeAlias = str | Addition


def parse_additions(text: str) -> tuple[Segment, ...]:
    """Split *text* into literal strings and Addition blocks.

    Only the exact command word ``\\addition`` opens a block; longer
    words such as ``\\additional`` stay literal. The options bracket is
    optional.
    """
    segments: list[Segment] = []
    pos = 0
    literal_start = 0
    while True:
        match = _KEYWORD_RE.search(text, pos)
        if match is None:
            break
        start = match.start()
        name, after = scan_command_name(text, start)
        if name != ADDITION_COMMAND:
            pos = after
            continue
        if start > literal_start:
            segments.append(text[literal_start:start])
        block, pos = _parse_block(text, start, after)
        segments.append(block)
        literal_start = pos
    if literal_start < len(text):
        segments.append(text[literal_start:])
    return tuple(segments)


def _parse_block(text: str, start: int, pos: int) -> tuple[Addition, int]:
    options: str | None = None
    if pos < len(text) and text[pos] == "[":
        options, pos = parse_options(text, pos, grammar=GRAMMAR_NAME)
    elif pos >= len(text) or text[pos] != "{":
        raise GrammarError(
            GRAMMAR_NAME, pos, "expected '[' or '{' after '\\addition'", source=text,
        )
    content, end = parse_group(text, pos, grammar=GRAMMAR_NAME)
    return Addition(options, content, SourceSpan(start, end)), end


def join_segments(segments: tuple[Segment, ...]) -> str:
    return "".join(
        segment.content if isinstance(segment, Addition) else segment
        for segment in segments
    )


def unwrap_additions(text: str) -> str:
    """Replace every addition block with its content."""
    return join_segments(parse_additions(text))
