"""Glossary grammar: split raw text into literals, definitions and references.

Recognized commands:

    \\newacronym{name}{short}{long}   -> Definition
    \\gls{name}                       -> ReferenceMark()
    \\Gls{name}                       -> ReferenceMark(UPPERCASE)
    \\glspl{name}                     -> ReferenceMark(PLURAL)
    \\Glspl{name}                     -> ReferenceMark(UPPERCASE | PLURAL)
    \\Glsfirst{name}                  -> ReferenceMark(UPPERCASE | FIRST)

Any other ``\\gls<letters>`` command word is dropped without producing an
entry; whatever follows it stays literal text.
"""

from __future__ import annotations

import re

from glsexpand.grammar import GrammarError, parse_group, parse_groups, scan_command_name
from glsexpand.types import (
    Definition,
    Document,
    Entry,
    LiteralText,
    RefFlag,
    ReferenceMark,
    SourceSpan,
)


GRAMMAR_NAME = "glossary"

DEFINITION_COMMAND = "newacronym"

REFERENCE_COMMANDS: dict[str, RefFlag] = {
    "gls": RefFlag.NONE,
    "Gls": RefFlag.UPPERCASE,
    "glspl": RefFlag.PLURAL,
    "Glspl": RefFlag.UPPERCASE | RefFlag.PLURAL,
    "Glsfirst": RefFlag.UPPERCASE | RefFlag.FIRST,
}

# Prefixes of every recognized keyword; literal runs stop at any of them.
_KEYWORD_RE = re.compile(r"\\(?:newacronym|gls|Gls)")

_DISCARD_PREFIX = "gls"


def parse_glossary(text: str) -> Document:
    """Tokenize *text* into a Document.

    Raises GrammarError if a keyword-prefixed command is malformed or a
    group is unbalanced. No partial Document is returned.
    """
    entries: list[Entry] = []
    pos = 0
    while pos < len(text):
        match = _KEYWORD_RE.search(text, pos)
        if match is None:
            entries.append(LiteralText(text[pos:], SourceSpan(pos, len(text))))
            break
        if match.start() > pos:
            entries.append(
                LiteralText(text[pos:match.start()], SourceSpan(pos, match.start())),
            )
        entry, pos = _parse_command(text, match.start())
        if entry is not None:
            entries.append(entry)
    return tuple(entries)


def _parse_command(text: str, start: int) -> tuple[Entry | None, int]:
    name, pos = scan_command_name(text, start)

    if name == DEFINITION_COMMAND:
        (key, short_form, long_form), end = parse_groups(
            text, pos, 3, grammar=GRAMMAR_NAME,
        )
        return Definition(key, short_form, long_form, SourceSpan(start, end)), end

    flags = REFERENCE_COMMANDS.get(name)
    if flags is not None:
        key, end = parse_group(text, pos, grammar=GRAMMAR_NAME)
        return ReferenceMark(key, flags, SourceSpan(start, end)), end

    if name.startswith(_DISCARD_PREFIX) and len(name) > len(_DISCARD_PREFIX):
        return None, pos

    raise GrammarError(
        GRAMMAR_NAME, start, f"unrecognized command '\\{name}'", source=text,
    )
