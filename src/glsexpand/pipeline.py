"""Four-pass glossary expansion: tokenize, build, expand, unwrap."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from glsexpand.addition import Addition, join_segments, parse_additions
from glsexpand.dictionary import build_dictionary, unused_names
from glsexpand.expander import expand_references
from glsexpand.glossary import parse_glossary
from glsexpand.types import Definition, Dictionary, Document, ReferenceMark

log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ExpansionResult:
    """Final text plus the intermediate artifacts of one run."""

    text: str
    document: Document
    dictionary: Dictionary
    additions: tuple[Addition, ...]

    def unused_names(self) -> list[str]:
        return unused_names(self.dictionary)


def expand_text(text: str) -> ExpansionResult:
    """Run the whole pipeline on *text*.

    The dictionary is built from the complete Document before any
    reference is resolved, so references may precede their definition.
    Addition blocks are unwrapped on the expanded text.

    Raises:
        GrammarError: either grammar pass failed.
        UndefinedReferenceError: a reference names an undefined acronym.
    """
    document = parse_glossary(text)
    log.debug(
        "Parsed %d entries (%d definitions, %d references)",
        len(document),
        sum(1 for e in document if isinstance(e, Definition)),
        sum(1 for e in document if isinstance(e, ReferenceMark)),
    )
    dictionary = build_dictionary(document)
    expanded = expand_references(document, dictionary)
    segments = parse_additions(expanded)
    additions = tuple(s for s in segments if isinstance(s, Addition))
    log.debug("Unwrapped %d addition blocks", len(additions))
    return ExpansionResult(
        text=join_segments(segments),
        document=document,
        dictionary=dictionary,
        additions=additions,
    )
