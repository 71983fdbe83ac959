"""Glossary macro expansion: acronym definitions, references, editorial additions."""

from glsexpand.addition import Addition, parse_additions, unwrap_additions
from glsexpand.dictionary import build_dictionary, dictionary_to_records, unused_names
from glsexpand.expander import (
    UndefinedReferenceError,
    expand_references,
    render_reference,
    upper_first,
)
from glsexpand.glossary import parse_glossary
from glsexpand.grammar import GrammarError, parse_group
from glsexpand.io_utils import InputReadError, read_input_text
from glsexpand.pipeline import ExpansionResult, expand_text
from glsexpand.types import (
    Definition,
    Dictionary,
    Document,
    Entry,
    GlossaryEntry,
    LiteralText,
    RefFlag,
    ReferenceMark,
    SourceSpan,
)

__all__ = [
    "Addition",
    "Definition",
    "Dictionary",
    "Document",
    "Entry",
    "ExpansionResult",
    "GlossaryEntry",
    "GrammarError",
    "InputReadError",
    "LiteralText",
    "RefFlag",
    "ReferenceMark",
    "SourceSpan",
    "UndefinedReferenceError",
    "build_dictionary",
    "dictionary_to_records",
    "expand_references",
    "expand_text",
    "parse_additions",
    "parse_glossary",
    "parse_group",
    "read_input_text",
    "render_reference",
    "unused_names",
    "unwrap_additions",
    "upper_first",
]
