"""Build the name -> definition table from a parsed Document."""

from __future__ import annotations

import logging

from glsexpand.types import (
    Definition,
    Dictionary,
    Document,
    GlossaryEntry,
    LiteralText,
    ReferenceMark,
)

log = logging.getLogger(__name__)


def build_dictionary(document: Document) -> Dictionary:
    """Collect every Definition, textually-last one winning per name.

    Entries start unused. An empty long form is logged as a warning and
    kept as-is.
    """
    dictionary: Dictionary = {}
    for entry in document:
        if isinstance(entry, Definition):
            if not entry.long_form:
                log.warning("Empty description for acronym '%s'", entry.name)
            if entry.name in dictionary:
                log.debug("Acronym '%s' redefined; keeping the later definition", entry.name)
            dictionary[entry.name] = GlossaryEntry(entry)
        elif isinstance(entry, (LiteralText, ReferenceMark)):
            continue
        else:
            raise TypeError(f"Unexpected document entry: {entry!r}")
    return dictionary


def unused_names(dictionary: Dictionary) -> list[str]:
    """Names of definitions never referenced, sorted."""
    return sorted(name for name, slot in dictionary.items() if not slot.used)


def dictionary_to_records(dictionary: Dictionary) -> list[dict[str, object]]:
    """JSON-friendly rows, one per name, sorted by name."""
    return [
        {
            "name": name,
            "short_form": slot.definition.short_form,
            "long_form": slot.definition.long_form,
            "used": slot.used,
        }
        for name, slot in sorted(dictionary.items())
    ]
