"""Resolve glossary references against a fully built dictionary.

The first reference to a name renders ``long (short)``; later ones render
``short``. Plural and uppercase modifiers select among four variants of
each. A FIRST-flagged reference always renders the first-use form, but
still marks the entry as used.
"""

from __future__ import annotations

from glsexpand.types import (
    FORM_MASK,
    Definition,
    Dictionary,
    Document,
    LiteralText,
    RefFlag,
    ReferenceMark,
    SourceSpan,
)


PLURAL_SUFFIX = "s"


class UndefinedReferenceError(LookupError):
    """Raised when a reference names an acronym that was never defined."""

    def __init__(self, name: str, span: SourceSpan | None = None) -> None:
        super().__init__(f"missing definition for {name}")
        self.name = name
        self.span = span


def upper_first(value: str) -> str:
    """Uppercase the first character if it is an ASCII lowercase letter."""
    if value and "a" <= value[0] <= "z":
        return chr(ord(value[0]) - 32) + value[1:]
    return value


def render_reference(definition: Definition, flags: RefFlag, *, used: bool) -> str:
    """Render one reference.

    Args:
        definition: The winning definition for the referenced name.
        flags: Modifiers of the reference.
        used: Whether the name was referenced before.

    Returns:
        Subsequent-use form when *used* and FIRST is not set, otherwise
        the first-use form.
    """
    subsequent = used and RefFlag.FIRST not in flags
    form = flags & FORM_MASK
    suffix = PLURAL_SUFFIX if RefFlag.PLURAL in form else ""
    long_form = definition.long_form
    short_form = definition.short_form
    if RefFlag.UPPERCASE in form:
        long_form = upper_first(long_form)
        if subsequent:
            short_form = upper_first(short_form)
    if subsequent:
        return short_form + suffix
    return f"{long_form}{suffix} ({short_form}{suffix})"


def expand_references(document: Document, dictionary: Dictionary) -> str:
    """Fold the Document into text, marking each referenced entry used.

    Raises UndefinedReferenceError on the first reference with no
    definition anywhere in the Document.
    """
    parts: list[str] = []
    for entry in document:
        if isinstance(entry, LiteralText):
            parts.append(entry.text)
        elif isinstance(entry, Definition):
            continue
        elif isinstance(entry, ReferenceMark):
            slot = dictionary.get(entry.name)
            if slot is None:
                raise UndefinedReferenceError(entry.name, entry.span)
            parts.append(render_reference(slot.definition, entry.flags, used=slot.used))
            slot.used = True
        else:
            raise TypeError(f"Unexpected document entry: {entry!r}")
    return "".join(parts)
