"""Grammar primitives shared by the glossary and addition passes.

Both passes are hand-written recursive-descent scanners over a plain
``str``. Every primitive takes the text plus a start offset and returns
the parsed value together with the offset just past it, so callers can
chain them without any cursor object.
"""

from __future__ import annotations

import bisect


class GrammarError(ValueError):
    """Raised when a grammar pass cannot consume the whole input."""

    def __init__(
        self, grammar: str, position: int, reason: str, *, source: str | None = None,
    ) -> None:
        super().__init__(f"{grammar} grammar: {reason} at offset {position}")
        self.grammar = grammar
        self.position = position
        self.reason = reason
        # Text the pass was scanning; for the addition pass this is the
        # expanded text, not the raw input.
        self.source = source

    def locate(self, text: str | None = None) -> tuple[int, int]:
        """Return 1-based (line, column) of the failure.

        Positions are offsets into the text the failing pass scanned, so
        *text* defaults to that text.
        """
        if text is None:
            text = self.source
        if text is None:
            raise ValueError("no source text to locate the error in")
        return line_and_column(text, self.position)


def compute_line_starts(text: str) -> list[int]:
    """Char offsets of every line start. Position 0 is always a line start."""
    starts = [0]
    for i, ch in enumerate(text):
        if ch == "\n":
            starts.append(i + 1)
    return starts


def line_and_column(text: str, position: int) -> tuple[int, int]:
    line_starts = compute_line_starts(text)
    idx = bisect.bisect_right(line_starts, position) - 1
    return idx + 1, position - line_starts[idx] + 1


def scan_command_name(text: str, pos: int) -> tuple[str, int]:
    """Read the ASCII letters following the backslash at *pos*.

    Returns the (possibly empty) command name and the offset after it.
    """
    end = pos + 1
    while end < len(text) and _is_ascii_letter(text[end]):
        end += 1
    return text[pos + 1:end], end


def _is_ascii_letter(ch: str) -> bool:
    return ("a" <= ch <= "z") or ("A" <= ch <= "Z")


def parse_group(text: str, pos: int, *, grammar: str) -> tuple[str, int]:
    """Parse one balanced ``{...}`` group starting at *pos*.

    The content is every character up to the matching close brace. Nested
    groups are kept verbatim, braces included; only the outer pair is
    stripped. Content may be empty.

    Tracks nesting with a depth counter rather than recursion, which
    accepts exactly the same language without a recursion limit.
    """
    if pos >= len(text) or text[pos] != "{":
        raise GrammarError(grammar, pos, "expected '{'", source=text)
    depth = 0
    for i in range(pos, len(text)):
        ch = text[i]
        if ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
            if depth == 0:
                return text[pos + 1:i], i + 1
    raise GrammarError(grammar, pos, "unbalanced braces in group", source=text)


def parse_groups(
    text: str, pos: int, count: int, *, grammar: str,
) -> tuple[list[str], int]:
    """Parse exactly *count* adjacent groups (no whitespace between them)."""
    contents: list[str] = []
    for _ in range(count):
        content, pos = parse_group(text, pos, grammar=grammar)
        contents.append(content)
    return contents, pos


def parse_options(text: str, pos: int, *, grammar: str) -> tuple[str, int]:
    """Parse a ``[...]`` options bracket starting at *pos*.

    Options are opaque: any characters other than ``]``.
    """
    if pos >= len(text) or text[pos] != "[":
        raise GrammarError(grammar, pos, "expected '['", source=text)
    close = text.find("]", pos + 1)
    if close < 0:
        raise GrammarError(grammar, pos, "unterminated options bracket", source=text)
    return text[pos + 1:close], close + 1
