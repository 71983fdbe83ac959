"""I/O utilities for input text, expanded output, and JSON dumps.

JSON goes through orjson; text is read and written as UTF-8.
"""
from __future__ import annotations

from pathlib import Path
from typing import Any

import orjson


class InputReadError(OSError):
    """Raised when the input document cannot be opened or decoded."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f'failed to open input "{path}": {reason}')
        self.path = path
        self.reason = reason


def read_input_text(path: Path) -> str:
    """Read the whole input document into memory."""
    try:
        raw = path.read_bytes()
    except OSError as exc:
        raise InputReadError(path, exc.strerror or str(exc)) from exc
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise InputReadError(path, "not valid UTF-8 text") from exc


def write_text(text: str, path: Path) -> None:
    """Write expanded text verbatim (no newline translation)."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(text.encode("utf-8"))


def dumps_json(obj: Any, *, pretty: bool = True) -> bytes:
    """Serialize *obj* to JSON bytes with sorted keys."""
    opts = orjson.OPT_INDENT_2 | orjson.OPT_SORT_KEYS if pretty else orjson.OPT_SORT_KEYS
    return orjson.dumps(obj, option=opts)


def save_json(obj: Any, path: Path, *, pretty: bool = True) -> None:
    """Save an object as JSON."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(dumps_json(obj, pretty=pretty) + b"\n")
