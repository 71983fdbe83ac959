#!/usr/bin/env python3
"""Expand glossary macros and editorial additions in a text file.

Usage:
    python3 scripts/expand_glossary.py chapter.tex
    python3 scripts/expand_glossary.py chapter.tex --output chapter.expanded.tex \
      --dump-dictionary glossary.json --warn-unused

Writes the expanded text to stdout (or --output), diagnostics to stderr.
Exits 1 on unreadable input, parse failure, or an undefined reference.
"""

import argparse
import logging
import sys
from pathlib import Path

from glsexpand.addition import GRAMMAR_NAME as ADDITION_GRAMMAR
from glsexpand.dictionary import dictionary_to_records
from glsexpand.expander import UndefinedReferenceError
from glsexpand.grammar import GrammarError, line_and_column
from glsexpand.io_utils import InputReadError, read_input_text, save_json, write_text
from glsexpand.pipeline import expand_text

log = logging.getLogger("expand_glossary")


def parse_arguments(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Expand \\newacronym/\\gls macros and unwrap \\addition blocks."
    )
    parser.add_argument("input", type=Path, help="Path to the input text file")
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Write expanded text here instead of stdout",
    )
    parser.add_argument(
        "--dump-dictionary",
        type=Path,
        default=None,
        help="Write the acronym dictionary (with used flags) as JSON",
    )
    parser.add_argument(
        "--warn-unused",
        action="store_true",
        help="Warn about acronyms that are defined but never referenced",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Verbose logging",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = parse_arguments(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )

    try:
        text = read_input_text(args.input)
    except InputReadError as exc:
        log.error("error: %s", exc)
        sys.exit(1)
    log.debug("Read %d characters from %s", len(text), args.input)

    try:
        result = expand_text(text)
    except GrammarError as exc:
        line, column = exc.locate()
        where = " of the expanded text" if exc.grammar == ADDITION_GRAMMAR else ""
        log.error(
            "error: failed to parse the input (%s pass, line %d, column %d%s: %s)",
            exc.grammar, line, column, where, exc.reason,
        )
        sys.exit(1)
    except UndefinedReferenceError as exc:
        if exc.span is not None:
            line, column = line_and_column(text, exc.span.char_start)
            log.error("error: %s (line %d, column %d)", exc, line, column)
        else:
            log.error("error: %s", exc)
        sys.exit(1)

    if args.warn_unused:
        for name in result.unused_names():
            log.warning("Acronym '%s' is defined but never referenced", name)

    written: list[Path] = []
    try:
        if args.dump_dictionary is not None:
            save_json(dictionary_to_records(result.dictionary), args.dump_dictionary)
            written.append(args.dump_dictionary)
        if args.output is not None:
            write_text(result.text, args.output)
            written.append(args.output)
    except OSError as exc:
        # A failed run leaves no partial artifacts behind.
        for path in written:
            path.unlink(missing_ok=True)
        log.error("error: failed to write output: %s", exc)
        sys.exit(1)

    if args.dump_dictionary is not None:
        log.info("Wrote %d dictionary entries to %s", len(result.dictionary), args.dump_dictionary)
    if args.output is not None:
        log.info("Wrote expanded text to %s", args.output)
    else:
        sys.stdout.buffer.write(result.text.encode("utf-8"))
        sys.stdout.buffer.flush()


if __name__ == "__main__":
    main()
