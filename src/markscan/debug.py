"""--debug token and line dump to stderr."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from typing import TextIO

from markscan.lines import Fragment, LineRecord
from markscan.tokens import Token


def dump_tokens(tokens: Iterable[Token], *, file: TextIO = sys.stderr) -> None:
    """Print one line per token: position, type and raw text."""
    file.write("Tokens\n")
    for tok in tokens:
        pos = f"{tok.span.start.line}:{tok.span.start.column}"
        flag = "" if tok.closed else " (unterminated)"
        file.write(f"  {pos:>7} {tok.type.name:<13} {tok.raw!r}{flag}\n")


def dump_lines(lines: Iterable[LineRecord], *, file: TextIO = sys.stderr) -> None:
    """Print each line record with its fragments indented beneath it."""
    file.write("Lines\n")
    for record in lines:
        file.write(f"  Line {record.number}\n")
        for fragment in record.fragments:
            _dump_fragment(fragment, 2, file)


def _indent(depth: int) -> str:
    return "  " * depth


def _dump_fragment(fragment: Fragment, depth: int, f: TextIO) -> None:
    f.write(f"{_indent(depth)}{fragment.type.name}({fragment.text!r})\n")
    for child in fragment.children:
        _dump_fragment(child, depth + 1, f)
