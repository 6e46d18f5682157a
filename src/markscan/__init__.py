"""Markscan — markup-aware tokenizer and line reconstruction for code blocks."""

from __future__ import annotations

from functools import lru_cache

from markscan.dedent import dedent
from markscan.escape import escape, unescape
from markscan.lexer import scan
from markscan.lines import Fragment, LineRecord, split_lines
from markscan.tokens import Token, TokenType

__version__ = "0.1.0"

__all__ = [
    "Fragment",
    "LineRecord",
    "Token",
    "TokenType",
    "copy_text",
    "dedent",
    "escape",
    "highlight",
    "scan",
    "split_lines",
    "unescape",
]


@lru_cache(maxsize=256)
def highlight(source: str) -> tuple[LineRecord, ...]:
    """Dedent, tokenize and line-split source into escaped line records."""
    return tuple(split_lines(scan(dedent(source))))


def copy_text(source: str) -> str:
    """Return the clipboard text for source: dedented, never escaped."""
    return dedent(source)
