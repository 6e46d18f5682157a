"""Shared test fixtures and helpers."""

from __future__ import annotations

import pytest

from markscan.escape import unescape
from markscan.lexer import scan
from markscan.lines import Fragment, LineRecord, split_lines
from markscan.tokens import Token, TokenType


@pytest.fixture
def lex():
    """Return a helper that tokenizes source and returns tokens."""

    def _lex(source: str) -> list[Token]:
        return scan(source)

    return _lex


@pytest.fixture
def lines():
    """Return a helper that tokenizes and line-splits source (no dedent)."""

    def _lines(source: str) -> list[LineRecord]:
        return split_lines(scan(source))

    return _lines


def assert_types(tokens: list[Token], expected: list[TokenType]) -> None:
    """Assert that the token types match the expected list."""
    actual = [t.type for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"


def fragment_types(record: LineRecord) -> list[TokenType]:
    """Return the fragment types of a line, in order."""
    return [f.type for f in record.fragments]


def significant(record: LineRecord) -> list[Fragment]:
    """Return the fragments of a line that are not whitespace-only plain text."""
    return [
        f for f in record.fragments if not (f.type == TokenType.PLAIN and not f.text.strip())
    ]


def rejoin(records: list[LineRecord] | tuple[LineRecord, ...]) -> str:
    """Rebuild raw text from line records: unescape fragments, join lines with \\n."""
    return "\n".join("".join(unescape(f.text) for f in r.fragments) for r in records)
