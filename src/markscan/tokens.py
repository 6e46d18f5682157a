"""Token types and source position data structures."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class TokenType(Enum):
    LINE_COMMENT = auto()  # // to end of line
    BLOCK_COMMENT = auto()  # /* ... */ or <!-- ... -->
    TAG = auto()  # <name ...>, </name>, <!doctype ...>
    STRING = auto()  # "..." or '...'
    PLAIN = auto()  # any other single character
    NEWLINE = auto()  # \n


@dataclass(frozen=True, slots=True)
class Position:
    """Source position, 1-based line and column, 0-based character offset."""

    line: int
    column: int
    offset: int


@dataclass(frozen=True, slots=True)
class Span:
    """Source range from start to end position."""

    start: Position
    end: Position


@dataclass(frozen=True, slots=True)
class Token:
    """A classified span of source text.

    ``raw`` is the exact source substring. ``closed`` is False when a comment,
    string or tag ran to end of input without its terminator. For TAG tokens,
    ``strings`` lists the quoted-string sub-spans as (start, end) offsets
    relative to ``raw``.
    """

    type: TokenType
    raw: str
    span: Span
    closed: bool = True
    strings: tuple[tuple[int, int], ...] = ()
