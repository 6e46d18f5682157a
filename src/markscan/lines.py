"""Line splitter — folds a token stream into numbered, escaped line records."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from markscan.escape import escape
from markscan.tokens import Token, TokenType


@dataclass(frozen=True, slots=True)
class Fragment:
    """One physical line's worth of a single token, escaped.

    TAG fragments carry ``children``: the tag and quoted-string pieces of
    that line in order, whose texts concatenate to ``text``.
    """

    type: TokenType
    text: str
    children: tuple[Fragment, ...] = ()


@dataclass(frozen=True, slots=True)
class LineRecord:
    """A 1-based line number and the fragments on that line."""

    number: int
    fragments: tuple[Fragment, ...]


class LineSplitter:
    """Split tokens at embedded newlines, reopening the token's type on
    every following line so multi-line comments, strings and tags keep
    their classification."""

    def __init__(self) -> None:
        self._lines: list[LineRecord] = []
        self._current: list[Fragment] = []

    def split(self, tokens: Iterable[Token]) -> list[LineRecord]:
        for tok in tokens:
            if tok.type == TokenType.NEWLINE:
                self._close_line()
            elif tok.type == TokenType.TAG:
                self._add_tag(tok)
            else:
                for i, part in enumerate(tok.raw.split("\n")):
                    if i:
                        self._close_line()
                    self._current.append(Fragment(tok.type, escape(part)))

        self._close_line()
        return self._lines

    def _close_line(self) -> None:
        self._lines.append(LineRecord(len(self._lines) + 1, tuple(self._current)))
        self._current = []

    def _add_tag(self, tok: Token) -> None:
        per_line: list[list[Fragment]] = [[]]
        for seg_type, seg_raw in _tag_segments(tok):
            for i, part in enumerate(seg_raw.split("\n")):
                if i:
                    per_line.append([])
                if part:
                    per_line[-1].append(Fragment(seg_type, escape(part)))

        for i, children in enumerate(per_line):
            if i:
                self._close_line()
            text = "".join(c.text for c in children)
            self._current.append(Fragment(TokenType.TAG, text, tuple(children)))


def _tag_segments(tok: Token) -> Iterator[tuple[TokenType, str]]:
    """Yield (type, raw) pieces of a tag, alternating markup and strings."""
    raw = tok.raw
    pos = 0
    for start, end in tok.strings:
        if start > pos:
            yield TokenType.TAG, raw[pos:start]
        yield TokenType.STRING, raw[start:end]
        pos = end
    if pos < len(raw):
        yield TokenType.TAG, raw[pos:]


def split_lines(tokens: Iterable[Token]) -> list[LineRecord]:
    """Convenience function: fold tokens into line records."""
    return LineSplitter().split(tokens)
