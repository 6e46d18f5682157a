"""Markscan lexer — converts source text into a flat, lossless token stream."""

from __future__ import annotations

from markscan.logger import get_logger
from markscan.tokens import Position, Span, Token, TokenType

logger = get_logger(__name__)

LINE_COMMENT = "//"

# (start marker, end marker, offset the end-marker search starts at), tried in
# order. "<!-->" is a complete empty markup comment; "/*/" is not closed.
BLOCK_COMMENTS = (("/*", "*/", 2), ("<!--", "-->", 2))

QUOTES = "\"'"


class Lexer:
    """Tokenize source text into a stream of Token objects.

    One forward cursor, no backtracking. At each position the rules are
    tried in fixed priority: line comment, block comment, tag, quoted
    string, newline, plain character. Malformed input never raises;
    unterminated constructs run to end of input with ``closed=False``.
    """

    def __init__(self, source: str) -> None:
        if not isinstance(source, str):
            raise TypeError(f"Lexer expects str source, got {type(source).__name__}")
        self._source = source
        self._pos = 0
        self._line = 1
        self._col = 1
        self._tokens: list[Token] = []

    def tokenize(self) -> list[Token]:
        """Tokenize the full source and return the token list."""
        while self._pos < len(self._source):
            self._lex_next()

        unclosed = sum(1 for t in self._tokens if not t.closed)
        logger.debug(
            "scanned %d chars into %d tokens (%d unterminated)",
            len(self._source),
            len(self._tokens),
            unclosed,
        )
        return self._tokens

    # ------------------------------------------------------------------
    # Position helpers
    # ------------------------------------------------------------------

    def _current_pos(self) -> Position:
        return Position(self._line, self._col, self._pos)

    def _peek(self, offset: int = 0) -> str:
        idx = self._pos + offset
        if idx < len(self._source):
            return self._source[idx]
        return ""

    def _at(self, marker: str) -> bool:
        return self._source.startswith(marker, self._pos)

    def _at_end(self) -> bool:
        return self._pos >= len(self._source)

    def _advance(self) -> str:
        ch = self._source[self._pos]
        self._pos += 1
        if ch == "\n":
            self._line += 1
            self._col = 1
        else:
            self._col += 1
        return ch

    def _advance_to(self, offset: int) -> None:
        while self._pos < offset:
            self._advance()

    def _emit(
        self,
        tt: TokenType,
        start: Position,
        closed: bool = True,
        strings: tuple[tuple[int, int], ...] = (),
    ) -> Token:
        end = self._current_pos()
        raw = self._source[start.offset : end.offset]
        tok = Token(tt, raw, Span(start, end), closed, strings)
        if not closed:
            logger.debug(
                "unterminated %s at %d:%d", tt.name.lower(), start.line, start.column
            )
        self._tokens.append(tok)
        return tok

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def _lex_next(self) -> None:
        ch = self._peek()

        if self._at(LINE_COMMENT):
            self._lex_line_comment()
            return

        for open_marker, close_marker, search_from in BLOCK_COMMENTS:
            if self._at(open_marker):
                self._lex_block_comment(close_marker, search_from)
                return

        if ch == "<" and _opens_tag(self._peek(1)):
            self._lex_tag()
            return

        if ch in QUOTES:
            self._lex_string()
            return

        start = self._current_pos()
        self._advance()
        if ch == "\n":
            self._emit(TokenType.NEWLINE, start)
        else:
            self._emit(TokenType.PLAIN, start)

    # ------------------------------------------------------------------
    # Comments
    # ------------------------------------------------------------------

    def _lex_line_comment(self) -> None:
        start = self._current_pos()
        end = self._source.find("\n", self._pos)
        if end == -1:
            end = len(self._source)
        self._advance_to(end)
        self._emit(TokenType.LINE_COMMENT, start)

    def _lex_block_comment(self, close_marker: str, search_from: int) -> None:
        start = self._current_pos()
        end = self._source.find(close_marker, self._pos + search_from)
        if end == -1:
            self._advance_to(len(self._source))
            self._emit(TokenType.BLOCK_COMMENT, start, closed=False)
            return
        self._advance_to(end + len(close_marker))
        self._emit(TokenType.BLOCK_COMMENT, start)

    # ------------------------------------------------------------------
    # Quoted strings
    # ------------------------------------------------------------------

    def _skip_string(self) -> bool:
        """Consume a quoted string at the cursor. Return False if unterminated."""
        quote = self._advance()
        while not self._at_end():
            ch = self._advance()
            if ch == "\\":
                if self._at_end():
                    break
                self._advance()
            elif ch == quote:
                return True
        return False

    def _lex_string(self) -> None:
        start = self._current_pos()
        closed = self._skip_string()
        self._emit(TokenType.STRING, start, closed=closed)

    # ------------------------------------------------------------------
    # Tags
    # ------------------------------------------------------------------

    def _lex_tag(self) -> None:
        """Scan to the closing ``>``, treating quoted values as opaque.

        The search is not limited to the current line. Each quoted
        sub-span is recorded so line splitting can colour it as a string.
        """
        start = self._current_pos()
        strings: list[tuple[int, int]] = []
        self._advance()  # consume <

        while not self._at_end():
            ch = self._peek()
            if ch == ">":
                self._advance()
                self._emit(TokenType.TAG, start, strings=tuple(strings))
                return
            if ch in QUOTES:
                s = self._pos - start.offset
                self._skip_string()
                strings.append((s, self._pos - start.offset))
                continue
            self._advance()

        self._emit(TokenType.TAG, start, closed=False, strings=tuple(strings))


def _opens_tag(ch: str) -> bool:
    """Return True if ch, following ``<``, starts a tag."""
    return ch in ("/", "!") or (ch.isascii() and ch.isalpha())


def scan(source: str) -> list[Token]:
    """Convenience function: tokenize source text and return token list."""
    return Lexer(source).tokenize()
