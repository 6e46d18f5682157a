"""Diagnostics for degraded input, with formatted source context.

Scanning never fails; a comment, string or tag that runs to end of input is
still tokenized. These helpers report such tokens so tools can warn about them.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from markscan.tokens import Span, Token, TokenType

_DESCRIPTIONS = {
    TokenType.BLOCK_COMMENT: "unterminated block comment",
    TokenType.STRING: "unterminated string",
    TokenType.TAG: "unterminated tag (no closing '>')",
}


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """A warning about a token, with its span in the scanned source."""

    message: str
    span: Span

    def format(self, source: str, filename: str = "input") -> str:
        """Render the warning with the offending line and a caret underline.

        Lines are counted on ``\\n`` only, like the lexer; a stray ``\\r`` is
        part of the line it sits on.
        """
        start, end = self.span.start, self.span.end
        lines = source.split("\n")
        text = lines[start.line - 1] if start.line <= len(lines) else ""

        # A span ending on a later line is underlined to the end of this one
        last_col = end.column if end.line == start.line else len(text) + 1
        carets = "^" * max(1, last_col - start.column)

        number = str(start.line)
        margin = " " * len(number)
        return "\n".join(
            [
                f"warning: {self.message}",
                f"{margin} --> {filename}:{start.line}:{start.column}",
                f"{margin} |",
                f"{number} | {text}",
                f"{margin} | {' ' * (start.column - 1)}{carets}",
            ]
        )


def check(tokens: Iterable[Token]) -> list[Diagnostic]:
    """Return one diagnostic per unterminated token, in source order."""
    return [Diagnostic(_DESCRIPTIONS[t.type], t.span) for t in tokens if not t.closed]
