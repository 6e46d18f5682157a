"""Display input for a code block: source text plus display flags."""

from __future__ import annotations

from dataclasses import dataclass

from markscan import copy_text, highlight
from markscan.lines import LineRecord

DEFAULT_LANGUAGE = "html"


@dataclass(frozen=True, slots=True)
class Snippet:
    """A code block as supplied by the caller.

    ``language`` is a display label only; it never changes tokenizing.
    """

    source: str
    language: str = DEFAULT_LANGUAGE
    line_numbers: bool = True

    @property
    def lines(self) -> tuple[LineRecord, ...]:
        return highlight(self.source)

    @property
    def copy_text(self) -> str:
        return copy_text(self.source)
