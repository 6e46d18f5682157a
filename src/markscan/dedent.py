"""Common-indentation removal for code blocks."""

from __future__ import annotations


def dedent(text: str) -> str:
    """Remove the indentation shared by every non-blank line of *text*.

    Algorithm:
    1. Split into lines on ``\\n``.
    2. Discard leading and trailing blank lines.
    3. Take the shortest run of leading spaces/tabs among non-blank lines.
    4. Slice that many characters off every line; blank lines shorter than
       the indent simply become empty.
    5. Rejoin with newline.

    Entirely blank input yields ``""``. The result is a fixed point:
    ``dedent(dedent(x)) == dedent(x)``.
    """
    if not isinstance(text, str):
        raise TypeError(f"dedent() expects str, got {type(text).__name__}")
    lines = text.split("\n")

    start = 0
    while start < len(lines) and _is_blank(lines[start]):
        start += 1
    end = len(lines)
    while end > start and _is_blank(lines[end - 1]):
        end -= 1

    lines = lines[start:end]
    if not lines:
        return ""

    indent = min(_indent_width(line) for line in lines if not _is_blank(line))
    if indent:
        lines = [line[indent:] for line in lines]
    return "\n".join(lines)


def _is_blank(line: str) -> bool:
    """Return True if line is empty or whitespace only."""
    return not line.strip()


def _indent_width(line: str) -> int:
    """Length of the leading run of spaces and tabs."""
    return len(line) - len(line.lstrip(" \t"))
