"""HTML renderer — converts line records into a highlighted code block."""

from __future__ import annotations

from collections.abc import Sequence

from markscan.lines import Fragment, LineRecord
from markscan.snippet import Snippet
from markscan.tokens import TokenType

CSS_CLASSES = {
    TokenType.LINE_COMMENT: "cm",
    TokenType.BLOCK_COMMENT: "cm",
    TokenType.TAG: "tg",
    TokenType.STRING: "str",
    TokenType.PLAIN: "pl",
}


def render(snippet: Snippet) -> str:
    """Render a snippet to an HTML code block with optional line numbers."""
    language = _escape_attr(snippet.language)
    parts: list[str] = [f'<div class="code" data-language="{language}">\n']
    parts.append(f'<span class="lang-badge">{language}</span>\n')
    parts.append("<pre><code>")
    parts.append(render_lines(snippet.lines, line_numbers=snippet.line_numbers))
    parts.append("</code></pre>\n")
    parts.append("</div>\n")
    return "".join(parts)


def render_lines(lines: Sequence[LineRecord], line_numbers: bool = True) -> str:
    """Render line records as ``<span class="line">`` elements.

    Fragment text is already escaped; it is inserted verbatim. Empty lines
    get a single space so they keep their height.
    """
    parts: list[str] = []
    for record in lines:
        parts.append('<span class="line">')
        if line_numbers:
            parts.append(f'<span class="ln">{record.number}</span>')
        body = "".join(_render_fragment(f) for f in record.fragments)
        parts.append(f"<span>{body or ' '}</span>")
        parts.append("</span>")
    return "".join(parts)


# ---------------------------------------------------------------------------
# Fragment helpers
# ---------------------------------------------------------------------------


def _render_fragment(fragment: Fragment) -> str:
    if fragment.children:
        return "".join(_render_fragment(c) for c in fragment.children)
    if not fragment.text:
        return ""
    return f'<span class="{CSS_CLASSES[fragment.type]}">{fragment.text}</span>'


def _escape_attr(text: str) -> str:
    """Escape text for HTML attribute values."""
    result: list[str] = []
    for ch in text:
        if ch == "&":
            result.append("&amp;")
        elif ch == "<":
            result.append("&lt;")
        elif ch == ">":
            result.append("&gt;")
        elif ch == '"':
            result.append("&quot;")
        else:
            result.append(ch)
    return "".join(result)
