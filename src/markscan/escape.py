"""Markup escaping for fragment text."""

from __future__ import annotations


def escape(text: str) -> str:
    """Escape ``&``, ``<`` and ``>`` for HTML body content.

    Quotes are left alone: fragment text is only ever placed between tags,
    never inside attribute values.
    """
    result: list[str] = []
    for ch in text:
        if ch == "&":
            result.append("&amp;")
        elif ch == "<":
            result.append("&lt;")
        elif ch == ">":
            result.append("&gt;")
        else:
            result.append(ch)
    return "".join(result)


def unescape(text: str) -> str:
    """Invert escape(). ``&amp;`` is resolved last so ``&amp;lt;`` stays ``&lt;``."""
    return text.replace("&lt;", "<").replace("&gt;", ">").replace("&amp;", "&")
