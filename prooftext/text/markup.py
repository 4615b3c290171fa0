"""Lightweight markup escaping and tag stripping.

Tag stripping is a regex pass, not a parser: `>` inside attribute values is
not supported.
"""

from __future__ import annotations

import re


# `&` must stay first so its replacement is not escaped again.
_XML_ESCAPES = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
)
_TAG_RE = re.compile(r"(?<!<)<[^<>]+>")


def escape_xml(text: str) -> str:
    """Escape `&`, `<`, `>` and `"` for XML text and attribute content."""

    for raw, escaped in _XML_ESCAPES:
        text = text.replace(raw, escaped)
    return text


def escape_html(text: str) -> str:
    """Escape text for HTML output, using the same table as XML."""

    return escape_xml(text)


def filter_xml(text: str) -> str:
    """Remove tag-like substrings such as `<b>` and `</em>` from `text`.

    A `<` directly after another `<` never opens a tag, so `"<<test>>"` is
    returned unchanged.
    """

    return _TAG_RE.sub("", text)
