"""A very naive conversion of markdown into plain text."""

from __future__ import annotations

import re

# Whitespace and non-whitespace classes restricted to ASCII space characters.
_WS = r"[\t\n\f\r ]"
_NWS = r"[^\t\n\f\r ]"

_REPLACEMENTS: list[tuple[re.Pattern[str], str]] = [
    # Header underline
    (re.compile(r"\n={2,}"), "\n"),
    # Fenced code blocks
    (re.compile(r"~{3}.*\n"), ""),
    # Strikethrough
    (re.compile(r"~~"), ""),
    # Fenced code blocks
    (re.compile(r"`{3}.*\n"), ""),
    # HTML tags
    (re.compile(r"<[^>]*>"), ""),
    # Setext-style headers
    (re.compile(r"\A[=\-]{2,}" + _WS + r"*\Z"), ""),
    # Footnotes
    (re.compile(r"\[\^.+?\](: .*?\Z)?"), ""),
    (re.compile(_WS + r"{0,2}\[.*?\]: .*?\Z"), ""),
    # Images
    (re.compile(r"!\[(.*?)\][\[(].*?[\])]"), r"\1"),
    # Inline links
    (re.compile(r"\[(.*?)\][\[(].*?[\])]"), r"\1"),
    # Blockquotes
    (re.compile(r"\A" + _WS + r"{0,3}>" + _WS + r"?"), ""),
    # Reference-style links
    (
        re.compile(
            r"\A" + _WS + r"{1,2}\[(.*?)\]: (" + _NWS + r"+)( \".*?\")?" + _WS + r"*\Z"
        ),
        "",
    ),
    # Atx-style headers
    (
        re.compile(
            r"\A(\n)?" + _WS + r"*#{1,6}" + _WS + r"+"
            r"| *(\n)?" + _WS + r"*#* *(\n)?" + _WS + r"*\Z"
        ),
        r"\1\2\3",
    ),
    # Emphasis, twice to remove double emphasis
    (
        re.compile(r"([*_]{1,3})([^\t\n\f\r *_].*?[^\t\n\f\r *_]?)([*_]{1,3})"),
        r"\2",
    ),
    (
        re.compile(r"([*_]{1,3})([^\t\n\f\r *_].*?[^\t\n\f\r *_]?)([*_]{1,3})"),
        r"\2",
    ),
    # Code blocks
    (re.compile(r"(`{3,})(.*?)(`{3,})"), r"\2"),
    # Inline code
    (re.compile(r"`(.+?)`"), r"\1"),
    # Collapse runs of blank lines
    (re.compile(r"\n{2,}"), "\n\n"),
]


def clean(markdown: str) -> str:
    """Strip common markdown syntax from ``markdown``, leaving plain text."""
    for pattern, substitute in _REPLACEMENTS:
        markdown = pattern.sub(substitute, markdown)
    return markdown