"""Conversion of lightly marked-up documentation bodies to plain text."""

from __future__ import annotations

# Applied in order. Tokens do not overlap, so the order only matters for
# readability.
_REPLACEMENTS: tuple[tuple[str, str], ...] = (
    ("<pre>", "\n"),
    ("</pre>", "\n"),
    ("<code>", ""),
    ("</code>", ""),
    ("<b>", ""),
    ("</b>", ""),
    ("<p>", ""),
    ("</p>", ""),
    ("&gt;", ">"),
    ("&lt;", "<"),
    ("&amp;", "&"),
    ("<br>", ""),
    ("<br/>", ""),
    ("<br />", ""),
    # Escaped CR LF pairs stored as text collapse to an escaped LF.
    ("\\r\\n", "\\n"),
)


def normalize_markup(text: str) -> str:
    """Strip the known markup tags from ``text`` and decode basic entities.

    >>> normalize_markup("a <b>bold</b> &amp; <code>x</code>")
    'a bold & x'
    """
    for token, replacement in _REPLACEMENTS:
        text = text.replace(token, replacement)
    return text


def trim_line_list(text: str) -> list[str]:
    """Split ``text`` into lines and drop blank lines at both ends.

    Blank lines between non-blank lines are kept.
    """
    lines = text.split("\n")
    start = 0
    while start < len(lines) and not lines[start].strip():
        start += 1
    end = len(lines)
    while end > start and not lines[end - 1].strip():
        end -= 1
    return lines[start:end]


__all__ = ["normalize_markup", "trim_line_list"]
