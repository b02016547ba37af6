"""Greedy word wrapping for fixed-width terminal output."""

from __future__ import annotations

import re

# Either a word with the whitespace before it, or a run of whitespace.
_SEGMENT = re.compile(r"(\s*\S+)|(\s+)")


def wrap_line(line: str, width: int) -> list[str]:
    """Reflow a single line into lines of at most ``width`` characters.

    Words are never split; a word longer than ``width`` gets a line of its
    own. Leading whitespace of the first line is preserved, trailing
    whitespace is dropped, and whitespace at each break is removed so that
    every later line starts with a non-whitespace character. A line without
    words wraps to ``[""]``.

    >>> wrap_line("the quick brown fox", 10)
    ['the quick', 'brown fox']
    >>> wrap_line("averylongwordthatoverflows", 5)
    ['averylongwordthatoverflows']
    """
    if width < 1:
        msg = f"width must be at least 1, got {width}"
        raise ValueError(msg)

    finished: list[str] = []
    current: list[str] = []
    length = 0
    for match in _SEGMENT.finditer(line.rstrip()):
        segment = match.group(0)
        if length == 0:
            current = [segment]
            length = len(segment)
        elif length + len(segment) <= width:
            current.append(segment)
            length += len(segment)
        else:
            finished.append("".join(current))
            segment = segment.lstrip()
            current = [segment]
            length = len(segment)

    if length == 0:
        return [""]
    finished.append("".join(current))
    return finished


__all__ = ["wrap_line"]
