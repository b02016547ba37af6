"""Shared utilities for docsnap."""

from __future__ import annotations

import re

# A name is either "/" itself or a run without "/"; neither part may start
# with a digit.
_FULL_SYMBOL_NAME = re.compile(r"^([^\d/].*)/(/|[^\d/][^/]*)$")


def split_symbol_name(full_name: str) -> tuple[str, str] | None:
    """Split a fully-qualified symbol name into namespace and name.

    Args:
        full_name: Canonical symbol name (e.g., "clojure.core/map")

    Returns:
        ``(namespace, name)`` tuple, or None if ``full_name`` has no namespace

    Examples:
        >>> split_symbol_name("clojure.core/map")
        ('clojure.core', 'map')
        >>> split_symbol_name("clojure.core//")
        ('clojure.core', '/')
        >>> split_symbol_name("map") is None
        True
    """
    match = _FULL_SYMBOL_NAME.match(full_name)
    if match is None:
        return None
    return match.group(1), match.group(2)


def plural(count: int, noun: str) -> str:
    """Return ``"<count> <noun>"`` with an ``s`` unless count is exactly 1."""
    return f"{count} {noun}{'' if count == 1 else 's'}"
