"""Substring and regular-expression search over symbol names."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from docindex.document_index import DocumentIndex
    from snapshot.models import SymbolKey


@dataclass(frozen=True)
class LiteralQuery:
    """Matches names containing ``text`` as a substring."""

    text: str

    def matches(self, name: str) -> bool:
        return self.text in name


@dataclass(frozen=True)
class PatternQuery:
    """Matches names in which ``pattern`` finds a match anywhere."""

    pattern: re.Pattern[str]

    def matches(self, name: str) -> bool:
        return self.pattern.search(name) is not None


Query = LiteralQuery | PatternQuery


def make_query(query: str | re.Pattern[str] | Query, *, regex: bool = False) -> Query:
    """Resolve user input into a tagged query.

    Compiled patterns become a PatternQuery. Strings are literal unless
    ``regex`` is set, in which case they are compiled.

    Raises:
        re.error: If ``regex`` is set and the string is not a valid pattern.
    """
    if isinstance(query, (LiteralQuery, PatternQuery)):
        return query
    if isinstance(query, re.Pattern):
        return PatternQuery(query)
    if regex:
        return PatternQuery(re.compile(query))
    return LiteralQuery(query)


def search(
    index: DocumentIndex,
    query: str | re.Pattern[str] | Query,
    namespace: str | None = None,
) -> list[SymbolKey]:
    """Return the keys of records whose bare name matches ``query``.

    ``namespace`` restricts the search to one namespace by exact equality.
    The order of the result is not significant.
    """
    resolved = make_query(query)
    return [
        record.key
        for _, record in index.all_records()
        if (namespace is None or record.ns == namespace)
        and resolved.matches(record.name)
    ]


__all__ = ["LiteralQuery", "PatternQuery", "Query", "make_query", "search"]
