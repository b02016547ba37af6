"""Symbol search."""

from search.engine import LiteralQuery, PatternQuery, Query, make_query, search

__all__ = ["LiteralQuery", "PatternQuery", "Query", "make_query", "search"]
