"""Query surface over a DocumentIndex.

``DocsService`` bundles the index with the search engine and the report
generators so callers hold one object instead of a process-wide mode.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from docindex.document_index import DocumentIndex
from render import reports
from render.reports import DEFAULT_SCREEN_WIDTH
from render.stats import snapshot_stats_report
from search.engine import search

if TYPE_CHECKING:
    import re
    from pathlib import Path

    from search.engine import Query
    from snapshot.codec import SnapshotSource
    from snapshot.models import Comment, SeeAlso, SymbolKey


class DocsService:
    def __init__(
        self,
        index: DocumentIndex | None = None,
        *,
        screen_width: int = DEFAULT_SCREEN_WIDTH,
    ) -> None:
        self.index = index if index is not None else DocumentIndex()
        self.screen_width = screen_width

    @classmethod
    def from_file(
        cls, path: str | Path, *, screen_width: int = DEFAULT_SCREEN_WIDTH
    ) -> DocsService:
        service = cls(screen_width=screen_width)
        service.load_snapshot(path)
        return service

    def load_snapshot(self, source: SnapshotSource) -> tuple[int, str | None]:
        """Load a snapshot file; returns ``(record_count, snapshot_time)``."""
        meta = self.index.load(source)
        return meta.record_count, meta.snapshot_time

    def search(
        self, query: str | re.Pattern[str] | Query, namespace: str | None = None
    ) -> list[SymbolKey]:
        return sorted(set(search(self.index, query, namespace)), key=str)

    def get_examples(self, namespace: str, name: str) -> dict[str, object]:
        return reports.get_examples(self.index, namespace, name)

    def get_comments(self, namespace: str, name: str) -> list[Comment]:
        return reports.get_comments(self.index, namespace, name)

    def get_see_also(self, namespace: str, name: str) -> list[SeeAlso]:
        return reports.get_see_also(self.index, namespace, name)

    def mode_report(self) -> str:
        return reports.mode_report(self.index)

    def search_report(
        self, query: str | re.Pattern[str] | Query, namespace: str | None = None
    ) -> str:
        return reports.search_report(self.index, query, namespace)

    def examples_report(self, namespace: str, name: str, *, verbose: bool = False) -> str:
        return reports.examples_report(self.index, namespace, name, verbose=verbose)

    def comments_report(self, namespace: str, name: str, *, verbose: bool = False) -> str:
        return reports.comments_report(
            self.index, namespace, name, verbose=verbose, width=self.screen_width
        )

    def see_also_report(self, namespace: str, name: str) -> str:
        return reports.see_also_report(self.index, namespace, name)

    def cdoc_report(self, namespace: str, name: str, *, verbose: bool = False) -> str:
        return reports.cdoc_report(
            self.index, namespace, name, verbose=verbose, width=self.screen_width
        )

    def namespace_listing_report(self, namespace: str) -> str:
        return reports.namespace_listing_report(self.index, namespace)

    def stats_report(self) -> str:
        return snapshot_stats_report(self.index)


__all__ = ["DocsService"]
