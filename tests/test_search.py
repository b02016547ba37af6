from __future__ import annotations

import re

import pytest

from docindex.document_index import DocumentIndex
from search.engine import LiteralQuery, PatternQuery, make_query, search
from snapshot.models import NameRecord, Snapshot, SymbolKey


@pytest.fixture
def index() -> DocumentIndex:
    records = {
        f"{ns}/{name}": NameRecord(ns=ns, name=name)
        for ns, name in (
            ("clojure.core", "map"),
            ("clojure.core", "pmap"),
            ("clojure.string", "join"),
        )
    }
    return DocumentIndex(Snapshot(snapshot_time="t", records=records))


def test_literal_substring_across_namespaces(index: DocumentIndex) -> None:
    assert sorted(search(index, "map")) == [
        SymbolKey("clojure.core", "map"),
        SymbolKey("clojure.core", "pmap"),
    ]


def test_namespace_filter_is_exact(index: DocumentIndex) -> None:
    assert search(index, "map", namespace="clojure.string") == []
    assert search(index, "map", namespace="clojure") == []
    assert search(index, "join", namespace="clojure.string") == [
        SymbolKey("clojure.string", "join")
    ]


def test_pattern_query(index: DocumentIndex) -> None:
    assert search(index, re.compile("^p")) == [SymbolKey("clojure.core", "pmap")]


def test_empty_literal_matches_everything(index: DocumentIndex) -> None:
    assert len(search(index, "")) == 3


def test_unknown_namespace_yields_empty(index: DocumentIndex) -> None:
    assert search(index, "", namespace="no.such.ns") == []


def test_literal_is_not_a_pattern(index: DocumentIndex) -> None:
    assert search(index, "^p") == []


def test_namespace_is_not_part_of_the_name(index: DocumentIndex) -> None:
    assert search(index, "core") == []


def test_make_query_resolves_variant() -> None:
    assert make_query("a.b") == LiteralQuery("a.b")
    assert isinstance(make_query("a.b", regex=True), PatternQuery)
    pattern = re.compile("x")
    assert make_query(pattern) == PatternQuery(pattern)
    with pytest.raises(re.error):
        make_query("(", regex=True)
