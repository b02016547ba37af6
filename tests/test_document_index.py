from __future__ import annotations

from pathlib import Path

import pytest

from docindex.document_index import DocumentIndex, SnapshotMeta
from snapshot.codec import CorruptSnapshotError
from snapshot.models import NameRecord, Snapshot, SymbolKey

FIXTURE = Path(__file__).parent / "fixtures" / "mini_snapshot.json"


def test_empty_index_has_no_records() -> None:
    index = DocumentIndex()

    assert index.lookup("clojure.core", "map") is None
    assert index.all_records() == []
    assert index.active_meta() == SnapshotMeta(
        source=None, snapshot_time=None, record_count=0
    )


def test_load_and_lookup() -> None:
    index = DocumentIndex()
    meta = index.load(FIXTURE)

    assert meta.record_count == 5
    assert meta.source == str(FIXTURE)
    record = index.lookup("clojure.core", "map")
    assert record is not None
    assert record.url == "http://clojuredocs.org/clojure_core/clojure.core/map"


def test_lookup_absent_key_returns_none() -> None:
    index = DocumentIndex()
    index.load(FIXTURE)

    assert index.lookup("clojure.core", "no-such-fn") is None
    assert index.lookup("no.such.ns", "map") is None


def test_all_records_in_canonical_key_order() -> None:
    index = DocumentIndex()
    index.load(FIXTURE)

    keys = [str(key) for key, _ in index.all_records()]

    assert keys == sorted(keys)
    assert keys[0] == "clojure.core/map"
    assert index.namespaces() == ["clojure.core", "clojure.data", "clojure.string"]


def test_replace_discards_previous_snapshot() -> None:
    index = DocumentIndex()
    index.load(FIXTURE)

    meta = index.replace(
        Snapshot(
            snapshot_time="later",
            records={"user/f": NameRecord(ns="user", name="f")},
        )
    )

    assert meta.record_count == 1
    assert index.lookup("clojure.core", "map") is None
    assert index.lookup("user", "f") is not None
    assert index.active_meta().snapshot_time == "later"


def test_failed_load_keeps_previous_index(tmp_path: Path) -> None:
    index = DocumentIndex()
    index.load(FIXTURE)
    bad = tmp_path / "bad.json"
    bad.write_text('{"snapshot-time": "t"}', encoding="utf-8")

    with pytest.raises(CorruptSnapshotError):
        index.load(bad)
    with pytest.raises(FileNotFoundError):
        index.load(tmp_path / "missing.json")

    assert index.active_meta().record_count == 5
    assert index.lookup("clojure.core", "map") is not None


def test_slash_symbol_key() -> None:
    index = DocumentIndex(
        Snapshot(
            snapshot_time="t",
            records={"clojure.core//": NameRecord(ns="clojure.core", name="/")},
        )
    )

    assert index.lookup("clojure.core", "/") is not None
    assert index.all_records()[0][0] == SymbolKey("clojure.core", "/")


def test_symbol_key_parse() -> None:
    assert SymbolKey.parse("clojure.string/join") == SymbolKey("clojure.string", "join")
    assert str(SymbolKey("clojure.core", "map")) == "clojure.core/map"
    assert SymbolKey.parse("join") is None
