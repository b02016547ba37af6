from __future__ import annotations

from pathlib import Path

import pytest

from docindex.document_index import DocumentIndex
from docindex.service import DocsService
from render.reports import (
    cdoc_report,
    comments_report,
    examples_report,
    get_comments,
    get_examples,
    get_see_also,
    mode_report,
    namespace_listing_report,
    search_report,
    see_also_report,
)

FIXTURE = Path(__file__).parent / "fixtures" / "mini_snapshot.json"


@pytest.fixture
def index() -> DocumentIndex:
    index = DocumentIndex()
    index.load(FIXTURE)
    return index


def test_examples_report(index: DocumentIndex) -> None:
    assert examples_report(index, "clojure.core", "map") == (
        "========== vvv Examples ================\n"
        "  user=> (map #(vector (first %) (* 2 (second %))) {:a 1 :b 2})\n"
        "  ([:a 2] [:b 4])\n"
        "~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~\n"
        "  user=> (map inc [1 2 3 4 5])\n"
        "  (2 3 4 5 6)\n"
        "========== ^^^ Examples ================\n"
        "2 examples found for clojure.core/map\n"
    )


def test_examples_report_verbose(index: DocumentIndex) -> None:
    report = examples_report(index, "clojure.string", "join", verbose=True)

    assert report.splitlines()[-4:] == [
        "  *** Last Updated: 2010-07-12T23:08:12Z",
        "========== ^^^ Examples ================",
        "1 example found for clojure.string/join",
        "Taken from http://clojuredocs.org/clojure_core/clojure.string/join",
    ]


def test_examples_report_unknown_symbol(index: DocumentIndex) -> None:
    assert examples_report(index, "clojure.core", "nope") == (
        "0 examples found for clojure.core/nope\n"
    )
    assert examples_report(index, "clojure.core", "nope", verbose=True) == (
        "0 examples found for clojure.core/nope\n"
    )


def test_comments_report_wraps_body(index: DocumentIndex) -> None:
    assert comments_report(index, "clojure.core", "map", width=40) == (
        "========== vvv Comments ================\n"
        "  Note that map is lazy, so side effects\n"
        "  inside the mapped function will not\n"
        "  happen until the result is realized.\n"
        "========== ^^^ Comments ================\n"
        "1 comment found for clojure.core/map\n"
    )


def test_comments_report_none(index: DocumentIndex) -> None:
    assert comments_report(index, "clojure.core", "pmap") == (
        "0 comments found for clojure.core/pmap\n"
    )


def test_see_also_report(index: DocumentIndex) -> None:
    assert see_also_report(index, "clojure.core", "map") == (
        "========== vvv See also ================\n"
        "  pmap\n"
        "  keep\n"
        "========== ^^^ See also ================\n"
        "2 see-alsos found for clojure.core/map\n"
    )
    assert see_also_report(index, "clojure.core", "pmap").endswith(
        "1 see-also found for clojure.core/pmap\n"
    )


def test_cdoc_report_joins_sections(index: DocumentIndex) -> None:
    report = cdoc_report(index, "clojure.core", "reduce")

    assert report == (
        "0 examples found for clojure.core/reduce\n"
        "\n"
        "0 see-alsos found for clojure.core/reduce\n"
        "\n"
        "0 comments found for clojure.core/reduce\n"
    )


def test_namespace_listing_report(index: DocumentIndex) -> None:
    assert namespace_listing_report(index, "clojure.core") == (
        "Exa See Com Symbol\n"
        "--- --- --- -------------\n"
        "  2   2   1 map\n"
        "  1   1   0 pmap\n"
        "  0   0   0 reduce\n"
    )


def test_search_report_sorted_with_count(index: DocumentIndex) -> None:
    assert search_report(index, "map") == (
        "clojure.core/map\nclojure.core/pmap\n2 matches found\n"
    )
    assert search_report(index, "zzz") == "0 matches found\n"


def test_mode_report(index: DocumentIndex) -> None:
    assert mode_report(index) == (
        f"Data for 5 names was read from file: {FIXTURE}\n"
        "Snapshot time: Sun Apr 01 17:20:17 PDT 2012\n"
    )


def test_getters_return_empty_for_unknown_symbol(index: DocumentIndex) -> None:
    assert get_examples(index, "user", "nope") == {"examples": [], "url": None}
    assert get_comments(index, "user", "nope") == []
    assert get_see_also(index, "user", "nope") == []


def test_get_examples_includes_url(index: DocumentIndex) -> None:
    result = get_examples(index, "clojure.core", "pmap")

    assert result["url"] == "http://clojuredocs.org/clojure_core/clojure.core/pmap"
    assert len(result["examples"]) == 1


def test_service_query_surface() -> None:
    service = DocsService(screen_width=40)

    count, snapshot_time = service.load_snapshot(FIXTURE)

    assert (count, snapshot_time) == (5, "Sun Apr 01 17:20:17 PDT 2012")
    assert [str(key) for key in service.search("map")] == [
        "clojure.core/map",
        "clojure.core/pmap",
    ]
    assert [sa.name for sa in service.get_see_also("clojure.core", "map")] == [
        "pmap",
        "keep",
    ]
    assert "  inside the mapped function will not\n" in service.comments_report(
        "clojure.core", "map"
    )
