"""Human-readable reports for the records of the active snapshot.

Every report returns its text; printing is left to the caller. Missing
symbols render as zero counts, never as errors.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from render.markup import normalize_markup, trim_line_list
from render.wrap import wrap_line
from search.engine import search
from snapshot.models import SymbolKey
from utils import plural

if TYPE_CHECKING:
    import re
    from collections.abc import Callable, Sequence

    from docindex.document_index import DocumentIndex
    from search.engine import Query
    from snapshot.models import Comment, Example, SeeAlso

DEFAULT_SCREEN_WIDTH = 72

SEPARATOR = "~" * 40


def _banner(arrows: str, title: str) -> str:
    return f"========== {arrows} {title} ".ljust(40, "=")


def _indent_body(lines: Sequence[str]) -> str:
    return "  " + "\n  ".join(lines)


def _example_lines(body: str) -> list[str]:
    return trim_line_list(normalize_markup(body))


def _comment_lines(body: str, width: int) -> list[str]:
    text = normalize_markup(body).replace("\r", "")
    return [
        wrapped for line in trim_line_list(text) for wrapped in wrap_line(line, width)
    ]


def _entries_report(
    title: str,
    noun: str,
    key: SymbolKey,
    entries: Sequence[Example | Comment],
    body_lines: Callable[[str], list[str]],
    verbose: bool,
) -> list[str]:
    out: list[str] = []
    if entries:
        out.append(_banner("vvv", title))
    for i, entry in enumerate(entries):
        if i:
            out.append(SEPARATOR)
        out.append(_indent_body(body_lines(entry.body)))
        if verbose:
            out.append(f"  *** Last Updated: {entry.updated_at}")
    if entries:
        out.append(_banner("^^^", title))
    out.append(f"{plural(len(entries), noun)} found for {key}")
    return out


def get_examples(index: DocumentIndex, namespace: str, name: str) -> dict[str, object]:
    """Return ``{"examples": [...], "url": ...}`` for a symbol.

    An unknown symbol yields an empty list and a None url.
    """
    record = index.lookup(namespace, name)
    if record is None:
        return {"examples": [], "url": None}
    return {"examples": list(record.examples), "url": record.url}


def get_comments(index: DocumentIndex, namespace: str, name: str) -> list[Comment]:
    record = index.lookup(namespace, name)
    return list(record.comments) if record else []


def get_see_also(index: DocumentIndex, namespace: str, name: str) -> list[SeeAlso]:
    record = index.lookup(namespace, name)
    return list(record.see_alsos) if record else []


def examples_report(
    index: DocumentIndex, namespace: str, name: str, *, verbose: bool = False
) -> str:
    """Render every example for a symbol, followed by a count line."""
    record = index.lookup(namespace, name)
    examples = record.examples if record else []
    out = _entries_report(
        "Examples",
        "example",
        SymbolKey(namespace, name),
        examples,
        _example_lines,
        verbose,
    )
    if verbose and record is not None and record.url:
        out.append(f"Taken from {record.url}")
    return "\n".join(out) + "\n"


def comments_report(
    index: DocumentIndex,
    namespace: str,
    name: str,
    *,
    verbose: bool = False,
    width: int = DEFAULT_SCREEN_WIDTH,
) -> str:
    """Render every comment for a symbol, wrapped to ``width`` columns."""
    record = index.lookup(namespace, name)
    comments = record.comments if record else []
    out = _entries_report(
        "Comments",
        "comment",
        SymbolKey(namespace, name),
        comments,
        lambda body: _comment_lines(body, width),
        verbose,
    )
    return "\n".join(out) + "\n"


def see_also_report(index: DocumentIndex, namespace: str, name: str) -> str:
    see_alsos = get_see_also(index, namespace, name)
    out: list[str] = []
    if see_alsos:
        out.append(_banner("vvv", "See also"))
    out.extend(f"  {see_also.name}" for see_also in see_alsos)
    if see_alsos:
        out.append(_banner("^^^", "See also"))
    out.append(
        f"{plural(len(see_alsos), 'see-also')} found for {SymbolKey(namespace, name)}"
    )
    return "\n".join(out) + "\n"


def cdoc_report(
    index: DocumentIndex,
    namespace: str,
    name: str,
    *,
    verbose: bool = False,
    width: int = DEFAULT_SCREEN_WIDTH,
) -> str:
    """Examples, see-alsos and comments for one symbol, separated by blank lines."""
    return "\n".join(
        [
            examples_report(index, namespace, name, verbose=verbose),
            see_also_report(index, namespace, name),
            comments_report(index, namespace, name, verbose=verbose, width=width),
        ]
    )


def namespace_listing_report(index: DocumentIndex, namespace: str) -> str:
    """Count examples, see-alsos and comments for each symbol in a namespace."""
    out = ["Exa See Com Symbol", "--- --- --- -------------"]
    for key, record in index.all_records():
        if key.namespace != namespace:
            continue
        out.append(
            f"{len(record.examples):3d} {len(record.see_alsos):3d} "
            f"{len(record.comments):3d} {key.name}"
        )
    return "\n".join(out) + "\n"


def search_report(
    index: DocumentIndex,
    query: str | re.Pattern[str] | Query,
    namespace: str | None = None,
) -> str:
    """List matching symbol names, sorted and de-duplicated, with a count."""
    names = sorted({str(key) for key in search(index, query, namespace)})
    return "\n".join([*names, f"{len(names)} matches found"]) + "\n"


def mode_report(index: DocumentIndex) -> str:
    meta = index.active_meta()
    return (
        f"Data for {meta.record_count} names was read from file: {meta.source}\n"
        f"Snapshot time: {meta.snapshot_time}\n"
    )


__all__ = [
    "DEFAULT_SCREEN_WIDTH",
    "cdoc_report",
    "comments_report",
    "examples_report",
    "get_comments",
    "get_examples",
    "get_see_also",
    "mode_report",
    "namespace_listing_report",
    "search_report",
    "see_also_report",
]
