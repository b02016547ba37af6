"""Per-namespace example coverage statistics."""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from docindex.document_index import DocumentIndex

NOT_AVAILABLE = "N/A"

_HEADER = (
    " #   # syms  % syms  avg / max",
    " of   with    with   examples",
    "syms examps examples per sym   Namespace",
)
_RULE = "---- ------ -------- --------- -----------------------"


@dataclass(frozen=True)
class NamespaceStats:
    namespace: str
    symbol_count: int
    with_examples: int
    example_total: int
    max_examples: int

    @property
    def percent_with_examples(self) -> float | None:
        if self.symbol_count == 0 or self.with_examples == 0:
            return None
        return 100.0 * self.with_examples / self.symbol_count

    @property
    def mean_examples(self) -> float | None:
        """Mean example count over the symbols that have at least one."""
        if self.with_examples == 0:
            return None
        return self.example_total / self.with_examples


def namespace_stats(index: DocumentIndex) -> list[NamespaceStats]:
    """Compute example statistics for every namespace, sorted by name."""
    counts: dict[str, list[int]] = defaultdict(list)
    for key, record in index.all_records():
        counts[key.namespace].append(len(record.examples))

    result: list[NamespaceStats] = []
    for namespace in sorted(counts):
        example_counts = counts[namespace]
        result.append(
            NamespaceStats(
                namespace=namespace,
                symbol_count=len(example_counts),
                with_examples=sum(1 for n in example_counts if n),
                example_total=sum(example_counts),
                max_examples=max(example_counts, default=0),
            )
        )
    return result


def _format_percent(value: float | None) -> str:
    if value is None:
        return f"{NOT_AVAILABLE:>8}"
    return f"{value:7.1f}%"


def format_stats_row(stats: NamespaceStats) -> str:
    mean = stats.mean_examples
    mean_text = f"{NOT_AVAILABLE:>6}" if mean is None else f"{mean:6.1f}"
    return (
        f"{stats.symbol_count:4d} {stats.with_examples:6d} "
        f"{_format_percent(stats.percent_with_examples)} {mean_text} "
        f"{stats.max_examples:2d} {stats.namespace}"
    )


def snapshot_stats_report(index: DocumentIndex) -> str:
    """Render example coverage for all namespaces of the active snapshot.

    Namespaces with at least one example get a table row; the others are
    listed at the end with their symbol counts.
    """
    all_stats = namespace_stats(index)
    shown = [s for s in all_stats if s.with_examples]
    without = [s for s in all_stats if not s.with_examples]

    out = [*_HEADER, _RULE]
    out.extend(format_stats_row(s) for s in shown)
    out.append(_RULE)

    shown_symbols = sum(s.symbol_count for s in shown)
    shown_with_examples = sum(s.with_examples for s in shown)
    total_percent = (
        100.0 * shown_with_examples / shown_symbols if shown_symbols else None
    )
    out.append(
        f"{shown_symbols:4d} {shown_with_examples:6d} {_format_percent(total_percent)}"
    )
    out.append("")
    out.append(
        f"Printed stats for {len(shown)} namespaces ({len(without)} others with a "
        f"total of {len(index) - shown_symbols} symbols have no examples)"
    )
    out.append("")
    out.append("List of namespaces that have no examples:")
    out.extend(f"{s.symbol_count:4d} {s.namespace}" for s in without)
    return "\n".join(out) + "\n"


__all__ = [
    "NOT_AVAILABLE",
    "NamespaceStats",
    "format_stats_row",
    "namespace_stats",
    "snapshot_stats_report",
]
