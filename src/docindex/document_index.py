"""In-memory index of the active documentation snapshot."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from snapshot.codec import load_snapshot
from snapshot.models import NameRecord, SymbolKey

if TYPE_CHECKING:
    from snapshot.codec import SnapshotSource
    from snapshot.models import Snapshot

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SnapshotMeta:
    source: str | None
    snapshot_time: str | None
    record_count: int


@dataclass(frozen=True)
class _IndexState:
    meta: SnapshotMeta
    records: dict[str, NameRecord] = field(default_factory=dict)
    keys: tuple[tuple[SymbolKey, str], ...] = ()


_EMPTY_STATE = _IndexState(
    meta=SnapshotMeta(source=None, snapshot_time=None, record_count=0)
)


def _key_for(raw_key: str, record: NameRecord) -> SymbolKey:
    return SymbolKey.parse(raw_key) or record.key


class DocumentIndex:
    """Holds exactly one active snapshot and answers lookups against it.

    The index is replaced wholesale by ``replace`` or ``load``; it is never
    mutated in place. Callers must serialize ``replace`` against readers.
    """

    def __init__(self, snapshot: Snapshot | None = None) -> None:
        self._state = _EMPTY_STATE
        if snapshot is not None:
            self.replace(snapshot)

    def replace(self, snapshot: Snapshot) -> SnapshotMeta:
        """Make ``snapshot`` the active index, discarding the previous one."""
        records = dict(snapshot.records)
        keys = tuple(
            sorted(
                ((_key_for(raw, records[raw]), raw) for raw in records),
                key=lambda pair: pair[1],
            )
        )
        meta = SnapshotMeta(
            source=snapshot.source,
            snapshot_time=snapshot.snapshot_time,
            record_count=len(records),
        )
        # Single assignment: readers see either the old or the new state.
        self._state = _IndexState(meta=meta, records=records, keys=keys)
        return meta

    def load(self, source: SnapshotSource) -> SnapshotMeta:
        """Load a snapshot file and make it active.

        The previous index stays active if loading fails.
        """
        snapshot = load_snapshot(source)
        meta = self.replace(snapshot)
        logger.info("Snapshot time: %s", meta.snapshot_time)
        return meta

    def lookup(self, namespace: str, name: str) -> NameRecord | None:
        return self._state.records.get(str(SymbolKey(namespace, name)))

    def all_records(self) -> list[tuple[SymbolKey, NameRecord]]:
        """Return every record in canonical key order."""
        state = self._state
        return [(key, state.records[raw]) for key, raw in state.keys]

    def namespaces(self) -> list[str]:
        return sorted({key.namespace for key, _ in self._state.keys})

    def active_meta(self) -> SnapshotMeta:
        return self._state.meta

    def __len__(self) -> int:
        return self._state.meta.record_count


__all__ = ["DocumentIndex", "SnapshotMeta"]
