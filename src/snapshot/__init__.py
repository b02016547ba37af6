"""Snapshot models and file format."""

from snapshot.codec import (
    CorruptSnapshotError,
    SnapshotError,
    canonicalize,
    dumps_snapshot,
    load_snapshot,
    loads_snapshot,
    save_snapshot,
)
from snapshot.models import Comment, Example, NameRecord, SeeAlso, Snapshot, SymbolKey

__all__ = [
    "Comment",
    "CorruptSnapshotError",
    "Example",
    "NameRecord",
    "SeeAlso",
    "Snapshot",
    "SnapshotError",
    "SymbolKey",
    "canonicalize",
    "dumps_snapshot",
    "load_snapshot",
    "loads_snapshot",
    "save_snapshot",
]
