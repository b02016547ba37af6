"""Determinism verification for snapshot files."""

from __future__ import annotations

import difflib
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from snapshot.codec import dumps_snapshot, loads_snapshot

if TYPE_CHECKING:
    from pathlib import Path


@dataclass(frozen=True)
class DeterminismResult:
    ok: bool
    record_count: int = 0
    diff: tuple[str, ...] = field(default_factory=tuple)


def verify_snapshot(path: Path, *, context_lines: int = 3) -> DeterminismResult:
    """Verify that a snapshot file is in canonical form.

    Loads the snapshot, serializes it again and compares the result
    byte-for-byte with the file on disk. A file written by ``save_snapshot``
    always verifies.

    Args:
        path: Snapshot file to check.
        context_lines: Context lines in the returned unified diff.

    Returns:
        DeterminismResult with ok status and a unified diff (existing file
        versus canonical rewrite) when they differ.

    Raises:
        FileNotFoundError: If path does not exist.
        CorruptSnapshotError: If the file is not a valid snapshot.
    """
    if not path.exists():
        msg = f"Snapshot file does not exist: {path}"
        raise FileNotFoundError(msg)

    original = path.read_bytes()
    snapshot = loads_snapshot(original, source=str(path))
    rewritten = dumps_snapshot(snapshot)

    if original == rewritten:
        return DeterminismResult(ok=True, record_count=len(snapshot))

    diff = difflib.unified_diff(
        original.decode("utf-8", errors="replace").splitlines(),
        rewritten.decode("utf-8").splitlines(),
        fromfile=str(path),
        tofile=f"{path} (canonical)",
        n=context_lines,
        lineterm="",
    )
    return DeterminismResult(ok=False, record_count=len(snapshot), diff=tuple(diff))
