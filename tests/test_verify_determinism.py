from __future__ import annotations

from pathlib import Path

import pytest

from snapshot.codec import CorruptSnapshotError, load_snapshot, save_snapshot
from verify.verify import DeterminismResult, verify_snapshot

FIXTURE = Path(__file__).parent / "fixtures" / "mini_snapshot.json"


def test_verify_requires_snapshot_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError, match="Snapshot file does not exist"):
        verify_snapshot(tmp_path / "missing.json")


def test_saved_snapshot_verifies(tmp_path: Path) -> None:
    out = tmp_path / "snap.json"
    save_snapshot(load_snapshot(FIXTURE), out)

    assert verify_snapshot(out) == DeterminismResult(ok=True, record_count=5)


def test_non_canonical_snapshot_reports_diff() -> None:
    result = verify_snapshot(FIXTURE)

    assert not result.ok
    assert result.record_count == 5
    assert result.diff[0].startswith("---")
    assert any(line.startswith("+") for line in result.diff[2:])


def test_corrupt_snapshot_raises(tmp_path: Path) -> None:
    path = tmp_path / "bad.json"
    path.write_text("{}", encoding="utf-8")

    with pytest.raises(CorruptSnapshotError):
        verify_snapshot(path)
