"""Reading and writing snapshot files.

Snapshots are written in canonical order at every level: records sorted by
symbol key, nested collections sorted, and the fields of every entity in the
order fixed by ``contract.snapshot_format``. Loading a freshly saved snapshot
and saving it again therefore yields byte-identical output.
"""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import IO, TYPE_CHECKING, Any

import orjson
from pydantic import ValidationError

from contract.snapshot_format import (
    COMMENT_FIELDS,
    EXAMPLE_FIELDS,
    NAME_RECORD_FIELDS,
    REQUIRED_TOP_LEVEL_KEYS,
    SEE_ALSO_FIELDS,
    SNAPSHOT_INFO_KEY,
    SNAPSHOT_TIME_KEY,
    order_fields,
)
from snapshot.models import NameRecord, Snapshot

if TYPE_CHECKING:
    from collections.abc import Iterable

    from snapshot.models import Comment, Example, SeeAlso

logger = logging.getLogger(__name__)

SnapshotSource = str | Path | IO[bytes]


class SnapshotError(Exception):
    """Base class for snapshot errors."""


class CorruptSnapshotError(SnapshotError):
    """Raised when snapshot data cannot be decoded into a Snapshot."""


def capture_timestamp(now: datetime | None = None) -> str:
    """Format a capture time the way snapshot files record it.

    >>> capture_timestamp(datetime(2012, 4, 1, 17, 20, 17))
    'Sun Apr 01 17:20:17 2012'
    """
    if now is None:
        now = datetime.now().astimezone()
    if now.tzinfo is None:
        return now.strftime("%a %b %d %H:%M:%S %Y")
    return now.strftime("%a %b %d %H:%M:%S %Z %Y")


def _by_created_at(item: Example | Comment) -> str:
    return item.created_at or ""


def canonicalize(snapshot: Snapshot) -> Snapshot:
    """Return a copy of ``snapshot`` with records and collections sorted."""
    records: dict[str, NameRecord] = {}
    for key in sorted(snapshot.records):
        record = snapshot.records[key]
        records[key] = record.model_copy(
            update={
                "see_alsos": sorted(record.see_alsos, key=lambda sa: sa.name),
                "examples": sorted(record.examples, key=_by_created_at),
                "comments": sorted(record.comments, key=_by_created_at),
            }
        )
    return snapshot.model_copy(update={"records": records})


def _dump_entities(
    entities: Iterable[Example | Comment | SeeAlso], field_order: tuple[str, ...]
) -> list[dict[str, Any]]:
    return [
        order_fields(entity.model_dump(by_alias=True), field_order)
        for entity in entities
    ]


def _dump_record(record: NameRecord) -> dict[str, Any]:
    payload = record.model_dump(
        by_alias=True, exclude={"see_alsos", "examples", "comments"}
    )
    payload["see-alsos"] = _dump_entities(record.see_alsos, SEE_ALSO_FIELDS)
    payload["examples"] = _dump_entities(record.examples, EXAMPLE_FIELDS)
    payload["comments"] = _dump_entities(record.comments, COMMENT_FIELDS)
    return order_fields(payload, NAME_RECORD_FIELDS)


def dumps_snapshot(snapshot: Snapshot) -> bytes:
    """Serialize a snapshot to canonical bytes."""
    canonical = canonicalize(snapshot)
    payload = {
        SNAPSHOT_TIME_KEY: canonical.snapshot_time,
        SNAPSHOT_INFO_KEY: {
            key: _dump_record(record) for key, record in canonical.records.items()
        },
    }
    return orjson.dumps(payload, option=orjson.OPT_INDENT_2) + b"\n"


def save_snapshot(snapshot: Snapshot, destination: str | Path | IO[bytes]) -> None:
    """Write ``snapshot`` in canonical form to a path or binary file object."""
    data = dumps_snapshot(snapshot)
    if isinstance(destination, (str, Path)):
        path = Path(destination)
        with path.open("wb") as handle:
            handle.write(data)
        logger.info("Wrote %d names to snapshot file: %s", len(snapshot), path)
        return
    destination.write(data)


def loads_snapshot(data: bytes | str, source: str | None = None) -> Snapshot:
    """Decode snapshot bytes into a Snapshot.

    Raises:
        CorruptSnapshotError: If the data is not a valid snapshot document.
    """
    where = source or "<snapshot>"
    try:
        document = orjson.loads(data)
    except orjson.JSONDecodeError as exc:
        msg = f"Invalid snapshot data in {where}: {exc}"
        raise CorruptSnapshotError(msg) from exc

    if not isinstance(document, dict):
        msg = f"Invalid snapshot data in {where}: top-level value is not an object"
        raise CorruptSnapshotError(msg)

    missing = [key for key in REQUIRED_TOP_LEVEL_KEYS if key not in document]
    if missing:
        msg = f"Invalid snapshot data in {where}: missing {', '.join(missing)}"
        raise CorruptSnapshotError(msg)

    info = document[SNAPSHOT_INFO_KEY]
    if not isinstance(info, dict):
        msg = f"Invalid snapshot data in {where}: {SNAPSHOT_INFO_KEY} is not an object"
        raise CorruptSnapshotError(msg)

    records: dict[str, NameRecord] = {}
    for key, raw_record in info.items():
        try:
            records[key] = NameRecord.model_validate(raw_record)
        except ValidationError as exc:
            msg = f"Invalid record {key!r} in {where}: {exc}"
            raise CorruptSnapshotError(msg) from exc

    try:
        return Snapshot(
            snapshot_time=document[SNAPSHOT_TIME_KEY], records=records, source=source
        )
    except ValidationError as exc:
        msg = f"Invalid snapshot data in {where}: {exc}"
        raise CorruptSnapshotError(msg) from exc


def load_snapshot(source: SnapshotSource) -> Snapshot:
    """Read a snapshot from a path or binary file object.

    Raises:
        CorruptSnapshotError: If the data is not a valid snapshot document.
        OSError: If the file cannot be opened or read.
    """
    if isinstance(source, (str, Path)):
        path = Path(source)
        with path.open("rb") as handle:
            data = handle.read()
        snapshot = loads_snapshot(data, source=str(path))
    else:
        name = getattr(source, "name", None)
        snapshot = loads_snapshot(
            source.read(), source=name if isinstance(name, str) else None
        )
    logger.info(
        "Read info on %d names from file: %s", len(snapshot), snapshot.source
    )
    return snapshot


__all__ = [
    "CorruptSnapshotError",
    "SnapshotError",
    "canonicalize",
    "capture_timestamp",
    "dumps_snapshot",
    "load_snapshot",
    "loads_snapshot",
    "save_snapshot",
]
