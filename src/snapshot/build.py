"""Assembling new snapshots from a remote documentation source."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pydantic import ValidationError

from snapshot.codec import CorruptSnapshotError, capture_timestamp, save_snapshot
from snapshot.models import NameRecord, Snapshot, SymbolKey

if TYPE_CHECKING:
    from pathlib import Path

    from remote.client import DocsSource

logger = logging.getLogger(__name__)


def collect_snapshot(
    source: DocsSource, search_filter: str = "", *, snapshot_time: str | None = None
) -> Snapshot:
    """Fetch examples, see-alsos and comments for every matching name.

    A later result for an already collected symbol replaces the earlier one.

    Raises:
        CorruptSnapshotError: If the source returns data that does not fit the
            snapshot models.
    """
    found = source.search(None, search_filter)
    total = len(found)
    logger.info("Retrieved basic information for %d names. Getting full details...", total)

    records: dict[str, NameRecord] = {}
    for idx, info in enumerate(found, start=1):
        try:
            namespace, name = info["ns"], info["name"]
        except (KeyError, TypeError) as exc:
            msg = f"Invalid search result {info!r}: no ns and name"
            raise CorruptSnapshotError(msg) from exc
        key = str(SymbolKey(namespace, name))
        examples = source.examples(namespace, name)
        see_alsos = source.see_also(namespace, name)
        comments = source.comments(namespace, name)
        logger.info(
            "%d/%d %s examples:%d see-alsos:%d comments:%d",
            idx,
            total,
            key,
            len(examples),
            len(see_alsos),
            len(comments),
        )
        if key in records:
            logger.debug("Replacing earlier record for %s", key)
        try:
            records[key] = NameRecord.model_validate(
                {
                    **info,
                    "examples": examples,
                    "see-alsos": see_alsos,
                    "comments": comments,
                }
            )
        except ValidationError as exc:
            msg = f"Invalid data for {key}: {exc}"
            raise CorruptSnapshotError(msg) from exc

    return Snapshot(snapshot_time=snapshot_time or capture_timestamp(), records=records)


def build_snapshot(
    source: DocsSource, search_filter: str, output_path: Path
) -> Snapshot:
    """Collect a snapshot from ``source`` and save it to ``output_path``.

    Building a full snapshot issues several requests per symbol and can take a
    long time; prefer loading an existing snapshot file.
    """
    snapshot = collect_snapshot(source, search_filter)
    save_snapshot(snapshot, output_path)
    return snapshot.model_copy(update={"source": str(output_path)})


__all__ = ["build_snapshot", "collect_snapshot"]
