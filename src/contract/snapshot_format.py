"""Snapshot file format contract (format v0).

A snapshot is a single JSON document with two top-level fields. Every entity
inside it is written with a fixed field order so that re-serializing a loaded
snapshot reproduces the same bytes.
"""

from __future__ import annotations

from typing import Any

SNAPSHOT_FORMAT_VERSION = 0

SNAPSHOT_TIME_KEY = "snapshot-time"
SNAPSHOT_INFO_KEY = "snapshot-info"

REQUIRED_TOP_LEVEL_KEYS = (SNAPSHOT_TIME_KEY, SNAPSHOT_INFO_KEY)

# Canonical field order per entity. Fields not listed here are written after
# the listed ones, sorted by name.
NAME_RECORD_FIELDS: tuple[str, ...] = (
    "name",
    "ns",
    "url",
    "id",
    "see-alsos",
    "examples",
    "comments",
)

SEE_ALSO_FIELDS: tuple[str, ...] = (
    "name",
    "url_friendly_name",
    "url",
    "file",
    "version",
    "added",
    "created_at",
    "updated_at",
    "namespace_id",
    "weight",
    "line",
    "arglists_comp",
)

EXAMPLE_FIELDS: tuple[str, ...] = (
    "function",
    "ns",
    "library",
    "lib_version",
    "created_at",
    "updated_at",
    "namespace_id",
    "version",
    "library_id",
    "body",
)

COMMENT_FIELDS: tuple[str, ...] = (
    "function",
    "ns",
    "library",
    "version",
    "user_id",
    "created_at",
    "updated_at",
    "namespace_id",
    "library_id",
    "body",
)


def order_fields(payload: dict[str, Any], field_order: tuple[str, ...]) -> dict[str, Any]:
    """Return a copy of ``payload`` with keys in canonical order.

    Keys named in ``field_order`` come first, in that order. Remaining keys
    follow, sorted.
    """
    ordered = {key: payload[key] for key in field_order if key in payload}
    for key in sorted(key for key in payload if key not in ordered):
        ordered[key] = payload[key]
    return ordered
