"""Validation helpers for snapshot files."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

import orjson
from pydantic import ValidationError

from contract.snapshot_format import (
    REQUIRED_TOP_LEVEL_KEYS,
    SNAPSHOT_INFO_KEY,
    SNAPSHOT_TIME_KEY,
)
from snapshot.models import NameRecord, SymbolKey

if TYPE_CHECKING:
    from pathlib import Path


@dataclass(frozen=True)
class ValidationMessage:
    path: Path
    message: str
    key: str | None = None

    def location(self) -> str:
        if self.key is None:
            return str(self.path)
        return f"{self.path}:{self.key}"

    def to_dict(self) -> dict[str, object]:
        return {
            "path": str(self.path),
            "key": self.key,
            "message": self.message,
        }


@dataclass
class ValidationResult:
    errors: list[ValidationMessage] = field(default_factory=list)
    warnings: list[ValidationMessage] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


def validate_snapshot(path: Path, *, strict_order: bool = False) -> ValidationResult:
    """Check a snapshot file record by record.

    Unlike loading, validation does not stop at the first bad record. Records
    stored under a key that does not match their namespace and name, and
    collections that are not in canonical order, are reported as warnings
    (errors with ``strict_order``).
    """
    result = ValidationResult()

    if not path.exists():
        result.errors.append(
            ValidationMessage(path=path, message="Snapshot file does not exist.")
        )
        return result

    try:
        document = orjson.loads(path.read_bytes())
    except (OSError, orjson.JSONDecodeError) as exc:
        result.errors.append(ValidationMessage(path=path, message=f"Invalid JSON: {exc}."))
        return result

    if not isinstance(document, dict):
        result.errors.append(
            ValidationMessage(path=path, message="Expected JSON object at top level.")
        )
        return result

    for key in REQUIRED_TOP_LEVEL_KEYS:
        if key not in document:
            result.errors.append(
                ValidationMessage(path=path, message=f"Missing top-level field '{key}'.")
            )
    if not result.ok:
        return result

    if not isinstance(document[SNAPSHOT_TIME_KEY], str):
        result.errors.append(
            ValidationMessage(
                path=path, message=f"Field '{SNAPSHOT_TIME_KEY}' must be a string."
            )
        )

    info = document[SNAPSHOT_INFO_KEY]
    if not isinstance(info, dict):
        result.errors.append(
            ValidationMessage(
                path=path, message=f"Field '{SNAPSHOT_INFO_KEY}' must be an object."
            )
        )
        return result

    keys = list(info)
    if keys != sorted(keys):
        _report_order(result, path, None, "Records are not sorted by key.", strict_order)

    for key, raw_record in info.items():
        _validate_record(result, path, key, raw_record, strict_order=strict_order)

    return result


def _validate_record(
    result: ValidationResult,
    path: Path,
    key: str,
    raw_record: Any,
    *,
    strict_order: bool,
) -> None:
    try:
        record = NameRecord.model_validate(raw_record)
    except ValidationError as exc:
        result.errors.append(
            ValidationMessage(
                path=path, key=key, message=f"Schema validation failed: {exc}."
            )
        )
        return

    expected_key = str(SymbolKey(record.ns, record.name))
    if key != expected_key:
        result.warnings.append(
            ValidationMessage(
                path=path,
                key=key,
                message=f"Record key does not match its symbol '{expected_key}'.",
            )
        )

    names = [see_also.name for see_also in record.see_alsos]
    if names != sorted(names):
        _report_order(result, path, key, "See-alsos are not sorted by name.", strict_order)
    for label, entries in (("Examples", record.examples), ("Comments", record.comments)):
        created = [entry.created_at or "" for entry in entries]
        if created != sorted(created):
            _report_order(
                result,
                path,
                key,
                f"{label} are not sorted by created_at.",
                strict_order,
            )


def _report_order(
    result: ValidationResult,
    path: Path,
    key: str | None,
    message: str,
    strict_order: bool,
) -> None:
    target = result.errors if strict_order else result.warnings
    target.append(ValidationMessage(path=path, key=key, message=message))


__all__ = [
    "ValidationMessage",
    "ValidationResult",
    "validate_snapshot",
]
