"""Stable snapshot file contract for docsnap.

Format constants are importable directly; validation helpers are loaded on
first access to keep the codec free of import cycles.
"""

from contract.snapshot_format import (
    COMMENT_FIELDS,
    EXAMPLE_FIELDS,
    NAME_RECORD_FIELDS,
    REQUIRED_TOP_LEVEL_KEYS,
    SEE_ALSO_FIELDS,
    SNAPSHOT_FORMAT_VERSION,
    SNAPSHOT_INFO_KEY,
    SNAPSHOT_TIME_KEY,
    order_fields,
)


def __getattr__(name: str) -> object:
    if name in {"ValidationMessage", "ValidationResult", "validate_snapshot"}:
        from contract.validation import (
            ValidationMessage,
            ValidationResult,
            validate_snapshot,
        )

        return {
            "ValidationMessage": ValidationMessage,
            "ValidationResult": ValidationResult,
            "validate_snapshot": validate_snapshot,
        }[name]

    msg = f"module 'contract' has no attribute {name!r}"
    raise AttributeError(msg)


__all__ = [
    "COMMENT_FIELDS",
    "EXAMPLE_FIELDS",
    "NAME_RECORD_FIELDS",
    "REQUIRED_TOP_LEVEL_KEYS",
    "SEE_ALSO_FIELDS",
    "SNAPSHOT_FORMAT_VERSION",
    "SNAPSHOT_INFO_KEY",
    "SNAPSHOT_TIME_KEY",
    "ValidationMessage",
    "ValidationResult",
    "order_fields",
    "validate_snapshot",
]
