"""Documentation snapshot models.

This module contains models for the per-symbol documentation metadata kept in
a snapshot: usage examples, discussion comments and "see also" pointers.
"""

from __future__ import annotations

from typing import NamedTuple

from pydantic import BaseModel, ConfigDict, Field

from utils import split_symbol_name


class SymbolKey(NamedTuple):
    """Unique index key of a documented symbol."""

    namespace: str
    name: str

    def __str__(self) -> str:
        return f"{self.namespace}/{self.name}"

    @classmethod
    def parse(cls, full_name: str) -> SymbolKey | None:
        """Parse a canonical ``"<namespace>/<name>"`` string.

        Returns None when the string is not a namespace-qualified name.
        """
        parts = split_symbol_name(full_name)
        if parts is None:
            return None
        return cls(*parts)


class _Entity(BaseModel):
    # Unknown fields from the data source are kept and written back.
    model_config = ConfigDict(extra="allow", populate_by_name=True)


class Example(_Entity):
    """A usage example attached to a symbol."""

    function: str | None = None
    ns: str | None = None
    library: str | None = None
    lib_version: str | None = None
    created_at: str | None = None
    updated_at: str | None = None
    namespace_id: int | None = None
    version: int | str | None = None
    library_id: int | None = None
    body: str = ""


class Comment(_Entity):
    """A discussion comment attached to a symbol."""

    function: str | None = None
    ns: str | None = None
    library: str | None = None
    version: str | int | None = None
    user_id: int | None = None
    created_at: str | None = None
    updated_at: str | None = None
    namespace_id: int | None = None
    library_id: int | None = None
    body: str = ""


class SeeAlso(_Entity):
    """A cross-reference from one symbol to another."""

    name: str
    url_friendly_name: str | None = None
    url: str | None = None
    file: str | None = None
    version: str | int | None = None
    added: str | None = None
    created_at: str | None = None
    updated_at: str | None = None
    namespace_id: int | None = None
    weight: int | None = None
    line: int | None = None
    arglists_comp: str | None = None


class NameRecord(_Entity):
    """All documentation metadata known for one symbol."""

    name: str
    ns: str
    url: str | None = None
    id: int | None = None
    see_alsos: list[SeeAlso] = Field(default_factory=list, alias="see-alsos")
    examples: list[Example] = Field(default_factory=list)
    comments: list[Comment] = Field(default_factory=list)

    @property
    def key(self) -> SymbolKey:
        return SymbolKey(self.ns, self.name)


class Snapshot(BaseModel):
    """A timestamped capture of documentation metadata for many symbols."""

    snapshot_time: str
    records: dict[str, NameRecord] = Field(default_factory=dict)
    source: str | None = Field(
        default=None, description="File the snapshot was read from (not persisted)"
    )

    def __len__(self) -> int:
        return len(self.records)


__all__ = ["Comment", "Example", "NameRecord", "SeeAlso", "Snapshot", "SymbolKey"]
