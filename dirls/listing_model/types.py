"""Domain datatypes for resolved directory-listing entries."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RawStat:
    """Metadata reported by the filesystem layer for one path."""

    size: int
    is_directory: bool
    owner_uid: int
    group_gid: int
    permission_bits: int
    modified_time: float
    link_count: int
    block_count: int


@dataclass(frozen=True)
class EntryRecord:
    """One fully resolved listing row.

    ``name`` is a leaf name, or the literal ``.``/``..`` for synthetic rows.
    ``permission_symbolic`` is always nine characters from ``rwx-``.
    """

    name: str
    size: int
    is_directory: bool
    owner_name: str
    group_name: str
    permission_symbolic: str
    modified_display: str
    link_count: int
    block_count: int

    @property
    def is_hidden(self) -> bool:
        return self.name.startswith(".")


__all__ = [
    "RawStat",
    "EntryRecord",
]
