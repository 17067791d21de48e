"""Enumerate a directory into resolved entry records."""

from __future__ import annotations

import logging
import os
from dataclasses import replace

from .fs import LocalFilesystem
from .identity import PosixIdentityLookup
from .resolver import resolve_entry
from .types import EntryRecord

logger = logging.getLogger(__name__)

SYNTHETIC_NAMES = (".", "..")


def is_synthetic_name(name: str) -> bool:
    """Return whether ``name`` is one of the injected ``.``/``..`` rows."""
    return name in SYNTHETIC_NAMES


def list_entries(
    directory_path: str | os.PathLike[str],
    include_hidden_synthetic: bool,
    suppress_synthetic: bool,
    filesystem: LocalFilesystem | None = None,
    identity: PosixIdentityLookup | None = None,
) -> list[EntryRecord]:
    """Resolve every child of ``directory_path`` in filesystem order.

    ``.`` and ``..`` are prepended only when ``include_hidden_synthetic`` is
    set and ``suppress_synthetic`` is not. Any failure propagates and no
    partial list is returned.
    """
    if filesystem is None:
        filesystem = LocalFilesystem()
    if identity is None:
        identity = PosixIdentityLookup()

    directory_text = os.fspath(directory_path)
    child_names = filesystem.open_directory(directory_text)
    logger.debug("enumerated %d entries in %s", len(child_names), directory_text)

    records: list[EntryRecord] = []
    if include_hidden_synthetic and not suppress_synthetic:
        for synthetic in SYNTHETIC_NAMES:
            record = resolve_entry(os.path.join(directory_text, synthetic), filesystem, identity)
            records.append(replace(record, name=synthetic))

    for name in child_names:
        records.append(resolve_entry(os.path.join(directory_text, name), filesystem, identity))
    return records


__all__ = [
    "SYNTHETIC_NAMES",
    "is_synthetic_name",
    "list_entries",
]
