"""Top-level listing dispatch and recursive directory walking.

``walk`` lists a directory, then descends depth-first into each child
directory in enumeration order. Only the top call may inject ``.``/``..``,
and synthetic rows are never descended into. A nested directory that cannot
be read is reported and skipped; its siblings are still listed.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TextIO

from .listing_model import (
    EntryRecord,
    ListingError,
    LocalFilesystem,
    PosixIdentityLookup,
    is_synthetic_name,
    list_entries,
    resolve_entry,
)
from .render import is_visible, render_entries

logger = logging.getLogger(__name__)


def _scan_directory(
    directory_path: str,
    show_hidden: bool,
    suppress_synthetic: bool,
    filesystem: LocalFilesystem,
    identity: PosixIdentityLookup,
) -> tuple[list[EntryRecord], ListingError | None]:
    """Enumerate ``directory_path`` and return ``(entries, scan_error)``."""
    try:
        entries = list_entries(
            directory_path,
            include_hidden_synthetic=show_hidden,
            suppress_synthetic=suppress_synthetic,
            filesystem=filesystem,
            identity=identity,
        )
    except ListingError as exc:
        return [], exc
    return entries, None


def subdirectories_to_visit(entries: list[EntryRecord], show_hidden: bool) -> list[str]:
    """Names of child directories to descend into, in enumeration order."""
    return [
        entry.name
        for entry in entries
        if entry.is_directory and not is_synthetic_name(entry.name) and is_visible(entry, show_hidden)
    ]


def walk(
    directory_path: str | os.PathLike[str],
    show_hidden: bool,
    long_format: bool,
    out: TextIO | None = None,
    filesystem: LocalFilesystem | None = None,
    identity: PosixIdentityLookup | None = None,
) -> int:
    """Recursively list ``directory_path`` and return the count of unreadable subdirectories.

    Failure to read ``directory_path`` itself propagates as ``ListingError``.
    """
    stream = out if out is not None else sys.stdout
    if filesystem is None:
        filesystem = LocalFilesystem()
    if identity is None:
        identity = PosixIdentityLookup()

    root_text = os.fspath(directory_path)
    root_entries = list_entries(
        root_text,
        include_hidden_synthetic=show_hidden,
        suppress_synthetic=False,
        filesystem=filesystem,
        identity=identity,
    )

    failures = 0

    def emit(path_text: str, entries: list[EntryRecord]) -> None:
        nonlocal failures
        stream.write(f"{path_text}:\n")
        render_entries(entries, show_hidden, long_format, out=stream)
        stream.write("\n")

        for name in subdirectories_to_visit(entries, show_hidden):
            child_path = os.path.join(path_text, name)
            child_entries, scan_error = _scan_directory(
                child_path,
                show_hidden,
                suppress_synthetic=True,
                filesystem=filesystem,
                identity=identity,
            )
            if scan_error is not None:
                failures += 1
                stream.write(f"{child_path}:\n")
                logger.warning("cannot open directory '%s': %s", scan_error.path, scan_error.reason)
                stream.write("\n")
                continue
            emit(child_path, child_entries)

    emit(root_text, root_entries)
    return failures


def list_path(
    path: str | os.PathLike[str],
    show_hidden: bool,
    long_format: bool,
    recursive: bool,
    out: TextIO | None = None,
    filesystem: LocalFilesystem | None = None,
    identity: PosixIdentityLookup | None = None,
) -> int:
    """List ``path`` the way the command line asks and return the failure count.

    A non-directory target is listed as a single row with no ``total`` line.
    The target itself is classified through symbolic links, so a link to a
    directory lists the directory contents. Children are never followed.
    """
    stream = out if out is not None else sys.stdout
    if filesystem is None:
        filesystem = LocalFilesystem()
    if identity is None:
        identity = PosixIdentityLookup()

    target = os.fspath(path)
    raw = filesystem.stat(target, follow_symlinks=True)
    if not raw.is_directory:
        render_entries(
            [resolve_entry(target, filesystem, identity)],
            True,
            long_format,
            out=stream,
            with_total=False,
        )
        return 0

    if recursive:
        return walk(target, show_hidden, long_format, out=stream, filesystem=filesystem, identity=identity)

    entries = list_entries(
        target,
        include_hidden_synthetic=show_hidden,
        suppress_synthetic=False,
        filesystem=filesystem,
        identity=identity,
    )
    render_entries(entries, show_hidden, long_format, out=stream)
    return 0


__all__ = [
    "subdirectories_to_visit",
    "walk",
    "list_path",
]
