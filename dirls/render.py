"""Plain-text rendering of entry records.

Short format prints visible names on one line. Long format prints a
``total`` line followed by one detail row per visible entry. Rows are emitted
in the order received.
"""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence
from typing import TextIO

from .listing_model import EntryRecord


def is_visible(entry: EntryRecord, show_hidden: bool) -> bool:
    """Return whether ``entry`` survives the hidden-name filter."""
    return show_hidden or not entry.is_hidden


def block_total(entries: Iterable[EntryRecord]) -> int:
    """Sum ``block_count`` over every entry, hidden ones included."""
    return sum(entry.block_count for entry in entries)


def type_glyph(entry: EntryRecord) -> str:
    """Return ``d`` for directories and ``-`` for everything else."""
    return "d" if entry.is_directory else "-"


def format_long_row(entry: EntryRecord) -> str:
    """Build one long-format row; fields are single-space separated."""
    return " ".join(
        (
            type_glyph(entry),
            entry.permission_symbolic,
            str(entry.link_count),
            entry.owner_name,
            entry.group_name,
            str(entry.size),
            entry.modified_display,
            entry.name,
        )
    )


def render_lines(
    entries: Sequence[EntryRecord],
    show_hidden: bool,
    long_format: bool,
    with_total: bool = True,
) -> list[str]:
    """Return output lines for ``entries`` without trailing newlines.

    ``with_total=False`` drops the long-format ``total`` line.
    """
    visible = [entry for entry in entries if is_visible(entry, show_hidden)]
    if not long_format:
        return [" ".join(entry.name for entry in visible)]

    lines = [f"total {block_total(entries)}"] if with_total else []
    lines.extend(format_long_row(entry) for entry in visible)
    return lines


def render_entries(
    entries: Sequence[EntryRecord],
    show_hidden: bool,
    long_format: bool,
    out: TextIO | None = None,
    with_total: bool = True,
) -> None:
    """Write the rendering of ``entries`` to ``out`` (default stdout)."""
    stream = out if out is not None else sys.stdout
    for line in render_lines(entries, show_hidden, long_format, with_total):
        stream.write(line + "\n")


__all__ = [
    "is_visible",
    "block_total",
    "type_glyph",
    "format_long_row",
    "render_lines",
    "render_entries",
]
