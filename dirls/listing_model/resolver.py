"""Resolve one path into a display-ready ``EntryRecord``."""

from __future__ import annotations

import logging
import os
from datetime import datetime

from .errors import IdentityLookupError
from .fs import LocalFilesystem
from .identity import PosixIdentityLookup
from .permissions import symbolic
from .types import EntryRecord

logger = logging.getLogger(__name__)


def format_modified(timestamp: float) -> str:
    """Format POSIX ``timestamp`` as local ``"Mon DD HH:MM"`` with a space-padded day."""
    moment = datetime.fromtimestamp(timestamp)
    return f"{moment:%b} {moment.day:>2} {moment:%H:%M}"


def leaf_name(path: str | os.PathLike[str]) -> str:
    """Return the final component of ``path``, ignoring trailing separators."""
    text = os.fspath(path)
    stripped = text.rstrip(os.sep)
    if not stripped:
        return text
    return os.path.basename(stripped)


def _owner_name(identity, uid: int) -> str:
    try:
        return identity.user_name(uid)
    except IdentityLookupError as exc:
        logger.warning("cannot resolve owner: %s; showing numeric id", exc.reason)
        return str(uid)


def _group_name(identity, gid: int) -> str:
    try:
        return identity.group_name(gid)
    except IdentityLookupError as exc:
        logger.warning("cannot resolve group: %s; showing numeric id", exc.reason)
        return str(gid)


def resolve_entry(
    path: str | os.PathLike[str],
    filesystem: LocalFilesystem | None = None,
    identity: PosixIdentityLookup | None = None,
) -> EntryRecord:
    """Stat ``path`` and build its ``EntryRecord``.

    Filesystem failures propagate as ``ListingError`` subclasses. Unknown
    owner/group ids fall back to the numeric id and log a warning.
    """
    if filesystem is None:
        filesystem = LocalFilesystem()
    if identity is None:
        identity = PosixIdentityLookup()

    raw = filesystem.stat(path)
    return EntryRecord(
        name=leaf_name(path),
        size=raw.size,
        is_directory=raw.is_directory,
        owner_name=_owner_name(identity, raw.owner_uid),
        group_name=_group_name(identity, raw.group_gid),
        permission_symbolic=symbolic(raw.permission_bits),
        modified_display=format_modified(raw.modified_time),
        link_count=raw.link_count,
        block_count=raw.block_count,
    )


__all__ = [
    "format_modified",
    "leaf_name",
    "resolve_entry",
]
