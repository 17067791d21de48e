"""Filesystem access layer for directory listings.

Wraps ``os.scandir`` and ``os.stat`` and translates OS failures into the
listing error taxonomy. ``stat`` does not follow a final symbolic link unless
asked, so a link to a directory reports ``is_directory=False``.
"""

from __future__ import annotations

import logging
import os
import stat as stat_module

from .errors import ListingError, ListingIOError, NotFoundError, PermissionDeniedError
from .types import RawStat

logger = logging.getLogger(__name__)


def translate_os_error(path: str | os.PathLike[str], exc: OSError) -> ListingError:
    """Map an ``OSError`` raised for ``path`` onto a ``ListingError`` subclass."""
    path_text = os.fspath(path)
    reason = exc.strerror or str(exc)
    if isinstance(exc, (FileNotFoundError, NotADirectoryError)):
        return NotFoundError(path_text, reason)
    if isinstance(exc, PermissionError):
        return PermissionDeniedError(path_text, reason)
    return ListingIOError(path_text, reason)


def is_displayable_name(name: str) -> bool:
    """Return whether ``name`` round-trips to valid UTF-8 bytes."""
    try:
        os.fsencode(name).decode("utf-8")
    except (UnicodeDecodeError, UnicodeEncodeError):
        return False
    return True


def raw_stat_from_os(result: os.stat_result) -> RawStat:
    """Project an ``os.stat_result`` onto the fields a listing needs."""
    return RawStat(
        size=int(result.st_size),
        is_directory=stat_module.S_ISDIR(result.st_mode),
        owner_uid=int(result.st_uid),
        group_gid=int(result.st_gid),
        permission_bits=stat_module.S_IMODE(result.st_mode),
        modified_time=float(result.st_mtime),
        link_count=int(result.st_nlink),
        block_count=int(getattr(result, "st_blocks", 0)),
    )


class LocalFilesystem:
    """Filesystem collaborator backed by the running OS."""

    def open_directory(self, path: str | os.PathLike[str]) -> list[str]:
        """Return child names of ``path`` in the order the OS yields them.

        Opening failures raise ``NotFoundError``/``PermissionDeniedError``;
        a failure while iterating raises ``ListingIOError`` and discards
        everything read so far. Names that are not valid UTF-8 are skipped
        with a warning.
        """
        try:
            handle = os.scandir(path)
        except OSError as exc:
            raise translate_os_error(path, exc) from exc

        names: list[str] = []
        with handle as entries:
            try:
                for child in entries:
                    if not is_displayable_name(child.name):
                        logger.warning("skipping undecodable name in %s: %r", os.fspath(path), os.fsencode(child.name))
                        continue
                    names.append(child.name)
            except OSError as exc:
                raise ListingIOError(os.fspath(path), exc.strerror or str(exc)) from exc
        return names

    def stat(self, path: str | os.PathLike[str], follow_symlinks: bool = False) -> RawStat:
        """Return metadata for ``path``.

        A final symlink is only followed when ``follow_symlinks`` is set.
        """
        try:
            result = os.stat(path, follow_symlinks=follow_symlinks)
        except OSError as exc:
            raise translate_os_error(path, exc) from exc
        return raw_stat_from_os(result)


__all__ = [
    "LocalFilesystem",
    "is_displayable_name",
    "raw_stat_from_os",
    "translate_os_error",
]
