"""Domain model for directory listings.

This package contains the non-rendering pipeline:
- entry/stat datatypes and the listing error taxonomy
- filesystem and identity collaborators
- permission formatting, per-path resolution, directory enumeration
"""

from __future__ import annotations

from .types import EntryRecord, RawStat
from .errors import (
    IdentityLookupError,
    ListingError,
    ListingIOError,
    NotFoundError,
    PermissionDeniedError,
)
from .fs import LocalFilesystem, is_displayable_name, raw_stat_from_os, translate_os_error
from .identity import PosixIdentityLookup
from .permissions import symbolic
from .resolver import format_modified, leaf_name, resolve_entry
from .enumerator import SYNTHETIC_NAMES, is_synthetic_name, list_entries

__all__ = [
    "EntryRecord",
    "RawStat",
    "ListingError",
    "NotFoundError",
    "PermissionDeniedError",
    "ListingIOError",
    "IdentityLookupError",
    "LocalFilesystem",
    "is_displayable_name",
    "raw_stat_from_os",
    "translate_os_error",
    "PosixIdentityLookup",
    "symbolic",
    "format_modified",
    "leaf_name",
    "resolve_entry",
    "SYNTHETIC_NAMES",
    "is_synthetic_name",
    "list_entries",
]
