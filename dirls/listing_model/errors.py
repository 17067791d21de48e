"""Error taxonomy for listing failures."""

from __future__ import annotations


class ListingError(Exception):
    """Base class for failures while reading a path for a listing."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


class NotFoundError(ListingError):
    """The path does not exist (or a parent component is not a directory)."""


class PermissionDeniedError(ListingError):
    """The path exists but cannot be opened or stat'ed."""


class ListingIOError(ListingError):
    """Any other OS-level failure."""


class IdentityLookupError(ListingError):
    """A numeric uid/gid has no entry in the identity database."""

    def __init__(self, kind: str, numeric_id: int) -> None:
        super().__init__(f"{kind} {numeric_id}", f"no {kind} entry for id {numeric_id}")
        self.kind = kind
        self.numeric_id = numeric_id


__all__ = [
    "ListingError",
    "NotFoundError",
    "PermissionDeniedError",
    "ListingIOError",
    "IdentityLookupError",
]
