"""User/group name lookup against the POSIX identity databases."""

from __future__ import annotations

import grp
import pwd

from .errors import IdentityLookupError


class PosixIdentityLookup:
    """Identity collaborator backed by ``pwd`` and ``grp``."""

    def user_name(self, uid: int) -> str:
        try:
            return pwd.getpwuid(uid).pw_name
        except KeyError as exc:
            raise IdentityLookupError("user", uid) from exc

    def group_name(self, gid: int) -> str:
        try:
            return grp.getgrgid(gid).gr_name
        except KeyError as exc:
            raise IdentityLookupError("group", gid) from exc


__all__ = ["PosixIdentityLookup"]
