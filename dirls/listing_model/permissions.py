"""Numeric permission bits to ``ls``-style symbolic strings."""

from __future__ import annotations

# (bit, glyph) pairs for owner, group and other triplets.
_PERMISSION_BITS: tuple[tuple[int, str], ...] = (
    (0o400, "r"),
    (0o200, "w"),
    (0o100, "x"),
    (0o040, "r"),
    (0o020, "w"),
    (0o010, "x"),
    (0o004, "r"),
    (0o002, "w"),
    (0o001, "x"),
)


def symbolic(mode_bits: int) -> str:
    """Return the 9-character ``rwxrwxrwx`` form of ``mode_bits``.

    Only the low nine bits are consulted, so file-type and
    setuid/setgid/sticky bits never change the result.
    """
    return "".join(glyph if mode_bits & bit else "-" for bit, glyph in _PERMISSION_BITS)


__all__ = ["symbolic"]
