"""Symbolic ``rwx`` rendering of POSIX permission bits."""

from __future__ import annotations

from .types import Entry

# (read, write, execute) masks per owner class, in display order.
OWNER_CLASS_MASKS: tuple[tuple[int, int, int], ...] = (
    (0o400, 0o200, 0o100),
    (0o040, 0o020, 0o010),
    (0o004, 0o002, 0o001),
)
PERMISSION_CHARS = ("r", "w", "x")


def format_triple(mode: int, masks: tuple[int, int, int]) -> str:
    """Render one owner class as three ``r``/``w``/``x``/``-`` characters."""
    return "".join(
        char if mode & mask else "-"
        for char, mask in zip(PERMISSION_CHARS, masks)
    )


def format_mode(mode: int) -> str:
    """Return the 9-character ``rwxr-xr-x`` form of ``mode``.

    Only the nine user/group/other bits are inspected. File-type bits and
    setuid/setgid/sticky bits are ignored, so the result is always exactly
    nine characters.
    """
    return "".join(format_triple(mode, masks) for masks in OWNER_CLASS_MASKS)


def type_char(entry: Entry) -> str:
    """Leading long-format type column: ``d`` for directories, else ``-``."""
    return "d" if entry.is_dir else "-"


__all__ = [
    "OWNER_CLASS_MASKS",
    "format_triple",
    "format_mode",
    "type_char",
]
