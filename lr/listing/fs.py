"""Thin wrappers over ``os.stat`` and ``os.scandir`` for listing entries."""

from __future__ import annotations

import os
import stat
from pathlib import Path

from .types import Entry, EntryKind


def stat_path(path: Path | str) -> Entry:
    """Return an ``Entry`` snapshot for ``path``, following symlinks.

    Raises ``OSError`` (``FileNotFoundError``, ``PermissionError``, ...) when
    metadata cannot be read.
    """
    st = os.stat(path)
    kind = EntryKind.DIRECTORY if stat.S_ISDIR(st.st_mode) else EntryKind.FILE
    return Entry(
        path=Path(path),
        kind=kind,
        mode=int(st.st_mode),
        nlink=int(st.st_nlink),
        uid=int(st.st_uid),
        gid=int(st.st_gid),
        size=int(st.st_size),
        mtime=float(st.st_mtime),
    )


def list_directory(directory: Path) -> list[Path]:
    """Return immediate child paths of ``directory`` in enumeration order.

    Opening the directory raises ``OSError`` on failure. An error while
    reading individual entries ends enumeration early and keeps the children
    seen so far.
    """
    children: list[Path] = []
    with os.scandir(directory) as entries:
        try:
            for child in entries:
                children.append(directory / child.name)
        except OSError:
            return children
    return children


def describe_os_error(exc: OSError) -> str:
    """Return the human-readable OS message for ``exc``."""
    if exc.strerror:
        return exc.strerror
    return str(exc)


def path_sort_key(path: Path | str) -> bytes:
    """Byte-wise ordering key for full path strings."""
    return os.fsencode(os.fspath(path))


__all__ = [
    "stat_path",
    "list_directory",
    "describe_os_error",
    "path_sort_key",
]
