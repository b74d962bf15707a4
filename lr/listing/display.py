"""Display-name computation and hidden-entry filtering.

An entry enumerated from a directory argument is shown relative to that
directory, so listing ``src`` prints ``main.py`` rather than ``src/main.py``.
The hidden check applies to the entry's own name, never to its parents.
"""

from __future__ import annotations

import os
from pathlib import Path, PurePath


def printable_path(path: Path | str) -> str:
    """Return ``path`` as text any UTF-8 stream accepts.

    Undecodable filename bytes become U+FFFD instead of lone surrogates.
    """
    return os.fsencode(os.fspath(path)).decode("utf-8", "replace")


def normalize_relative(path: Path | str) -> str:
    """Return ``path`` with ``.`` segments and repeated separators removed."""
    return printable_path(PurePath(path))


def display_name(path: Path | str, directory: Path | str | None = None) -> str:
    """Return the name shown for ``path`` within its listing context.

    The components of ``directory`` are dropped from the front of ``path``.
    When there is no listing directory, or ``path`` does not live under it,
    the normalized relative form of ``path`` is returned instead.
    """
    if directory is not None:
        try:
            relative = PurePath(path).relative_to(PurePath(directory))
        except ValueError:
            relative = None
        if relative is not None and relative.parts:
            return printable_path(relative)
    return normalize_relative(path)


def visibility_name(display: str, path: Path | str, directory: Path | str | None = None) -> str:
    """Return the name the hidden filter judges.

    Directory children are judged by their display name. A path given
    directly is judged by its last component, so ``../notes.txt`` is not
    mistaken for a hidden entry.
    """
    if directory is not None:
        return display
    return PurePath(path).name or display


def is_hidden(name: str) -> bool:
    return name.startswith(".")


def is_visible(name: str, show_all: bool) -> bool:
    """Return whether a name passes the hidden-entry filter."""
    return show_all or not is_hidden(name)


__all__ = [
    "printable_path",
    "normalize_relative",
    "display_name",
    "visibility_name",
    "is_hidden",
    "is_visible",
]
