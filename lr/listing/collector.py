"""Expand path arguments into a flat, sorted list of concrete paths.

Directory arguments are replaced by their immediate children, other
arguments pass through as-is. Unreadable arguments are reported and skipped
so one bad path never stops the rest of the listing.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from ..diagnostics import Diagnostics
from .display import printable_path
from .fs import describe_os_error, list_directory, path_sort_key, stat_path
from .types import CollectedPath, Entry


def collect(arguments: Iterable[str], diagnostics: Diagnostics) -> list[CollectedPath]:
    """Resolve ``arguments`` into collected paths sorted by full path.

    Diagnostics are reported in argument order. The final order is byte-wise
    ascending on the path string and does not depend on directory
    enumeration order.
    """
    collected: list[CollectedPath] = []
    for argument in arguments:
        try:
            entry = stat_path(argument)
        except OSError as exc:
            diagnostics.report(f"cannot access '{printable_path(argument)}': {describe_os_error(exc)}")
            continue

        path = Path(argument)
        if not entry.is_dir:
            collected.append(CollectedPath(path=path))
            continue

        try:
            children = list_directory(path)
        except OSError as exc:
            diagnostics.report(f"cannot open directory '{printable_path(argument)}': {describe_os_error(exc)}")
            continue
        collected.extend(
            CollectedPath(path=child, directory=path)
            for child in children
        )

    collected.sort(key=lambda item: path_sort_key(item.path))
    return collected


def collect_paths(arguments: Iterable[str], diagnostics: Diagnostics) -> list[Path]:
    """Return only the sorted paths from :func:`collect`."""
    return [item.path for item in collect(arguments, diagnostics)]


def resolve(path: Path, diagnostics: Diagnostics) -> Entry | None:
    """Read metadata for ``path``, reporting and returning ``None`` on failure."""
    try:
        return stat_path(path)
    except OSError as exc:
        diagnostics.report(f"cannot access file's metadata '{printable_path(path)}': {describe_os_error(exc)}")
        return None


__all__ = [
    "collect",
    "collect_paths",
    "resolve",
]
