"""Domain datatypes for resolved listing entries."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class EntryKind(Enum):
    """Coarse filesystem object classification used by the renderer."""

    FILE = "file"
    DIRECTORY = "directory"


@dataclass(frozen=True)
class Entry:
    """Metadata snapshot for one path, taken once per listing run.

    ``mode`` carries the raw ``st_mode`` value; only the permission bits are
    rendered, file-type bits are summarized by ``kind``.
    """

    path: Path
    kind: EntryKind
    mode: int
    nlink: int
    uid: int
    gid: int
    size: int
    mtime: float

    @property
    def is_dir(self) -> bool:
        return self.kind is EntryKind.DIRECTORY


@dataclass(frozen=True)
class CollectedPath:
    """Concrete path produced by entry collection.

    ``directory`` is the listing context: the directory argument the path was
    enumerated from, or ``None`` when the path was given directly.
    """

    path: Path
    directory: Path | None = None


__all__ = [
    "EntryKind",
    "Entry",
    "CollectedPath",
]
