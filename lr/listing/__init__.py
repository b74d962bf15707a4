"""Entry resolution for directory listings.

This package contains the non-rendering listing pipeline:
- entry/metadata datatypes
- stat and directory enumeration wrappers
- argument collection and metadata resolution
- display-name normalization and hidden filtering
- permission-bit and owner/group formatting
"""

from __future__ import annotations

from .types import CollectedPath, Entry, EntryKind
from .fs import describe_os_error, list_directory, path_sort_key, stat_path
from .collector import collect, collect_paths, resolve
from .display import (
    display_name,
    is_hidden,
    is_visible,
    normalize_relative,
    printable_path,
    visibility_name,
)
from .permissions import format_mode, type_char
from .identity import clear_identity_cache, group_display_name, user_display_name

__all__ = [
    "CollectedPath",
    "Entry",
    "EntryKind",
    "describe_os_error",
    "list_directory",
    "path_sort_key",
    "stat_path",
    "collect",
    "collect_paths",
    "resolve",
    "display_name",
    "is_hidden",
    "is_visible",
    "normalize_relative",
    "printable_path",
    "visibility_name",
    "format_mode",
    "type_char",
    "clear_identity_cache",
    "group_display_name",
    "user_display_name",
]
