"""Owner and group name lookups with numeric fallback.

Lookups are memoized for the life of the process because most entries in a
listing share a handful of owners.
"""

from __future__ import annotations

import grp
import pwd
from functools import lru_cache

IDENTITY_CACHE_MAX = 256


@lru_cache(maxsize=IDENTITY_CACHE_MAX)
def lookup_user_name(uid: int) -> str | None:
    """Return the account name for ``uid`` or ``None`` when unmapped."""
    try:
        return pwd.getpwuid(uid).pw_name
    except (KeyError, OverflowError):
        return None


@lru_cache(maxsize=IDENTITY_CACHE_MAX)
def lookup_group_name(gid: int) -> str | None:
    """Return the group name for ``gid`` or ``None`` when unmapped."""
    try:
        return grp.getgrgid(gid).gr_name
    except (KeyError, OverflowError):
        return None


def user_display_name(uid: int) -> str:
    name = lookup_user_name(uid)
    return name if name is not None else str(uid)


def group_display_name(gid: int) -> str:
    name = lookup_group_name(gid)
    return name if name is not None else str(gid)


def clear_identity_cache() -> None:
    """Forget memoized user/group lookups."""
    lookup_user_name.cache_clear()
    lookup_group_name.cache_clear()


__all__ = [
    "lookup_user_name",
    "lookup_group_name",
    "user_display_name",
    "group_display_name",
    "clear_identity_cache",
]
