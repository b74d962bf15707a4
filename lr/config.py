"""Persistent JSON config helpers.

Stores default listing flags, color policy, and theme name.
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
from pathlib import Path

from platformdirs import user_config_dir

from .ui_theme import COLOR_POLICIES

APP_NAME = "lr"
CONFIG_FILENAME = "config.json"
DEFAULT_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
CONFIG_PATH = DEFAULT_CONFIG_PATH


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Filesystem errors are ignored so an unwritable config never breaks a
    listing.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except OSError:
        pass


def _load_bool(key: str) -> bool:
    """Only explicit booleans are honored; anything else reads as ``False``."""
    value = load_config().get(key)
    return value if isinstance(value, bool) else False


def load_show_hidden() -> bool:
    """Return persisted default for ``--all``."""
    return _load_bool("show_hidden")


def load_long_format() -> bool:
    """Return persisted default for ``--long``."""
    return _load_bool("long")


def load_color_policy() -> str | None:
    """Load persisted color policy, returning ``None`` when unset/invalid."""
    value = load_config().get("color")
    if not isinstance(value, str):
        return None
    candidate = value.strip().lower()
    return candidate if candidate in COLOR_POLICIES else None


def load_theme_name() -> str | None:
    """Load persisted UI theme name, returning ``None`` when unset/invalid."""
    value = load_config().get("theme")
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def save_listing_defaults(
    show_hidden: bool,
    long_format: bool,
    color_policy: str | None = None,
    theme_name: str | None = None,
) -> None:
    """Persist listing defaults, keeping unrelated keys intact."""
    config = load_config()
    config["show_hidden"] = bool(show_hidden)
    config["long"] = bool(long_format)
    if color_policy is not None and color_policy in COLOR_POLICIES:
        config["color"] = color_policy
    if theme_name is not None and str(theme_name).strip():
        config["theme"] = str(theme_name).strip()
    save_config(config)
