"""UI theme definitions and color-policy helpers.

Themes are ANSI palettes for listing output. Whether any styling is emitted
at all is decided separately by the color policy (``auto``/``always``/``never``).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TextIO

COLOR_POLICIES = ("auto", "always", "never")
DEFAULT_COLOR_POLICY = "auto"


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by renderers."""

    name: str
    reset: str
    directory: str
    file: str


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    directory="\033[1;34m",
    file="",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    directory="\033[1;38;5;45m",
    file="\033[38;5;252m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    directory="",
    file="",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


def normalize_color_policy(policy: str | None) -> str:
    if not policy:
        return DEFAULT_COLOR_POLICY
    candidate = str(policy).strip().lower()
    return candidate if candidate in COLOR_POLICIES else DEFAULT_COLOR_POLICY


def color_enabled(policy: str | None, stream: TextIO) -> bool:
    """Return whether styling should be written to ``stream``.

    ``auto`` styles only when ``stream`` is attached to a terminal.
    """
    normalized = normalize_color_policy(policy)
    if normalized == "always":
        return True
    if normalized == "never":
        return False
    isatty = getattr(stream, "isatty", None)
    if isatty is None:
        return False
    try:
        return bool(isatty())
    except (OSError, ValueError):
        return False


__all__ = [
    "COLOR_POLICIES",
    "DEFAULT_COLOR_POLICY",
    "UITheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
    "normalize_color_policy",
    "color_enabled",
]
