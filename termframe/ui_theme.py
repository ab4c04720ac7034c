"""UI theme definitions and selection helpers.

Themes are UI-only ANSI palettes (gutter/minimap/scrollbar/selection).
Syntax colors come from the syntax collaborator as opaque span tags.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by renderers.

    Instances are immutable; a theme change swaps the whole value so no
    renderer ever sees a half-updated palette.
    """

    name: str
    reset: str
    gutter: str
    gutter_active: str
    minimap_indicator: str
    minimap_text: str
    selection: str
    cursor: str
    scrollbar_track: str
    scrollbar_thumb: str


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    gutter="\033[38;5;243m",
    gutter_active="\033[1;38;5;229m",
    minimap_indicator="\033[38;5;44m",
    minimap_text="\033[38;5;246m",
    selection="\033[48;2;58;92;188m",
    cursor="\033[7m",
    scrollbar_track="\033[2;38;5;240m",
    scrollbar_thumb="\033[38;5;250m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    gutter="\033[2;38;5;110m",
    gutter_active="\033[1;38;5;45m",
    minimap_indicator="\033[38;5;39m",
    minimap_text="\033[38;5;73m",
    selection="\033[48;5;24m",
    cursor="\033[7m",
    scrollbar_track="\033[2;38;5;31m",
    scrollbar_thumb="\033[38;5;117m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    gutter="",
    gutter_active="",
    minimap_indicator="",
    minimap_text="",
    selection="",
    cursor="",
    scrollbar_track="",
    scrollbar_thumb="",
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


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]
