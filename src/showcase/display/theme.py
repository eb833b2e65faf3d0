"""Theme system for showcase display.

This module defines color palettes and themes for the console display.
"""

from dataclasses import dataclass
from typing import Optional

ThemeName = str


@dataclass
class ColorPalette:
    """Color palette for a UI theme."""

    # Semantic colors
    primary: str = "cyan"
    success: str = "green"
    error: str = "red"
    warning: str = "yellow"
    info: str = "blue"
    muted: str = "dim"

    # Content-specific colors
    entry_title: str = "bold cyan"
    asset_path: str = "cyan"
    link_url: str = "blue underline"
    media_kind: str = "magenta"


@dataclass
class Theme:
    """A complete theme with palette and behavior settings."""

    name: ThemeName
    palette: ColorPalette


THEMES: dict[str, Theme] = {
    "default": Theme(
        name="default",
        palette=ColorPalette(),
    ),
    "light": Theme(
        name="light",
        palette=ColorPalette(
            primary="blue",
            warning="bright_yellow",
            muted="grey50",
            entry_title="bold blue",
            asset_path="blue",
        ),
    ),
    "minimal": Theme(
        name="minimal",
        palette=ColorPalette(
            primary="white",
            success="white",
            error="white",
            warning="white",
            info="white",
            muted="dim",
            entry_title="bold",
            asset_path="white",
            link_url="white",
            media_kind="white",
        ),
    ),
}


_current_theme: Optional[Theme] = None


def set_theme(name: str) -> None:
    """Set the current theme by name. Unknown names fall back to default."""
    global _current_theme
    _current_theme = THEMES.get(name, THEMES["default"])


def get_current_theme() -> Theme:
    """Get the current theme, loading from settings if needed."""
    if _current_theme is not None:
        return _current_theme

    from showcase.config import get_settings

    set_theme(get_settings().color_theme)
    return _current_theme if _current_theme is not None else THEMES["default"]


def reset_theme() -> None:
    """Forget the current theme so the next lookup reloads it."""
    global _current_theme
    _current_theme = None
