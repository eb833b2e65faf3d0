"""Display module for showcase.

This module provides themed console output for the discovered content.
"""

from showcase.display.console import get_console, reset_console
from showcase.display.listing import (
    display_config,
    display_experiences,
    display_projects,
    display_stats,
)
from showcase.display.theme import (
    THEMES,
    ColorPalette,
    Theme,
    get_current_theme,
    reset_theme,
    set_theme,
)

__all__ = [
    "get_console",
    "reset_console",
    "display_config",
    "display_experiences",
    "display_projects",
    "display_stats",
    "ColorPalette",
    "Theme",
    "THEMES",
    "get_current_theme",
    "reset_theme",
    "set_theme",
]
