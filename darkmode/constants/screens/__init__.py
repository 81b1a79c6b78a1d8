"""Screen-specific constants."""

from darkmode.constants.screens.common import DARK_THEME, LIGHT_THEME

__all__ = [
    "DARK_THEME",
    "LIGHT_THEME",
]
