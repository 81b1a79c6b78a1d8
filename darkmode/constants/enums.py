"""All enum definitions for the TUI."""

from enum import Enum


class ThemeMode(Enum):
    """Theme mode values."""

    DARK = "dark"
    LIGHT = "light"


__all__ = [
    "ThemeMode",
]
