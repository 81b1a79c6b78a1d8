"""Widgets module for the Dark Mode TUI."""

from darkmode.widgets.dark_mode_toggle import DarkModeToggle

__all__ = [
    "DarkModeToggle",
]
