"""Screens for the Dark Mode TUI."""

from darkmode.screens.base_screen import BaseScreen
from darkmode.screens.main import MainScreen
from darkmode.screens.splash import SplashScreen

__all__ = [
    "BaseScreen",
    "MainScreen",
    "SplashScreen",
]
