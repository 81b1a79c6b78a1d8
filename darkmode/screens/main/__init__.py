from darkmode.screens.main.main_screen import MainScreen

__all__ = [
    "MainScreen",
]
