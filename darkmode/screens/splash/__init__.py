from darkmode.screens.splash.splash_screen import SplashScreen

__all__ = [
    "SplashScreen",
]
