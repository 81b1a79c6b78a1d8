"""Splash screen shown until the first preference value is known."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Container
from textual.widgets import LoadingIndicator, Static

from darkmode.constants.values import SPLASH_MESSAGE
from darkmode.screens.base_screen import BaseScreen


class SplashScreen(BaseScreen):
    """Blocking screen kept on top while the UI state is ``Loading``."""

    DEFAULT_CSS = """
    SplashScreen {
        align: center middle;
        background: $background;
    }

    #splash-panel {
        width: 40;
        height: auto;
        padding: 1 2;
        border: round $primary;
        background: $surface;
    }

    #splash-message {
        width: 1fr;
        content-align: center middle;
        text-align: center;
    }

    #splash-indicator {
        height: 3;
    }
    """

    @property
    def screen_title(self) -> str:
        return "Loading"

    def compose(self) -> ComposeResult:
        yield Container(
            LoadingIndicator(id="splash-indicator"),
            Static(SPLASH_MESSAGE, id="splash-message"),
            id="splash-panel",
        )
