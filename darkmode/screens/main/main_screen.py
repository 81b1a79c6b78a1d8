"""Main screen: a single dark mode toggle."""

from __future__ import annotations

from contextlib import suppress

from textual.app import ComposeResult
from textual.containers import Container
from textual.css.query import NoMatches
from textual.widgets import Footer, Header

from darkmode.models.state.ui_state import UiState, should_use_dark_theme
from darkmode.screens.base_screen import BaseScreen
from darkmode.widgets import DarkModeToggle


class MainScreen(BaseScreen):
    """Renders the current UI state and forwards user toggles to the app."""

    @property
    def screen_title(self) -> str:
        return "Settings"

    def compose(self) -> ComposeResult:
        yield Header()
        yield Container(
            DarkModeToggle(
                is_dark_mode=should_use_dark_theme(
                    self.app.ui_state, self.app.system_prefers_dark
                ),
                id="dark-mode-toggle",
            ),
            id="main-content",
        )
        yield Footer()

    def render_state(self, state: UiState) -> None:
        """Bring the toggle in line with ``state``."""
        with suppress(NoMatches):
            toggle = self.query_one("#dark-mode-toggle", DarkModeToggle)
            toggle.is_dark_mode = should_use_dark_theme(
                state, self.app.system_prefers_dark
            )

    def on_dark_mode_toggle_toggled(self, event: DarkModeToggle.Toggled) -> None:
        event.stop()
        self.app.action_toggle_dark_mode()
