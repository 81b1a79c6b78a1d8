"""Main application class for the Dark Mode TUI."""

from __future__ import annotations

import logging
from pathlib import Path

from textual.app import App
from textual.binding import Binding
from textual.message import Message
from textual.reactive import reactive

from darkmode.constants import (
    APP_TITLE,
    DARK_THEME,
    LIGHT_THEME,
    STATE_STOP_TIMEOUT,
    SYSTEM_THEME_DEFAULT,
    TOGGLE_FAILED_TITLE,
)
from darkmode.constants.enums import ThemeMode
from darkmode.controllers import PreferenceStore, Subscription, UiStateController
from darkmode.keyboard.app import APP_BINDINGS
from darkmode.models.state import (
    LOADING,
    ConfigManager,
    StorageError,
    Success,
    UiState,
    should_use_dark_theme,
)
from darkmode.screens import MainScreen, SplashScreen

logger = logging.getLogger(__name__)


class DarkModeApp(App[None]):
    """Single-screen TUI that toggles and persists dark mode."""

    TITLE = APP_TITLE
    CSS_PATH = "css/app.tcss"
    BINDINGS: list[Binding] = APP_BINDINGS
    _SCREEN_MAIN_NAME = "main"

    ui_state: reactive[UiState] = reactive(LOADING, init=False)

    class UiStateChanged(Message):
        """Posted by the controller observer when the UI state changes."""

        def __init__(self, state: UiState) -> None:
            super().__init__()
            self.state = state

    def __init__(
        self,
        config_dir: Path | None = None,
        system_theme: str = SYSTEM_THEME_DEFAULT,
        store: PreferenceStore | None = None,
        stop_timeout: float = STATE_STOP_TIMEOUT,
        *args,
        **kwargs,
    ) -> None:
        super().__init__(*args, **kwargs)
        self.config_dir = config_dir
        self.system_theme = ThemeMode(system_theme)

        if store is None:
            store = PreferenceStore(ConfigManager.in_directory(config_dir))
        self.store = store
        self.controller = UiStateController(store, stop_timeout=stop_timeout)
        self._subscription: Subscription | None = None

        self._apply_theme()

    @property
    def system_prefers_dark(self) -> bool:
        return self.system_theme is ThemeMode.DARK

    def _apply_theme(self) -> None:
        """Apply the theme for the current UI state."""
        if should_use_dark_theme(self.ui_state, self.system_prefers_dark):
            self.theme = DARK_THEME
        else:
            self.theme = LIGHT_THEME

    def on_mount(self) -> None:
        """Show the main screen behind the splash and start observing state."""
        self.install_screen(MainScreen(), self._SCREEN_MAIN_NAME)
        self.push_screen(self._SCREEN_MAIN_NAME)
        self.push_screen(SplashScreen())
        self._subscription = self.controller.subscribe(self._on_controller_state)

    def _on_controller_state(self, state: UiState) -> None:
        self.post_message(self.UiStateChanged(state))

    def on_dark_mode_app_ui_state_changed(self, message: DarkModeApp.UiStateChanged) -> None:
        self.ui_state = message.state

    def watch_ui_state(self, state: UiState) -> None:
        self._apply_theme()
        main_screen = self.get_screen(self._SCREEN_MAIN_NAME)
        if isinstance(main_screen, MainScreen):
            main_screen.render_state(state)
        if isinstance(state, Success):
            self._dismiss_splash()

    def _dismiss_splash(self) -> None:
        if isinstance(self.screen, SplashScreen):
            logger.debug("First preference value received, leaving splash screen")
            self.pop_screen()

    def action_toggle_dark_mode(self) -> None:
        """Flip the stored preference in a background worker."""
        if not isinstance(self.ui_state, Success):
            return
        self.run_worker(
            self._toggle_dark_mode(),
            name="toggle-dark-mode",
            group="preferences",
            exit_on_error=False,
        )

    async def _toggle_dark_mode(self) -> None:
        try:
            await self.controller.toggle_dark_mode()
        except StorageError as e:
            logger.exception("Failed to toggle dark mode")
            self.notify(str(e), title=TOGGLE_FAILED_TITLE, severity="error")
            # The switch moved on click; put it back to the stored value.
            main_screen = self.get_screen(self._SCREEN_MAIN_NAME)
            if isinstance(main_screen, MainScreen):
                main_screen.render_state(self.ui_state)

    async def on_unmount(self) -> None:
        """End the observing session."""
        if self._subscription is not None:
            self._subscription.cancel()
            self._subscription = None
        await self.controller.close()


__all__ = [
    "DarkModeApp",
]
