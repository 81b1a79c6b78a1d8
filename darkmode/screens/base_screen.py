"""Base screen class for the Dark Mode TUI."""

from __future__ import annotations

from typing import TYPE_CHECKING, cast

from textual.screen import Screen

from darkmode.constants.values import APP_TITLE

if TYPE_CHECKING:
    from darkmode.app import DarkModeApp


class BaseScreen(Screen[None]):
    """Common base for the application's screens.

    Subclasses override ``screen_title`` to set the window sub-title while
    they are active.
    """

    @property
    def screen_title(self) -> str:
        """Title displayed in the application window."""
        return APP_TITLE

    @property
    def app(self) -> DarkModeApp:
        """Get the application instance."""
        return cast("DarkModeApp", super().app)

    def on_screen_resume(self) -> None:
        self.sub_title = self.screen_title
