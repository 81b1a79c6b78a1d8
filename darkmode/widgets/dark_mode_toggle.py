"""Dark mode toggle: a labelled switch bound to the preference."""

from __future__ import annotations

from contextlib import suppress

from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.css.query import NoMatches
from textual.message import Message
from textual.reactive import reactive
from textual.widgets import Static, Switch

from darkmode.constants.values import DARK_MODE_LABEL


class DarkModeToggle(Horizontal):
    """Switch showing ``is_dark_mode``; posts :class:`Toggled` on user input.

    Setting ``is_dark_mode`` updates the switch without posting a message, so
    state pushed from the preference store never loops back as a toggle.
    """

    DEFAULT_CSS = """
    DarkModeToggle {
        width: auto;
        height: auto;
        align: center middle;
    }

    DarkModeToggle #dark-mode-label {
        width: auto;
        padding: 1 1;
    }
    """

    is_dark_mode = reactive(False, always_update=True)

    class Toggled(Message):
        """The user flipped the switch."""

        def __init__(self, toggle: DarkModeToggle, requested: bool) -> None:
            super().__init__()
            self.toggle = toggle
            self.requested = requested

        @property
        def control(self) -> DarkModeToggle:
            return self.toggle

    def __init__(
        self,
        is_dark_mode: bool = False,
        *,
        label: str = DARK_MODE_LABEL,
        id: str | None = None,
        classes: str | None = None,
    ) -> None:
        super().__init__(id=id, classes=classes)
        self._label = label
        self.set_reactive(DarkModeToggle.is_dark_mode, is_dark_mode)

    def compose(self) -> ComposeResult:
        yield Switch(value=self.is_dark_mode, id="dark-mode-switch")
        yield Static(self._label, id="dark-mode-label")

    def watch_is_dark_mode(self, is_dark_mode: bool) -> None:
        with suppress(NoMatches):
            switch = self.query_one("#dark-mode-switch", Switch)
            with switch.prevent(Switch.Changed):
                switch.value = is_dark_mode

    def on_switch_changed(self, event: Switch.Changed) -> None:
        event.stop()
        if event.value == self.is_dark_mode:
            return
        self.post_message(self.Toggled(self, event.value))


__all__ = [
    "DarkModeToggle",
]
