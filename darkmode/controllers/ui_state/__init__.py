"""UI state controller."""

from darkmode.controllers.ui_state.controller import (
    StateObserver,
    Subscription,
    UiStateController,
)

__all__ = [
    "StateObserver",
    "Subscription",
    "UiStateController",
]
