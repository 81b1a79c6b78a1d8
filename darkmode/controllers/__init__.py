"""Controllers for the Dark Mode TUI.

This package provides:
- PreferenceStore: the persisted dark mode flag with reactive reads
- UiStateController: Loading/Success screen state derived from the store
"""

from darkmode.controllers.preferences import PreferenceStore
from darkmode.controllers.ui_state import (
    StateObserver,
    Subscription,
    UiStateController,
)

__all__ = [
    "PreferenceStore",
    "StateObserver",
    "Subscription",
    "UiStateController",
]
