"""State models: persisted settings and UI state."""

from darkmode.models.state.app_settings import (
    PreferenceSettings,
    StorageError,
    StorageReadError,
    StorageWriteError,
)
from darkmode.models.state.config_manager import ConfigManager, resolve_config_dir
from darkmode.models.state.ui_state import (
    LOADING,
    Loading,
    Success,
    UiState,
    should_use_dark_theme,
)

__all__ = [
    "LOADING",
    "ConfigManager",
    "Loading",
    "PreferenceSettings",
    "StorageError",
    "StorageReadError",
    "StorageWriteError",
    "Success",
    "UiState",
    "resolve_config_dir",
    "should_use_dark_theme",
]
