"""Constants module for the Dark Mode TUI.

Centralized constants organized by domain:
- enums.py: All Enum class definitions
- values.py: Scalar constants (strings with Final)
- timeouts.py: Timeout values (seconds)
- defaults.py: Default values for settings
- screens/: Screen-specific constants

Note: Keyboard bindings are defined in darkmode.keyboard module.
"""

from darkmode.constants.defaults import (
    CONFIG_DIR_DEFAULT,
    CONFIG_DIR_ENV_VAR,
    DARK_MODE_DEFAULT,
    LOG_LEVEL_DEFAULT,
    SETTINGS_FILE_NAME,
    SETTINGS_NAMESPACE,
    SYSTEM_THEME_DEFAULT,
)
from darkmode.constants.enums import ThemeMode
from darkmode.constants.screens.common import DARK_THEME, LIGHT_THEME
from darkmode.constants.timeouts import STATE_STOP_TIMEOUT
from darkmode.constants.values import (
    APP_TITLE,
    DARK_MODE_KEY,
    DARK_MODE_LABEL,
    SPLASH_MESSAGE,
    TOGGLE_FAILED_TITLE,
)

__all__ = [
    # Application
    "APP_TITLE",
    # Storage
    "CONFIG_DIR_DEFAULT",
    "CONFIG_DIR_ENV_VAR",
    # Themes
    "DARK_THEME",
    # Preferences
    "DARK_MODE_DEFAULT",
    "DARK_MODE_KEY",
    "DARK_MODE_LABEL",
    "LIGHT_THEME",
    "LOG_LEVEL_DEFAULT",
    "SETTINGS_FILE_NAME",
    "SETTINGS_NAMESPACE",
    "SPLASH_MESSAGE",
    # Timeouts
    "STATE_STOP_TIMEOUT",
    "SYSTEM_THEME_DEFAULT",
    "TOGGLE_FAILED_TITLE",
    # Enums
    "ThemeMode",
]
