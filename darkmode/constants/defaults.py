"""Default values for settings.

All default values used in the preference model and runtime options.
"""

from typing import Final

# ============================================================================
# Preference defaults
# ============================================================================

DARK_MODE_DEFAULT: Final = False

# ============================================================================
# Storage defaults
# ============================================================================

SETTINGS_NAMESPACE: Final = "settings"
SETTINGS_FILE_NAME: Final = f"{SETTINGS_NAMESPACE}.json"
CONFIG_DIR_DEFAULT: Final = "~/.config/darkmode"
CONFIG_DIR_ENV_VAR: Final = "DARKMODE_CONFIG_DIR"

# ============================================================================
# Runtime defaults
# ============================================================================

SYSTEM_THEME_DEFAULT: Final = "dark"
LOG_LEVEL_DEFAULT: Final = "WARNING"

__all__ = [
    "CONFIG_DIR_DEFAULT",
    "CONFIG_DIR_ENV_VAR",
    "DARK_MODE_DEFAULT",
    "LOG_LEVEL_DEFAULT",
    "SETTINGS_FILE_NAME",
    "SETTINGS_NAMESPACE",
    "SYSTEM_THEME_DEFAULT",
]
