"""Scalar constants for the TUI.

All application-level constants with proper type hints using Final.
"""

from typing import Final

# ============================================================================
# Application
# ============================================================================

APP_TITLE: Final = "Dark Mode"

# ============================================================================
# Persisted keys
# ============================================================================

DARK_MODE_KEY: Final = "dark_mode"

# ============================================================================
# Labels
# ============================================================================

DARK_MODE_LABEL: Final = "Dark Mode"
SPLASH_MESSAGE: Final = "Loading preferences..."
TOGGLE_FAILED_TITLE: Final = "Preference not saved"

__all__ = [
    "APP_TITLE",
    "DARK_MODE_KEY",
    "DARK_MODE_LABEL",
    "SPLASH_MESSAGE",
    "TOGGLE_FAILED_TITLE",
]
