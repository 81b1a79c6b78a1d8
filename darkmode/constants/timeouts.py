"""Timeout constants for the TUI.

All timeout and interval values for shared subscriptions and async operations.
"""

from typing import Final

# ============================================================================
# Shared subscription timeouts (float, in seconds)
# ============================================================================

# How long the shared preference collection keeps running after the last
# observer leaves.
STATE_STOP_TIMEOUT: Final = 5.0

__all__ = [
    "STATE_STOP_TIMEOUT",
]
