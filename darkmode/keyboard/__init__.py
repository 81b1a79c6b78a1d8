"""Keyboard bindings module.

- app: App-level bindings (APP_BINDINGS)
"""

from darkmode.keyboard.app import APP_BINDINGS

__all__ = [
    "APP_BINDINGS",
]
