"""Persisted preference store."""

from darkmode.controllers.preferences.store import PreferenceStore

__all__ = [
    "PreferenceStore",
]
