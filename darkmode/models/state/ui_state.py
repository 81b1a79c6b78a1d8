"""UI state presented to screens: ``Loading`` or ``Success(is_dark_mode)``."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias


@dataclass(frozen=True)
class Loading:
    """No persisted value has been observed yet."""


@dataclass(frozen=True)
class Success:
    """The resolved dark mode preference."""

    is_dark_mode: bool


UiState: TypeAlias = Loading | Success

LOADING = Loading()


def should_use_dark_theme(state: UiState, system_default: bool) -> bool:
    """Return whether the dark theme applies for ``state``.

    While loading, the caller's system default decides.
    """
    if isinstance(state, Success):
        return state.is_dark_mode
    return system_default


__all__ = [
    "LOADING",
    "Loading",
    "Success",
    "UiState",
    "should_use_dark_theme",
]
