"""Common screen constants (registered app theme names)."""

# Built-in Textual theme names the preference maps onto.
DARK_THEME = "textual-dark"
LIGHT_THEME = "textual-light"

__all__ = [
    "DARK_THEME",
    "LIGHT_THEME",
]
