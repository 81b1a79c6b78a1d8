"""Unit tests for default values in constants/defaults.py and timeouts.py."""

from __future__ import annotations

import pytest

from darkmode.constants import (
    APP_TITLE,
    DARK_MODE_DEFAULT,
    DARK_MODE_KEY,
    DARK_THEME,
    LIGHT_THEME,
    SETTINGS_FILE_NAME,
    SETTINGS_NAMESPACE,
    STATE_STOP_TIMEOUT,
    SYSTEM_THEME_DEFAULT,
    ThemeMode,
)

# =============================================================================
# Preference defaults
# =============================================================================


@pytest.mark.unit
@pytest.mark.fast
class TestPreferenceDefaults:
    """Test persisted preference defaults."""

    def test_dark_mode_default_is_false(self) -> None:
        assert DARK_MODE_DEFAULT is False

    def test_dark_mode_key(self) -> None:
        assert DARK_MODE_KEY == "dark_mode"

    def test_settings_namespace(self) -> None:
        assert SETTINGS_NAMESPACE == "settings"

    def test_settings_file_name_uses_namespace(self) -> None:
        assert SETTINGS_FILE_NAME == "settings.json"


# =============================================================================
# Runtime defaults
# =============================================================================


class TestRuntimeDefaults:
    """Test runtime option defaults."""

    def test_state_stop_timeout_positive(self) -> None:
        assert isinstance(STATE_STOP_TIMEOUT, float)
        assert STATE_STOP_TIMEOUT == 5.0

    def test_system_theme_default_is_a_theme_mode(self) -> None:
        assert ThemeMode(SYSTEM_THEME_DEFAULT) is ThemeMode.DARK

    def test_app_title_not_empty(self) -> None:
        assert APP_TITLE


@pytest.mark.unit
@pytest.mark.fast
class TestEnumsAndThemes:
    """Test enums and theme names."""

    def test_theme_mode_values(self) -> None:
        assert {mode.value for mode in ThemeMode} == {"dark", "light"}

    def test_theme_names_are_textual_builtins(self) -> None:
        assert DARK_THEME == "textual-dark"
        assert LIGHT_THEME == "textual-light"
