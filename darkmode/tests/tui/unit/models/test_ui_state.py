"""Unit tests for the Loading/Success UI state."""

from __future__ import annotations

import dataclasses

import pytest

from darkmode.models.state import LOADING, Loading, Success, should_use_dark_theme


@pytest.mark.unit
@pytest.mark.fast
class TestUiStateValues:
    """Test UI state value semantics."""

    def test_loading_instances_are_equal(self) -> None:
        assert Loading() == LOADING

    def test_success_compares_by_flag(self) -> None:
        assert Success(True) == Success(True)
        assert Success(True) != Success(False)
        assert Success(False) != LOADING

    def test_success_is_immutable(self) -> None:
        state = Success(True)
        with pytest.raises(dataclasses.FrozenInstanceError):
            state.is_dark_mode = False  # type: ignore[misc]


class TestShouldUseDarkTheme:
    """Test theme resolution from UI state."""

    @pytest.mark.parametrize("system_default", [True, False])
    def test_loading_follows_system_default(self, system_default: bool) -> None:
        assert should_use_dark_theme(LOADING, system_default) is system_default

    @pytest.mark.parametrize("system_default", [True, False])
    def test_success_ignores_system_default(self, system_default: bool) -> None:
        assert should_use_dark_theme(Success(True), system_default) is True
        assert should_use_dark_theme(Success(False), system_default) is False
