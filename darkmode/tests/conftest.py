"""Shared fixtures for the Dark Mode TUI tests."""

from __future__ import annotations

import threading
from collections.abc import Iterator
from pathlib import Path

import pytest

from darkmode.controllers import PreferenceStore
from darkmode.models.state import (
    ConfigManager,
    PreferenceSettings,
    StorageWriteError,
)


class FailingConfigManager(ConfigManager):
    """ConfigManager whose saves fail while ``fail_saves`` is set."""

    def __init__(self, path: Path) -> None:
        super().__init__(path)
        self.fail_saves = True
        self.save_attempts = 0

    def save(self, settings: PreferenceSettings) -> None:
        self.save_attempts += 1
        if self.fail_saves:
            raise StorageWriteError(f"Cannot write {self.path}: disk full")
        super().save(settings)


class BlockingConfigManager(ConfigManager):
    """ConfigManager whose loads wait until ``release`` is set."""

    def __init__(self, path: Path) -> None:
        super().__init__(path)
        self.release = threading.Event()

    def load(self) -> PreferenceSettings:
        self.release.wait(timeout=10)
        return super().load()


@pytest.fixture
def settings_path(tmp_path: Path) -> Path:
    return tmp_path / "config" / "settings.json"


@pytest.fixture
def config_manager(settings_path: Path) -> ConfigManager:
    return ConfigManager(settings_path)


@pytest.fixture
def store(config_manager: ConfigManager) -> PreferenceStore:
    return PreferenceStore(config_manager)


@pytest.fixture
def failing_config_manager(settings_path: Path) -> FailingConfigManager:
    return FailingConfigManager(settings_path)


@pytest.fixture
def blocking_config_manager(settings_path: Path) -> Iterator[BlockingConfigManager]:
    manager = BlockingConfigManager(settings_path)
    yield manager
    manager.release.set()
