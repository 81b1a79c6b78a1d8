"""File-backed storage for the settings namespace.

The namespace is a single JSON document (``settings.json``) in the
configuration directory. Loads and saves are blocking; callers running on
the event loop should dispatch them to a worker thread.
"""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path

from pydantic import ValidationError

from darkmode.constants.defaults import (
    CONFIG_DIR_DEFAULT,
    CONFIG_DIR_ENV_VAR,
    SETTINGS_FILE_NAME,
)
from darkmode.models.state.app_settings import (
    PreferenceSettings,
    StorageError,
    StorageReadError,
    StorageWriteError,
)

logger = logging.getLogger(__name__)


def resolve_config_dir(config_dir: str | Path | None = None) -> Path:
    """Resolve the configuration directory.

    Precedence: explicit argument, then the environment variable, then the
    per-user default.
    """
    raw_value = str(config_dir or "").strip()
    if not raw_value:
        raw_value = os.environ.get(CONFIG_DIR_ENV_VAR, "").strip()
    if not raw_value:
        raw_value = CONFIG_DIR_DEFAULT
    return Path(raw_value).expanduser().absolute()


class ConfigManager:
    """Load and save :class:`PreferenceSettings` from one JSON file."""

    def __init__(self, path: Path) -> None:
        self._path = path

    @classmethod
    def in_directory(cls, config_dir: str | Path | None = None) -> ConfigManager:
        """Build a manager for ``settings.json`` inside the resolved config dir."""
        return cls(resolve_config_dir(config_dir) / SETTINGS_FILE_NAME)

    @property
    def path(self) -> Path:
        return self._path

    def exists(self) -> bool:
        return self._path.is_file()

    def load(self) -> PreferenceSettings:
        """Read the settings file.

        A missing file yields defaults.

        Raises:
            StorageReadError: The file exists but cannot be read or parsed.
        """
        try:
            raw = self._path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.debug(f"No settings file at {self._path}, using defaults")
            return PreferenceSettings()
        except (OSError, UnicodeDecodeError) as e:
            raise StorageReadError(f"Cannot read {self._path}: {e}") from e

        if not raw.strip():
            return PreferenceSettings()

        try:
            settings = PreferenceSettings.model_validate_json(raw)
        except ValidationError as e:
            raise StorageReadError(f"Invalid settings in {self._path}: {e}") from e

        logger.debug(f"Loaded settings from {self._path}: {settings!r}")
        return settings

    def save(self, settings: PreferenceSettings) -> None:
        """Atomically replace the settings file.

        Raises:
            StorageWriteError: The directory or file cannot be written.
        """
        payload = settings.model_dump_json(indent=2, by_alias=True)
        tmp_name: str | None = None
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{self._path.name}.",
                suffix=".tmp",
                dir=self._path.parent,
            )
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(payload)
                handle.flush()
                os.fsync(handle.fileno())
            os.replace(tmp_name, self._path)
            tmp_name = None
        except OSError as e:
            raise StorageWriteError(f"Cannot write {self._path}: {e}") from e
        finally:
            if tmp_name is not None:
                Path(tmp_name).unlink(missing_ok=True)

        logger.debug(f"Saved settings to {self._path}")


__all__ = [
    "ConfigManager",
    "PreferenceSettings",
    "StorageError",
    "StorageReadError",
    "StorageWriteError",
    "resolve_config_dir",
]
