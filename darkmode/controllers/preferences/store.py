"""Reactive store for the persisted dark mode preference.

The store owns the single ``dark_mode`` flag of the settings namespace.
Readers get an endless stream that replays the latest value and then follows
every change; writers go through :meth:`PreferenceStore.toggle`, which is
serialized so concurrent toggles never lose an update.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import AsyncIterator

from darkmode.constants.defaults import DARK_MODE_DEFAULT
from darkmode.models.state.app_settings import StorageError
from darkmode.models.state.config_manager import ConfigManager

logger = logging.getLogger(__name__)


class PreferenceStore:
    """Durable dark mode flag with reactive reads.

    Disk access is dispatched with ``asyncio.to_thread`` so the event loop
    stays responsive. Values are conflated: a slow reader skips intermediate
    values but never sees them out of order.
    """

    def __init__(self, config_manager: ConfigManager) -> None:
        self._config = config_manager
        self._lock = asyncio.Lock()  # Serializes initial load and writes
        self._changed = asyncio.Condition()
        self._value: bool = DARK_MODE_DEFAULT
        self._version = 0  # 0 until the first value is known

    @property
    def config_manager(self) -> ConfigManager:
        return self._config

    @property
    def is_loaded(self) -> bool:
        return self._version > 0

    def current(self) -> bool:
        """Latest known value, without touching storage."""
        return self._value

    async def read(self) -> AsyncIterator[bool]:
        """Yield the current value, then every later change. Never ends."""
        await self._ensure_loaded()
        seen = 0
        while True:
            async with self._changed:
                await self._changed.wait_for(lambda: self._version != seen)
                seen = self._version
                value = self._value
            yield value

    async def toggle(self) -> bool:
        """Flip the persisted flag and publish the new value.

        Returns:
            The value now stored.

        Raises:
            StorageReadError: The current value could not be read.
            StorageWriteError: The new value could not be written.
        """
        async with self._lock:
            settings = await asyncio.to_thread(self._config.load)
            updated = settings.model_copy(update={"dark_mode": not settings.dark_mode})
            await asyncio.to_thread(self._config.save, updated)
            logger.debug(f"Dark mode toggled to {updated.dark_mode}")
            await self._publish(updated.dark_mode)
            return updated.dark_mode

    async def _ensure_loaded(self) -> None:
        if self.is_loaded:
            return
        async with self._lock:
            if self.is_loaded:
                return
            try:
                settings = await asyncio.to_thread(self._config.load)
                value = settings.dark_mode
            except StorageError as e:
                logger.warning(f"Using default dark mode preference: {e}")
                value = DARK_MODE_DEFAULT
            await self._publish(value)

    async def _publish(self, value: bool) -> None:
        async with self._changed:
            self._value = value
            self._version += 1
            self._changed.notify_all()


__all__ = [
    "PreferenceStore",
]
