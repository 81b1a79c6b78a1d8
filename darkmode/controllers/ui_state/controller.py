"""UI state controller - turns the preference stream into screen state.

The controller shares one collection of the preference stream between all
observers. Collection starts with the first subscriber and stops
``stop_timeout`` seconds after the last one leaves; a subscriber arriving
inside that window keeps the running collection. The last state is kept
across stops, so a session never returns to ``Loading`` once it has seen a
value.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from contextlib import suppress

from darkmode.constants.timeouts import STATE_STOP_TIMEOUT
from darkmode.controllers.preferences.store import PreferenceStore
from darkmode.models.state.ui_state import LOADING, Success, UiState

logger = logging.getLogger(__name__)

StateObserver = Callable[[UiState], None]


class Subscription:
    """Handle returned by :meth:`UiStateController.subscribe`."""

    def __init__(self, controller: UiStateController, observer: StateObserver) -> None:
        self._controller = controller
        self._observer = observer
        self._active = True

    @property
    def active(self) -> bool:
        return self._active

    def cancel(self) -> None:
        """Detach the observer. Safe to call more than once."""
        if not self._active:
            return
        self._active = False
        self._controller.unsubscribe(self._observer)


class UiStateController:
    """Presentation state for the dark mode screen.

    Args:
        store: Preference store to observe and write through.
        stop_timeout: Seconds the shared collection outlives its last
            subscriber.
    """

    def __init__(
        self,
        store: PreferenceStore,
        *,
        stop_timeout: float = STATE_STOP_TIMEOUT,
    ) -> None:
        self._store = store
        self._stop_timeout = stop_timeout
        self._state: UiState = LOADING
        self._observers: list[StateObserver] = []
        self._collector: asyncio.Task[None] | None = None
        self._stop_handle: asyncio.TimerHandle | None = None
        self._ready = asyncio.Event()

    @property
    def state(self) -> UiState:
        return self._state

    def current_state(self) -> UiState:
        """Latest known UI state."""
        return self._state

    @property
    def subscriber_count(self) -> int:
        return len(self._observers)

    @property
    def is_collecting(self) -> bool:
        return self._collector is not None and not self._collector.done()

    # =========================================================================
    # Subscriptions
    # =========================================================================

    def subscribe(self, observer: StateObserver) -> Subscription:
        """Register ``observer`` and call it with the current state.

        Must be called from a running event loop. The observer is called
        synchronously on every later state change.
        """
        self._observers.append(observer)
        self._cancel_pending_stop()
        if not self.is_collecting:
            self._start_collecting()
        self._notify(observer, self._state)
        return Subscription(self, observer)

    def unsubscribe(self, observer: StateObserver) -> None:
        """Detach ``observer``; schedules the idle stop when none are left."""
        with suppress(ValueError):
            self._observers.remove(observer)
        if not self._observers and self.is_collecting:
            self._schedule_stop()

    async def wait_until_ready(self) -> UiState:
        """Wait for the first ``Success`` state.

        Only completes while collection is running, i.e. with at least one
        subscriber or inside the idle window.
        """
        await self._ready.wait()
        return self._state

    # =========================================================================
    # Commands
    # =========================================================================

    async def toggle_dark_mode(self) -> None:
        """Flip the stored preference.

        The new state arrives through the preference stream, not from here.

        Raises:
            StorageError: The preference could not be read or written.
        """
        await self._store.toggle()

    async def close(self) -> None:
        """End the session: stop collecting now and drop all observers."""
        self._observers.clear()
        self._cancel_pending_stop()
        collector, self._collector = self._collector, None
        if collector is not None and not collector.done():
            collector.cancel()
            with suppress(asyncio.CancelledError):
                await collector

    # =========================================================================
    # Collection
    # =========================================================================

    def _start_collecting(self) -> None:
        logger.debug("Starting dark mode preference collection")
        self._collector = asyncio.create_task(
            self._collect(), name="dark-mode-preference"
        )
        self._collector.add_done_callback(self._on_collector_done)

    async def _collect(self) -> None:
        async for is_dark_mode in self._store.read():
            self._set_state(Success(is_dark_mode))

    def _on_collector_done(self, task: asyncio.Task[None]) -> None:
        if task.cancelled():
            return
        error = task.exception()
        if error is not None:
            logger.error("Dark mode preference collection failed", exc_info=error)
        if self._collector is task:
            self._collector = None

    def _schedule_stop(self) -> None:
        self._cancel_pending_stop()
        if self._stop_timeout <= 0:
            self._stop_collecting()
            return
        loop = asyncio.get_running_loop()
        self._stop_handle = loop.call_later(self._stop_timeout, self._stop_collecting)

    def _cancel_pending_stop(self) -> None:
        if self._stop_handle is not None:
            self._stop_handle.cancel()
            self._stop_handle = None

    def _stop_collecting(self) -> None:
        self._stop_handle = None
        if self._observers:
            return
        collector, self._collector = self._collector, None
        if collector is not None:
            logger.debug("Stopping idle dark mode preference collection")
            collector.cancel()

    def _set_state(self, state: UiState) -> None:
        if state == self._state:
            return
        self._state = state
        self._ready.set()
        for observer in list(self._observers):
            self._notify(observer, state)

    @staticmethod
    def _notify(observer: StateObserver, state: UiState) -> None:
        """Call one observer so a failing observer cannot stop the others."""
        try:
            observer(state)
        except Exception:
            logger.exception(f"UI state observer {observer!r} failed")


__all__ = [
    "StateObserver",
    "Subscription",
    "UiStateController",
]
