"""
FishingEngine - ticks the HookManager on a worker thread

The engine only owns lifecycle: MacroState, the running flag and the worker
thread. Every fishing decision happens inside HookManager.tick(), which the
worker calls once per configured tick interval.

Usage:
    engine = FishingEngine(hook_manager, settings, logger)
    engine.start()
    ...
    engine.stop()
"""

import logging
import threading
import time
from typing import Optional

from core.state import MacroState
from utils.timing import interruptible_sleep


class FishingEngine:
    """
    Worker thread lifecycle around a HookManager.

    Start and stop are safe to call from any thread; only the worker ever
    calls tick().
    """

    def __init__(
        self,
        hook_manager,
        settings_manager,
        logger: Optional[logging.Logger] = None,
        callbacks: Optional[dict] = None,
    ):
        """
        Args:
            hook_manager: HookManager (tick() and shutdown())
            settings_manager: Source of load_tick_interval()
            logger: Optional logger for engine events
            callbacks: Optional dict of callbacks:
                - on_state_change: (old_state, new_state) -> None
                - on_start: () -> None
                - on_stop: () -> None
                - on_error: (exception) -> None
        """
        self._hook_manager = hook_manager
        self._settings = settings_manager
        self._logger = logger or logging.getLogger("AutoHook")
        self._callbacks = callbacks or {}

        self._state = MacroState.STOPPED
        self._state_lock = threading.Lock()

        self._worker_thread: Optional[threading.Thread] = None
        self._running = threading.Event()
        self._started_at: Optional[float] = None

    # ========== PUBLIC API ==========

    def start(self) -> bool:
        """Launch the tick worker; False if the engine is already active"""
        with self._state_lock:
            if not self._state.can_start:
                self._logger.warning(f"Cannot start: engine is {self._state}")
                return False
            self._set_state(MacroState.STARTING)

        try:
            self._running.set()
            self._worker_thread = threading.Thread(
                target=self._worker_loop,
                name="AutoHook-Ticker",
                daemon=True,
            )
            self._started_at = time.time()
            self._worker_thread.start()
        except Exception as e:
            self._logger.error(f"Failed to start engine: {e}", exc_info=True)
            self._running.clear()
            self._fail(e)
            return False

        with self._state_lock:
            # The worker may already have failed and moved to ERROR
            if self._state == MacroState.STARTING:
                self._set_state(MacroState.RUNNING)
        self._notify("on_start")
        self._logger.info("Auto hook started")
        return True

    def stop(self, timeout: float = 5.0) -> bool:
        """Stop ticking and wait for the worker

        Pending hooks and queued events are dropped only once the worker has
        exited; a worker still inside tick() keeps its state untouched.

        Returns:
            True if the worker exited within `timeout`
        """
        with self._state_lock:
            if not self._state.can_stop:
                return True
            self._set_state(MacroState.STOPPING)

        self._running.clear()

        worker = self._worker_thread
        if worker is not None and worker.is_alive():
            worker.join(timeout=timeout)
        timed_out = worker is not None and worker.is_alive()

        if timed_out:
            self._logger.warning(f"Worker still ticking after {timeout}s, left to exit on its own")
        else:
            self._hook_manager.shutdown()

        self._worker_thread = None
        self._started_at = None

        # Always STOPPED so the engine can be started again
        with self._state_lock:
            self._set_state(MacroState.STOPPED)
        self._notify("on_stop")
        self._logger.info("Auto hook stopped")
        return not timed_out

    def is_running(self) -> bool:
        return self._running.is_set()

    def get_state(self) -> MacroState:
        with self._state_lock:
            return self._state

    def get_uptime(self) -> Optional[float]:
        """Seconds since start, None while stopped"""
        if self._started_at is not None and self.is_running():
            return time.time() - self._started_at
        return None

    # ========== INTERNAL ==========

    def _worker_loop(self):
        # HookManager.tick() contains its own failures; anything raised here is fatal
        try:
            while self.is_running():
                self._hook_manager.tick()
                interruptible_sleep(self._settings.load_tick_interval(), self.is_running)
        except Exception as e:
            self._logger.error(f"Worker thread exception: {e}", exc_info=True)
            self._fail(e)
        finally:
            self._running.clear()

    def _fail(self, error):
        with self._state_lock:
            self._set_state(MacroState.ERROR)
        self._notify("on_error", error)

    def _notify(self, name, *args):
        if name in self._callbacks:
            self._callbacks[name](*args)

    def _set_state(self, new_state: MacroState):
        """Must be called with _state_lock held"""
        old_state, self._state = self._state, new_state
        self._logger.debug(f"State transition: {old_state} -> {new_state}")

        if "on_state_change" in self._callbacks:
            try:
                self._callbacks["on_state_change"](old_state, new_state)
            except Exception as e:
                self._logger.error(f"State change callback error: {e}")
