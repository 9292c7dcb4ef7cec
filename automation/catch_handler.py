"""
CatchHandler - catch counting, stop-after-caught limits, timeouts and
the end-of-session cleanup.
"""

import logging

from config.ids import Actions
from config.models import BaitFish
from core.state import ActionKind, StepKind

logger = logging.getLogger("AutoHook")


class CatchHandler:
    def __init__(self, resolver, ledger, tracker, dispatcher, status, fishing_timer, recast_gate, hook_config_fn):
        """
        Args:
            resolver: ConfigResolver
            ledger: CatchLedger
            tracker: PhaseTracker
            dispatcher: ActionDispatcher
            status: StatusService
            fishing_timer: Stopwatch measuring time waited for a bite
            recast_gate: RecastGate of the auto-cast selector
            hook_config_fn: () -> HookConfig effective for the current cycle
        """
        self._resolver = resolver
        self._ledger = ledger
        self._tracker = tracker
        self._dispatcher = dispatcher
        self._status = status
        self._fishing_timer = fishing_timer
        self._recast_gate = recast_gate
        self._hook_config_fn = hook_config_fn

    def on_catch(self, fish_id: int, amount: int):
        fish_cfg = self._resolver.fish_config(fish_id)
        fish = fish_cfg.fish if fish_cfg is not None else BaitFish(fish_id, "-")

        logger.debug(f"[HookManager] Caught {fish.name} (id {fish.id}) x{amount}")
        self._tracker.record_catch(fish)

        if fish_cfg is not None:
            for _ in range(amount):
                self._ledger.add(fish_cfg.get_unique_id())

        hook_cfg = self._hook_config_fn()
        if hook_cfg.enabled:
            self._ledger.add(hook_cfg.get_unique_id())

    def check_stop_condition(self):
        """Force the configured stop step once a caught limit is reached"""
        last_catch = self._tracker.last_catch
        fish_cfg = self._resolver.fish_config(last_catch.id) if last_catch else None

        if fish_cfg is not None and fish_cfg.stop_after_caught:
            guid = fish_cfg.get_unique_id()
            total = self._ledger.get_count(guid)

            if total >= fish_cfg.stop_after_caught_limit:
                self._status.chat(
                    f"Caught limit reached: {fish_cfg.fish.name}: {fish_cfg.stop_after_caught_limit}"
                )
                self._tracker.force(fish_cfg.stop_fishing_step)
                if fish_cfg.stop_after_reset_count:
                    self._ledger.remove(guid)

        hook_cfg = self._hook_config_fn()
        hookset = hook_cfg.hookset
        if hook_cfg.enabled and hookset.stop_after_caught:
            guid = hook_cfg.get_unique_id()
            total = self._ledger.get_count(guid)

            if total >= hookset.stop_after_caught_limit:
                self._status.chat(
                    f"Hooking limit reached: {hook_cfg.bait.name}: {hookset.stop_after_caught_limit}"
                )
                self._tracker.force(hookset.stop_fishing_step)
                if hookset.stop_after_reset_count:
                    self._ledger.remove(guid)

    def check_timeout(self, timeout: float):
        """Hook anything once the wait exceeds the configured timeout"""
        if not self._fishing_timer.is_running:
            self._fishing_timer.start()

        max_time = int(timeout * 100) / 100
        current_time = self._fishing_timer.truncated_seconds()

        if not max_time > 0 or not current_time > max_time or self._tracker.kind == StepKind.TIME_OUT:
            return

        logger.debug("[HookManager] Timeout. Hooking fish.")
        self._tracker.force(StepKind.TIME_OUT)
        self._dispatcher.cast_delayed(Actions.HOOK, ActionKind.ACTION, "Hook")

    def on_fishing_stop(self):
        self._tracker.reset()
        self._fishing_timer.reset()
        self._recast_gate.reset()
        self._status.clear_status()
        self._ledger.reset()

        # Always sent, even if a quit already went out
        self._dispatcher.cast_no_delay(Actions.QUIT, ActionKind.ACTION, "Quit")
