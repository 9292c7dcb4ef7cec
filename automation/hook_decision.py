"""
HookDecision - picks the hook for a bite

The choice itself is a pure function of (bite, elapsed, hook config) and the
availability oracle. Issuing it goes through the deferred scheduler after a
random human reaction delay; the continuation re-validates before acting.
"""

import logging
from typing import Optional

from core.state import ActionKind, BiteType, HookType
from utils.timing import reaction_delay

logger = logging.getLogger("AutoHook")


class HookDecision:
    """Hook selection and delayed dispatch"""

    def __init__(self, dispatcher, oracle, scheduler, delay_range_fn, rng=None):
        """
        Args:
            dispatcher: ActionDispatcher
            oracle: ResourceOracle
            scheduler: DeferredScheduler drained by the tick loop
            delay_range_fn: () -> (min_ms, max_ms) reaction delay bounds
            rng: Optional random.Random for the reaction delay
        """
        self._dispatcher = dispatcher
        self._oracle = oracle
        self._scheduler = scheduler
        self._delay_range_fn = delay_range_fn
        self._rng = rng

    def choose(self, bite: BiteType, elapsed: float, hook_cfg) -> Optional[HookType]:
        """Hook to use, or None to let the fish escape"""
        if not hook_cfg.enabled:
            return None

        hook = hook_cfg.get_hook(bite, elapsed)
        if hook is None or hook == HookType.NONE:
            return None

        if self._oracle.action_available(int(hook)):
            return hook

        if hook_cfg.hookset.lets_fish_escape(hook):
            logger.debug(f"[HookManager] {hook.label} not available. Letting fish escape")
            return None

        logger.debug(f"[HookManager] {hook.label} not available. Using normal hook. (Bite: {bite.value})")
        return HookType.NORMAL

    def request(self, bite: BiteType, hook_cfg, elapsed_fn, still_valid):
        """Queue the hook decision behind the reaction delay

        Args:
            bite: Bite type seen when the fish bit
            hook_cfg: HookConfig resolved at the bite
            elapsed_fn: () -> truncated seconds waited before the bite
            still_valid: () -> bool, False once the bite is no longer current
        """
        if not hook_cfg.enabled:
            return

        delay_min, delay_max = self._delay_range_fn()
        if self._rng is not None:
            delay = reaction_delay(delay_min, delay_max, self._rng)
        else:
            delay = reaction_delay(delay_min, delay_max)

        self._scheduler.schedule(delay, self._hook_fish, bite, hook_cfg, elapsed_fn, still_valid)

    def _hook_fish(self, bite, hook_cfg, elapsed_fn, still_valid):
        # Config or state may have changed during the delay
        if not hook_cfg.enabled or not still_valid():
            return

        hook = self.choose(bite, elapsed_fn(), hook_cfg)
        if hook is None:
            return

        logger.debug(f"[HookManager] Using {hook.label} hook. (Bite: {bite.value})")
        self._dispatcher.cast_delayed(int(hook), ActionKind.ACTION, hook.label)
