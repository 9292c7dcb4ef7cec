"""
AutoCastSelector - picks the next action while the pole is ready

Priority per run: status reactions (never cast anything themselves), fish
caught actions, the ordered auto-cast list, then mooch / cast line. The first
eligible candidate is dispatched and the scan stops.
"""

import logging

from config.ids import Actions, Status
from core.state import ActionKind, StepKind

logger = logging.getLogger("AutoHook")

# Nothing to auto-cast before a cycle has really started
IDLE_STEPS = (StepKind.NONE, StepKind.BEGAN_FISHING, StepKind.BEGAN_MOOCHING)


class AutoCastSelector:
    def __init__(self, resolver, ledger, tracker, triggers, dispatcher, oracle, signals, gate):
        """
        Args:
            resolver: ConfigResolver
            ledger: CatchLedger
            tracker: PhaseTracker
            triggers: ReactiveTriggers
            dispatcher: ActionDispatcher
            oracle: ResourceOracle
            signals: SignalSource
            gate: RecastGate debouncing the selector
        """
        self._resolver = resolver
        self._ledger = ledger
        self._tracker = tracker
        self._triggers = triggers
        self._dispatcher = dispatcher
        self._oracle = oracle
        self._signals = signals
        self.gate = gate

    def last_catch_config(self):
        if self._tracker.last_catch is None:
            return None
        return self._resolver.fish_config(self._tracker.last_catch.id)

    def tick(self):
        """Run one selection if the gate allows it

        Returns:
            The ActionCast dispatched, or None
        """
        if self._tracker.kind in IDLE_STEPS:
            return None

        if not self.gate.ready():
            return None

        if not self._oracle.can_cast():
            return None

        self._triggers.check_status_changes()

        ac_cfg = self._resolver.auto_casts()

        cast = self.fish_caught_action() or self.next_auto_cast(ac_cfg)
        if cast is not None:
            self._dispatcher.cast_delayed(cast.id, cast.kind, cast.name)
            return cast

        return self.cast_line_mooch_or_release(ac_cfg)

    def fish_caught_action(self):
        fish_cfg = self.last_catch_config()
        if fish_cfg is None or not fish_cfg.enabled:
            return None

        if fish_cfg.ignore_on_intuition and self._signals.has_status(Status.FISHERS_INTUITION):
            return None

        caught_count = self._ledger.get_count(fish_cfg.get_unique_id())

        if fish_cfg.identical_cast.is_available_to_cast(self._oracle, caught_count):
            return fish_cfg.identical_cast

        if fish_cfg.surface_slap.is_available_to_cast(self._oracle):
            return fish_cfg.surface_slap

        self._triggers.check_catch_milestones(fish_cfg, caught_count)
        return None

    def next_auto_cast(self, ac_cfg):
        if not ac_cfg.enable_all:
            return None

        for action in ac_cfg.get_auto_cast_order():
            if action.is_available_to_cast(self._oracle):
                logger.debug(f"[HookManager] Returning {action.name}")
                return action

        return None

    def cast_line_mooch_or_release(self, ac_cfg):
        fish_cfg = self.last_catch_config()

        block_mooch = fish_cfg is not None and fish_cfg.enabled and fish_cfg.never_mooch

        if not block_mooch:
            if fish_cfg is not None and fish_cfg.enabled and fish_cfg.mooch.is_available_to_cast(self._oracle):
                self._dispatcher.cast_no_delay(fish_cfg.mooch.id, fish_cfg.mooch.kind, "Mooch")
                return fish_cfg.mooch

            if ac_cfg.enable_all and ac_cfg.cast_mooch.is_available_to_cast(self._oracle):
                self._dispatcher.cast_no_delay(ac_cfg.cast_mooch.id, ac_cfg.cast_mooch.kind, "Mooch")
                return ac_cfg.cast_mooch

        if ac_cfg.enable_all and ac_cfg.cast_line.is_available_to_cast(self._oracle):
            self._dispatcher.cast_no_delay(Actions.CAST, ActionKind.ACTION, "Cast Line")
            return ac_cfg.cast_line

        return None
