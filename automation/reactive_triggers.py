"""
Reactive Triggers - one-shot reactions to status changes and catch milestones

Status watchers latch on the rising and falling edge of a game status and run
the configured gain/lost reaction exactly once per edge. Catch milestones
(swap bait / swap preset after N catches) are guarded by the BaitSwapped /
PresetSwapped flags on the current Step, so each fires at most once per cycle.
"""

import logging

from config.ids import Status
from core.interfaces import BaitControl, ConfigStore, SignalSource
from core.state import ChangeBaitResult, StepKind

logger = logging.getLogger("AutoHook")


class StatusWatcher:
    """Edge detector for one boolean game status"""

    def __init__(self, name, signal_fn, gain_rule_fn, lost_rule_fn, react):
        """
        Args:
            name: Label used in logs
            signal_fn: () -> bool, is the status present right now
            gain_rule_fn: () -> StatusReaction applied on the rising edge
            lost_rule_fn: () -> StatusReaction applied on the falling edge
            react: (reaction, lost) -> None
        """
        self.name = name
        self.active = False
        self._signal_fn = signal_fn
        self._gain_rule_fn = gain_rule_fn
        self._lost_rule_fn = lost_rule_fn
        self._react = react

    def check(self):
        present = self._signal_fn()

        if not self.active and present:
            self.active = True  # only one try
            logger.debug(f"[Extra] {self.name} gained")
            self._react(self._gain_rule_fn(), lost=False)
        elif self.active and not present:
            self.active = False  # only one try
            logger.debug(f"[Extra] {self.name} lost")
            self._react(self._lost_rule_fn(), lost=True)


class ReactiveTriggers:
    """Preset and bait swaps driven by statuses and catch counts"""

    def __init__(
        self,
        resolver,
        store: ConfigStore,
        tracker,
        bait_control: BaitControl,
        signals: SignalSource,
        status,
    ):
        """
        Args:
            resolver: ConfigResolver
            store: Configuration store (presets + save())
            tracker: PhaseTracker owning the Step flags
            bait_control: BaitControl
            signals: SignalSource
            status: StatusService for chat messages
        """
        self._resolver = resolver
        self._store = store
        self._tracker = tracker
        self._bait_control = bait_control
        self._status = status

        self.spectral = StatusWatcher(
            "Spectral Current",
            signals.in_spectral_current,
            lambda: self._resolver.extra().spectral_gain,
            lambda: self._resolver.extra().spectral_lost,
            self._react,
        )
        self.intuition = StatusWatcher(
            "Fisher's Intuition",
            lambda: signals.has_status(Status.FISHERS_INTUITION),
            lambda: self._resolver.extra().intuition_gain,
            lambda: self._resolver.extra().intuition_lost,
            self._react,
        )

    def check_status_changes(self):
        self.spectral.check()
        self.intuition.check()

    def _react(self, reaction, lost):
        step = self._tracker.step

        if reaction.swap_preset:
            step.preset_swapped = True  # one try per catch
            self.swap_preset(reaction.preset_to_swap, "[Extra]")

        if reaction.swap_bait:
            step.bait_swapped = True  # one try per catch
            self.swap_bait(reaction.bait_to_swap, "[Extra]")

        if not lost:
            return

        if reaction.quit_on_lost:
            self._tracker.force(StepKind.QUITTING)

        if reaction.stop_on_lost:
            self._tracker.force(StepKind.NONE)

    def check_catch_milestones(self, fish_cfg, caught_count: int):
        """Swap bait / preset once the fish has been caught N times"""
        step = self._tracker.step

        if fish_cfg.swap_bait and not step.bait_swapped:
            if (
                caught_count == fish_cfg.swap_bait_count
                and fish_cfg.bait_to_swap.id != self._bait_control.current
            ):
                step.bait_swapped = True  # one try per catch
                self.swap_bait(fish_cfg.bait_to_swap, "[Fish]")

        if fish_cfg.swap_presets and not step.preset_swapped:
            selected = self._store.presets.selected_preset
            if caught_count == fish_cfg.swap_preset_count and fish_cfg.preset_to_swap != (
                selected.name if selected else None
            ):
                step.preset_swapped = True  # one try per catch
                self.swap_preset(fish_cfg.preset_to_swap, "[Fish]")

    def swap_preset(self, name: str, tag: str) -> bool:
        preset = self._resolver.find_custom_preset(name)
        if preset is None:
            self._status.chat(f"Preset {name} not found.")
            return False

        self._store.presets.selected_preset = preset
        self._status.chat(f"{tag} Swapping current preset to {name}")
        self._store.save()
        return True

    def swap_bait(self, bait, tag: str) -> bool:
        result = self._bait_control.change_bait(bait)
        if result != ChangeBaitResult.SUCCESS:
            logger.debug(f"{tag} Bait swap to {bait.name} failed: {result.name}")
            return False

        self._status.chat(f"{tag} Swapping bait to {bait.name}")
        self._store.save()
        return True
