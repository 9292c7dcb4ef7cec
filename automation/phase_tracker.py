"""
PhaseTracker - derives the internal fishing step from game phase changes

The game reports a coarse phase every tick; the tracker remembers the last
phase it saw and turns changes into events for the hook manager, while owning
the Step (primary step + one-shot swap flags) for the current cycle.
"""

import logging
from enum import Enum, auto

from core.state import FishingPhase, Step, StepKind

logger = logging.getLogger("AutoHook")


class PhaseEvent(Enum):
    HOOKED_EARLY = auto()   # Pole pulled in before any bite
    POLE_OUT = auto()
    BITE = auto()
    POLE_READY = auto()
    QUIT = auto()


class PhaseTracker:
    """Owns Step and reacts to phase transitions"""

    def __init__(self):
        self.step = Step()
        self.last_phase = FishingPhase.NOT_FISHING
        self.is_mooching = False
        self.last_catch = None      # BaitFish of the most recent catch this cycle
        self.mooch_target = None    # BaitFish being mooched, fixed at mooch start
        self.bite_serial = 0        # Increments on every accepted bite

    @property
    def kind(self) -> StepKind:
        return self.step.kind

    def observe(self, phase: FishingPhase):
        """Record the phase seen this tick

        Returns:
            PhaseEvent when the phase changed and needs handling, else None
        """
        if phase == self.last_phase:
            return None

        self.last_phase = phase

        if phase == FishingPhase.PULL_POLE_IN:
            # A hook was used before any bite: nothing to auto-cast after it
            if self.step.kind in (StepKind.BEGAN_FISHING, StepKind.BEGAN_MOOCHING):
                self.step.advance(StepKind.NONE)
            return PhaseEvent.HOOKED_EARLY

        if phase == FishingPhase.POLE_OUT:
            return PhaseEvent.POLE_OUT

        if phase == FishingPhase.BITE:
            if self.step.kind == StepKind.FISH_BIT:
                return None
            self.last_catch = None
            self.bite_serial += 1
            self.step.advance(StepKind.FISH_BIT)
            return PhaseEvent.BITE

        if phase == FishingPhase.POLE_READY:
            return PhaseEvent.POLE_READY

        if phase == FishingPhase.QUIT:
            return PhaseEvent.QUIT

        return None

    def begin_fishing(self) -> bool:
        """Cycle start from a cast; a repeated cast is ignored"""
        if self.step.kind == StepKind.BEGAN_FISHING:
            return False

        self.step.advance(StepKind.BEGAN_FISHING)
        self.is_mooching = False
        self.mooch_target = None
        return True

    def begin_mooching(self) -> bool:
        """Cycle start from a mooch; repeats only count from a ready pole"""
        if self.step.kind == StepKind.BEGAN_MOOCHING and self.last_phase != FishingPhase.POLE_READY:
            return False

        self.step.advance(StepKind.BEGAN_MOOCHING)
        self.is_mooching = True
        self.mooch_target = self.last_catch
        return True

    def current_identity(self, equipped_bait: int) -> int:
        """Bait id, or the mooched fish id, that selects the hook config"""
        if self.is_mooching:
            return self.mooch_target.id if self.mooch_target else 0
        return equipped_bait

    def record_catch(self, fish):
        self.last_catch = fish
        self.step.advance(StepKind.FISH_CAUGHT)

    def force(self, kind: StepKind):
        logger.debug(f"[HookManager] Step forced: {self.step} -> {kind}")
        self.step.advance(kind)

    def quit_pending(self, phase: FishingPhase) -> bool:
        """A quit was requested but the game has not reported it yet"""
        return phase != FishingPhase.QUIT and self.step.kind == StepKind.QUITTING

    def reset(self):
        self.step.advance(StepKind.NONE)
