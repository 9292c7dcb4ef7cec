"""
Macro State Definitions

Defines the engine lifecycle states, the fishing phases reported by the game,
and the internal fishing step tracked by the hook manager.
"""

from dataclasses import dataclass
from enum import Enum, IntEnum, auto


class MacroState(Enum):
    """Macro execution states"""

    STOPPED = auto()    # Engine is stopped, no threads running
    STARTING = auto()   # Engine is initializing (transitional)
    RUNNING = auto()    # Engine is ticking the hook manager
    STOPPING = auto()   # Engine is shutting down (transitional)
    ERROR = auto()      # Engine encountered fatal error

    def __str__(self):
        return self.name.title()

    @property
    def is_active(self):
        """Returns True if engine is running or transitioning"""
        return self in (MacroState.STARTING, MacroState.RUNNING, MacroState.STOPPING)

    @property
    def can_start(self):
        """Returns True if engine can be started from this state"""
        return self in (MacroState.STOPPED, MacroState.ERROR)

    @property
    def can_stop(self):
        """Returns True if engine can be stopped from this state"""
        return self in (MacroState.STARTING, MacroState.RUNNING)


class FishingPhase(Enum):
    """Fishing phase as reported by the game, read once per tick"""

    NOT_FISHING = auto()
    POLE_OUT = auto()
    BITE = auto()
    PULL_POLE_IN = auto()
    POLE_READY = auto()
    WAITING2 = auto()
    QUIT = auto()


class BiteType(Enum):
    UNKNOWN = "unknown"
    WEAK = "weak"
    STRONG = "strong"
    LEGENDARY = "legendary"


class HookType(IntEnum):
    """Hook actions, valued by their game action id"""

    NONE = 0
    NORMAL = 296
    PRECISION = 4179
    POWERFUL = 4103
    DOUBLE = 269
    TRIPLE = 27523

    @property
    def label(self):
        return self.name.title()


class ActionKind(Enum):
    ACTION = "action"
    ABILITY = "ability"
    ITEM = "item"


class ChangeBaitResult(Enum):
    SUCCESS = auto()
    FAILURE = auto()
    NOT_IN_INVENTORY = auto()


class StepKind(Enum):
    """Progress marker inside one fishing cycle"""

    NONE = auto()
    BEGAN_FISHING = auto()
    BEGAN_MOOCHING = auto()
    FISH_BIT = auto()
    FISH_CAUGHT = auto()
    TIME_OUT = auto()
    QUITTING = auto()

    def __str__(self):
        return self.name.title().replace("_", "")


# Moving into one of these starts a fresh cycle and drops the one-shot flags
CYCLE_RESET_STEPS = (StepKind.NONE, StepKind.BEGAN_FISHING, StepKind.BEGAN_MOOCHING)


@dataclass
class Step:
    """Current step plus the one-shot swap guards for this cycle"""

    kind: StepKind = StepKind.NONE
    bait_swapped: bool = False
    preset_swapped: bool = False

    def advance(self, kind: StepKind):
        self.kind = kind
        if kind in CYCLE_RESET_STEPS:
            self.bait_swapped = False
            self.preset_swapped = False

    def __str__(self):
        flags = [
            name
            for name, on in (("BaitSwapped", self.bait_swapped), ("PresetSwapped", self.preset_swapped))
            if on
        ]
        return ", ".join([str(self.kind)] + flags)
