# Utils module for BPS Auto Hook
# Timing gates and settings validation

from .timing import (
    interruptible_sleep,
    Stopwatch,
    RecastGate,
    DeferredScheduler,
    reaction_delay,
    truncate_seconds,
)
from .validators import (
    validate_delay_range,
    validate_tick_interval,
    validate_preset_name,
)

__all__ = [
    'interruptible_sleep',
    'Stopwatch',
    'RecastGate',
    'DeferredScheduler',
    'reaction_delay',
    'truncate_seconds',
    'validate_delay_range',
    'validate_tick_interval',
    'validate_preset_name',
]
