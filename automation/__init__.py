"""
Automation Module - Auto Hook Decision Engine
==============================================
Everything that decides what to do while fishing.

All automation components use dependency injection and never touch the game
directly: they read signals and dispatch actions through the collaborators
given to HookManager.

Modules:
    - phase_tracker: Step tracking from fishing phase changes
    - hook_decision: Hook selection + delayed dispatch
    - auto_cast: Priority-ordered auto-cast selection while the pole is ready
    - reactive_triggers: One-shot status and catch milestone swaps
    - catch_handler: Catch counting, stop limits, timeout, session stop
    - hook_manager: Per-tick orchestration

Usage:
    from automation import HookManager

    manager = HookManager(signals, dispatcher, oracle, bait_control, settings)
    manager.tick()
"""

from .phase_tracker import PhaseEvent, PhaseTracker
from .hook_decision import HookDecision
from .auto_cast import AutoCastSelector
from .reactive_triggers import ReactiveTriggers, StatusWatcher
from .catch_handler import CatchHandler
from .hook_manager import HookManager

__all__ = [
    'PhaseEvent',
    'PhaseTracker',
    'HookDecision',
    'AutoCastSelector',
    'ReactiveTriggers',
    'StatusWatcher',
    'CatchHandler',
    'HookManager',
]
