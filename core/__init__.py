"""
Core Module - Auto Hook Lifecycle Orchestration

This module provides the core application lifecycle management layer and the
shared state types. It owns engine state, thread control, and orchestration
WITHOUT any:
- Hook / auto-cast decision logic
- Signal interception
- Input/control logic

Components:
    - engine: FishingEngine (ticks the HookManager on a worker thread)
    - state: MacroState, FishingPhase, Step and friends
    - interfaces: collaborator protocols
    - exceptions: Custom exceptions for lifecycle control

Usage:
    from core import FishingEngine, MacroState

    engine = FishingEngine(hook_manager, settings, logger)
    engine.start()
    # ... engine ticks in background ...
    engine.stop()
"""

from core.state import (
    ActionKind,
    BiteType,
    ChangeBaitResult,
    FishingPhase,
    HookType,
    MacroState,
    Step,
    StepKind,
)
from core.exceptions import ConfigError, EngineException
from core.engine import FishingEngine

__all__ = [
    'FishingEngine',
    'MacroState',
    'FishingPhase',
    'BiteType',
    'HookType',
    'ActionKind',
    'ChangeBaitResult',
    'Step',
    'StepKind',
    'ConfigError',
    'EngineException',
]
