# Config module for BPS Auto Hook
# Presets, their resolution, and the JSON-backed settings store

from .settings_manager import SettingsManager
from .resolver import ConfigResolver
from .models import (
    ActionCast,
    AutoCastsConfig,
    BaitFish,
    ExtraConfig,
    FishConfig,
    HookConfig,
    HookPresets,
    HookRule,
    Hookset,
    IdenticalCastRule,
    Preset,
    StatusReaction,
)

__all__ = [
    'SettingsManager',
    'ConfigResolver',
    'ActionCast',
    'AutoCastsConfig',
    'BaitFish',
    'ExtraConfig',
    'FishConfig',
    'HookConfig',
    'HookPresets',
    'HookRule',
    'Hookset',
    'IdenticalCastRule',
    'Preset',
    'StatusReaction',
]
