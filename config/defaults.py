# Copyright (C) 2026 BPS
# This file is part of BPS Auto Hook.
#
# Default configuration values applied on first run

from .ids import Actions

# General settings (delays in milliseconds, tick interval in seconds)
DEFAULT_GENERAL_SETTINGS = {
    "plugin_enabled": True,
    "delay_between_hook_min": 0,
    "delay_between_hook_max": 0,
    "reset_afk_timer": False,
    "show_status_header": True,
    "game_window_title": "FINAL FANTASY XIV",
    "tick_interval": 0.05,
}

DEFAULT_PRESET_NAME = "Default"

# Generic hook entries of the default preset: every bite gets a normal hook
DEFAULT_HOOKSET = {
    "rules": [
        {"bite": "weak", "hook": "NORMAL", "min_seconds": 0, "max_seconds": 0},
        {"bite": "strong", "hook": "NORMAL", "min_seconds": 0, "max_seconds": 0},
        {"bite": "legendary", "hook": "NORMAL", "min_seconds": 0, "max_seconds": 0},
    ],
}

DEFAULT_AUTO_CASTS = {
    "enable_all": False,
    "cast_line": {"id": Actions.CAST, "name": "Cast Line", "kind": "action", "enabled": True},
    "cast_mooch": {"id": Actions.MOOCH, "name": "Mooch", "kind": "action", "enabled": False},
    "cast_collect": {"id": Actions.COLLECT, "name": "Collect", "kind": "ability", "enabled": False},
    "actions": [],
}


def get_default_presets():
    """Build the presets payload written to a fresh settings file"""
    return {
        "default_preset": {
            "name": DEFAULT_PRESET_NAME,
            "baits": [
                {"bait": {"id": 0, "name": "All Baits"}, "enabled": True, "hookset": dict(DEFAULT_HOOKSET)}
            ],
            "moochs": [
                {"bait": {"id": 0, "name": "All Mooches"}, "enabled": True, "hookset": dict(DEFAULT_HOOKSET)}
            ],
            "fishes": [],
            "auto_casts": dict(DEFAULT_AUTO_CASTS),
            "extra": {"enabled": False},
        },
        "custom_presets": [],
        "selected_preset": None,
    }
