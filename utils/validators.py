# Copyright (C) 2026 BPS
# This file is part of BPS Auto Hook.
#
# Validation utilities for general settings and preset edits

import logging

logger = logging.getLogger('AutoHook')

# Human reaction delay must stay below this to hook before the fish escapes
MAX_HOOK_DELAY_MS = 5000


def validate_delay_range(delay_min, delay_max):
    """Validate hook reaction delay bounds (milliseconds)"""
    for name, value in (("delay_between_hook_min", delay_min), ("delay_between_hook_max", delay_max)):
        if not isinstance(value, int) or isinstance(value, bool):
            logger.warning(f"Invalid {name}: not an integer")
            return False
        if value < 0 or value > MAX_HOOK_DELAY_MS:
            logger.warning(f"Invalid {name}: {value} outside 0-{MAX_HOOK_DELAY_MS}ms")
            return False
    if delay_min > delay_max:
        logger.warning(f"Invalid hook delay: min {delay_min} > max {delay_max}")
        return False
    return True


def validate_tick_interval(interval):
    """Validate engine tick interval (seconds)"""
    if not isinstance(interval, (int, float)) or isinstance(interval, bool):
        return False
    return 0 < interval <= 1.0


def validate_preset_name(name, existing_names=()):
    """Validate a new custom preset name (non-empty, unique)"""
    if not name or not isinstance(name, str) or not name.strip():
        return False
    if name in existing_names:
        logger.warning(f"Preset name already in use: {name}")
        return False
    return True
