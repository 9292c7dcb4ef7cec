# Copyright (C) 2026 BPS
# This file is part of BPS Auto Hook.
#
# Centralized settings manager
# General settings and hook presets live in one JSON file; the hook manager
# reads presets through `presets` and calls `save()` after a swap.

import os
import json
import logging
import threading

from core.exceptions import ConfigError

from .defaults import DEFAULT_GENERAL_SETTINGS, get_default_presets
from .models import HookPresets, Preset
from utils.validators import validate_delay_range, validate_preset_name, validate_tick_interval

logger = logging.getLogger("AutoHook")


class SettingsManager:
    """Centralized settings management for BPS Auto Hook

    Keeps an in-memory cache of the JSON file guarded by a lock, so UI threads
    can save while the engine thread reads. Presets are parsed once into
    dataclasses; the engine only ever reassigns `presets.selected_preset`.
    """

    def __init__(self, settings_file: str):
        """Initialize settings manager

        Args:
            settings_file: Absolute path to settings JSON file
        """
        self.settings_file = settings_file
        self._data = {}  # In-memory cache
        self._lock = threading.Lock()  # Thread-safe access
        self._ensure_settings_file_exists()
        self._load_all()
        self._presets = self._load_presets()

    def _ensure_settings_file_exists(self):
        """Create default settings file if it doesn't exist"""
        if not os.path.exists(self.settings_file):
            logger.info("Creating default settings file...")
            default_settings = dict(DEFAULT_GENERAL_SETTINGS)
            default_settings["hook_presets"] = get_default_presets()
            try:
                with open(self.settings_file, "w", encoding="utf-8") as f:
                    json.dump(default_settings, f, indent=4, ensure_ascii=False)
                logger.info(f"Default settings created at: {self.settings_file}")
            except Exception as e:
                logger.error(f"Failed to create default settings: {e}")

    def _load_all(self):
        """Load all settings from file (called at init, no lock needed)"""
        try:
            if os.path.exists(self.settings_file):
                with open(self.settings_file, "r", encoding="utf-8") as f:
                    self._data = json.load(f)
        except json.JSONDecodeError as e:
            logger.error(f"Failed to parse settings file: {e}")
            self._data = {}
        except Exception as e:
            logger.error(f"Error loading settings: {e}")
            self._data = {}

    def _load_presets(self) -> HookPresets:
        """Parse presets from the cache, falling back to defaults on bad content"""
        raw = self._data.get("hook_presets")
        if raw:
            try:
                return HookPresets.from_dict(raw)
            except (ConfigError, TypeError, ValueError, AttributeError) as e:
                logger.error(f"Invalid hook presets, using defaults: {e}")
        return HookPresets.from_dict(get_default_presets())

    def _save_all(self):
        """Save all settings to file (assumes caller holds lock)"""
        try:
            with open(self.settings_file, "w", encoding="utf-8") as f:
                json.dump(self._data, f, indent=4, ensure_ascii=False)
        except Exception as e:
            logger.error(f"Error saving settings: {e}")

    def _get(self, key):
        with self._lock:
            return self._data.get(key, DEFAULT_GENERAL_SETTINGS[key])

    def _set(self, key, value):
        with self._lock:
            self._data[key] = value
            self._save_all()

    # ========================================================================
    # PRESETS
    # ========================================================================

    @property
    def presets(self) -> HookPresets:
        return self._presets

    def save(self):
        """Persist presets (including the selected preset) to the settings file"""
        with self._lock:
            self._data["hook_presets"] = self._presets.to_dict()
            self._save_all()

    def add_custom_preset(self, preset: Preset) -> bool:
        """Publish a new custom preset; names must be unique"""
        existing = [p.name for p in self._presets.custom_presets]
        if not validate_preset_name(preset.name, existing):
            return False
        self._presets.custom_presets = self._presets.custom_presets + [preset]
        self.save()
        return True

    def remove_custom_preset(self, name: str) -> bool:
        preset = self._presets.find_custom(name)
        if preset is None:
            return False
        if self._presets.selected_preset is preset:
            self._presets.selected_preset = None
        self._presets.custom_presets = [p for p in self._presets.custom_presets if p is not preset]
        self.save()
        return True

    def select_preset(self, name) -> bool:
        """Select a custom preset by name, or clear the selection with None"""
        if name is None:
            self._presets.selected_preset = None
        else:
            preset = self._presets.find_custom(name)
            if preset is None:
                logger.warning(f"Preset {name} not found")
                return False
            self._presets.selected_preset = preset
        self.save()
        return True

    # ========================================================================
    # GENERAL SETTINGS
    # ========================================================================

    def load_general_settings(self):
        """Load all general settings merged over defaults"""
        with self._lock:
            return {key: self._data.get(key, value) for key, value in DEFAULT_GENERAL_SETTINGS.items()}

    def load_plugin_enabled(self):
        return self._get("plugin_enabled")

    def save_plugin_enabled(self, enabled):
        self._set("plugin_enabled", bool(enabled))

    def load_delay_range(self):
        """Load hook reaction delay bounds (milliseconds)"""
        with self._lock:
            delay_min = self._data.get("delay_between_hook_min", DEFAULT_GENERAL_SETTINGS["delay_between_hook_min"])
            delay_max = self._data.get("delay_between_hook_max", DEFAULT_GENERAL_SETTINGS["delay_between_hook_max"])
        if not validate_delay_range(delay_min, delay_max):
            return (
                DEFAULT_GENERAL_SETTINGS["delay_between_hook_min"],
                DEFAULT_GENERAL_SETTINGS["delay_between_hook_max"],
            )
        return delay_min, delay_max

    def save_delay_range(self, delay_min, delay_max) -> bool:
        if not validate_delay_range(delay_min, delay_max):
            return False
        with self._lock:
            self._data["delay_between_hook_min"] = delay_min
            self._data["delay_between_hook_max"] = delay_max
            self._save_all()
        return True

    def load_reset_afk_timer(self):
        return self._get("reset_afk_timer")

    def save_reset_afk_timer(self, enabled):
        self._set("reset_afk_timer", bool(enabled))

    def load_show_status_header(self):
        return self._get("show_status_header")

    def save_show_status_header(self, enabled):
        self._set("show_status_header", bool(enabled))

    def load_game_window_title(self):
        return self._get("game_window_title")

    def load_tick_interval(self):
        interval = self._get("tick_interval")
        if not validate_tick_interval(interval):
            return DEFAULT_GENERAL_SETTINGS["tick_interval"]
        return interval

    def save_tick_interval(self, interval) -> bool:
        if not validate_tick_interval(interval):
            return False
        self._set("tick_interval", interval)
        return True
