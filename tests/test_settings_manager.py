"""
Test suite for config/settings_manager.py
==========================================
Tests for settings loading, saving, caching and preset persistence.
"""

import pytest
import json
import os
import tempfile
from config.settings_manager import SettingsManager
from config.models import Preset
from config.defaults import DEFAULT_PRESET_NAME


class TestSettingsManagerInitialization:
    """Tests for SettingsManager initialization"""

    def test_initialization_creates_default_file(self):
        """Test that initialization creates settings file if it doesn't exist"""
        with tempfile.TemporaryDirectory() as temp_dir:
            temp_file = os.path.join(temp_dir, "test_settings.json")

            manager = SettingsManager(temp_file)

            # File should be created, presets included
            assert os.path.exists(temp_file)
            with open(temp_file, "r", encoding="utf-8") as f:
                data = json.load(f)
            assert "hook_presets" in data

    def test_default_presets_loaded(self):
        """Test that a fresh file yields the default preset and no selection"""
        with tempfile.TemporaryDirectory() as temp_dir:
            temp_file = os.path.join(temp_dir, "test_settings.json")

            manager = SettingsManager(temp_file)

            assert manager.presets.default_preset.name == DEFAULT_PRESET_NAME
            assert manager.presets.custom_presets == []
            assert manager.presets.selected_preset is None
            assert manager.presets.default_preset.baits[0].bait.id == 0
            assert manager.presets.default_preset.baits[0].enabled == True

    def test_invalid_presets_fall_back_to_defaults(self):
        """Test that unparseable presets do not prevent startup"""
        with tempfile.TemporaryDirectory() as temp_dir:
            temp_file = os.path.join(temp_dir, "test_settings.json")
            with open(temp_file, "w", encoding="utf-8") as f:
                json.dump({"hook_presets": {"custom_presets": []}}, f)

            manager = SettingsManager(temp_file)

            assert manager.presets.default_preset.name == DEFAULT_PRESET_NAME

    def test_corrupt_file_uses_defaults(self):
        """Test that a corrupt JSON file falls back to defaults"""
        with tempfile.TemporaryDirectory() as temp_dir:
            temp_file = os.path.join(temp_dir, "test_settings.json")
            with open(temp_file, "w", encoding="utf-8") as f:
                f.write("{not json")

            manager = SettingsManager(temp_file)

            assert manager.load_plugin_enabled() == True
            assert manager.load_delay_range() == (0, 0)


class TestPresets:
    """Tests for custom preset management"""

    def test_add_and_select_custom_preset(self):
        """Test that a selected preset survives a reload"""
        with tempfile.TemporaryDirectory() as temp_dir:
            temp_file = os.path.join(temp_dir, "test_settings.json")

            manager = SettingsManager(temp_file)
            assert manager.add_custom_preset(Preset(name="Ocean")) == True
            assert manager.select_preset("Ocean") == True

            reloaded = SettingsManager(temp_file)

            assert reloaded.presets.selected_preset is not None
            assert reloaded.presets.selected_preset.name == "Ocean"

    def test_duplicate_preset_name_rejected(self):
        with tempfile.TemporaryDirectory() as temp_dir:
            temp_file = os.path.join(temp_dir, "test_settings.json")

            manager = SettingsManager(temp_file)
            manager.add_custom_preset(Preset(name="Ocean"))

            assert manager.add_custom_preset(Preset(name="Ocean")) == False
            assert len(manager.presets.custom_presets) == 1

    def test_select_unknown_preset(self):
        with tempfile.TemporaryDirectory() as temp_dir:
            temp_file = os.path.join(temp_dir, "test_settings.json")

            manager = SettingsManager(temp_file)

            assert manager.select_preset("Missing") == False
            assert manager.presets.selected_preset is None

    def test_remove_selected_preset_clears_selection(self):
        with tempfile.TemporaryDirectory() as temp_dir:
            temp_file = os.path.join(temp_dir, "test_settings.json")

            manager = SettingsManager(temp_file)
            manager.add_custom_preset(Preset(name="Ocean"))
            manager.select_preset("Ocean")

            assert manager.remove_custom_preset("Ocean") == True
            assert manager.presets.selected_preset is None
            assert manager.presets.custom_presets == []

    def test_clear_selection(self):
        with tempfile.TemporaryDirectory() as temp_dir:
            temp_file = os.path.join(temp_dir, "test_settings.json")

            manager = SettingsManager(temp_file)
            manager.add_custom_preset(Preset(name="Ocean"))
            manager.select_preset("Ocean")
            manager.select_preset(None)

            reloaded = SettingsManager(temp_file)
            assert reloaded.presets.selected_preset is None


class TestDelayRange:
    """Tests for hook reaction delay settings"""

    def test_save_and_load_delay_range(self):
        with tempfile.TemporaryDirectory() as temp_dir:
            temp_file = os.path.join(temp_dir, "test_settings.json")

            manager = SettingsManager(temp_file)

            assert manager.save_delay_range(100, 400) == True
            assert manager.load_delay_range() == (100, 400)

    def test_invalid_delay_range_not_saved(self):
        with tempfile.TemporaryDirectory() as temp_dir:
            temp_file = os.path.join(temp_dir, "test_settings.json")

            manager = SettingsManager(temp_file)

            assert manager.save_delay_range(500, 100) == False
            assert manager.load_delay_range() == (0, 0)

    def test_invalid_delay_in_file_uses_defaults(self):
        """Test that hand-edited bad bounds fall back to defaults"""
        with tempfile.TemporaryDirectory() as temp_dir:
            temp_file = os.path.join(temp_dir, "test_settings.json")
            with open(temp_file, "w", encoding="utf-8") as f:
                json.dump({"delay_between_hook_min": -5, "delay_between_hook_max": "x"}, f)

            manager = SettingsManager(temp_file)

            assert manager.load_delay_range() == (0, 0)


class TestGeneralToggles:
    """Tests for boolean general settings"""

    def test_save_and_load_plugin_enabled(self):
        with tempfile.TemporaryDirectory() as temp_dir:
            temp_file = os.path.join(temp_dir, "test_settings.json")

            manager = SettingsManager(temp_file)

            manager.save_plugin_enabled(False)
            assert manager.load_plugin_enabled() == False

            manager.save_plugin_enabled(True)
            assert manager.load_plugin_enabled() == True

    def test_save_and_load_reset_afk_timer(self):
        with tempfile.TemporaryDirectory() as temp_dir:
            temp_file = os.path.join(temp_dir, "test_settings.json")

            manager = SettingsManager(temp_file)

            manager.save_reset_afk_timer(True)
            assert manager.load_reset_afk_timer() == True

    def test_save_and_load_show_status_header(self):
        with tempfile.TemporaryDirectory() as temp_dir:
            temp_file = os.path.join(temp_dir, "test_settings.json")

            manager = SettingsManager(temp_file)

            manager.save_show_status_header(False)
            assert manager.load_show_status_header() == False

    def test_tick_interval_validation(self):
        with tempfile.TemporaryDirectory() as temp_dir:
            temp_file = os.path.join(temp_dir, "test_settings.json")

            manager = SettingsManager(temp_file)

            assert manager.save_tick_interval(0.1) == True
            assert manager.load_tick_interval() == 0.1
            assert manager.save_tick_interval(0) == False
            assert manager.load_tick_interval() == 0.1


class TestCachePerformance:
    """Tests for settings manager cache"""

    def test_loads_do_not_touch_file(self):
        """Test that cache prevents redundant file I/O"""
        with tempfile.TemporaryDirectory() as temp_dir:
            temp_file = os.path.join(temp_dir, "test_settings.json")

            manager = SettingsManager(temp_file)

            mtime_before = os.path.getmtime(temp_file)
            settings1 = manager.load_general_settings()
            settings2 = manager.load_general_settings()
            mtime_after = os.path.getmtime(temp_file)

            assert settings1 == settings2
            assert mtime_before == mtime_after

    def test_save_writes_selected_preset_name(self):
        """Test that presets are stored with the selection by name"""
        with tempfile.TemporaryDirectory() as temp_dir:
            temp_file = os.path.join(temp_dir, "test_settings.json")

            manager = SettingsManager(temp_file)
            manager.add_custom_preset(Preset(name="Ocean"))
            manager.select_preset("Ocean")

            with open(temp_file, "r", encoding="utf-8") as f:
                data = json.load(f)

            assert data["hook_presets"]["selected_preset"] == "Ocean"
