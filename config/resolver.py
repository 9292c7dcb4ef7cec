# Copyright (C) 2026 BPS
# This file is part of BPS Auto Hook.
#
# Two-level configuration resolution: selected preset over default preset

from typing import Optional

from core.interfaces import ConfigStore

from .models import AutoCastsConfig, BaitFish, ExtraConfig, FishConfig, HookConfig, Preset


class ConfigResolver:
    """Resolves the effective hook, fish, auto-cast and extra configuration

    A selected-preset entry only overrides the default preset when that entry
    is itself enabled. Bundles (auto-casts, extra) are taken whole from one
    preset or the other, never merged field by field.
    """

    def __init__(self, store: ConfigStore):
        """
        Args:
            store: Configuration store exposing `presets` (HookPresets)
        """
        self._store = store

    @property
    def presets(self):
        return self._store.presets

    @property
    def selected(self) -> Optional[Preset]:
        return self.presets.selected_preset

    @property
    def default(self) -> Preset:
        return self.presets.default_preset

    def _custom_hook(self, identity: int, mooching: bool) -> Optional[HookConfig]:
        if self.selected is None:
            return None
        if mooching:
            return self.selected.get_mooch_by_id(identity)
        return self.selected.get_bait_by_id(identity)

    def _default_hook(self, identity: int, mooching: bool) -> Optional[HookConfig]:
        table = self.default.moochs if mooching else self.default.baits
        if mooching:
            entry = self.default.get_mooch_by_id(identity)
        else:
            entry = self.default.get_bait_by_id(identity)
        if entry is None and table:
            entry = table[0]
        return entry

    def hook_config(self, identity: int, mooching: bool) -> HookConfig:
        """Effective hook config for the equipped bait or the fish being mooched

        Never returns None: with nothing configured a disabled placeholder is
        returned, so callers only ever check `enabled`.
        """
        custom = self._custom_hook(identity, mooching)
        if custom is not None and custom.enabled:
            return custom

        default = self._default_hook(identity, mooching)
        if default is not None:
            return default

        return HookConfig(bait=BaitFish(identity, "-"), enabled=False)

    def fish_config(self, fish_id: int) -> Optional[FishConfig]:
        custom = self.selected.get_fish_by_id(fish_id) if self.selected else None
        if custom is not None and custom.enabled:
            return custom
        return self.default.get_fish_by_id(fish_id)

    def auto_casts(self) -> AutoCastsConfig:
        if self.selected is not None and self.selected.auto_casts.enable_all:
            return self.selected.auto_casts
        return self.default.auto_casts

    def extra(self) -> ExtraConfig:
        if self.selected is not None and self.selected.extra.enabled:
            return self.selected.extra
        return self.default.extra

    def find_custom_preset(self, name: str) -> Optional[Preset]:
        return self.presets.find_custom(name)

    def preset_label(self, identity: int, mooching: bool) -> str:
        """Human readable name of the config that will hook this cycle"""
        custom = self._custom_hook(identity, mooching)
        if custom is not None and custom.enabled:
            return f"{custom.bait.name} ({self.selected.name})"

        default = self._default_hook(identity, mooching)
        if default is not None and default.enabled:
            return f"{default.bait.name} ({self.default.name})"

        return "None"
