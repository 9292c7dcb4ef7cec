"""
Shared fixtures: fake game collaborators, a controllable clock and
preset builders.
"""

import random

import pytest

from automation.hook_manager import HookManager
from config.models import (
    BaitFish,
    FishConfig,
    HookConfig,
    HookPresets,
    HookRule,
    Hookset,
    Preset,
)
from core.state import BiteType, ChangeBaitResult, FishingPhase, HookType
from services.status_service import StatusService

EQUIPPED_BAIT = 29717


class FakeClock:
    def __init__(self, start=1000.0):
        self.now = start

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


class FakeSignals:
    def __init__(self):
        self.fishing_phase = FishingPhase.NOT_FISHING
        self.bite_type = BiteType.UNKNOWN
        self.statuses = set()
        self.spectral = False

    def has_status(self, status_id):
        return status_id in self.statuses

    def in_spectral_current(self):
        return self.spectral


class FakeDispatcher:
    def __init__(self):
        self.calls = []

    def cast_delayed(self, action_id, kind, label=""):
        self.calls.append(("delayed", action_id, kind, label))

    def cast_no_delay(self, action_id, kind, label=""):
        self.calls.append(("no_delay", action_id, kind, label))

    @property
    def action_ids(self):
        return [call[1] for call in self.calls]

    def hooks(self):
        hook_ids = {int(h) for h in HookType if h != HookType.NONE}
        return [call for call in self.calls if call[1] in hook_ids]


class FakeOracle:
    def __init__(self):
        self.unavailable = set()
        self.can_cast_now = True

    def action_available(self, action_id):
        return action_id not in self.unavailable

    def can_cast(self):
        return self.can_cast_now


class FakeBaitControl:
    def __init__(self, current=EQUIPPED_BAIT):
        self.current = current
        self.result = ChangeBaitResult.SUCCESS
        self.changes = []

    def change_bait(self, bait):
        self.changes.append(bait)
        if self.result == ChangeBaitResult.SUCCESS:
            self.current = bait.id
        return self.result


class FakeSettings:
    """In-memory stand-in for SettingsManager"""

    def __init__(self, presets):
        self.presets = presets
        self.saves = 0
        self.plugin_enabled = True
        self.delay_range = (0, 0)
        self.reset_afk_timer = False
        self.show_status_header = True
        self.tick_interval = 0.01

    def save(self):
        self.saves += 1

    def load_plugin_enabled(self):
        return self.plugin_enabled

    def load_delay_range(self):
        return self.delay_range

    def load_reset_afk_timer(self):
        return self.reset_afk_timer

    def load_show_status_header(self):
        return self.show_status_header

    def load_tick_interval(self):
        return self.tick_interval


def make_hook(bait_id=0, name="All Baits", enabled=True, rules=None, **hookset):
    if rules is None:
        rules = [
            HookRule(BiteType.WEAK, HookType.NORMAL),
            HookRule(BiteType.STRONG, HookType.NORMAL),
            HookRule(BiteType.LEGENDARY, HookType.NORMAL),
        ]
    return HookConfig(bait=BaitFish(bait_id, name), enabled=enabled, hookset=Hookset(rules=rules, **hookset))


def make_fish(fish_id=100, name="Fish", enabled=True, **fields):
    return FishConfig(fish=BaitFish(fish_id, name), enabled=enabled, **fields)


def make_presets(*custom, selected=None):
    default = Preset(
        name="Default",
        baits=[make_hook(0, "All Baits")],
        moochs=[make_hook(0, "All Mooches")],
    )
    presets = HookPresets(default_preset=default, custom_presets=list(custom))
    if selected is not None:
        presets.selected_preset = presets.find_custom(selected)
    return presets


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def signals():
    return FakeSignals()


@pytest.fixture
def dispatcher():
    return FakeDispatcher()


@pytest.fixture
def oracle():
    return FakeOracle()


@pytest.fixture
def bait_control():
    return FakeBaitControl()


@pytest.fixture
def settings():
    return FakeSettings(make_presets())


@pytest.fixture
def chat():
    return []


@pytest.fixture
def manager(signals, dispatcher, oracle, bait_control, settings, clock, chat):
    return HookManager(
        signals,
        dispatcher,
        oracle,
        bait_control,
        settings,
        status=StatusService({"on_chat": chat.append}),
        clock=clock,
        rng=random.Random(7),
    )
