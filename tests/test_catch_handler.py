"""
Test suite for automation/catch_handler.py
===========================================
Catch counting, stop-after-caught limits and the bite timeout.
"""

import pytest
from conftest import make_fish, make_hook
from config.ids import Actions, COLLECTIBLE_ID_OFFSET
from core.state import ActionKind, FishingPhase, StepKind

FISH_ID = 100


def catch(manager, signals, fish_id=FISH_ID, amount=1):
    manager.on_catch_update(fish_id, amount)
    signals.fishing_phase = FishingPhase.POLE_READY
    manager.tick()


class TestCatchCounting:
    def test_counts_fish_and_hook_config(self, manager, signals):
        fish_cfg = make_fish(FISH_ID)
        manager.resolver.default.fishes = [fish_cfg]

        catch(manager, signals, amount=2)

        assert manager.ledger.get_count(fish_cfg.get_unique_id()) == 2
        assert manager.ledger.get_count(manager.current_hook_config().get_unique_id()) == 1
        assert manager.tracker.kind == StepKind.FISH_CAUGHT

    def test_collectible_offset_removed(self, manager, signals):
        fish_cfg = make_fish(FISH_ID)
        manager.resolver.default.fishes = [fish_cfg]

        catch(manager, signals, fish_id=FISH_ID + COLLECTIBLE_ID_OFFSET)

        assert manager.ledger.get_count(fish_cfg.get_unique_id()) == 1
        assert manager.tracker.last_catch.id == FISH_ID

    def test_unconfigured_fish_still_recorded(self, manager, signals):
        catch(manager, signals, fish_id=555)

        assert manager.tracker.last_catch.id == 555
        assert manager.tracker.kind == StepKind.FISH_CAUGHT


class TestStopAfterCaught:
    """Tests for fish and hook caught limits"""

    def test_fish_limit_quits_and_resets(self, manager, signals, dispatcher, chat):
        fish_cfg = make_fish(FISH_ID, "Goldfish", stop_after_caught=True, stop_after_caught_limit=3,
                             stop_after_reset_count=True)
        manager.resolver.default.fishes = [fish_cfg]

        catch(manager, signals)
        catch(manager, signals)
        assert manager.tracker.kind == StepKind.FISH_CAUGHT

        catch(manager, signals)
        assert manager.tracker.kind == StepKind.QUITTING
        assert chat == ["Caught limit reached: Goldfish: 3"]
        assert fish_cfg.get_unique_id() not in manager.ledger

    def test_fish_limit_keeps_count_without_reset(self, manager, signals):
        fish_cfg = make_fish(FISH_ID, stop_after_caught=True, stop_after_caught_limit=3)
        manager.resolver.default.fishes = [fish_cfg]

        catch(manager, signals, amount=3)

        assert manager.tracker.kind == StepKind.QUITTING
        assert manager.ledger.get_count(fish_cfg.get_unique_id()) == 3

    def test_stop_step_none_does_not_quit(self, manager, signals, dispatcher):
        fish_cfg = make_fish(FISH_ID, stop_after_caught=True, stop_after_caught_limit=1,
                             stop_fishing_step=StepKind.NONE)
        manager.resolver.default.fishes = [fish_cfg]

        catch(manager, signals)
        assert manager.tracker.kind == StepKind.NONE

        manager.tick()
        assert Actions.QUIT not in dispatcher.action_ids

    def test_hook_limit(self, manager, signals, chat):
        manager.resolver.default.baits = [
            make_hook(0, "All Baits", stop_after_caught=True, stop_after_caught_limit=2)
        ]

        catch(manager, signals)
        catch(manager, signals)

        assert manager.tracker.kind == StepKind.QUITTING
        assert chat == ["Hooking limit reached: All Baits: 2"]

    def test_quit_sent_once_game_allows(self, manager, signals, dispatcher, oracle):
        fish_cfg = make_fish(FISH_ID, stop_after_caught=True, stop_after_caught_limit=1)
        manager.resolver.default.fishes = [fish_cfg]
        catch(manager, signals)

        oracle.can_cast_now = False
        manager.tick()
        assert dispatcher.calls == []

        oracle.can_cast_now = True
        manager.tick()
        assert dispatcher.calls == [
            ("delayed", Actions.QUIT, ActionKind.ACTION, "Quit"),
            ("no_delay", Actions.QUIT, ActionKind.ACTION, "Quit"),
        ]
        assert manager.tracker.kind == StepKind.NONE
        assert len(manager.ledger) == 0


class TestTimeout:
    def cast(self, manager, signals):
        manager.on_use_action(ActionKind.ACTION, Actions.CAST)
        signals.fishing_phase = FishingPhase.POLE_OUT
        manager.tick()

    def test_hooks_after_timeout(self, manager, signals, clock, dispatcher):
        manager.resolver.default.baits = [make_hook(timeout_max=1.0)]
        self.cast(manager, signals)

        signals.fishing_phase = FishingPhase.WAITING2
        clock.advance(0.5)
        manager.tick()
        assert dispatcher.calls == []

        clock.advance(1.0)
        manager.tick()
        manager.tick()

        assert dispatcher.calls == [("delayed", Actions.HOOK, ActionKind.ACTION, "Hook")]
        assert manager.tracker.kind == StepKind.TIME_OUT

    def test_zero_timeout_never_fires(self, manager, signals, clock, dispatcher):
        self.cast(manager, signals)
        signals.fishing_phase = FishingPhase.WAITING2
        clock.advance(120)
        manager.tick()
        assert dispatcher.calls == []

    def test_disabled_config_has_no_timeout(self, manager, signals, clock, dispatcher):
        manager.resolver.default.baits = [make_hook(enabled=False, timeout_max=1.0)]
        self.cast(manager, signals)
        signals.fishing_phase = FishingPhase.WAITING2
        clock.advance(5)
        manager.tick()
        assert dispatcher.calls == []
