"""
HookManager - per-tick driver of the auto hook

Owns the whole decision context (phase tracker, catch ledger, timers,
deferred hooks) and sequences it once per tick:

    1. drain deferred hooks and intercepted game events
    2. force a pending quit
    3. stop-after-caught limits, auto-casts, bite timeout
    4. react to the phase change, if any

Intercepted game events arrive on the game thread. Casts and mooches are
checked there while still usable; accepted cycle starts and catches are
queued and applied at the start of the next tick, so engine state is only
ever touched by the tick thread.
"""

import logging
import queue
import time

from config.ids import Actions, COLLECTIBLE_ID_OFFSET
from config.resolver import ConfigResolver
from core.interfaces import ActionDispatcher, BaitControl, ConfigStore, ResourceOracle, SignalSource
from core.state import ActionKind, FishingPhase, StepKind
from services.catch_ledger import CatchLedger
from services.status_service import StatusService
from utils.timing import DeferredScheduler, RecastGate, Stopwatch

from .auto_cast import AutoCastSelector
from .catch_handler import CatchHandler
from .hook_decision import HookDecision
from .phase_tracker import PhaseEvent, PhaseTracker
from .reactive_triggers import ReactiveTriggers

logger = logging.getLogger("AutoHook")


class HookManager:
    """
    Decision engine orchestrator.

    All collaborators are injected; everything stateful is created here and
    lives as long as the manager.
    """

    def __init__(
        self,
        signals: SignalSource,
        dispatcher: ActionDispatcher,
        oracle: ResourceOracle,
        bait_control: BaitControl,
        settings: ConfigStore,
        status=None,
        anti_idle=None,
        clock=time.monotonic,
        rng=None,
    ):
        """
        Args:
            signals: SignalSource (phase, bite type, statuses)
            dispatcher: ActionDispatcher
            oracle: ResourceOracle
            bait_control: BaitControl
            settings: ConfigStore, normally the SettingsManager
            status: Optional StatusService for the status line and chat
            anti_idle: Optional () -> None poked on every status update
            clock: Monotonic clock for all timers (injectable for tests)
            rng: Optional random.Random for hook reaction delays
        """
        self._signals = signals
        self._dispatcher = dispatcher
        self._oracle = oracle
        self._bait_control = bait_control
        self._settings = settings
        self._anti_idle = anti_idle

        self.status = status or StatusService()
        self.ledger = CatchLedger()
        self.tracker = PhaseTracker()
        self.resolver = ConfigResolver(settings)
        self.fishing_timer = Stopwatch(clock)
        self.scheduler = DeferredScheduler(clock)
        self._events = queue.SimpleQueue()
        self._timeout = 0.0

        self.triggers = ReactiveTriggers(
            self.resolver, settings, self.tracker, bait_control, signals, self.status
        )
        self.hook_decision = HookDecision(
            dispatcher, oracle, self.scheduler, settings.load_delay_range, rng=rng
        )
        self.auto_cast = AutoCastSelector(
            self.resolver,
            self.ledger,
            self.tracker,
            self.triggers,
            dispatcher,
            oracle,
            signals,
            RecastGate(clock=clock),
        )
        self.catch_handler = CatchHandler(
            self.resolver,
            self.ledger,
            self.tracker,
            dispatcher,
            self.status,
            self.fishing_timer,
            self.auto_cast.gate,
            self.current_hook_config,
        )

    # ========== CONFIG ==========

    def current_identity(self) -> int:
        return self.tracker.current_identity(self._bait_control.current)

    def current_hook_config(self):
        return self.resolver.hook_config(self.current_identity(), self.tracker.is_mooching)

    # ========== INTERCEPTED GAME EVENTS ==========

    def on_use_action(self, kind: ActionKind, action_id: int):
        """Called by the action interception layer before the game runs the action

        Availability is checked here, on the calling thread, while the action
        is still usable; only an accepted cycle start is queued for the tick.
        """
        if kind != ActionKind.ACTION or not self._settings.load_plugin_enabled():
            return

        if action_id == Actions.CAST:
            if self._oracle.action_available(action_id):
                self._events.put((self._on_began_fishing, ()))
        elif action_id in (Actions.MOOCH, Actions.MOOCH2):
            if self._oracle.action_available(action_id):
                self._events.put((self._on_began_mooch, ()))

    def on_catch_update(self, fish_id: int, amount: int):
        """Called by the catch interception layer for every catch"""
        self._events.put((self._handle_catch, (fish_id, amount)))

    def process_events(self):
        while True:
            try:
                handler, args = self._events.get_nowait()
            except queue.Empty:
                return
            try:
                handler(*args)
            except Exception as e:
                logger.error(f"[HookManager] Error: {e}", exc_info=True)

    def _handle_catch(self, fish_id, amount):
        # Collectibles are reported with an id offset
        if fish_id > COLLECTIBLE_ID_OFFSET:
            fish_id -= COLLECTIBLE_ID_OFFSET
        self.catch_handler.on_catch(fish_id, amount)

    # ========== TICK ==========

    def tick(self):
        """Run one decision step; a failing tick is logged and skipped"""
        try:
            self._tick()
        except Exception as e:
            logger.error(f"[HookManager] Tick failed: {e}", exc_info=True)

    def _tick(self):
        self.scheduler.run_due()
        self.process_events()

        phase = self._signals.fishing_phase

        if not self._settings.load_plugin_enabled() or phase == FishingPhase.NOT_FISHING:
            return

        if self.tracker.quit_pending(phase):
            if self._oracle.can_cast():
                self._dispatcher.cast_delayed(Actions.QUIT, ActionKind.ACTION, "Quit")
                phase = FishingPhase.QUIT

        if (
            phase == FishingPhase.POLE_READY
            and self.tracker.kind == StepKind.FISH_CAUGHT
        ):
            self.catch_handler.check_stop_condition()

        if self.tracker.kind != StepKind.QUITTING and phase == FishingPhase.POLE_READY:
            self.auto_cast.tick()

        if phase == FishingPhase.WAITING2:
            self.catch_handler.check_timeout(self._timeout)

        event = self.tracker.observe(phase)
        if event is None:
            return

        if event == PhaseEvent.POLE_READY:
            self.status.clear_status()
        elif event == PhaseEvent.HOOKED_EARLY:
            self.fishing_timer.reset()
        elif event == PhaseEvent.POLE_OUT:
            self.fishing_timer.start()
        elif event == PhaseEvent.BITE:
            self._on_bite()
        elif event == PhaseEvent.QUIT:
            self.catch_handler.on_fishing_stop()

    def shutdown(self):
        """Drop pending hooks and queued events (engine stopped)"""
        self.scheduler.clear()
        while not self._events.empty():
            self._events.get_nowait()

    # ========== CYCLE EVENTS ==========

    def _on_began_fishing(self):
        if not self.tracker.begin_fishing():
            return
        self._cast_collect()
        self._update_status_and_timer()

    def _on_began_mooch(self):
        if not self.tracker.begin_mooching():
            return
        self._cast_collect()
        self._update_status_and_timer()

    def _cast_collect(self):
        cfg = self.resolver.auto_casts()
        if cfg.cast_collect.is_available_to_cast(self._oracle):
            self._dispatcher.cast_delayed(cfg.cast_collect.id, cfg.cast_collect.kind, cfg.cast_collect.name)

    def _on_bite(self):
        self._update_status_and_timer()
        hook_cfg = self.current_hook_config()
        self.fishing_timer.stop()

        bite_serial = self.tracker.bite_serial

        def still_valid():
            return self.tracker.kind == StepKind.FISH_BIT and self.tracker.bite_serial == bite_serial

        self.hook_decision.request(
            self._signals.bite_type,
            hook_cfg,
            self.fishing_timer.truncated_seconds,
            still_valid,
        )

    def _update_status_and_timer(self):
        """Refresh timeout and status line from the config used this cycle

        Runs when a cycle begins (config chosen by bait/mooch) and again on
        the bite, in case the user changed the config meanwhile.
        """
        if self._anti_idle is not None and self._settings.load_reset_afk_timer():
            self._anti_idle()

        selected = self.current_hook_config()
        self._timeout = selected.hookset.timeout_max if selected.enabled else 0.0

        if not self._settings.load_show_status_header():
            return

        buff_status = ""
        if selected.hookset.required_status:
            buff_status = f"(Status {selected.hookset.required_status})"

        if not selected.enabled:
            message = "No config found. Not hooking"
        else:
            label = self.resolver.preset_label(self.current_identity(), self.tracker.is_mooching)
            message = f"Hook Found: {label} {buff_status}".rstrip()

        self.status.set_status(message)
        logger.debug(f"[HookManager] {message}")
