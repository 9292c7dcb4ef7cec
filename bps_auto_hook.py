# Copyright (C) 2026 BPS
# This file is part of BPS Auto Hook.
#
# Application wiring: builds the settings store, hook manager and engine
# around the game collaborators supplied by the host.

import logging
import os
import sys

from automation import HookManager
from config import SettingsManager
from core import FishingEngine
from core.interfaces import ActionDispatcher, BaitControl, ResourceOracle, SignalSource
from services import LoggingService, StatusService

logger = logging.getLogger("AutoHook")

SETTINGS_FILE_NAME = "auto_hook_settings.json"


def get_app_dir():
    """Directory next to the script, or next to the frozen executable"""
    if getattr(sys, "frozen", False):
        return os.path.dirname(sys.executable)
    return os.path.dirname(os.path.abspath(__file__))


def build_anti_idle(settings: SettingsManager):
    """Anti-idle keystroke for the configured game window"""
    # Windows-only input stack, imported on demand
    from input import AntiIdle, KeyboardController, WindowManager

    return AntiIdle(KeyboardController(), WindowManager(settings.load_game_window_title()))


def build_engine(
    signals: SignalSource,
    dispatcher: ActionDispatcher,
    oracle: ResourceOracle,
    bait_control: BaitControl,
    settings_file: str = None,
    callbacks: dict = None,
    anti_idle=None,
    setup_logging: bool = True,
):
    """Wire a FishingEngine around the host's collaborators

    Args:
        signals: SignalSource for phase, bite and statuses
        dispatcher: ActionDispatcher
        oracle: ResourceOracle
        bait_control: BaitControl
        settings_file: Settings JSON path (default: next to the app)
        callbacks: Optional dict; on_status/on_chat go to the status service,
            the rest (on_start, on_stop, on_error, on_state_change) to the engine
        anti_idle: Optional anti-idle callable; built from settings when None
            and the AFK reset is enabled
        setup_logging: Configure file + console logging

    Returns:
        (engine, hook_manager); the host forwards intercepted actions and
        catches to hook_manager.on_use_action / on_catch_update
    """
    if setup_logging:
        LoggingService()

    callbacks = callbacks or {}
    settings = SettingsManager(settings_file or os.path.join(get_app_dir(), SETTINGS_FILE_NAME))

    if anti_idle is None and settings.load_reset_afk_timer():
        anti_idle = build_anti_idle(settings)

    status = StatusService({k: v for k, v in callbacks.items() if k in ("on_status", "on_chat")})
    hook_manager = HookManager(
        signals,
        dispatcher,
        oracle,
        bait_control,
        settings,
        status=status,
        anti_idle=anti_idle,
    )
    engine = FishingEngine(
        hook_manager,
        settings,
        logger,
        {k: v for k, v in callbacks.items() if k not in ("on_status", "on_chat")},
    )
    return engine, hook_manager
