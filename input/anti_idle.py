"""
Anti-Idle - Auto Hook
======================
Resets the game's AFK timer with a harmless keystroke.

The right Windows key is never bound by the game, so tapping it counts as
activity without triggering anything in game.
"""

import logging

from pynput.keyboard import Key

logger = logging.getLogger("AutoHook")


class AntiIdle:
    """Callable poked by the hook manager on every status update"""

    def __init__(self, keyboard, window_manager, key=Key.cmd_r):
        """
        Args:
            keyboard: KeyboardController
            window_manager: WindowManager for the game window
            key: Key to tap (default: right Windows key)
        """
        self.keyboard = keyboard
        self.window_manager = window_manager
        self.key = key

    def __call__(self):
        # Keystrokes go to the foreground window only
        if not self.window_manager.is_game_focused():
            logger.debug("[AntiIdle] Game window not focused, skipping")
            return False

        self.keyboard.tap(self.key)
        return True
