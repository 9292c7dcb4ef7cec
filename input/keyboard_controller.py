"""
Keyboard Controller - Auto Hook
================================
Handles keyboard input operations.

This module centralizes keyboard input using pynput.keyboard.Controller.
"""

import time
from pynput.keyboard import Controller


class KeyboardController:
    """
    Centralized keyboard control using pynput.

    Supports both character keys ('5', '`') and special keys (Key.cmd_r, Key.shift).
    """

    def __init__(self):
        """Initialize keyboard controller with pynput Controller."""
        self.kb = Controller()

    def tap(self, key, delay=0.05):
        """
        Press and release a key with a delay.

        Args:
            key: Key to tap (string like '5' or Key object like Key.cmd_r)
            delay (float): Delay between press and release in seconds (default: 0.05)
        """
        self.kb.press(key)
        time.sleep(delay)
        self.kb.release(key)
