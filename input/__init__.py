"""
Input Module - Auto Hook
=========================
Input abstraction for the anti-idle keystroke.

Isolates pynput and win32gui from the rest of the codebase; nothing in the
decision engine imports this package.

Modules:
    - keyboard_controller: Keyboard input simulation
    - window_manager: Game window detection and focus checks
    - anti_idle: Keystroke that resets the game's AFK timer

Usage:
    from input import AntiIdle, KeyboardController, WindowManager

    anti_idle = AntiIdle(KeyboardController(), WindowManager("FINAL FANTASY XIV"))
    anti_idle()
"""

from .keyboard_controller import KeyboardController
from .window_manager import WindowManager
from .anti_idle import AntiIdle

__all__ = [
    'KeyboardController',
    'WindowManager',
    'AntiIdle',
]
