"""
Window Manager - Auto Hook
===========================
Handles game window detection.

This module centralizes window management using win32gui,
providing methods to find the game window and check its focus.
"""

import win32gui


class WindowManager:
    """
    Game window detection by exact window title.

    Uses win32gui to find the window and compare it to the foreground one.
    """

    def __init__(self, window_title):
        """
        Args:
            window_title (str): Exact title of the game window
        """
        self.window_title = window_title

    def find_window(self):
        """
        Find the game window handle.

        Returns:
            int: Window handle (hwnd) if found, None otherwise
        """
        try:
            hwnd = win32gui.FindWindow(None, self.window_title)
            return hwnd if hwnd else None
        except Exception:
            return None

    def is_game_focused(self):
        """
        Check if the game window is currently focused.

        Returns:
            bool: True if the game window exists and is foreground, False otherwise
        """
        try:
            hwnd = self.find_window()
            if hwnd:
                return hwnd == win32gui.GetForegroundWindow()
            return False
        except Exception:
            return False
