# Copyright (C) 2026 BPS
# This file is part of BPS Auto Hook.
#
# Services Module - Status Service
# User-facing status line and chat messages

import logging

logger = logging.getLogger("AutoHook")


class StatusService:
    """Status line + chat channel shown to the user

    Every message is logged; callbacks forward them to whatever UI is attached.
    """

    def __init__(self, callbacks=None):
        """
        Args:
            callbacks: Optional dict of callbacks:
                - on_status: (text) -> None, status line changed
                - on_chat: (text) -> None, chat message emitted
        """
        self._callbacks = callbacks or {}
        self.status = ""

    def set_status(self, text: str):
        self.status = text
        if "on_status" in self._callbacks:
            self._callbacks["on_status"](text)

    def clear_status(self):
        self.set_status("")

    def chat(self, text: str):
        logger.info(text)
        if "on_chat" in self._callbacks:
            self._callbacks["on_chat"](text)
