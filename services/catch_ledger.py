# Copyright (C) 2026 BPS
# This file is part of BPS Auto Hook.
#
# Services Module - Catch Ledger
# Per-config catch counters for stop-after-caught and swap milestone rules

import logging

logger = logging.getLogger("AutoHook")


class CatchLedger:
    """
    Session catch counters keyed by config unique id

    Entries are created on first add, dropped on remove, and the whole
    ledger is cleared when fishing stops.
    """

    def __init__(self):
        self._counts = {}

    def add(self, unique_id: str) -> int:
        """Count one catch and return the new total"""
        self._counts[unique_id] = self._counts.get(unique_id, 0) + 1
        return self._counts[unique_id]

    def get_count(self, unique_id: str) -> int:
        return self._counts.get(unique_id, 0)

    def remove(self, unique_id: str):
        self._counts.pop(unique_id, None)

    def reset(self):
        if self._counts:
            logger.debug(f"Catch ledger cleared ({len(self._counts)} entries)")
        self._counts = {}

    def __len__(self):
        return len(self._counts)

    def __contains__(self, unique_id):
        return unique_id in self._counts
