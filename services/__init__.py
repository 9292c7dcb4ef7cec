# Copyright (C) 2026 BPS
# This file is part of BPS Auto Hook.
#
# Services Module - Public Interface

from .catch_ledger import CatchLedger
from .logging_service import LoggingService
from .status_service import StatusService

__all__ = [
    "CatchLedger",
    "LoggingService",
    "StatusService",
]
