# Copyright (C) 2026 BPS
# This file is part of BPS Auto Hook.
#
# Services Module - Logging Service

import logging
import os
import sys


class LoggingService:
    """
    Centralized logging service

    File + console handlers on the shared "AutoHook" logger.
    """

    def __init__(self, log_file: str = None, log_level: int = logging.INFO):
        """
        Initialize logging service

        Args:
            log_file: Path to log file
            log_level: Logging level (default: INFO)
        """
        if log_file is None:
            # Default log file sits next to the app (or the frozen executable)
            log_file = os.path.join(
                os.path.dirname(os.path.abspath(__file__)) if not getattr(sys, 'frozen', False)
                else os.path.dirname(sys.executable),
                'auto_hook.log'
            )

        self.log_file = log_file
        self.log_level = log_level
        self.logger = None
        self._setup_logging()

    def _setup_logging(self):
        """Setup logging with file and console handlers"""
        logging.basicConfig(
            level=self.log_level,
            format='%(asctime)s | %(levelname)s | %(message)s',
            handlers=[
                logging.FileHandler(self.log_file, encoding='utf-8'),
                logging.StreamHandler()
            ]
        )
        self.logger = logging.getLogger('AutoHook')

    def get_logger(self):
        """Get the logger instance"""
        return self.logger
