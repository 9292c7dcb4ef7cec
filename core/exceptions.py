"""
Core Exceptions

Custom exceptions for engine lifecycle control and configuration loading.
"""


class EngineException(Exception):
    """Base exception for FishingEngine errors"""
    pass


class ConfigError(EngineException):
    """
    Raised when a preset or settings payload cannot be parsed.

    The settings manager catches this at load time, logs it and falls back
    to defaults; the engine itself never sees a half-parsed preset.
    """
    pass
