"""Utility exports for the hikaru package."""

from .logger import Logger, funclogger, get_logger, set_level

__all__ = [
    "Logger",
    "funclogger",
    "get_logger",
    "set_level",
]
