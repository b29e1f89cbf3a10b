"""Logger configuration and convenience helpers."""

from __future__ import annotations

import logging
import os
import sys
import time
from functools import wraps

_DEFAULT_LOGGER_NAME = "hikaru"
_DEFAULT_FORMATTER = logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")
_DEFAULT_HANDLER = logging.StreamHandler(sys.stdout)
_DEFAULT_HANDLER.setFormatter(_DEFAULT_FORMATTER)


def _resolve_level(value: str | None, default: int = logging.INFO) -> int:
    """Translate a level name such as ``"debug"`` into its numeric value."""
    if not value:
        return default
    return logging.getLevelNamesMapping().get(value.strip().upper(), default)


_DEFAULT_LOG_LEVEL = _resolve_level(os.getenv("HIKARU_LOG_LEVEL"))


def _configure_logger(logger: logging.Logger, level: int) -> None:
    """
    Configures a logger with the specified logging level and default handler.

    If the logger's level is not set, this function sets it to the provided level.
    It also ensures that a default handler is attached if no handlers are present,
    and disables propagation to ancestor loggers.

    Parameters
    ----------
    logger : logging.Logger
        The logger instance to configure.
    level : int
        The logging level to set if the logger's level is not already set.

    Examples
    --------
    >>> import logging
    >>> from hikaru.utils.logger import _configure_logger
    >>> logger = logging.getLogger("my_logger")
    >>> _configure_logger(logger, logging.INFO)
    >>> logger.info("This is an info message.")
    """
    if logger.level == logging.NOTSET:
        logger.setLevel(level)
    if not logger.handlers:
        logger.addHandler(_DEFAULT_HANDLER)
    logger.propagate = False


def get_logger(name: str | None = None, level: int = _DEFAULT_LOG_LEVEL) -> logging.Logger:
    """Return a configured logger for the given name.

    Loggers under ``hikaru.`` are left unconfigured so they inherit the level
    and handler of the ``hikaru`` logger; only that parent is configured.
    """
    name = name or _DEFAULT_LOGGER_NAME
    if name.startswith(_DEFAULT_LOGGER_NAME + "."):
        _configure_logger(logging.getLogger(_DEFAULT_LOGGER_NAME), level)
        return logging.getLogger(name)
    logger = logging.getLogger(name)
    _configure_logger(logger, level)
    return logger


def set_level(level: int | str, logger_names: list[str] | None = None) -> None:
    """Set the log level for one or more logger names."""
    numeric = _resolve_level(level) if isinstance(level, str) else level
    names = logger_names or [_DEFAULT_LOGGER_NAME]
    for name in names:
        logging.getLogger(name).setLevel(numeric)


class Logger(logging.Logger):
    """Custom Logger class for hikaru."""

    def __init__(self, name: str = _DEFAULT_LOGGER_NAME, level: int = _DEFAULT_LOG_LEVEL) -> None:
        super().__init__(name, level)
        _configure_logger(self, level)


def funclogger(func):
    """Decorator to add debug tracing to functions:

    Logs the qualified function name.
    Logs each positional and keyword argument.
    Logs the elapsed time and the return value.
    """

    @wraps(func)
    def wrapper(*args, **kwargs):
        function_path = f"{func.__module__}.{func.__qualname__}".replace("<", "").replace(">", "")
        logger = get_logger(function_path)

        logger.debug("Starting %s", function_path)
        for i, arg in enumerate(args):
            logger.debug(" %s. %s (%s)", i, arg, type(arg).__name__)
        for key, value in kwargs.items():
            logger.debug(" - %s (%s): %s", key, type(value).__name__, value)

        start_time = time.time()
        result = func(*args, **kwargs)
        elapsed_time = time.time() - start_time
        logger.debug("Finished %s in %.4f seconds", func.__qualname__, elapsed_time)
        logger.debug("Return Value: %s (%s)", result, type(result).__name__)
        return result

    return wrapper
