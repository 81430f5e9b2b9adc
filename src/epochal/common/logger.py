"""Defines the :class:`.Logger` class and the package-level logging one-liners."""

from __future__ import annotations

# Standard Library Imports
import logging
import sys
from functools import cache
from logging.handlers import RotatingFileHandler
from os import makedirs
from os.path import exists, join

# Local Imports
from . import pathSafeTime
from .behavioral_config import BehavioralConfig

PACKAGE_LOGGER_NAME: str = "epochal"
"""``str``: name of the top-level logger the one-liner helpers write to."""


class Logger:
    """Thin wrapper over a standard :class:`logging.Logger`.

    Handler, level and file naming are taken from :class:`.BehavioralConfig` unless given.
    """

    def __init__(self, name, level=None, path=None, allow_multiple_handlers=None):
        """Configure the logging information for this Logger instance.

        Args:
            name (``string``): Name of the the logger instance
            level (``logging.LOG_LEVEL``): Determines what level of log messages are published
            path (``string``): Path to where the log file will be stored, or ``"stdout"``
            allow_multiple_handlers (``bool``, optional): whether multiple log handlers are permitted
        """
        config = BehavioralConfig.getConfig()
        if not level:
            level = config.logging.Level
        if not path:
            path = config.logging.OutputLocation
        if not allow_multiple_handlers:
            allow_multiple_handlers = config.logging.AllowMultipleHandlers

        self.logger = logging.getLogger(name)
        self.filename = None
        if not self.logger.handlers or allow_multiple_handlers is True:
            if path == "stdout":
                self.filename = "stdout"
                handler = logging.StreamHandler(sys.stdout)

            else:
                if not exists(path):
                    self.logger.info(f"Path did not exist: {path!r}. Creating path...")
                    makedirs(path)

                log_name = f"{name}_{pathSafeTime()}.log"
                self.filename = join(path, log_name)

                handler = RotatingFileHandler(
                    self.filename,
                    maxBytes=config.logging.MaxFileSize,
                    backupCount=config.logging.MaxFileCount,
                )

            formatter = logging.Formatter("%(asctime)s - %(module)s - %(levelname)s - %(message)s")
            handler.setFormatter(formatter)

            self.logger.setLevel(level)
            self.logger.addHandler(handler)

    def __getattr__(self, name):
        """Forward everything else to the wrapped :class:`logging.Logger`."""
        return getattr(self.logger, name)


@cache
def getPackageLogger() -> Logger:
    """Return the top-level :class:`.Logger`, configured from the ``[logging]`` settings on first use.

    The handler, level and rotation come from :class:`.BehavioralConfig` as loaded when the
    first package message is logged.
    """
    return Logger(PACKAGE_LOGGER_NAME)


def _epochalLog(message: str, level: int):
    """Log a message to the top-level log record.

    This is a one-liner that does not need a pre-built :class:`.Logger`, meant for plain
    functions that report a problem right before raising.

    Args:
        message (``str``): message to record with in the log.
        level (``int``): level at which to log this message, corresponding to `logging.LOG_LEVEL`.
    """
    getPackageLogger().log(msg=message, level=level)


def epochalLogCritical(message: str):
    """Log a CRITICAL message to the top-level log record."""
    _epochalLog(message, level=logging.CRITICAL)


def epochalLogError(message: str):
    """Log an ERROR message to the top-level log record.

    See Also:
        :func:`._epochalLog`

    Args:
        message (``str``): message to record with in the log.
    """
    _epochalLog(message, level=logging.ERROR)


def epochalLogWarning(message: str):
    """Log a WARNING message to the top-level log record."""
    _epochalLog(message, level=logging.WARNING)


def epochalLogInfo(message: str):
    """Log an INFO message to the top-level log record."""
    _epochalLog(message, level=logging.INFO)


def epochalLogDebug(message: str):
    """Log a DEBUG message to the top-level log record."""
    _epochalLog(message, level=logging.DEBUG)
