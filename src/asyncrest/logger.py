"""Process-wide leveled logger.

Messages are written to stdout as ``[LEVEL] message - Details: details``.
A single threshold decides what is printed: a message is emitted when its
severity rank is less than or equal to the threshold's rank, where
``ERROR`` (rank 0) is the most severe and ``INFO`` (rank 2) the least.
The default threshold is ``ERROR``, so out of the box only errors print.

The module exposes two layers, mirroring how the rest of the package is
organised:

1. :class:`Logger` -- holds the threshold and a Rich
   :class:`~rich.console.Console`.
2. Module-level helpers (:func:`set_level`, :func:`log`, :func:`error`,
   :func:`warning`, :func:`info`) that delegate to the global instance
   returned by :func:`get_logger`.

Example::

    from asyncrest import logger
    from asyncrest.logger import LogLevel

    logger.set_level(LogLevel.INFO)
    logger.info("Request successful", details="Status Code: 200")
"""

from __future__ import annotations

import sys
import threading
from enum import Enum
from typing import Optional

from rich.console import Console


class LogLevel(str, Enum):
    """Log severities, ordered by :attr:`rank` rather than by name."""

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"

    @property
    def rank(self) -> int:
        """Severity rank: 0 for ERROR, 1 for WARNING, 2 for INFO."""
        return _RANKS[self]


_RANKS = {LogLevel.ERROR: 0, LogLevel.WARNING: 1, LogLevel.INFO: 2}

_STYLES: dict[LogLevel, Optional[str]] = {
    LogLevel.ERROR: "bold red",
    LogLevel.WARNING: "yellow",
    LogLevel.INFO: None,
}


class Logger:
    """Leveled logger writing to stdout.

    The threshold may be changed from any thread; reads and writes go
    through a lock.

    Args:
        level: Initial threshold.
        no_color: Write plain text with :func:`print` instead of styling
            the level prefix through Rich.
    """

    def __init__(self, level: LogLevel = LogLevel.ERROR, no_color: bool = False) -> None:
        self._level = LogLevel(level)
        self._lock = threading.Lock()
        self._no_color = no_color
        # No explicit file: Rich resolves sys.stdout at write time.
        self._console = Console(no_color=no_color, soft_wrap=True)

    @property
    def level(self) -> LogLevel:
        """The current threshold."""
        with self._lock:
            return self._level

    @level.setter
    def level(self, value: LogLevel) -> None:
        with self._lock:
            self._level = LogLevel(value)

    def is_enabled(self, level: LogLevel) -> bool:
        """Return ``True`` if a message at *level* would be printed."""
        return LogLevel(level).rank <= self.level.rank

    def log(self, level: LogLevel, message: str, details: str) -> None:
        """Print *message* with *details* if *level* passes the threshold.

        Args:
            level: Severity of the message.
            message: Short description.
            details: Additional context appended after ``- Details:``.
        """
        level = LogLevel(level)
        if not self.is_enabled(level):
            return

        prefix = f"[{level.value.upper()}]"
        text = f"{message} - Details: {details}"
        if self._no_color:
            print(f"{prefix} {text}", file=sys.stdout, flush=True)
            return

        # Only the prefix goes through Rich; it would rewrite tabs and
        # control characters in the body.
        self._console.print(prefix, style=_STYLES[level], markup=False, highlight=False, end="")
        out = self._console.file
        out.write(f" {text}\n")
        out.flush()

    def error(self, message: str, details: str) -> None:
        """Log at :attr:`LogLevel.ERROR`."""
        self.log(LogLevel.ERROR, message, details)

    def warning(self, message: str, details: str) -> None:
        """Log at :attr:`LogLevel.WARNING`."""
        self.log(LogLevel.WARNING, message, details)

    def info(self, message: str, details: str) -> None:
        """Log at :attr:`LogLevel.INFO`."""
        self.log(LogLevel.INFO, message, details)


# ------------------------------------------------------------------ #
# Global logger instance
# ------------------------------------------------------------------ #

_logger: Optional[Logger] = None
_logger_lock = threading.Lock()


def get_logger() -> Logger:
    """Return the global :class:`Logger`, creating it with defaults on first use."""
    global _logger
    with _logger_lock:
        if _logger is None:
            _logger = Logger()
        return _logger


def set_logger(logger: Logger) -> None:
    """Install *logger* as the global instance."""
    global _logger
    with _logger_lock:
        _logger = logger


def reset_logger() -> None:
    """Drop the global instance so the next :func:`get_logger` starts fresh.

    Primarily useful in test suites.
    """
    global _logger
    with _logger_lock:
        _logger = None


# ------------------------------------------------------------------ #
# Convenience functions that use the global instance
# ------------------------------------------------------------------ #


def set_level(level: LogLevel) -> None:
    """Set the global threshold."""
    get_logger().level = level


def get_level() -> LogLevel:
    """Return the global threshold."""
    return get_logger().level


def log(level: LogLevel, message: str, details: str) -> None:
    """Log through the global instance."""
    get_logger().log(level, message, details)


def error(message: str, details: str) -> None:
    """Log an error through the global instance."""
    get_logger().error(message, details)


def warning(message: str, details: str) -> None:
    """Log a warning through the global instance."""
    get_logger().warning(message, details)


def info(message: str, details: str) -> None:
    """Log an info message through the global instance."""
    get_logger().info(message, details)
