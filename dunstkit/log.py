"""Log levels and a log handler for the dunstkit logger hierarchy."""

from __future__ import annotations

import enum
import logging
import sys

__all__ = [
    "LogLevel",
    "level_to_string",
    "set_level_from_string",
    "set_level",
    "get_level",
    "log_init",
]

LOGGER_NAME = "dunstkit"

_logger = logging.getLogger(LOGGER_NAME)


class LogLevel(enum.IntEnum):
    """Message severities; a lower value is more severe."""

    ERROR = 1 << 2
    CRITICAL = 1 << 3
    WARNING = 1 << 4
    MESSAGE = 1 << 5
    INFO = 1 << 6
    DEBUG = 1 << 7


_ALIASES = {
    "critical": LogLevel.CRITICAL,
    "crit": LogLevel.CRITICAL,
    "warning": LogLevel.WARNING,
    "warn": LogLevel.WARNING,
    "message": LogLevel.MESSAGE,
    "mesg": LogLevel.MESSAGE,
    "info": LogLevel.INFO,
    "debug": LogLevel.DEBUG,
    "deb": LogLevel.DEBUG,
}

_level: LogLevel = LogLevel.WARNING
_handler: logging.Handler | None = None


def level_to_string(level: int) -> str:
    """Return the upper-case name of a level, or "UNKNOWN"."""
    try:
        return LogLevel(level).name
    except ValueError:
        return "UNKNOWN"


def set_level_from_string(level: str | None) -> None:
    """Set the level by a (case-insensitive) name; None or unknown names change nothing."""
    global _level
    if level is None:
        return
    found = _ALIASES.get(level.lower())
    if found is None:
        _logger.warning("Unknown log level: '%s'", level)
        return
    _level = found


def set_level(level: LogLevel) -> None:
    """Set the minimum level of messages that get printed."""
    global _level
    _level = LogLevel(level)


def get_level() -> LogLevel:
    """Return the current minimum level."""
    return _level


def _from_python_level(levelno: int) -> LogLevel:
    if levelno > logging.CRITICAL:
        return LogLevel.ERROR
    if levelno >= logging.ERROR:
        return LogLevel.CRITICAL
    if levelno >= logging.WARNING:
        return LogLevel.WARNING
    if levelno > logging.INFO:
        return LogLevel.MESSAGE
    if levelno == logging.INFO:
        return LogLevel.INFO
    return LogLevel.DEBUG


class _DunstHandler(logging.Handler):
    """Print records as "LEVEL: message", warnings and worse to stderr."""

    def __init__(self, testing: bool) -> None:
        super().__init__(logging.DEBUG)
        self.testing = testing

    def emit(self, record: logging.LogRecord) -> None:
        if self.testing:
            return
        level = _from_python_level(record.levelno)
        if _level < level:
            return
        try:
            message = record.getMessage()
        except Exception:  # pragma: no cover - malformed record
            self.handleError(record)
            return
        stream = sys.stderr if level <= LogLevel.WARNING else sys.stdout
        print(f"{level.name}: {message}", file=stream)


def log_init(testing: bool) -> None:
    """Install the handler; in testing mode all output is suppressed."""
    global _handler
    if _handler is not None:
        _logger.removeHandler(_handler)
    _handler = _DunstHandler(bool(testing))
    _logger.addHandler(_handler)
    _logger.setLevel(logging.DEBUG)
    _logger.propagate = False