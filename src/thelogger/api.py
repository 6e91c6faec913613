from __future__ import annotations

"""
Convenience Logging Functions.

One function per severity. Each formats the message ``%``-style (as the
standard ``logging`` module does), captures the caller's location and logs
with that severity. The severity is passed per call, so concurrent callers
using different functions never overwrite each other's level.

    >>> log_warning(my_logger, "disk %s is full", "/dev/sda1")
"""

from typing import Any, Optional

from thelogger.core.callsite import capture_call_site
from thelogger.core.logger import TheLogger
from thelogger.domain.levels import LogLevel


def _emit(logger: Optional[TheLogger], level: LogLevel, msg: str, args: tuple) -> None:
    target = logger or TheLogger.instance()
    message = msg % args if args else str(msg)
    # _emit <- log_xxx <- user code
    target.log(message, capture_call_site(stacklevel=3), level=level)


def log(logger: Optional[TheLogger], msg: str, *args: Any) -> None:
    _emit(logger, LogLevel.VERBOSE, msg, args)


def log_info(logger: Optional[TheLogger], msg: str, *args: Any) -> None:
    _emit(logger, LogLevel.INFORMATION, msg, args)


def log_warning(logger: Optional[TheLogger], msg: str, *args: Any) -> None:
    _emit(logger, LogLevel.WARNING, msg, args)


def log_error(logger: Optional[TheLogger], msg: str, *args: Any) -> None:
    _emit(logger, LogLevel.ERROR, msg, args)


def log_debug(logger: Optional[TheLogger], msg: str, *args: Any) -> None:
    _emit(logger, LogLevel.DEBUG, msg, args)


def log_trace(logger: Optional[TheLogger], msg: str, *args: Any) -> None:
    _emit(logger, LogLevel.TRACE, msg, args)


def log_critical(logger: Optional[TheLogger], msg: str, *args: Any) -> None:
    _emit(logger, LogLevel.CRITICAL, msg, args)
