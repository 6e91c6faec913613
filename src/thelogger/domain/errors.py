from __future__ import annotations

"""
Logger Exception Hierarchy.

Only the sink can fail: the formatter is total over its inputs and every
configuration operation accepts its whole domain.
"""


class TheLoggerError(Exception):
    """Base class for every error raised by the logger."""


class SinkUnavailableError(TheLoggerError):
    """
    The daily log file (or its directory) could not be created or opened.

    Raised once, at sink construction. A logger without a sink does not exist.
    """

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Log sink unavailable at '{path}': {reason}")
        self.path = path
        self.reason = reason


class SinkWriteError(TheLoggerError):
    """An append to an already opened sink failed. Fatal to the calling log operation."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Failed to append record to '{path}': {reason}")
        self.path = path
        self.reason = reason
