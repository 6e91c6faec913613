from __future__ import annotations

"""
Severity and Timestamp Enumerations.

Defines the fixed, ordered severity set with its column-aligned display
labels, the three-valued sub-second precision, and the timezone mode used
when resolving the wall clock.
"""

import math
from enum import Enum
from typing import Tuple, Union

from thelogger.domain.constants import (
    LEVEL_ALIASES,
    LEVEL_COLUMN,
    LEVEL_LABELS,
    TAB_STOP,
)

# -----------------------------------------------------------------------------
# SEVERITY
# -----------------------------------------------------------------------------

class LogLevel(Enum):
    """Fixed, ordered set of severity tags. VERBOSE is the default."""
    VERBOSE = "VERBOSE"
    INFORMATION = "INFORMATION"
    WARNING = "WARNING"
    ERROR = "ERROR"
    DEBUG = "DEBUG"
    TRACE = "TRACE"
    CRITICAL = "CRITICAL"

    @property
    def label(self) -> str:
        """Short display name, e.g. ``INFO`` for INFORMATION."""
        return LEVEL_LABELS[self.value]

    @property
    def tag(self) -> str:
        """
        Bracketed label padded with tabs up to the location column.

        With tab stops every 8 characters, ``[INFO]`` needs two tabs and
        ``[WARNING]`` one to reach column 16.

        Returns:
            str: e.g. ``"[WARNING]\\t"`` or ``"[INFO]\\t\\t"``.
        """
        bracketed = f"[{self.label}]"
        tabs = max(1, math.ceil((LEVEL_COLUMN - len(bracketed)) / TAB_STOP))
        return bracketed + "\t" * tabs

    @classmethod
    def parse(cls, value: Union[str, LogLevel]) -> LogLevel:
        """
        Resolve a level from its member name, display label or alias.

        Args:
            value: Case-insensitive text such as ``"info"`` or ``"Warning"``.

        Returns:
            LogLevel: The matching member.

        Raises:
            ValueError: If the text names no known level.
        """
        if isinstance(value, cls):
            return value
        key = str(value).strip().upper()
        key = LEVEL_ALIASES.get(key, key)
        try:
            return cls(key)
        except ValueError:
            raise ValueError(f"Unknown log level: {value!r}") from None


# -----------------------------------------------------------------------------
# TIMESTAMP
# -----------------------------------------------------------------------------

class SubsecondPrecision(Enum):
    """Fractional-second output appended after the time fields."""
    MICROSECONDS = "MICROSECONDS"
    MILLISECONDS = "MILLISECONDS"
    NONE = "NONE"

    @classmethod
    def from_flags(cls, hide_millis: bool, hide_micros: bool) -> SubsecondPrecision:
        """
        Derive the precision from the legacy pair of hide flags.

        Hiding milliseconds suppresses the fraction whatever the micros flag says.
        """
        if hide_millis:
            return cls.NONE
        if hide_micros:
            return cls.MILLISECONDS
        return cls.MICROSECONDS

    def to_flags(self) -> Tuple[bool, bool]:
        """Return the ``(hide_millis, hide_micros)`` pair for this precision."""
        if self is SubsecondPrecision.NONE:
            return True, True
        if self is SubsecondPrecision.MILLISECONDS:
            return False, True
        return False, False


class TimezoneMode(Enum):
    """Clock used to stamp records."""
    LOCAL = "LOCAL"
    UTC = "UTC"
