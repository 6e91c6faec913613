from __future__ import annotations

"""
Record Data Models.

A record only lives for the duration of one log call; these types carry
its parts between the capture helper, the formatter and the logger facade.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import NamedTuple, Optional

from thelogger.domain.levels import LogLevel


class CallSite(NamedTuple):
    """
    Origin of a log call.

    Attributes:
        file: Source file name as it should appear after ``@``.
        line: 1-based line number, None when unknown.
        column: 1-based column number, None when unknown.
    """
    file: str
    line: Optional[int] = None
    column: Optional[int] = None


@dataclass(frozen=True)
class Record:
    """
    One logical log event before rendering.

    Attributes:
        timestamp: Wall-clock moment already expressed in the target timezone.
        level: Severity attached to the event.
        call_site: Where the call originated, if captured.
        message: Pre-formatted message text.
    """
    timestamp: datetime
    level: LogLevel
    call_site: Optional[CallSite]
    message: str
