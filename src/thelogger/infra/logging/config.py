from __future__ import annotations

"""
Diagnostics channel settings.

The channel only carries the package's own reports (sink failures, preset
I/O problems, CLI debug traces). Rendered records never pass through it.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class LoggingConfig:
    """
    Immutable settings for the diagnostics channel.

    Attributes:
        level: Minimum severity by name (``"DEBUG"``, ``"WARNING"``, ...).
            Unknown names fall back to ``WARNING``.
        console: Whether diagnostics are written to stderr.
        fmt: Format of each stderr line.
    """
    level: str = "WARNING"
    console: bool = True
    fmt: str = "%(levelname)s | %(name)s | %(message)s"
