from __future__ import annotations

"""
Logger Facade.

Binds one configuration store to one sink. A log call takes exactly one
snapshot of the configuration, renders the whole line in memory and hands
it to the sink in a single append, so records are never partial and never
interleaved.
"""

import atexit
import logging
import threading
from datetime import datetime
from typing import Optional, Union

from thelogger.core.formatter import format_record
from thelogger.core.store import ConfigStore
from thelogger.domain.config import LoggerConfig
from thelogger.domain.levels import LogLevel
from thelogger.domain.record_models import CallSite
from thelogger.infra.sink import DailyFileSink

logger = logging.getLogger(__name__)

_INSTANCE: Optional[TheLogger] = None
_INSTANCE_LOCK = threading.Lock()


class TheLogger:
    """
    Configurable, append-only daily file logger.

    Args:
        sink: Destination of rendered lines (owned by the logger once passed).
        config: Initial configuration; defaults to ``LoggerConfig()``.

    Example:
        >>> log = TheLogger.with_defaults(logs_dir="logs")
        >>> log.settings.hide_years().location_width(40)
        >>> log.warning().log("disk full", CallSite("main.py", 42, 7))
    """

    def __init__(self, sink: DailyFileSink, config: Optional[LoggerConfig] = None) -> None:
        self._sink = sink
        self._store = ConfigStore(config)

    @classmethod
    def with_defaults(cls, logs_dir: Optional[str] = None) -> TheLogger:
        """Build a logger with the default configuration writing under ``logs_dir``."""
        return cls(DailyFileSink(logs_dir))

    @classmethod
    def instance(cls) -> TheLogger:
        """
        Return the process-wide logger, creating it on first use.

        Lives until interpreter exit, writes to ``<cwd>/logs`` and starts with
        the default configuration. Prefer an explicit instance where the
        configuration must be isolated (tests, libraries).

        Raises:
            SinkUnavailableError: If the daily file cannot be opened.
        """
        global _INSTANCE
        with _INSTANCE_LOCK:
            if _INSTANCE is None:
                _INSTANCE = cls.with_defaults()
                atexit.register(_INSTANCE.close)
                logger.debug(f"Process-wide logger ready: {_INSTANCE.path}")
            return _INSTANCE

    @property
    def settings(self) -> ConfigStore:
        return self._store

    @property
    def path(self) -> str:
        return self._sink.path

    # --- Severity selection (chainable) ---

    def set_level(self, level: Union[str, LogLevel]) -> TheLogger:
        self._store.set_level(level)
        return self

    def verbose(self) -> TheLogger:
        return self.set_level(LogLevel.VERBOSE)

    def info(self) -> TheLogger:
        return self.set_level(LogLevel.INFORMATION)

    def warning(self) -> TheLogger:
        return self.set_level(LogLevel.WARNING)

    def error(self) -> TheLogger:
        return self.set_level(LogLevel.ERROR)

    def debug(self) -> TheLogger:
        return self.set_level(LogLevel.DEBUG)

    def trace(self) -> TheLogger:
        return self.set_level(LogLevel.TRACE)

    def critical(self) -> TheLogger:
        return self.set_level(LogLevel.CRITICAL)

    # --- Logging ---

    def render(
            self,
            message: str,
            call_site: Optional[CallSite] = None,
            *,
            level: Optional[LogLevel] = None,
            timestamp: Optional[datetime] = None,
    ) -> str:
        """
        Render a line from the current configuration without writing it.

        Args:
            message: Pre-formatted message text.
            call_site: Origin of the call, if known.
            level: Per-call severity; the store is left untouched.
            timestamp: Fixed moment instead of the wall clock.

        Returns:
            str: The rendered line.
        """
        snapshot = self._store.snapshot()
        return format_record(snapshot, message, call_site, level=level, timestamp=timestamp)

    def log(
            self,
            message: str,
            call_site: Optional[CallSite] = None,
            *,
            level: Optional[LogLevel] = None,
            timestamp: Optional[datetime] = None,
    ) -> None:
        """
        Render a record and append it to the daily file.

        Returns once the line has been written and flushed.

        Raises:
            SinkWriteError: If the append fails. The record is not written.
        """
        line = self.render(message, call_site, level=level, timestamp=timestamp)
        self._sink.append(line)

    def close(self) -> None:
        self._sink.close()

    def __enter__(self) -> TheLogger:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
