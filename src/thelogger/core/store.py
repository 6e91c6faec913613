from __future__ import annotations

"""
Shared Configuration Store.

Holds the current ``LoggerConfig`` of one logger behind a readers-writer
lock. Every mutation is an exclusive read-modify-write that builds a new
immutable value and swaps it in; every snapshot is a shared read of that
single reference, so a render always sees one consistent configuration.
"""

import logging
from typing import Callable, Optional, Union

from thelogger.core.rwlock import ReadWriteLock
from thelogger.domain.config import ConfigBuilder, LoggerConfig
from thelogger.domain.levels import LogLevel, SubsecondPrecision

logger = logging.getLogger(__name__)

_Mutation = Callable[[ConfigBuilder], ConfigBuilder]


class ConfigStore:
    """
    Thread-safe, chainable holder of the process configuration.

    All operations return the store so calls can be chained:

        >>> store.hide_years().hide_months().warning().location_width(40)
    """

    def __init__(self, config: Optional[LoggerConfig] = None) -> None:
        self._lock = ReadWriteLock()
        self._config = config or LoggerConfig()

    def snapshot(self) -> LoggerConfig:
        """Return the configuration in effect, read under shared access."""
        with self._lock.read():
            return self._config

    def replace(self, config: LoggerConfig) -> ConfigStore:
        """Swap in a whole configuration (e.g. a named preset) at once."""
        with self._lock.write():
            self._config = config
        logger.debug("Configuration replaced in bulk.")
        return self

    def _apply(self, mutation: _Mutation) -> ConfigStore:
        with self._lock.write():
            self._config = mutation(ConfigBuilder(self._config)).build()
        return self

    # --- Severity selection ---

    def set_level(self, level: Union[str, LogLevel]) -> ConfigStore:
        level = LogLevel.parse(level)
        return self._apply(lambda b: b.level(level))

    def verbose(self) -> ConfigStore:
        return self._apply(ConfigBuilder.verbose)

    def info(self) -> ConfigStore:
        return self._apply(ConfigBuilder.info)

    def warning(self) -> ConfigStore:
        return self._apply(ConfigBuilder.warning)

    def error(self) -> ConfigStore:
        return self._apply(ConfigBuilder.error)

    def debug(self) -> ConfigStore:
        return self._apply(ConfigBuilder.debug)

    def trace(self) -> ConfigStore:
        return self._apply(ConfigBuilder.trace)

    def critical(self) -> ConfigStore:
        return self._apply(ConfigBuilder.critical)

    # --- Date fields ---

    def show_years(self) -> ConfigStore:
        return self._apply(ConfigBuilder.show_years)

    def hide_years(self) -> ConfigStore:
        return self._apply(ConfigBuilder.hide_years)

    def show_months(self) -> ConfigStore:
        return self._apply(ConfigBuilder.show_months)

    def hide_months(self) -> ConfigStore:
        return self._apply(ConfigBuilder.hide_months)

    def show_days(self) -> ConfigStore:
        return self._apply(ConfigBuilder.show_days)

    def hide_days(self) -> ConfigStore:
        return self._apply(ConfigBuilder.hide_days)

    # --- Time fields ---

    def show_hours(self) -> ConfigStore:
        return self._apply(ConfigBuilder.show_hours)

    def hide_hours(self) -> ConfigStore:
        return self._apply(ConfigBuilder.hide_hours)

    def show_minutes(self) -> ConfigStore:
        return self._apply(ConfigBuilder.show_minutes)

    def hide_minutes(self) -> ConfigStore:
        return self._apply(ConfigBuilder.hide_minutes)

    def show_seconds(self) -> ConfigStore:
        return self._apply(ConfigBuilder.show_seconds)

    def hide_seconds(self) -> ConfigStore:
        return self._apply(ConfigBuilder.hide_seconds)

    def show_millis(self) -> ConfigStore:
        return self._apply(ConfigBuilder.show_millis)

    def hide_millis(self) -> ConfigStore:
        """Hide milliseconds, which hides microseconds as well."""
        return self._apply(ConfigBuilder.hide_millis)

    def show_micros(self) -> ConfigStore:
        return self._apply(ConfigBuilder.show_micros)

    def hide_micros(self) -> ConfigStore:
        return self._apply(ConfigBuilder.hide_micros)

    def subsecond(self, precision: SubsecondPrecision) -> ConfigStore:
        return self._apply(lambda b: b.subsecond(precision))

    def utc_time(self) -> ConfigStore:
        return self._apply(ConfigBuilder.utc_time)

    def local_time(self) -> ConfigStore:
        return self._apply(ConfigBuilder.local_time)

    # --- Level tag ---

    def show_level(self) -> ConfigStore:
        return self._apply(ConfigBuilder.show_level)

    def hide_level(self) -> ConfigStore:
        return self._apply(ConfigBuilder.hide_level)

    # --- Location ---

    def show_file_name(self) -> ConfigStore:
        return self._apply(ConfigBuilder.show_file_name)

    def hide_file_name(self) -> ConfigStore:
        return self._apply(ConfigBuilder.hide_file_name)

    def show_file_line(self) -> ConfigStore:
        return self._apply(ConfigBuilder.show_file_line)

    def hide_file_line(self) -> ConfigStore:
        return self._apply(ConfigBuilder.hide_file_line)

    def show_file_column(self) -> ConfigStore:
        return self._apply(ConfigBuilder.show_file_column)

    def hide_file_column(self) -> ConfigStore:
        return self._apply(ConfigBuilder.hide_file_column)

    # --- Widths ---

    def location_width(self, width: int) -> ConfigStore:
        return self._apply(lambda b: b.location_width(width))

    def content_width(self, width: int) -> ConfigStore:
        return self._apply(lambda b: b.content_width(width))
