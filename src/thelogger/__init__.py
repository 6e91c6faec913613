from __future__ import annotations

from .api import (
    log,
    log_critical,
    log_debug,
    log_error,
    log_info,
    log_trace,
    log_warning,
)
from .core.callsite import capture_call_site
from .core.formatter import format_record
from .core.logger import TheLogger
from .core.store import ConfigStore
from .domain.config import ConfigBuilder, LoggerConfig
from .domain.errors import SinkUnavailableError, SinkWriteError, TheLoggerError
from .domain.levels import LogLevel, SubsecondPrecision, TimezoneMode
from .domain.record_models import CallSite
from .infra.sink import DailyFileSink

__all__ = [
    "CallSite",
    "ConfigBuilder",
    "ConfigStore",
    "DailyFileSink",
    "LogLevel",
    "LoggerConfig",
    "SinkUnavailableError",
    "SinkWriteError",
    "SubsecondPrecision",
    "TheLogger",
    "TheLoggerError",
    "TimezoneMode",
    "capture_call_site",
    "format_record",
    "log",
    "log_critical",
    "log_debug",
    "log_error",
    "log_info",
    "log_trace",
    "log_warning",
]
