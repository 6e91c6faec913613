# tests/test_imports_smoke.py
# -----------------------------------------------------------------------------
# Smoke tests for imports and the public API contract of the package root.
# -----------------------------------------------------------------------------

from __future__ import annotations

import thelogger


def test_package_importable():
    assert thelogger is not None


def test_public_api_contract():
    required = [
        "TheLogger",
        "ConfigStore",
        "ConfigBuilder",
        "LoggerConfig",
        "LogLevel",
        "SubsecondPrecision",
        "TimezoneMode",
        "CallSite",
        "DailyFileSink",
        "format_record",
        "capture_call_site",
        "log",
        "log_info",
        "log_warning",
        "log_error",
        "log_debug",
        "log_trace",
        "log_critical",
        "TheLoggerError",
        "SinkUnavailableError",
        "SinkWriteError",
    ]
    for name in required:
        assert hasattr(thelogger, name), f"thelogger missing: {name}"
        assert name in thelogger.__all__
