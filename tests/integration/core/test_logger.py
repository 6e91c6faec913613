from __future__ import annotations

"""
Integration tests for the logger facade and convenience functions.

Verifies:
1. Records land in the daily file in rendered form.
2. Severity chaining and per-call overrides.
3. Call-site capture through the convenience functions.
4. Write failures propagate to the caller.
"""

import sys
from pathlib import Path
from unittest.mock import patch

import pytest

from thelogger import api
from thelogger.core.logger import TheLogger
from thelogger.domain.errors import SinkWriteError
from thelogger.domain.levels import LogLevel
from thelogger.domain.record_models import CallSite


def _lines(the_logger: TheLogger):
    return Path(the_logger.path).read_text(encoding="utf-8").splitlines(keepends=True)


def test_log_appends_rendered_line(file_logger, fixed_moment):
    file_logger.warning().log("disk full", CallSite("main.rs", 42, 7), timestamp=fixed_moment)

    (line,) = _lines(file_logger)
    assert line == file_logger.render(
        "disk full", CallSite("main.rs", 42, 7), timestamp=fixed_moment
    )
    assert "\t[WARNING]\t@main.rs: 42" in line
    assert "|7" not in line
    assert line.rstrip(" \n").endswith("disk full")


def test_severity_selection_persists(file_logger):
    file_logger.error()
    assert file_logger.settings.snapshot().level is LogLevel.ERROR


def test_level_override_leaves_store_untouched(file_logger, fixed_moment):
    file_logger.info()
    line = file_logger.render("x", level=LogLevel.CRITICAL, timestamp=fixed_moment)

    assert "[CRITICAL]\t" in line
    assert file_logger.settings.snapshot().level is LogLevel.INFORMATION


def test_settings_changes_apply_to_next_record(file_logger, fixed_moment):
    file_logger.log("before", timestamp=fixed_moment)
    file_logger.settings.hide_years().hide_months().hide_days().hide_level()
    file_logger.log("after", timestamp=fixed_moment)

    before, after = _lines(file_logger)
    assert before.startswith("2024-03-09 07:05:03.004042\t[VERBOSE]\tbefore")
    assert after.startswith("07:05:03.004042\t\tafter")


def test_convenience_functions_capture_call_site(file_logger):
    expected_line = sys._getframe().f_lineno + 1
    api.log_warning(file_logger, "disk %s is %d%% full", "sda1", 97)

    (line,) = _lines(file_logger)
    assert "[WARNING]\t" in line
    assert f"@test_logger.py: {expected_line}" in line
    assert "disk sda1 is 97% full" in line


@pytest.mark.parametrize("func, tag", [
    (api.log, "[VERBOSE]"),
    (api.log_info, "[INFO]"),
    (api.log_error, "[ERROR]"),
    (api.log_debug, "[DEBUG]"),
    (api.log_trace, "[TRACE]"),
    (api.log_critical, "[CRITICAL]"),
])
def test_each_convenience_function_uses_its_level(file_logger, func, tag):
    func(file_logger, "100% literal")

    (line,) = _lines(file_logger)
    assert tag in line
    assert "100% literal" in line


def test_write_failure_is_fatal_to_the_call(file_logger):
    file_logger.log("kept")
    with patch("thelogger.infra.sink.os.write", side_effect=OSError("device gone")):
        with pytest.raises(SinkWriteError):
            file_logger.log("lost")
    file_logger.log("after")

    lines = _lines(file_logger)
    assert len(lines) == 2
    assert not any("lost" in line for line in lines)


def test_instance_is_process_wide(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr("thelogger.core.logger._INSTANCE", None)

    first = TheLogger.instance()
    try:
        assert TheLogger.instance() is first
        assert Path(first.path).parent.resolve() == (tmp_path / "logs").resolve()
    finally:
        first.close()
