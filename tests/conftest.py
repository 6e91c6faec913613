from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared fixtures for configurations, fixed timestamps and temporary loggers.
"""

import os
import sys
from datetime import datetime
from pathlib import Path
from typing import Generator

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from thelogger.core.logger import TheLogger  # noqa: E402
from thelogger.domain.config import LoggerConfig  # noqa: E402
from thelogger.infra.sink import DailyFileSink  # noqa: E402


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def default_config() -> LoggerConfig:
    """Configuration with every default in place."""
    return LoggerConfig()


@pytest.fixture
def fixed_moment() -> datetime:
    """
    A naive timestamp whose fields are all distinguishable.

    2024-03-09 07:05:03.004042 -> millis 004, micros 004042.
    """
    return datetime(2024, 3, 9, 7, 5, 3, 4042)


@pytest.fixture
def logs_dir(tmp_path: Path) -> Path:
    return tmp_path / "logs"


@pytest.fixture
def file_logger(logs_dir: Path) -> Generator[TheLogger, None, None]:
    """
    Provide a TheLogger writing to a temporary logs directory.

    Yields:
        TheLogger: Logger with the default configuration, closed afterwards.
    """
    the_logger = TheLogger(DailyFileSink(str(logs_dir)))
    yield the_logger
    the_logger.close()
