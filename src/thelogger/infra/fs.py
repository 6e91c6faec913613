from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides cross-platform resolution of the user data directory (presets),
the logs directory and the daily log file name. Acts as an abstraction over
the 'os' module to ensure uniform behavior across Windows and Unix-like
systems.
"""

import os
from datetime import date
from typing import Optional

from thelogger.domain.constants import (
    APP_DIR_NAME,
    DEFAULT_LOGS_DIR_NAME,
    LOG_FILE_DATE_FORMAT,
    LOG_FILE_PATTERN,
    UNIX_APP_DIR_NAME,
)

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def get_user_data_dir() -> str:
    """
    Resolve the standard OS-specific directory for persistent application data.

    Automatically creates the hierarchy if it does not exist.
    Standards:
    - Windows: %LOCALAPPDATA%/TheLogger
    - Linux/Mac: ~/.thelogger

    Returns:
        str: Absolute path to the application data directory.
    """
    path: str = ""

    if os.name == "nt":
        base = os.environ.get("LOCALAPPDATA") or os.environ.get("APPDATA")
        if base:
            path = os.path.join(base, APP_DIR_NAME)

    if not path:
        path = os.path.join(os.path.expanduser("~"), UNIX_APP_DIR_NAME)

    try:
        os.makedirs(path, exist_ok=True)
    except OSError:
        pass

    return os.path.abspath(path)


def resolve_logs_dir(logs_dir: Optional[str] = None) -> str:
    """
    Normalize the directory that receives the daily log files.

    Handles environment variable expansion and user home shortcuts. An empty
    value means ``<cwd>/logs``.

    Args:
        logs_dir: Raw directory path, or None for the default.

    Returns:
        str: Absolute path (not created here).
    """
    p = (logs_dir or "").strip()
    if not p:
        return os.path.abspath(DEFAULT_LOGS_DIR_NAME)
    return os.path.abspath(os.path.expandvars(os.path.expanduser(p)))


def daily_log_filename(day: date) -> str:
    """Return the deterministic file name for the given calendar day."""
    return LOG_FILE_PATTERN.format(date=day.strftime(LOG_FILE_DATE_FORMAT))


def ensure_dir(path: str) -> None:
    """
    Create a directory hierarchy if missing.

    Raises:
        OSError: If the hierarchy cannot be created.
    """
    os.makedirs(path, exist_ok=True)
