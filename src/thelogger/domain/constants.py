from __future__ import annotations

"""
Domain Constants and Static Data Structures.

Provides centralized access to the default field widths, record layout
markers, storage naming patterns and preset schema versioning used across
the logger.
"""

from typing import Dict

CURRENT_PRESET_VERSION = "1.0.0"

# -----------------------------------------------------------------------------
# FIELD WIDTHS
# -----------------------------------------------------------------------------
DEFAULT_LOCATION_WIDTH = 80
DEFAULT_CONTENT_WIDTH = 300

# -----------------------------------------------------------------------------
# RECORD LAYOUT
# -----------------------------------------------------------------------------
SECTION_SEPARATOR = "\t"
TRUNCATED_LOCATION_SUFFIX = "\t\t"
LINE_TERMINATOR = "\n"

DATE_SEPARATOR = "-"
TIME_SEPARATOR = ":"
FRACTION_SEPARATOR = "."

# Level labels are padded with tabs so the location starts at this column
TAB_STOP = 8
LEVEL_COLUMN = 16

LEVEL_LABELS: Dict[str, str] = {
    "VERBOSE": "VERBOSE",
    "INFORMATION": "INFO",
    "WARNING": "WARNING",
    "ERROR": "ERROR",
    "DEBUG": "DEBUG",
    "TRACE": "TRACE",
    "CRITICAL": "CRITICAL",
}

# Extra spellings accepted when parsing a level from text
LEVEL_ALIASES: Dict[str, str] = {
    "INFO": "INFORMATION",
    "WARN": "WARNING",
    "FATAL": "CRITICAL",
}

# -----------------------------------------------------------------------------
# STORAGE
# -----------------------------------------------------------------------------
DEFAULT_LOGS_DIR_NAME = "logs"
LOG_FILE_PATTERN = "Log {date}.log"
LOG_FILE_DATE_FORMAT = "%Y-%m-%d"
LOG_FILE_ENCODING = "utf-8"

APP_DIR_NAME = "TheLogger"
UNIX_APP_DIR_NAME = ".thelogger"
PRESETS_FILENAME = "presets.json"
