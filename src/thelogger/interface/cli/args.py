from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema and translates the raw argparse namespace
into configuration changes applied on top of a base ``LoggerConfig``.
"""

import argparse
from typing import Optional

from thelogger.domain.config import ConfigBuilder, LoggerConfig
from thelogger.domain.levels import LogLevel
from thelogger.domain.record_models import CallSite

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the thelogger CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="thelogger",
        description="Append one record to today's log file.",
    )

    p.add_argument(
        "message",
        nargs="*",
        help="Message text (joined with spaces).",
    )

    # --- Destination ---
    p.add_argument(
        "--logs-dir",
        dest="logs_dir",
        default=None,
        help="Directory holding the daily log files (default: ./logs).",
    )

    # --- Severity ---
    p.add_argument(
        "-l", "--level",
        default=None,
        help="Severity: verbose, info, warning, error, debug, trace or critical.",
    )

    # --- Presets ---
    p.add_argument(
        "--preset",
        default=None,
        help="Start from a saved preset instead of the defaults.",
    )
    p.add_argument(
        "--save-preset",
        dest="save_preset",
        default=None,
        help="Save the effective configuration under this name.",
    )
    p.add_argument(
        "--delete-preset",
        dest="delete_preset",
        default=None,
        help="Remove a saved preset and exit.",
    )

    # --- Timestamp ---
    p.add_argument("--utc", action="store_true", help="Stamp records in UTC.")
    p.add_argument("--hide-date", action="store_true", help="Hide year, month and day.")
    p.add_argument("--hide-time", action="store_true", help="Hide hours, minutes and seconds.")
    p.add_argument("--hide-millis", action="store_true", help="Hide the sub-second fraction.")
    p.add_argument("--hide-micros", action="store_true", help="Cut the fraction to milliseconds.")

    # --- Level tag and location ---
    p.add_argument("--hide-level", action="store_true", help="Replace the severity tag by a tab.")
    p.add_argument("--hide-location", action="store_true", help="Omit the call-site section.")
    p.add_argument("--show-column", action="store_true", help="Append the column to the location.")

    p.add_argument("--file", dest="call_file", default=None, help="Call-site file name.")
    p.add_argument("--line", dest="call_line", type=int, default=None, help="Call-site line.")
    p.add_argument("--column", dest="call_column", type=int, default=None, help="Call-site column.")

    # --- Widths ---
    p.add_argument(
        "--location-width",
        type=_non_negative_int,
        default=None,
        help="Characters reserved for the location section.",
    )
    p.add_argument(
        "--content-width",
        type=_non_negative_int,
        default=None,
        help="Characters reserved for the message.",
    )

    # --- Runtime ---
    p.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the rendered line instead of appending it.",
    )
    p.add_argument(
        "--dump-config",
        action="store_true",
        help="Print the effective configuration as JSON and exit.",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate diagnostics verbosity to DEBUG.",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def apply_overrides(base: LoggerConfig, args: argparse.Namespace) -> LoggerConfig:
    """
    Apply the command-line toggles on top of a base configuration.

    Args:
        base: Defaults or a loaded preset.
        args: Parsed command-line arguments.

    Returns:
        LoggerConfig: The effective configuration.

    Raises:
        ValueError: If ``--level`` names no known severity.
    """
    b = ConfigBuilder(base)

    if args.level:
        b.level(LogLevel.parse(args.level))
    if args.utc:
        b.utc_time()
    if args.hide_date:
        b.hide_years().hide_months().hide_days()
    if args.hide_time:
        b.hide_hours().hide_minutes().hide_seconds()
    if args.hide_micros:
        b.hide_micros()
    if args.hide_millis:
        b.hide_millis()
    if args.hide_level:
        b.hide_level()
    if args.hide_location:
        b.hide_file_name()
    if args.show_column:
        b.show_file_column()
    if args.location_width is not None:
        b.location_width(args.location_width)
    if args.content_width is not None:
        b.content_width(args.content_width)

    return b.build()


def validate_call_site_args(parser: argparse.ArgumentParser, args: argparse.Namespace) -> None:
    """
    Reject call-site parts that would be silently dropped.

    The location shows a line only after a file and a column only after a
    line, so ``--line`` needs ``--file`` and ``--column`` needs ``--line``.
    Exits with status 2 through ``parser.error``.
    """
    if not args.call_file and (args.call_line is not None or args.call_column is not None):
        parser.error("--line and --column require --file")
    if args.call_column is not None and args.call_line is None:
        parser.error("--column requires --line")


def call_site_from_args(args: argparse.Namespace) -> Optional[CallSite]:
    """Build the explicit call-site, or None when ``--file`` is absent."""
    if not args.call_file:
        return None
    return CallSite(args.call_file, args.call_line, args.call_column)

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def _non_negative_int(value: str) -> int:
    n = int(value)
    if n < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {n}")
    return n
