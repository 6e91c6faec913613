from __future__ import annotations

"""
Record Formatter.

Turns one configuration snapshot plus the parts of a record into a single
line: timestamp, severity tag, call-site location and message, in that
order, each section sized by the snapshot's toggles and widths. Pure string
work; the caller owns the I/O.

Line layout:
    <timestamp>\\t[<LEVEL>]<tabs><location><message padded to content_width>\\n
"""

from datetime import datetime, timezone
from typing import List, Optional

from thelogger.domain.config import LoggerConfig
from thelogger.domain.constants import (
    DATE_SEPARATOR,
    FRACTION_SEPARATOR,
    LINE_TERMINATOR,
    SECTION_SEPARATOR,
    TIME_SEPARATOR,
    TRUNCATED_LOCATION_SUFFIX,
)
from thelogger.domain.levels import LogLevel, SubsecondPrecision, TimezoneMode
from thelogger.domain.record_models import CallSite, Record

# Line breaks become spaces so a record never spans two lines
_SINGLE_LINE = str.maketrans({"\n": " ", "\r": " "})

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def format_record(
        config: LoggerConfig,
        message: str,
        call_site: Optional[CallSite] = None,
        *,
        level: Optional[LogLevel] = None,
        timestamp: Optional[datetime] = None,
) -> str:
    """
    Render one record from a single configuration snapshot.

    Args:
        config: Snapshot to render with. Read once, never mutated.
        message: Pre-formatted message text.
        call_site: Origin of the call, or None to leave the location empty.
        level: Severity override; defaults to ``config.level``.
        timestamp: Moment to stamp; defaults to the wall clock in the
            configured timezone.

    Returns:
        str: The complete line, terminator included.
    """
    record = Record(
        timestamp=_to_zone(timestamp, config.timezone) if timestamp else resolve_wall_clock(config.timezone),
        level=level or config.level,
        call_site=call_site,
        message=message,
    )
    return render(config, record)


def render(config: LoggerConfig, record: Record) -> str:
    """Assemble the four sections of an already built record."""
    return "".join((
        render_timestamp(config, record.timestamp),
        render_level(config, record.level),
        render_location(config, record.call_site),
        render_message(config, record.message).ljust(config.content_width),
        LINE_TERMINATOR,
    ))


def resolve_wall_clock(mode: TimezoneMode) -> datetime:
    """Current time as a naive datetime in the requested zone."""
    if mode is TimezoneMode.UTC:
        return datetime.now(timezone.utc).replace(tzinfo=None)
    return datetime.now()

# -----------------------------------------------------------------------------
# SECTION RENDERERS
# -----------------------------------------------------------------------------

def render_timestamp(config: LoggerConfig, moment: datetime) -> str:
    """
    Render the date, time and fraction fields enabled in the snapshot.

    Date parts are joined by ``-`` and followed by one space only when at
    least one of them is shown. Time parts are joined by ``:``. The section
    always ends with a tab, even when every field is hidden.

    Args:
        config: Snapshot selecting the visible fields.
        moment: Time already expressed in the configured zone.

    Returns:
        str: e.g. ``"2024-03-09 07:05:03.000042\\t"``.
    """
    date_parts: List[str] = []
    if config.show_years:
        date_parts.append(f"{moment.year:04d}"[-4:])
    if config.show_months:
        date_parts.append(f"{moment.month:02d}")
    if config.show_days:
        date_parts.append(f"{moment.day:02d}")

    time_parts: List[str] = []
    if config.show_hours:
        time_parts.append(f"{moment.hour:02d}")
    if config.show_minutes:
        time_parts.append(f"{moment.minute:02d}")
    if config.show_seconds:
        time_parts.append(f"{moment.second:02d}")

    out = DATE_SEPARATOR.join(date_parts)
    if date_parts:
        out += " "
    out += TIME_SEPARATOR.join(time_parts)

    if config.subsecond is SubsecondPrecision.MICROSECONDS:
        out += f"{FRACTION_SEPARATOR}{moment.microsecond:06d}"
    elif config.subsecond is SubsecondPrecision.MILLISECONDS:
        out += f"{FRACTION_SEPARATOR}{moment.microsecond // 1000:03d}"

    return out + SECTION_SEPARATOR


def render_level(config: LoggerConfig, level: LogLevel) -> str:
    """Padded severity tag, or a lone tab keeping later columns in place."""
    if not config.show_level:
        return SECTION_SEPARATOR
    return level.tag


def render_location(config: LoggerConfig, call_site: Optional[CallSite]) -> str:
    """
    Render ``@file: line|column`` within ``location_width`` characters.

    A field is emitted only if it and every field it depends on are shown
    (column needs line, line needs file). Too long: cut to exactly
    ``location_width`` characters plus two tabs. Otherwise padded to
    ``location_width``. No call-site or no file name: empty.
    """
    text = _location_text(config, call_site)
    if not text:
        return ""

    width = config.location_width
    if len(text) > width:
        return text[:width] + TRUNCATED_LOCATION_SUFFIX
    return text.ljust(width)


def render_message(config: LoggerConfig, message: str) -> str:
    """Cut the message to ``content_width`` characters; shorter text is kept as is."""
    text = str(message).translate(_SINGLE_LINE)
    if len(text) > config.content_width:
        return text[:config.content_width]
    return text

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _location_text(config: LoggerConfig, call_site: Optional[CallSite]) -> str:
    if call_site is None or not config.show_file_name:
        return ""

    out = "@" + str(call_site.file).translate(_SINGLE_LINE)
    if not config.show_file_line or call_site.line is None:
        return out

    out += f": {call_site.line}"
    if config.show_file_column and call_site.column is not None:
        out += f"|{call_site.column}"
    return out


def _to_zone(moment: datetime, mode: TimezoneMode) -> datetime:
    """Express an aware datetime in the configured zone; naive ones are taken as is."""
    if moment.tzinfo is None:
        return moment
    if mode is TimezoneMode.UTC:
        return moment.astimezone(timezone.utc).replace(tzinfo=None)
    return moment.astimezone().replace(tzinfo=None)
