from __future__ import annotations

"""
Logger Configuration Model.

Defines the immutable configuration value that drives record rendering and
the consuming builder that produces it. A snapshot handed to the formatter
can never change underneath it; mutation always means building a new value.
The shared, lock-guarded holder of the current value lives in
``thelogger.core.store``.
"""

import logging
from dataclasses import asdict, dataclass, fields
from typing import Any, Dict, Mapping, Optional, Union

from thelogger.domain.constants import DEFAULT_CONTENT_WIDTH, DEFAULT_LOCATION_WIDTH
from thelogger.domain.levels import LogLevel, SubsecondPrecision, TimezoneMode

logger = logging.getLogger(__name__)

_ENUM_FIELDS = {
    "subsecond": SubsecondPrecision,
    "timezone": TimezoneMode,
    "level": LogLevel,
}
_WIDTH_FIELDS = ("location_width", "content_width")


def _clamp_width(value: int) -> int:
    """Widths are character counts; anything below zero means zero."""
    return max(0, int(value))


# -----------------------------------------------------------------------------
# CONFIGURATION VALUE
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class LoggerConfig:
    """
    Immutable rendering configuration.

    Attributes:
        show_years: Include the 4-digit year.
        show_months: Include the 2-digit month.
        show_days: Include the 2-digit day.
        show_hours: Include the 2-digit hour.
        show_minutes: Include the 2-digit minute.
        show_seconds: Include the 2-digit second.
        subsecond: Fraction appended after the time fields.
        timezone: Local wall clock or UTC.
        show_level: Emit the bracketed severity tag (a bare tab otherwise).
        level: Severity attached to records rendered from this value.
        show_file_name: Emit ``@<file>``; line and column depend on it.
        show_file_line: Emit ``: <line>`` after the file name.
        show_file_column: Emit ``|<column>`` after the line.
        location_width: Column budget of the location section.
        content_width: Column budget of the message section.
    """
    show_years: bool = True
    show_months: bool = True
    show_days: bool = True

    show_hours: bool = True
    show_minutes: bool = True
    show_seconds: bool = True
    subsecond: SubsecondPrecision = SubsecondPrecision.MICROSECONDS
    timezone: TimezoneMode = TimezoneMode.LOCAL

    show_level: bool = True
    level: LogLevel = LogLevel.VERBOSE

    show_file_name: bool = True
    show_file_line: bool = True
    show_file_column: bool = False

    location_width: int = DEFAULT_LOCATION_WIDTH
    content_width: int = DEFAULT_CONTENT_WIDTH

    def __post_init__(self) -> None:
        for name in _WIDTH_FIELDS:
            object.__setattr__(self, name, _clamp_width(getattr(self, name)))

    @property
    def hide_millis(self) -> bool:
        return self.subsecond.to_flags()[0]

    @property
    def hide_micros(self) -> bool:
        return self.subsecond.to_flags()[1]

    def to_builder(self) -> ConfigBuilder:
        return ConfigBuilder(self)

    # --- Serialization ---

    def to_dict(self) -> Dict[str, Any]:
        """
        Export the configuration as a JSON-compatible dictionary.

        Returns:
            Dict[str, Any]: Field values with enums stored by name.
        """
        data = asdict(self)
        for name in _ENUM_FIELDS:
            data[name] = data[name].name
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> LoggerConfig:
        """
        Rebuild a configuration from a dictionary produced by ``to_dict``.

        Unknown keys are ignored, missing keys keep their defaults and values
        of the wrong shape fall back to the default with a warning.

        Args:
            data: Mapping of field names to stored values.

        Returns:
            LoggerConfig: The reconstructed configuration.
        """
        known = {f.name for f in fields(cls)}
        defaults = cls()
        values: Dict[str, Any] = {}

        for key, raw in data.items():
            if key not in known:
                logger.debug(f"Ignoring unknown configuration key: {key}")
                continue
            try:
                values[key] = _coerce_field(key, raw)
            except (TypeError, ValueError, KeyError) as e:
                logger.warning(f"Invalid value for '{key}' ({raw!r}): {e}. Using default.")
                values[key] = getattr(defaults, key)

        return cls(**values)


# -----------------------------------------------------------------------------
# CONSUMING BUILDER
# -----------------------------------------------------------------------------

class ConfigBuilder:
    """
    Fluent, single-use builder for ``LoggerConfig``.

    Every operation mutates the pending field set and returns the builder;
    ``build()`` freezes the result. The same operations back the shared
    ``ConfigStore`` so both surfaces follow one set of rules.

    Example:
        >>> cfg = ConfigBuilder().hide_years().warning().location_width(40).build()
    """

    def __init__(self, base: Optional[LoggerConfig] = None) -> None:
        self._values: Dict[str, Any] = asdict(base or LoggerConfig())

    def build(self) -> LoggerConfig:
        return LoggerConfig(**self._values)

    def _set(self, **changes: Any) -> ConfigBuilder:
        self._values.update(changes)
        return self

    # --- Severity selection ---

    def level(self, level: Union[str, LogLevel]) -> ConfigBuilder:
        return self._set(level=LogLevel.parse(level))

    def verbose(self) -> ConfigBuilder:
        return self.level(LogLevel.VERBOSE)

    def info(self) -> ConfigBuilder:
        return self.level(LogLevel.INFORMATION)

    def warning(self) -> ConfigBuilder:
        return self.level(LogLevel.WARNING)

    def error(self) -> ConfigBuilder:
        return self.level(LogLevel.ERROR)

    def debug(self) -> ConfigBuilder:
        return self.level(LogLevel.DEBUG)

    def trace(self) -> ConfigBuilder:
        return self.level(LogLevel.TRACE)

    def critical(self) -> ConfigBuilder:
        return self.level(LogLevel.CRITICAL)

    # --- Date fields ---

    def show_years(self) -> ConfigBuilder:
        return self._set(show_years=True)

    def hide_years(self) -> ConfigBuilder:
        return self._set(show_years=False)

    def show_months(self) -> ConfigBuilder:
        return self._set(show_months=True)

    def hide_months(self) -> ConfigBuilder:
        return self._set(show_months=False)

    def show_days(self) -> ConfigBuilder:
        return self._set(show_days=True)

    def hide_days(self) -> ConfigBuilder:
        return self._set(show_days=False)

    # --- Time fields ---

    def show_hours(self) -> ConfigBuilder:
        return self._set(show_hours=True)

    def hide_hours(self) -> ConfigBuilder:
        return self._set(show_hours=False)

    def show_minutes(self) -> ConfigBuilder:
        return self._set(show_minutes=True)

    def hide_minutes(self) -> ConfigBuilder:
        return self._set(show_minutes=False)

    def show_seconds(self) -> ConfigBuilder:
        return self._set(show_seconds=True)

    def hide_seconds(self) -> ConfigBuilder:
        return self._set(show_seconds=False)

    # --- Sub-second precision ---

    def hide_millis(self) -> ConfigBuilder:
        """Suppress the fraction entirely. Micros are hidden along with millis."""
        return self._set(subsecond=SubsecondPrecision.NONE)

    def show_millis(self) -> ConfigBuilder:
        """Bring back milliseconds. An already visible fraction is left as is."""
        if self._values["subsecond"] is SubsecondPrecision.NONE:
            return self._set(subsecond=SubsecondPrecision.MILLISECONDS)
        return self

    def hide_micros(self) -> ConfigBuilder:
        if self._values["subsecond"] is SubsecondPrecision.MICROSECONDS:
            return self._set(subsecond=SubsecondPrecision.MILLISECONDS)
        return self

    def show_micros(self) -> ConfigBuilder:
        """Upgrade milliseconds to microseconds. No effect while millis are hidden."""
        if self._values["subsecond"] is SubsecondPrecision.MILLISECONDS:
            return self._set(subsecond=SubsecondPrecision.MICROSECONDS)
        return self

    def subsecond(self, precision: SubsecondPrecision) -> ConfigBuilder:
        return self._set(subsecond=precision)

    # --- Timezone ---

    def utc_time(self) -> ConfigBuilder:
        return self._set(timezone=TimezoneMode.UTC)

    def local_time(self) -> ConfigBuilder:
        return self._set(timezone=TimezoneMode.LOCAL)

    # --- Level tag ---

    def show_level(self) -> ConfigBuilder:
        return self._set(show_level=True)

    def hide_level(self) -> ConfigBuilder:
        return self._set(show_level=False)

    # --- Location ---

    def show_file_name(self) -> ConfigBuilder:
        return self._set(show_file_name=True)

    def hide_file_name(self) -> ConfigBuilder:
        return self._set(show_file_name=False)

    def show_file_line(self) -> ConfigBuilder:
        return self._set(show_file_line=True)

    def hide_file_line(self) -> ConfigBuilder:
        return self._set(show_file_line=False)

    def show_file_column(self) -> ConfigBuilder:
        return self._set(show_file_column=True)

    def hide_file_column(self) -> ConfigBuilder:
        return self._set(show_file_column=False)

    # --- Widths ---

    def location_width(self, width: int) -> ConfigBuilder:
        return self._set(location_width=_clamp_width(width))

    def content_width(self, width: int) -> ConfigBuilder:
        return self._set(content_width=_clamp_width(width))


# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def _coerce_field(key: str, raw: Any) -> Any:
    """Convert a stored JSON value back into the field's Python type."""
    if key == "level":
        return LogLevel.parse(raw)
    if key in _ENUM_FIELDS:
        return _ENUM_FIELDS[key][str(raw).strip().upper()]
    if key in _WIDTH_FIELDS:
        if isinstance(raw, bool):
            raise TypeError("expected an integer")
        return _clamp_width(int(raw))
    if not isinstance(raw, bool):
        raise TypeError("expected a boolean")
    return raw
