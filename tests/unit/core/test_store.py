from __future__ import annotations

"""
Unit tests for the shared Configuration Store.

Verifies:
1. Chainable mutators return the store and publish new snapshots.
2. Snapshots taken before a mutation are never altered by it.
3. Bulk replace round-trips every field.
"""

from thelogger.core.store import ConfigStore
from thelogger.domain.config import ConfigBuilder, LoggerConfig
from thelogger.domain.levels import LogLevel, SubsecondPrecision, TimezoneMode


def test_mutators_are_chainable():
    store = ConfigStore()
    result = store.hide_years().hide_months().warning().location_width(40)

    assert result is store
    snap = store.snapshot()
    assert snap.show_years is False
    assert snap.show_months is False
    assert snap.level is LogLevel.WARNING
    assert snap.location_width == 40


def test_severity_selectors():
    store = ConfigStore()
    selectors = {
        store.verbose: LogLevel.VERBOSE,
        store.info: LogLevel.INFORMATION,
        store.warning: LogLevel.WARNING,
        store.error: LogLevel.ERROR,
        store.debug: LogLevel.DEBUG,
        store.trace: LogLevel.TRACE,
        store.critical: LogLevel.CRITICAL,
    }
    for select, expected in selectors.items():
        assert select().snapshot().level is expected

    assert store.set_level("warn").snapshot().level is LogLevel.WARNING


def test_old_snapshot_is_not_affected_by_later_mutation():
    store = ConfigStore()
    before = store.snapshot()

    store.hide_level().utc_time()

    assert before.show_level is True
    assert before.timezone is TimezoneMode.LOCAL
    assert store.snapshot().show_level is False
    assert store.snapshot().timezone is TimezoneMode.UTC


def test_show_toggle_twice_equals_once():
    once = ConfigStore().hide_seconds().show_seconds().snapshot()
    twice = ConfigStore().hide_seconds().show_seconds().show_seconds().snapshot()
    assert once == twice


def test_every_toggle_pair_round_trips():
    store = ConfigStore()
    pairs = [
        ("years", "show_years"), ("months", "show_months"), ("days", "show_days"),
        ("hours", "show_hours"), ("minutes", "show_minutes"), ("seconds", "show_seconds"),
        ("level", "show_level"), ("file_name", "show_file_name"),
        ("file_line", "show_file_line"), ("file_column", "show_file_column"),
    ]
    for suffix, field_name in pairs:
        getattr(store, f"hide_{suffix}")()
        assert getattr(store.snapshot(), field_name) is False, suffix
        getattr(store, f"show_{suffix}")()
        assert getattr(store.snapshot(), field_name) is True, suffix


def test_hide_millis_via_store_hides_micros():
    store = ConfigStore().show_micros().hide_millis().show_micros()
    snap = store.snapshot()

    assert snap.subsecond is SubsecondPrecision.NONE
    assert snap.hide_micros is True


def test_bulk_replace_round_trip():
    preset = LoggerConfig(
        show_years=False,
        show_months=True,
        show_days=False,
        show_hours=True,
        show_minutes=False,
        show_seconds=True,
        subsecond=SubsecondPrecision.MILLISECONDS,
        timezone=TimezoneMode.UTC,
        show_level=False,
        level=LogLevel.DEBUG,
        show_file_name=True,
        show_file_line=False,
        show_file_column=True,
        location_width=12,
        content_width=64,
    )
    store = ConfigStore().critical().hide_days()

    assert store.replace(preset) is store
    snap = store.snapshot()

    assert snap == preset
    for name, value in preset.to_dict().items():
        assert snap.to_dict()[name] == value


def test_explicit_initial_config_is_used():
    cfg = ConfigBuilder().error().build()
    assert ConfigStore(cfg).snapshot() is cfg
