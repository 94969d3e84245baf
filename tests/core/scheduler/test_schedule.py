"""Tests for schedule expression parsing."""

from datetime import UTC, datetime, timedelta
from zoneinfo import ZoneInfo

import pytest

from core.scheduler import (
    CronSchedule,
    IntervalSchedule,
    InvalidScheduleError,
    ManualSchedule,
    parse_schedule,
)

REFERENCE = datetime(2024, 3, 10, 8, 0, tzinfo=UTC)


@pytest.mark.parametrize(
    "expression,expected",
    [
        ("@every 1s", timedelta(seconds=1)),
        ("@every 250ms", timedelta(milliseconds=250)),
        ("@every 1.5m", timedelta(seconds=90)),
        ("@every 2h", timedelta(hours=2)),
        ("@every 1d", timedelta(days=1)),
    ],
)
def test_interval_expressions(expression, expected):
    schedule = parse_schedule(expression)

    assert isinstance(schedule, IntervalSchedule)
    assert schedule.interval == expected
    assert schedule.next_run(REFERENCE) == REFERENCE + expected
    assert str(schedule) == expression


def test_manual_expression():
    schedule = parse_schedule("@manual")

    assert isinstance(schedule, ManualSchedule)
    assert schedule.is_manual is True
    assert schedule.next_run(REFERENCE) is None


def test_cron_expression_same_day():
    schedule = parse_schedule("0 9 * * *")

    assert isinstance(schedule, CronSchedule)
    assert schedule.is_manual is False
    assert schedule.next_run(REFERENCE) == datetime(2024, 3, 10, 9, 0, tzinfo=UTC)


def test_cron_expression_rolls_over_to_next_day():
    schedule = parse_schedule("0 9 * * *")
    after = datetime(2024, 3, 10, 10, 30, tzinfo=UTC)

    assert schedule.next_run(after) == datetime(2024, 3, 11, 9, 0, tzinfo=UTC)


def test_cron_alias():
    assert isinstance(parse_schedule("@daily"), CronSchedule)


def test_schedule_instance_passes_through():
    schedule = IntervalSchedule(timedelta(minutes=5))

    assert parse_schedule(schedule) is schedule


def test_surrounding_whitespace_is_ignored():
    assert isinstance(parse_schedule("  @manual "), ManualSchedule)


@pytest.mark.parametrize(
    "expression",
    ["", "   ", "not a cron", "@every", "@every 5x", "@every 0s", "61 * * * *"],
)
def test_invalid_expressions(expression):
    with pytest.raises(InvalidScheduleError) as exc_info:
        parse_schedule(expression)

    assert isinstance(exc_info.value, ValueError)


def test_non_positive_interval_is_rejected():
    with pytest.raises(InvalidScheduleError, match="positive"):
        IntervalSchedule(timedelta(0))


PARIS = ZoneInfo("Europe/Paris")


@pytest.mark.parametrize(
    "after,expected_hours",
    [
        # 2024-03-31: clocks go forward at 02:00
        (datetime(2024, 3, 30, 10, 0, tzinfo=PARIS), 22),
        # 2024-10-27: clocks go back at 03:00
        (datetime(2024, 10, 26, 10, 0, tzinfo=PARIS), 24),
    ],
)
def test_cron_keeps_local_hour_across_offset_change(after, expected_hours):
    next_run = parse_schedule("0 9 * * *").next_run(after)

    assert (next_run.hour, next_run.minute) == (9, 0)
    assert next_run.timestamp() - after.timestamp() == expected_hours * 3600


def test_interval_counts_elapsed_time_across_offset_change():
    after = datetime(2024, 3, 31, 1, 30, tzinfo=PARIS)

    next_run = parse_schedule("@every 1h").next_run(after)

    assert next_run.timestamp() - after.timestamp() == 3600
    assert (next_run.hour, next_run.minute) == (3, 30)
    assert next_run.utcoffset() == timedelta(hours=2)
