"""Utility functions for the application."""

import calendar
from datetime import UTC, date, datetime


def get_current_timestamp() -> str:
    """Get current timestamp in ISO8601 format."""
    return datetime.now(UTC).isoformat()


def clamp_day(year: int, month: int, day: int) -> date:
    """Build a date, clamping the day to the last day of the month."""
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(day, last_day))
