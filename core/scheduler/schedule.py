"""Recurrence expressions for scheduled tasks.

Supported forms:

- ``@every <N><unit>``: fixed interval, unit one of ``ms``, ``s``, ``m``, ``h``, ``d``
- ``@manual``: never fires on its own, only forced runs execute the task
- any cron expression accepted by croniter (``0 9 * * *``, ``@daily``, ...)
"""

import re
from abc import ABC, abstractmethod
from datetime import UTC, datetime, timedelta

from croniter import croniter

from core.constants import EVERY_PREFIX, MANUAL_SCHEDULE

from .exceptions import InvalidScheduleError

_EVERY_PATTERN = re.compile(
    rf"^{EVERY_PREFIX}\s+(?P<amount>\d+(?:\.\d+)?)\s*(?P<unit>ms|s|m|h|d)$"
)

_UNIT_SECONDS = {
    "ms": 0.001,
    "s": 1.0,
    "m": 60.0,
    "h": 3600.0,
    "d": 86400.0,
}


class Schedule(ABC):
    """Computes when a task should fire next."""

    def __init__(self, expression: str) -> None:
        self.expression = expression

    @abstractmethod
    def next_run(self, after: datetime) -> datetime | None:
        """Return the first fire time strictly after ``after``.

        Returns None when the schedule never fires.
        """
        pass

    @property
    def is_manual(self) -> bool:
        return False

    def __str__(self) -> str:
        return self.expression

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.expression!r})"


class IntervalSchedule(Schedule):
    """Fires every fixed interval."""

    def __init__(self, interval: timedelta, expression: str | None = None) -> None:
        if interval <= timedelta(0):
            raise InvalidScheduleError(
                expression or str(interval), "interval must be positive"
            )
        super().__init__(expression or f"{EVERY_PREFIX} {interval.total_seconds()}s")
        self.interval = interval

    def next_run(self, after: datetime) -> datetime:
        if after.tzinfo is None:
            return after + self.interval
        # Elapsed time, not wall-clock time, across offset changes
        return (after.astimezone(UTC) + self.interval).astimezone(after.tzinfo)


class CronSchedule(Schedule):
    """Fires according to a cron expression."""

    def __init__(self, expression: str) -> None:
        if not croniter.is_valid(expression):
            raise InvalidScheduleError(expression, "not a valid cron expression")
        super().__init__(expression)

    def next_run(self, after: datetime) -> datetime:
        next_time: datetime = croniter(self.expression, after).get_next(datetime)
        return next_time


class ManualSchedule(Schedule):
    """Never fires; the task only runs when forced."""

    def __init__(self) -> None:
        super().__init__(MANUAL_SCHEDULE)

    def next_run(self, after: datetime) -> None:
        return None

    @property
    def is_manual(self) -> bool:
        return True


def parse_schedule(expression: str | Schedule) -> Schedule:
    """Parse a schedule expression.

    Args:
        expression: Expression string, or an already-built schedule

    Returns:
        Schedule instance

    Raises:
        InvalidScheduleError: If the expression is not recognised
    """
    if isinstance(expression, Schedule):
        return expression

    text = expression.strip()
    if not text:
        raise InvalidScheduleError(expression, "empty expression")

    if text == MANUAL_SCHEDULE:
        return ManualSchedule()

    if text.startswith(EVERY_PREFIX):
        match = _EVERY_PATTERN.match(text)
        if match is None:
            raise InvalidScheduleError(expression, "expected '@every <N><unit>'")
        seconds = float(match["amount"]) * _UNIT_SECONDS[match["unit"]]
        return IntervalSchedule(timedelta(seconds=seconds), expression=text)

    return CronSchedule(text)
