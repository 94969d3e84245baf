"""Named recurring task scheduler."""

from .exceptions import (
    DuplicateTaskError,
    InvalidScheduleError,
    SchedulerError,
    TaskActionError,
    TaskAlreadyRunningError,
    TaskNotFoundError,
)
from .schedule import (
    CronSchedule,
    IntervalSchedule,
    ManualSchedule,
    Schedule,
    parse_schedule,
)
from .scheduler import ScheduledTask, TaskAction, TaskScheduler

__all__ = [
    "CronSchedule",
    "DuplicateTaskError",
    "IntervalSchedule",
    "InvalidScheduleError",
    "ManualSchedule",
    "Schedule",
    "ScheduledTask",
    "SchedulerError",
    "TaskAction",
    "TaskActionError",
    "TaskAlreadyRunningError",
    "TaskNotFoundError",
    "TaskScheduler",
    "parse_schedule",
]
