"""Process-wide registry and runner for named recurring tasks."""

import asyncio
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from datetime import UTC, datetime, tzinfo
from typing import Literal
from zoneinfo import ZoneInfo

from core.log import get_logger, task_context
from core.models.domain.task import TaskSnapshot, TaskStats

from .exceptions import (
    DuplicateTaskError,
    TaskActionError,
    TaskAlreadyRunningError,
    TaskNotFoundError,
)
from .schedule import Schedule, parse_schedule

logger = get_logger(__name__)

TaskAction = Callable[[], Awaitable[object]]
Trigger = Literal["schedule", "forced"]


@dataclass
class ScheduledTask:
    """Registered task and its mutable run state."""

    name: str
    schedule: Schedule
    action: TaskAction
    running: bool = False
    last_run_at: datetime | None = None
    last_error: str | None = None
    next_run_at: datetime | None = None
    stats: TaskStats = field(default_factory=TaskStats)

    def snapshot(self) -> TaskSnapshot:
        return TaskSnapshot(
            name=self.name,
            schedule=str(self.schedule),
            running=self.running,
            last_run_at=self.last_run_at,
            last_error=self.last_error,
            next_run_at=self.next_run_at,
            stats=self.stats.model_copy(),
        )


class TaskScheduler:
    """Runs registered tasks on their own schedule and on demand.

    All bookkeeping happens on the event loop thread. The ``running`` flag is
    checked and set without any suspension point in between, so timer fires
    and forced runs can never start the same task twice.
    """

    def __init__(self, timezone: str | tzinfo = UTC) -> None:
        self.timezone = ZoneInfo(timezone) if isinstance(timezone, str) else timezone
        self._tasks: dict[str, ScheduledTask] = {}
        self._timers: dict[str, asyncio.Task[None]] = {}
        self._inflight: set[asyncio.Task[Exception | None]] = set()
        self._started = False

    @property
    def is_started(self) -> bool:
        """Whether timer loops are active."""
        return self._started

    @property
    def task_names(self) -> list[str]:
        return list(self._tasks)

    def now(self) -> datetime:
        return datetime.now(self.timezone)

    def register_task(
        self, name: str, schedule: str | Schedule, action: TaskAction
    ) -> ScheduledTask:
        """Register a task.

        Args:
            name: Unique task name
            schedule: Recurrence expression or schedule instance
            action: Coroutine function invoked on each run

        Returns:
            The registered task

        Raises:
            DuplicateTaskError: If the name is already registered
            InvalidScheduleError: If the schedule cannot be parsed
        """
        if name in self._tasks:
            raise DuplicateTaskError(name)

        task = ScheduledTask(name=name, schedule=parse_schedule(schedule), action=action)
        self._tasks[name] = task
        logger.info(f"Registered task {name} with schedule {task.schedule}")

        if self._started:
            self._start_timer(task)
        return task

    def get_task(self, name: str) -> ScheduledTask:
        try:
            return self._tasks[name]
        except KeyError:
            raise TaskNotFoundError(name) from None

    def get_tasks_status(self) -> list[TaskSnapshot]:
        """Snapshot of every task in registration order."""
        return [task.snapshot() for task in self._tasks.values()]

    async def start(self) -> None:
        """Start one timer loop per scheduled task."""
        if self._started:
            logger.warning("Task scheduler is already running")
            return

        self._started = True
        for task in self._tasks.values():
            self._start_timer(task)
        logger.info(f"Task scheduler started with {len(self._tasks)} task(s)")

    async def stop(self) -> None:
        """Cancel timer loops. Running actions are left to complete."""
        if not self._started:
            logger.warning("Task scheduler is not running")
            return

        self._started = False
        timers = list(self._timers.values())
        self._timers.clear()
        for timer in timers:
            timer.cancel()
        await asyncio.gather(*timers, return_exceptions=True)

        for task in self._tasks.values():
            task.next_run_at = None

        if self._inflight:
            logger.warning(f"{len(self._inflight)} task run(s) still in progress")
        logger.info("Task scheduler stopped")

    async def force_run_task(self, name: str) -> datetime:
        """Run a task now and wait for it to finish.

        Returns:
            Start time of the invocation

        Raises:
            TaskNotFoundError: If no task has this name
            TaskAlreadyRunningError: If the task is currently running
            TaskActionError: If the action raised
        """
        task = self.get_task(name)
        if not self._try_acquire(task):
            raise TaskAlreadyRunningError(name)

        logger.info(f"Forced run of task {name}")
        started_at = self.now()
        error = await self._run_task(task, started_at, trigger="forced")
        if error is not None:
            raise TaskActionError(name, task.last_error or "") from error
        return started_at

    def _try_acquire(self, task: ScheduledTask) -> bool:
        if task.running:
            return False
        task.running = True
        return True

    async def _run_task(
        self, task: ScheduledTask, started_at: datetime, trigger: Trigger
    ) -> Exception | None:
        """Invoke an acquired task and record the outcome.

        Returns the exception raised by the action, or None on success.
        """
        task.last_run_at = started_at
        with task_context(task.name):
            try:
                await task.action()
            except Exception as e:
                task.last_error = str(e) or type(e).__name__
                task.stats.errors += 1
                logger.error(
                    f"Run ({trigger}) failed: {task.last_error}", exc_info=True
                )
                return e
            else:
                task.last_error = None
                task.stats.executions += 1
                elapsed = -self._seconds_until(started_at)
                logger.info(f"Run ({trigger}) completed in {elapsed:.2f}s")
                return None
            finally:
                task.running = False

    def _start_timer(self, task: ScheduledTask) -> None:
        if task.schedule.is_manual:
            logger.debug(f"Task {task.name} is manual-only, no timer started")
            return
        self._timers[task.name] = asyncio.create_task(
            self._timer_loop(task), name=f"timer:{task.name}"
        )

    async def _timer_loop(self, task: ScheduledTask) -> None:
        logger.info(f"Timer loop started for task {task.name}")
        try:
            while True:
                next_run = task.schedule.next_run(self.now())
                task.next_run_at = next_run
                if next_run is None:
                    return

                await self._sleep_until(next_run)
                self._fire(task)
        except asyncio.CancelledError:
            logger.info(f"Timer loop cancelled for task {task.name}")
            raise

    def _seconds_until(self, moment: datetime) -> float:
        # Same-zone subtraction ignores offset changes; compare instants
        return moment.timestamp() - self.now().timestamp()

    async def _sleep_until(self, moment: datetime) -> None:
        """Sleep until ``moment`` has passed, sleeping again on early wake-ups."""
        delay = self._seconds_until(moment)
        while delay > 0:
            await asyncio.sleep(delay)
            delay = self._seconds_until(moment)

    def _fire(self, task: ScheduledTask) -> None:
        if not self._try_acquire(task):
            logger.info(f"Skipping scheduled run of {task.name}: already running")
            return

        logger.info(f"Scheduled run of task {task.name}")
        run = asyncio.create_task(
            self._run_task(task, self.now(), trigger="schedule"),
            name=f"run:{task.name}",
        )
        self._inflight.add(run)
        run.add_done_callback(self._inflight.discard)
