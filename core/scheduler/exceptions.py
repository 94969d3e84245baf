"""Custom exceptions for the task scheduler."""


class SchedulerError(Exception):
    """Base exception for scheduler errors."""

    pass


class InvalidScheduleError(SchedulerError, ValueError):
    """Raised when a schedule expression cannot be parsed."""

    def __init__(self, expression: str, reason: str | None = None) -> None:
        self.expression = expression
        message = f"Invalid schedule expression: {expression!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class DuplicateTaskError(SchedulerError):
    """Raised when a task name is registered twice."""

    def __init__(self, task_name: str) -> None:
        self.task_name = task_name
        super().__init__(f"Task already registered: {task_name}")


class TaskNotFoundError(SchedulerError):
    """Raised when no task is registered under the given name."""

    def __init__(self, task_name: str) -> None:
        self.task_name = task_name
        super().__init__(f"Task not found: {task_name}")


class TaskAlreadyRunningError(SchedulerError):
    """Raised when a forced run targets a task that is currently running."""

    def __init__(self, task_name: str) -> None:
        self.task_name = task_name
        super().__init__(f"Task is already running: {task_name}")


class TaskActionError(SchedulerError):
    """Raised to a forcing caller when the task action fails.

    The original exception is chained as ``__cause__``.
    """

    def __init__(self, task_name: str, error_message: str) -> None:
        self.task_name = task_name
        self.error_message = error_message
        super().__init__(f"Task {task_name} failed: {error_message}")
