"""API models package."""

from .auth import AuthError
from .scheduler import (
    ErrorResponse,
    RunTaskData,
    RunTaskResponse,
    SchedulerStatusData,
    SchedulerStatusResponse,
)

__all__ = [
    "AuthError",
    "ErrorResponse",
    "RunTaskData",
    "RunTaskResponse",
    "SchedulerStatusData",
    "SchedulerStatusResponse",
]
