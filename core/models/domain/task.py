"""Scheduled task domain models."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class TaskStats(BaseModel):
    """Execution counters for a scheduled task."""

    executions: int = 0
    errors: int = 0


class TaskSnapshot(BaseModel):
    """Point-in-time status of a scheduled task."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: str = Field(description="Unique task name")
    schedule: str = Field(description="Recurrence expression")
    running: bool = Field(description="Whether an invocation is in progress")
    last_run_at: datetime | None = Field(
        default=None, description="Start time of the most recent invocation"
    )
    last_error: str | None = Field(
        default=None, description="Failure message of the last run, if it failed"
    )
    next_run_at: datetime | None = Field(
        default=None, description="Next timer fire time, if timers are started"
    )
    stats: TaskStats = Field(default_factory=TaskStats)
