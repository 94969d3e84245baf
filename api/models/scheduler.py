"""Scheduler API response models."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from core.models.domain.task import TaskSnapshot


class CamelModel(BaseModel):
    """Response model serialized with camelCase field names."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SchedulerStatusData(CamelModel):
    """Scheduler status payload."""

    scheduler_running: bool = Field(
        description="Running flag of the first registered task (legacy field)"
    )
    scheduler_started: bool = Field(description="Whether task timers are active")
    any_task_running: bool = Field(description="Whether any task is executing")
    tasks: list[TaskSnapshot]
    current_time: datetime


class SchedulerStatusResponse(CamelModel):
    """Response for GET /api/scheduler/status."""

    success: bool = True
    data: SchedulerStatusData


class RunTaskData(CamelModel):
    """Forced run payload."""

    task_name: str
    execution_time: datetime


class RunTaskResponse(CamelModel):
    """Response for a successful forced run."""

    success: bool = True
    message: str
    data: RunTaskData


class ErrorResponse(CamelModel):
    """Failure envelope returned with HTTP 400."""

    success: bool = False
    message: str
