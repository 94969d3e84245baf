"""Scheduler status and forced-run endpoints."""

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from api.dependencies import get_scheduler
from api.models.scheduler import (
    ErrorResponse,
    RunTaskData,
    RunTaskResponse,
    SchedulerStatusData,
    SchedulerStatusResponse,
)
from core.log import get_logger
from core.scheduler import SchedulerError, TaskScheduler

logger = get_logger(__name__)

router = APIRouter(prefix="/api/scheduler", tags=["scheduler"])


@router.get("/status", response_model=SchedulerStatusResponse)
async def get_scheduler_status(
    scheduler: TaskScheduler = Depends(get_scheduler),
) -> SchedulerStatusResponse:
    """Get scheduler status and tasks."""
    tasks = scheduler.get_tasks_status()
    return SchedulerStatusResponse(
        data=SchedulerStatusData(
            scheduler_running=tasks[0].running if tasks else False,
            scheduler_started=scheduler.is_started,
            any_task_running=any(task.running for task in tasks),
            tasks=tasks,
            current_time=scheduler.now(),
        )
    )


@router.post(
    "/run-task/{task_name}",
    response_model=RunTaskResponse,
    responses={status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse}},
)
async def run_task(
    task_name: str,
    scheduler: TaskScheduler = Depends(get_scheduler),
) -> RunTaskResponse | JSONResponse:
    """Force run a specific task and wait for it to finish."""
    try:
        started_at = await scheduler.force_run_task(task_name)
    except SchedulerError as e:
        logger.warning(f"Forced run of {task_name} rejected: {e}")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=ErrorResponse(message=str(e)).model_dump(by_alias=True),
        )

    return RunTaskResponse(
        message=f"Task {task_name} executed successfully",
        data=RunTaskData(task_name=task_name, execution_time=started_at),
    )
