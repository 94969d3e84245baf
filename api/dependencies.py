"""FastAPI dependencies backed by app state."""

from fastapi import Request

from core.config import Settings
from core.scheduler import TaskScheduler


def get_settings(request: Request) -> Settings:
    """Get settings from app state."""
    settings: Settings = request.app.state.settings
    return settings


def get_scheduler(request: Request) -> TaskScheduler:
    """Get the process-wide task scheduler from app state."""
    scheduler: TaskScheduler = request.app.state.scheduler
    return scheduler
