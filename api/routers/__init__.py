"""API routers package."""

from .common import router as common_router
from .scheduler import router as scheduler_router

__all__ = [
    "common_router",
    "scheduler_router",
]
