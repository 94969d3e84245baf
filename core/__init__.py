"""Core functionality for the gestloc system."""

from .config import Settings, load_settings
from .log import configure_logging, get_logger, setup_logging, task_context
from .types import ContractStatus, Environment, RentStatus

__all__ = [
    "ContractStatus",
    "Environment",
    "RentStatus",
    "Settings",
    "load_settings",
    "configure_logging",
    "get_logger",
    "setup_logging",
    "task_context",
]
