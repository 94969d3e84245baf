"""Unified models package for gestloc system."""

from core.models.domain.task import TaskSnapshot, TaskStats
from core.models.rows import Contract, Rent

__all__ = [
    "Contract",
    "Rent",
    "TaskSnapshot",
    "TaskStats",
]
