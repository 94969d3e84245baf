"""Core database functionality."""

from .engine import (
    create_database_engine,
    create_database_tables,
)
from .repository import ContractRepository, RentRepository

__all__ = [
    "ContractRepository",
    "RentRepository",
    "create_database_engine",
    "create_database_tables",
]
