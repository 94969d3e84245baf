"""Repository layer for database operations."""

from .rent import ContractRepository, RentRepository

__all__ = [
    "ContractRepository",
    "RentRepository",
]
