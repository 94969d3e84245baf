"""Common type definitions for the gestloc system."""

from enum import Enum


class Environment(str, Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    PRODUCTION = "production"
    TESTING = "testing"


class ContractStatus(str, Enum):
    """Lease contract status enum."""

    ACTIVE = "ACTIF"
    TERMINATED = "TERMINE"
    SUSPENDED = "SUSPENDU"


class RentStatus(str, Enum):
    """Monthly rent status enum."""

    PENDING = "EN_ATTENTE"
    PAID = "PAYE"
    PARTIAL = "PARTIEL"
    LATE = "RETARD"
