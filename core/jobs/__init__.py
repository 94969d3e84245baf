"""Background jobs registered with the task scheduler."""

from .rents import RentGenerationResult, RentJobs, compute_rent_status

__all__ = ["RentGenerationResult", "RentJobs", "compute_rent_status"]
