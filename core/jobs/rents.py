"""Rent jobs run by the task scheduler."""

from datetime import date

from pydantic import BaseModel, Field
from sqlalchemy.engine import Engine
from sqlmodel import Session

from core.database.repository import ContractRepository, RentRepository
from core.log import get_logger
from core.models.rows import Contract, Rent
from core.types import RentStatus
from core.utils import clamp_day, get_current_timestamp

logger = get_logger(__name__)


class CreatedRent(BaseModel):
    """Rent created by the generation job."""

    rent_id: int
    contract_id: int
    month: int
    year: int
    amount_due: float
    due_date: date
    property_address: str
    tenant_names: str


class RentGenerationError(BaseModel):
    """Per-contract failure during rent generation."""

    contract_id: int | None
    property_address: str
    error: str


class RentGenerationResult(BaseModel):
    """Outcome of a rent generation run."""

    created: list[CreatedRent] = Field(default_factory=list)
    contracts_processed: int = 0
    active_contracts_total: int = 0
    errors: list[RentGenerationError] = Field(default_factory=list)


def compute_rent_status(
    amount_due: float,
    amount_paid: float,
    month: int,
    year: int,
    payment_day: int,
    today: date,
) -> RentStatus:
    """Derive the status of a monthly rent.

    A rent is late from its due date onwards; a partial payment keeps it
    PARTIAL whether or not the due date has passed.
    """
    if amount_paid >= amount_due:
        return RentStatus.PAID

    if amount_paid > 0:
        return RentStatus.PARTIAL

    due_date = clamp_day(year, month, payment_day)
    if today >= due_date:
        return RentStatus.LATE
    return RentStatus.PENDING


class RentJobs:
    """Background jobs over contracts and rents."""

    def __init__(self, engine: Engine) -> None:
        self.engine = engine

    async def generate_missing_rents(
        self, today: date | None = None
    ) -> RentGenerationResult:
        """Create this month's rent for active contracts whose payment day passed."""
        today = today or date.today()
        logger.info(f"Checking for missing rents on {today.isoformat()}")

        result = RentGenerationResult()
        with Session(self.engine) as session:
            contracts = ContractRepository(session).get_active_on(today)
            rent_repo = RentRepository(session)
            result.active_contracts_total = len(contracts)

            for contract in contracts:
                result.contracts_processed += 1
                try:
                    created = self._generate_for_contract(rent_repo, contract, today)
                except Exception as e:
                    logger.error(
                        f"Failed to create rent for contract {contract.contract_id}: {e}"
                    )
                    result.errors.append(
                        RentGenerationError(
                            contract_id=contract.contract_id,
                            property_address=contract.property_address,
                            error=str(e),
                        )
                    )
                    continue
                if created is not None:
                    result.created.append(created)

        if result.created:
            logger.info(
                f"{len(result.created)} rent(s) created for "
                f"{result.active_contracts_total} active contract(s)"
            )
        else:
            logger.info(
                f"No rent to create ({result.active_contracts_total} contracts checked)"
            )
        if result.errors:
            logger.warning(f"{len(result.errors)} error(s) during rent generation")
        return result

    def _generate_for_contract(
        self, rent_repo: RentRepository, contract: Contract, today: date
    ) -> CreatedRent | None:
        if contract.contract_id is None:
            raise ValueError("Contract has no ID")
        due_date = clamp_day(today.year, today.month, contract.payment_day)
        if today < due_date:
            return None
        if rent_repo.get_for_period(contract.contract_id, today.month, today.year):
            return None

        rent = rent_repo.create(
            Rent(
                contract_id=contract.contract_id,
                month=today.month,
                year=today.year,
                amount_due=contract.monthly_total,
                amount_paid=0.0,
                due_date=due_date,
                status=RentStatus.PENDING,
                comments=(
                    "Generated automatically by the scheduler on "
                    f"{get_current_timestamp()}"
                ),
            )
        )
        if rent.rent_id is None:
            raise ValueError("Rent has no ID")
        logger.info(f"Rent created: {contract.property_address} - {rent.amount_due}")
        return CreatedRent(
            rent_id=rent.rent_id,
            contract_id=contract.contract_id,
            month=rent.month,
            year=rent.year,
            amount_due=rent.amount_due,
            due_date=due_date,
            property_address=contract.property_address,
            tenant_names=contract.tenant_names,
        )

    async def recalculate_rent_statuses(self, today: date | None = None) -> int:
        """Recompute every rent status; returns the number of rents updated."""
        today = today or date.today()
        logger.info("Recalculating rent statuses")

        updates = 0
        with Session(self.engine) as session:
            rent_repo = RentRepository(session)
            for rent in rent_repo.list_all():
                new_status = compute_rent_status(
                    rent.amount_due,
                    rent.amount_paid,
                    rent.month,
                    rent.year,
                    rent.contract.payment_day,
                    today,
                )
                if new_status == rent.status:
                    continue

                old_status = rent.status
                rent_repo.set_status(rent, new_status)
                updates += 1
                logger.debug(
                    f"Rent {rent.rent_id} status: {old_status.value} -> {new_status.value}"
                )

        logger.info(f"Rent status recalculation done: {updates} rent(s) updated")
        return updates
