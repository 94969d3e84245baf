"""Contract and rent repositories using SQLModel."""

from datetime import date

from sqlmodel import Session, col, or_, select

from core.database.repository.base import BaseRepository
from core.log import get_logger
from core.models.rows import Contract, Rent
from core.types import ContractStatus, RentStatus
from core.utils import get_current_timestamp

logger = get_logger(__name__)


class ContractRepository(BaseRepository[Contract]):
    """Lease contract repository."""

    def __init__(self, db: Session) -> None:
        super().__init__(Contract, db)

    def get_active_on(self, day: date) -> list[Contract]:
        """Get contracts in force on the given day.

        Args:
            day: Reference date

        Returns:
            Active contracts whose period covers ``day``
        """
        statement = select(Contract).where(
            Contract.status == ContractStatus.ACTIVE,
            Contract.start_date <= day,
            or_(col(Contract.end_date).is_(None), col(Contract.end_date) >= day),
        )
        return list(self.db.exec(statement).all())


class RentRepository(BaseRepository[Rent]):
    """Monthly rent repository."""

    def __init__(self, db: Session) -> None:
        super().__init__(Rent, db)

    def get_for_period(self, contract_id: int, month: int, year: int) -> Rent | None:
        statement = select(Rent).where(
            Rent.contract_id == contract_id,
            Rent.month == month,
            Rent.year == year,
        )
        return self.db.exec(statement).first()

    def list_all(self) -> list[Rent]:
        return list(self.db.exec(select(Rent)).all())

    def set_status(self, rent: Rent, status: RentStatus) -> Rent:
        rent.status = status
        rent.updated_at = get_current_timestamp()
        return self.update(rent)
