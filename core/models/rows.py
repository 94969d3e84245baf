"""SQLModel database models for GestLoc."""

from datetime import date

from sqlmodel import Field, Index, Relationship, SQLModel, UniqueConstraint

from core.types import ContractStatus, RentStatus
from core.utils import get_current_timestamp


class Contract(SQLModel, table=True):
    """Lease contract database model."""

    contract_id: int | None = Field(default=None, primary_key=True)
    property_address: str = Field(description="Address of the rented property")
    tenant_names: str = Field(default="", description="Comma-separated tenant names")
    status: ContractStatus = Field(default=ContractStatus.ACTIVE)
    start_date: date = Field(description="First day of the lease")
    end_date: date | None = Field(default=None, description="Last day of the lease")
    monthly_rent: float = Field(ge=0, description="Rent excluding charges")
    monthly_charges: float = Field(default=0.0, ge=0, description="Monthly charges")
    payment_day: int = Field(ge=1, le=31, description="Day of month rent is due")

    __table_args__ = (Index("idx_contract_status", "status"),)

    rents: list["Rent"] = Relationship(back_populates="contract")

    @property
    def monthly_total(self) -> float:
        return self.monthly_rent + self.monthly_charges


class Rent(SQLModel, table=True):
    """Monthly rent database model."""

    rent_id: int | None = Field(default=None, primary_key=True)
    contract_id: int = Field(foreign_key="contract.contract_id")
    month: int = Field(ge=1, le=12)
    year: int
    amount_due: float = Field(ge=0)
    amount_paid: float = Field(default=0.0, ge=0)
    due_date: date
    status: RentStatus = Field(default=RentStatus.PENDING)
    comments: str | None = Field(default=None)
    updated_at: str = Field(
        default_factory=get_current_timestamp,
        description="ISO8601 datetime - automatically updated",
    )

    __table_args__ = (
        UniqueConstraint("contract_id", "month", "year", name="uq_rent_period"),
        Index("idx_rent_period", "year", "month"),
    )

    contract: Contract = Relationship(back_populates="rents")
