"""Tests for the contract and rent repositories."""

from datetime import date

from core.models.rows import Rent
from core.types import ContractStatus, RentStatus


def test_get_active_on_filters_by_status_and_period(contract_repo, make_contract):
    open_ended = make_contract(property_address="1 open-ended")
    bounded = make_contract(
        property_address="2 bounded", end_date=date(2024, 12, 31)
    )
    make_contract(property_address="3 ended", end_date=date(2024, 2, 1))
    make_contract(property_address="4 future", start_date=date(2024, 6, 1))
    make_contract(property_address="5 suspended", status=ContractStatus.SUSPENDED)

    active = contract_repo.get_active_on(date(2024, 3, 10))

    assert {c.contract_id for c in active} == {
        open_ended.contract_id,
        bounded.contract_id,
    }


def test_end_date_is_inclusive(contract_repo, make_contract):
    make_contract(end_date=date(2024, 3, 10))

    assert len(contract_repo.get_active_on(date(2024, 3, 10))) == 1


def test_monthly_total(make_contract):
    contract = make_contract(monthly_rent=700.0, monthly_charges=45.5)

    assert contract.monthly_total == 745.5


def test_get_for_period_and_set_status(rent_repo, make_contract):
    contract = make_contract()
    rent = rent_repo.create(
        Rent(
            contract_id=contract.contract_id,
            month=3,
            year=2024,
            amount_due=850.0,
            due_date=date(2024, 3, 5),
        )
    )
    original_updated_at = rent.updated_at

    found = rent_repo.get_for_period(contract.contract_id, 3, 2024)
    assert found is not None
    assert found.rent_id == rent.rent_id
    assert found.status == RentStatus.PENDING
    assert rent_repo.get_for_period(contract.contract_id, 4, 2024) is None

    updated = rent_repo.set_status(found, RentStatus.LATE)
    assert updated.status == RentStatus.LATE
    assert updated.updated_at >= original_updated_at
    reloaded = rent_repo.get_for_period(contract.contract_id, 3, 2024)
    assert reloaded is not None
    assert reloaded.status == RentStatus.LATE
