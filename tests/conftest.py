"""Global pytest configuration and fixtures."""

from collections.abc import Callable, Generator
from datetime import date
from pathlib import Path
from typing import Any

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlmodel import Session

from api.app import create_app
from core import configure_logging
from core.config import Settings
from core.database.engine import create_database_tables
from core.database.repository import ContractRepository, RentRepository
from core.models.rows import Contract
from core.scheduler import TaskScheduler
from core.types import Environment


@pytest.fixture(scope="session", autouse=True)
def setup_logging() -> None:
    """Setup test logging for all tests."""
    configure_logging(Settings(environment=Environment.TESTING))


@pytest.fixture
def db_engine(tmp_path: Path) -> Generator[Engine, None, None]:
    """Create a real database engine backed by a file in tmp_path."""
    engine = create_engine(
        f"sqlite:///{tmp_path / 'test.db'}",
        echo=False,
        connect_args={"check_same_thread": False},
    )
    create_database_tables(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db_session(db_engine: Engine) -> Generator[Session, None, None]:
    with Session(db_engine) as session:
        yield session


@pytest.fixture
def contract_repo(db_session: Session) -> ContractRepository:
    return ContractRepository(db_session)


@pytest.fixture
def rent_repo(db_session: Session) -> RentRepository:
    return RentRepository(db_session)


@pytest.fixture
def make_contract(
    contract_repo: ContractRepository,
) -> Callable[..., Contract]:
    """Factory saving a contract with sensible defaults."""

    def _make(**overrides: Any) -> Contract:
        fields: dict[str, Any] = {
            "property_address": "12 rue des Lilas, Lyon",
            "tenant_names": "Marie Dupont",
            "start_date": date(2024, 1, 1),
            "monthly_rent": 800.0,
            "monthly_charges": 50.0,
            "payment_day": 5,
        }
        fields.update(overrides)
        return contract_repo.create(Contract(**fields))

    return _make


@pytest.fixture
def scheduler() -> TaskScheduler:
    return TaskScheduler()


@pytest.fixture
def test_settings() -> Settings:
    return Settings(environment=Environment.TESTING)


@pytest.fixture
def app(test_settings: Settings) -> FastAPI:
    return create_app(test_settings)


@pytest.fixture
def client(app: FastAPI) -> Generator[TestClient, None, None]:
    """Test client with the application lifespan running."""
    with TestClient(app) as test_client:
        yield test_client
