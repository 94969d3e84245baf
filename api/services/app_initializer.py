"""Application service initializer for managing startup and shutdown."""

from pathlib import Path

from fastapi import FastAPI
from sqlalchemy.engine import Engine

from core.config import Settings
from core.constants import RENT_GENERATION_TASK, RENT_STATUS_TASK
from core.database.engine import create_database_engine, create_database_tables
from core.jobs import RentJobs
from core.log import get_logger
from core.scheduler import TaskScheduler

logger = get_logger(__name__)


class AppServiceInitializer:
    """Manages initialization and lifecycle of application services."""

    def __init__(self, settings: Settings, scheduler: TaskScheduler):
        """Initialize with application settings and the app's scheduler."""
        self.settings = settings
        self.scheduler = scheduler
        self.engine: Engine | None = None
        self.rent_jobs: RentJobs | None = None

    async def initialize_all_services(
        self, app: FastAPI, engine: Engine | None = None
    ) -> None:
        """Initialize all services and configure app.state."""
        logger.info("Initializing all application services...")

        await self.initialize_database(engine)
        await self.initialize_scheduler()
        self._setup_app_state(app)

        logger.info("All application services initialized successfully")

    async def initialize_database(self, engine: Engine | None = None) -> None:
        """Initialize database engine and create tables."""
        if engine:
            self.engine = engine
        else:
            db_path = Path(self.settings.db_path) if self.settings.db_path else None
            self.engine = create_database_engine(
                self.settings.environment, db_path=db_path
            )

        create_database_tables(self.engine)
        logger.info("Database initialized successfully")

    async def initialize_scheduler(self) -> None:
        """Register the rent jobs with the scheduler."""
        if not self.engine:
            raise RuntimeError("Database must be initialized before the scheduler")

        self.rent_jobs = RentJobs(self.engine)
        self.scheduler.register_task(
            RENT_GENERATION_TASK,
            self.settings.rent_generation_schedule,
            self.rent_jobs.generate_missing_rents,
        )
        self.scheduler.register_task(
            RENT_STATUS_TASK,
            self.settings.rent_status_schedule,
            self.rent_jobs.recalculate_rent_statuses,
        )

    async def start_all_services(self) -> None:
        """Start task timers if enabled."""
        if not self.settings.scheduler_enabled:
            logger.warning("Task scheduler timers are disabled")
            return
        await self.scheduler.start()

    async def stop_all_services(self) -> None:
        """Stop task timers."""
        if self.scheduler.is_started:
            await self.scheduler.stop()
        if self.engine:
            self.engine.dispose()

    def _setup_app_state(self, app: FastAPI) -> None:
        app.state.engine = self.engine
