"""Configuration management for the gestloc system."""

import os
from typing import Any

from dotenv import load_dotenv
from pydantic import BaseModel, Field

from .constants import DEFAULT_RENT_GENERATION_SCHEDULE, DEFAULT_RENT_STATUS_SCHEDULE
from .types import Environment

TRUTHY_VALUES = ["true", "1", "yes", "on"]


class Settings(BaseModel):
    """Application settings."""

    # Environment
    version: str = Field(default="0.1.0", description="Application version")
    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Application environment (development/production/testing)",
    )

    # API Settings
    api_title: str = Field(default="GestLoc API", description="API title")
    api_version: str = Field(default="1.0.0", description="API version")

    # CORS Settings
    cors_allow_origins: list[str] = Field(
        default=["*"], description="Allowed CORS origins"
    )

    # Auth Settings
    auth_required: bool = Field(
        default=False, description="Whether authentication is required"
    )
    auth_header_name: str = Field(
        default="Authorization", description="Authentication header name"
    )

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")

    # Database
    db_path: str | None = Field(
        default=None, description="SQLite database path (environment default if unset)"
    )

    # Scheduler Settings
    scheduler_enabled: bool = Field(
        default=True, description="Whether task timers start with the application"
    )
    scheduler_timezone: str = Field(
        default="Europe/Paris", description="Timezone used to evaluate cron schedules"
    )
    rent_generation_schedule: str = Field(
        default=DEFAULT_RENT_GENERATION_SCHEDULE,
        description="Schedule of the automatic rent generation task",
    )
    rent_status_schedule: str = Field(
        default=DEFAULT_RENT_STATUS_SCHEDULE,
        description="Schedule of the rent status recalculation task",
    )

    def __init__(self, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        if self.environment == Environment.PRODUCTION:
            self.auth_required = True
        else:  # DEVELOPMENT and TESTING
            self.auth_required = False

        # Timers never fire on their own during tests
        if self.environment == Environment.TESTING:
            self.scheduler_enabled = False

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.environment == Environment.DEVELOPMENT

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.environment == Environment.PRODUCTION

    @property
    def is_testing(self) -> bool:
        """Check if running in testing mode."""
        return self.environment == Environment.TESTING


def load_settings() -> Settings:
    """Load settings from environment variables."""

    load_dotenv()

    cors_origins_str = os.getenv("GESTLOC_CORS_ORIGINS", "*")
    if cors_origins_str == "*":
        cors_origins = ["*"]
    else:
        cors_origins = [origin.strip() for origin in cors_origins_str.split(",")]

    auth_required = os.getenv("GESTLOC_AUTH_REQUIRED", "false").lower() == "true"
    scheduler_enabled = (
        os.getenv("GESTLOC_SCHEDULER_ENABLED", "true").lower() in TRUTHY_VALUES
    )

    return Settings(
        environment=Environment(os.getenv("GESTLOC_ENV", "development")),
        api_title=os.getenv("GESTLOC_API_TITLE", "GestLoc API"),
        api_version=os.getenv("GESTLOC_API_VERSION", "1.0.0"),
        cors_allow_origins=cors_origins,
        auth_required=auth_required,
        auth_header_name=os.getenv("GESTLOC_AUTH_HEADER", "Authorization"),
        log_level=os.getenv("GESTLOC_LOG_LEVEL", "INFO").upper(),
        db_path=os.getenv("GESTLOC_DB_PATH"),
        scheduler_enabled=scheduler_enabled,
        scheduler_timezone=os.getenv("GESTLOC_SCHEDULER_TIMEZONE", "Europe/Paris"),
        rent_generation_schedule=os.getenv(
            "GESTLOC_RENT_GENERATION_SCHEDULE", DEFAULT_RENT_GENERATION_SCHEDULE
        ),
        rent_status_schedule=os.getenv(
            "GESTLOC_RENT_STATUS_SCHEDULE", DEFAULT_RENT_STATUS_SCHEDULE
        ),
    )

