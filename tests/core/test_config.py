"""Tests for configuration management."""

import os
from unittest.mock import patch

from core.config import Environment, Settings, load_settings


def test_environment_values() -> None:
    """Test environment enum values."""
    assert Environment.DEVELOPMENT == "development"
    assert Environment.PRODUCTION == "production"
    assert Environment.TESTING == "testing"


def test_default_settings() -> None:
    """Test default settings values."""
    with patch.dict(os.environ, {}, clear=True):
        settings = Settings()

        assert settings.environment == Environment.DEVELOPMENT
        assert settings.api_title == "GestLoc API"
        assert settings.api_version == "1.0.0"
        assert settings.cors_allow_origins == ["*"]
        assert settings.auth_required is False
        assert settings.log_level == "INFO"
        assert settings.scheduler_enabled is True
        assert settings.rent_generation_schedule == "0 9 * * *"
        assert settings.rent_status_schedule == "0 8 * * *"


def test_production_mode_requires_auth() -> None:
    with patch.dict(os.environ, {"GESTLOC_ENV": "production"}, clear=True):
        settings = load_settings()

        assert settings.is_production is True
        assert settings.auth_required is True


def test_testing_mode_disables_timers() -> None:
    with patch.dict(
        os.environ,
        {"GESTLOC_ENV": "testing", "GESTLOC_SCHEDULER_ENABLED": "true"},
        clear=True,
    ):
        settings = load_settings()

        assert settings.is_testing is True
        assert settings.scheduler_enabled is False
        assert settings.auth_required is False


def test_custom_settings() -> None:
    """Test custom settings via environment variables."""
    env_vars = {
        "GESTLOC_ENV": "development",
        "GESTLOC_API_TITLE": "Custom API",
        "GESTLOC_CORS_ORIGINS": "https://example.com,https://test.com",
        "GESTLOC_AUTH_HEADER": "X-API-Key",
        "GESTLOC_LOG_LEVEL": "debug",
        "GESTLOC_SCHEDULER_ENABLED": "off",
        "GESTLOC_SCHEDULER_TIMEZONE": "UTC",
        "GESTLOC_RENT_GENERATION_SCHEDULE": "@every 1h",
        "GESTLOC_RENT_STATUS_SCHEDULE": "@manual",
        "GESTLOC_DB_PATH": "/tmp/gestloc-test.db",
    }

    with patch.dict(os.environ, env_vars, clear=True):
        settings = load_settings()

        assert settings.is_development is True
        assert settings.api_title == "Custom API"
        assert settings.cors_allow_origins == [
            "https://example.com",
            "https://test.com",
        ]
        assert settings.auth_header_name == "X-API-Key"
        assert settings.log_level == "DEBUG"
        assert settings.scheduler_enabled is False
        assert settings.scheduler_timezone == "UTC"
        assert settings.rent_generation_schedule == "@every 1h"
        assert settings.rent_status_schedule == "@manual"
        assert settings.db_path == "/tmp/gestloc-test.db"
