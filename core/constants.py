"""Application constants and configuration values."""

from typing import Final

# Task names are referenced by the front end and must stay stable.
RENT_GENERATION_TASK: Final[str] = "generation-loyers-automatique"
RENT_STATUS_TASK: Final[str] = "recalcul-statuts-loyers"

DEFAULT_RENT_GENERATION_SCHEDULE: Final[str] = "0 9 * * *"
DEFAULT_RENT_STATUS_SCHEDULE: Final[str] = "0 8 * * *"

MANUAL_SCHEDULE: Final[str] = "@manual"
EVERY_PREFIX: Final[str] = "@every"
