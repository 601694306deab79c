"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.

Dependencies: All config modules
System role: Central configuration aggregator for the notifier
"""

from functools import lru_cache

from pydantic import Field

from emr_notifier.configs.base import BaseSettings
from emr_notifier.configs.database import DatabaseSettings
from emr_notifier.configs.emr import EMRServerlessSettings


class Settings(BaseSettings):
    """Unified application settings aggregating all config modules."""

    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    emr: EMRServerlessSettings = Field(default_factory=EMRServerlessSettings)


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Environment variables are read once per process (per Lambda container).

    Returns:
        Settings: Application settings instance

    Usage:
        from emr_notifier.configs import get_settings
        settings = get_settings()
    """
    return Settings()
