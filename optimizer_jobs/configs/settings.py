"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.
Provides dependency injection factory for FastAPI and the Celery workers.

Dependencies: All config modules
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from optimizer_jobs.configs.base import BaseSettings
from optimizer_jobs.configs.celery_config import CelerySettings
from optimizer_jobs.configs.result_store import ResultStoreSettings


class Settings(BaseSettings):
    """Unified application settings aggregating all config modules."""

    # Aggregated settings
    celery: CelerySettings = CelerySettings()
    result_store: ResultStoreSettings = ResultStoreSettings()


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Returns Settings instance, cached for dependency injection.
    Environment variables loaded once at startup.

    Returns:
        Settings: Application settings instance

    Usage:
        from optimizer_jobs.configs import get_settings
        settings = get_settings()
    """
    return Settings()
