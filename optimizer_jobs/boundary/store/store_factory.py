"""
Result store factory for selecting between Redis (shared) and in-memory (local).

Depends on RESULT_STORE_BACKEND environment variable.
Provides consistent interface regardless of underlying implementation.

Dependencies: optimizer_jobs.boundary.store, optimizer_jobs.configs
System role: Result store instantiation and selection
"""

import logging
from functools import lru_cache

from optimizer_jobs.boundary.store.base import ResultStore
from optimizer_jobs.boundary.store.memory_store import InMemoryResultStore
from optimizer_jobs.boundary.store.redis_store import RedisResultStore
from optimizer_jobs.configs import get_settings
from optimizer_jobs.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


@lru_cache
def get_result_store() -> ResultStore:
    """
    Factory function to get the result store based on environment configuration.

    Cached so workers and the API share one connection pool per process.

    Returns:
        RedisResultStore or InMemoryResultStore: Configured store instance

    Raises:
        ConfigurationError: If RESULT_STORE_BACKEND is invalid
    """
    settings = get_settings().result_store
    backend = settings.backend.lower()

    if backend == "redis":
        logger.info(f"{__name__}:get_result_store - Creating Redis result store")
        return RedisResultStore.from_url(
            settings.redis_url,
            key_prefix=settings.key_prefix,
            status_ttl=settings.status_ttl_seconds,
            socket_timeout=settings.socket_timeout,
            socket_connect_timeout=settings.socket_connect_timeout,
        )

    elif backend == "memory":
        logger.info(
            f"{__name__}:get_result_store - Creating in-memory result store (single process only)"
        )
        return InMemoryResultStore(
            key_prefix=settings.key_prefix,
            status_ttl=settings.status_ttl_seconds,
        )

    else:
        raise ConfigurationError(
            f"Invalid RESULT_STORE_BACKEND: {backend}. Must be 'redis' or 'memory'.",
            field="result_store.backend",
        )
