"""
Dependency injection container.

Factory functions for FastAPI dependencies.

Dependencies: optimizer_jobs.configs, optimizer_jobs.application, optimizer_jobs.boundary
System role: DI container for service injection
"""

from functools import lru_cache

from fastapi import Depends

from optimizer_jobs.application.services import JobService
from optimizer_jobs.boundary.store import ResultStore, get_result_store
from optimizer_jobs.configs import Settings, get_settings


@lru_cache
def get_settings_dependency() -> Settings:
    """Get settings singleton."""
    return get_settings()


def get_store() -> ResultStore:
    """Get the shared result store."""
    return get_result_store()


def get_job_service(store: ResultStore = Depends(get_store)) -> JobService:
    """
    Get job service instance.

    Args:
        store: Result store

    Returns:
        JobService: Job service instance
    """
    return JobService(store)
