"""API-specific dependencies."""

from .dependencies import get_job_service, get_settings_dependency, get_store

__all__ = [
    "get_job_service",
    "get_settings_dependency",
    "get_store",
]
