"""
Core business logic module.

Contains the exception hierarchy, the contracts pluggable optimization
components must satisfy, and the registries that resolve them by name.
"""

from optimizer_jobs.core.contracts import CompiledProgram, Optimizer, ProgressCallback
from optimizer_jobs.core.exceptions import (
    OptimizerJobsException,
    ConfigurationError,
    UnknownComponentError,
    ResultStoreError,
    JobNotFoundError,
    JobExecutionError,
)
from optimizer_jobs.core.registry import ComponentRegistry, optimizers, programs

__all__ = [
    # Contracts
    "CompiledProgram",
    "Optimizer",
    "ProgressCallback",
    # Exceptions
    "OptimizerJobsException",
    "ConfigurationError",
    "UnknownComponentError",
    "ResultStoreError",
    "JobNotFoundError",
    "JobExecutionError",
    # Registries
    "ComponentRegistry",
    "optimizers",
    "programs",
]
