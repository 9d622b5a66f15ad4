"""
Exception hierarchy for the optimizer job layer.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class OptimizerJobsException(Exception):
    """Base exception for all optimizer job layer errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging

        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ConfigurationError(OptimizerJobsException):
    """Raised when a job is given an unusable reference or malformed options."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize configuration error.

        Args:
            message: Error message
            field: Configuration field that was rejected
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, details)


class UnknownComponentError(ConfigurationError):
    """Raised when a registry lookup names a component that was never registered."""

    def __init__(self, kind: str, name: str, known: list[str]) -> None:
        """
        Initialize unknown component error.

        Args:
            kind: Registry kind (optimizer, program)
            name: Requested key
            known: Keys currently registered
        """
        super().__init__(
            f"Unknown {kind}: {name!r}",
            field=kind,
            details={"known": sorted(known)},
        )
        self.kind = kind
        self.name = name


class ResultStoreError(OptimizerJobsException):
    """Raised when a status or result record cannot be read or written."""

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        job_id: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize result store error.

        Args:
            message: Error message
            operation: Operation that failed (write_status, write_result, read_status, read_result)
            job_id: Job whose record was involved
            details: Additional context
        """
        details = details or {}
        if operation:
            details["operation"] = operation
        if job_id:
            details["job_id"] = job_id
        super().__init__(message, details)
        self.operation = operation
        self.job_id = job_id


class JobNotFoundError(OptimizerJobsException):
    """Raised when no live record exists for a job identifier."""

    def __init__(self, job_id: str, record: str = "status") -> None:
        super().__init__(f"No {record} record for job {job_id}", {"job_id": job_id})
        self.job_id = job_id
        self.record = record


class JobExecutionError(OptimizerJobsException):
    """
    Routine failure carrying an explicit classifier.

    Optimization routines may raise this (or any exception exposing an
    ``error_kind`` attribute) to control the classifier recorded in the
    failed result, e.g. ``"BackendError"`` for an unavailable model.
    """

    def __init__(
        self,
        message: str,
        error_kind: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.error_kind = error_kind
