"""
Job domain models and schemas.

Status and result records persisted per job identifier, plus the outcome
returned by one job attempt.

Dependencies: pydantic
System role: Job status/result wire contracts
"""

import enum
from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, Field

DEFAULT_RESULT_TTL_SECONDS = 86_400


def utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


class JobStatus(str, enum.Enum):
    """
    Job execution states.

    QUEUED: Submitted, job body not started (implicit; never written by a worker)
    RUNNING: Job body executing; progress updated by the routine
    COMPLETED: Routine returned; result record holds payload and metrics
    FAILED: Routine raised; result record holds error and classifier
    """

    QUEUED = "queued"
    RUNNING = "running"
    COMPLETED = "completed"
    FAILED = "failed"

    @property
    def is_terminal(self) -> bool:
        return self in (JobStatus.COMPLETED, JobStatus.FAILED)


class StatusRecord(BaseModel):
    """Live progress descriptor, overwritten on every status write."""

    job_id: str = Field(description="Job identifier")
    status: JobStatus = Field(description="Current execution state")
    progress: int = Field(default=0, ge=0, le=100, description="Progress percentage (0-100)")
    message: str = Field(default="", description="Current activity")
    updated_at: str | None = Field(
        default=None,
        description="ISO-8601 timestamp of the last write (set by the store)",
    )


class ResultRecord(BaseModel):
    """
    Terminal outcome of one job attempt.

    Written once per attempt when the job reaches COMPLETED or FAILED and
    stored with a bounded lifetime. A retry overwrites the whole record.

    Attributes:
        success: Whether the routine returned normally
        payload: Compiled program configuration (success only)
        metrics: Routine final metrics (success only, empty on failure)
        error: Human-readable failure message (failure only)
        error_kind: Stable failure classifier, e.g. ``BackendError`` (failure only)
        completed_at: ISO-8601 time the terminal state was reached
        ttl: Record lifetime in seconds
    """

    job_id: str
    success: bool
    payload: Any = None
    metrics: dict[str, Any] = Field(default_factory=dict)
    error: str | None = None
    error_kind: str | None = None
    completed_at: str = Field(default_factory=utc_now_iso)
    ttl: int = Field(default=DEFAULT_RESULT_TTL_SECONDS, gt=0)

    @classmethod
    def succeeded(
        cls,
        job_id: str,
        payload: Any,
        metrics: dict[str, Any] | None = None,
        ttl: int = DEFAULT_RESULT_TTL_SECONDS,
    ) -> "ResultRecord":
        """Build a success record stamped with the current time."""
        return cls(
            job_id=job_id,
            success=True,
            payload=payload,
            metrics=dict(metrics or {}),
            completed_at=utc_now_iso(),
            ttl=ttl,
        )

    @classmethod
    def failed(
        cls,
        job_id: str,
        error: str,
        error_kind: str,
        ttl: int = DEFAULT_RESULT_TTL_SECONDS,
    ) -> "ResultRecord":
        """Build a failure record stamped with the current time."""
        return cls(
            job_id=job_id,
            success=False,
            error=error,
            error_kind=error_kind,
            completed_at=utc_now_iso(),
            ttl=ttl,
        )


class JobOutcome:
    """
    Recorded outcome of one attempt.

    Returned by ``BaseJob.execute`` after both records have been written.
    ``error`` holds the original routine exception on failure so the caller
    can re-signal it to the retry mechanism.
    """

    def __init__(
        self,
        job_id: str,
        result: ResultRecord,
        error: BaseException | None = None,
    ) -> None:
        self.job_id = job_id
        self.result = result
        self.error = error

    @property
    def succeeded(self) -> bool:
        return self.result.success

    def __repr__(self) -> str:
        return f"JobOutcome(job_id={self.job_id!r}, succeeded={self.succeeded})"
