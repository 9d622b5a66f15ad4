"""Domain models."""

from optimizer_jobs.models.job import (
    DEFAULT_RESULT_TTL_SECONDS,
    JobOutcome,
    JobStatus,
    ResultRecord,
    StatusRecord,
    utc_now_iso,
)

__all__ = [
    "DEFAULT_RESULT_TTL_SECONDS",
    "JobOutcome",
    "JobStatus",
    "ResultRecord",
    "StatusRecord",
    "utc_now_iso",
]
