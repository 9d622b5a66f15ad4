"""
Job envelope shared by every job type.

Implements the begin -> progress* -> end protocol:

    running(0, start message)
      -> running(n, progress message)   zero or more times
      -> completed(100) + success result
       | failed(last progress) + failure result, then re-raise

Recording and signalling are separate steps: ``execute`` writes the
terminal records and returns a JobOutcome, ``perform`` re-raises a recorded
routine failure so the dispatcher's retry policy can act on it.

Store errors are never recorded as routine failures: no failure result is
written for them. The envelope makes one attempt to mark the status failed
so pollers do not see a stale "running" record, then re-raises the store
error so a storage outage is not reported as a failed computation.

Dependencies: optimizer_jobs.boundary.store, optimizer_jobs.models
System role: Job lifecycle and status/result persistence protocol
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, NamedTuple

from optimizer_jobs.boundary.store.base import ResultStore
from optimizer_jobs.core.contracts import ProgressCallback
from optimizer_jobs.core.exceptions import ConfigurationError, ResultStoreError
from optimizer_jobs.models.job import (
    DEFAULT_RESULT_TTL_SECONDS,
    JobOutcome,
    JobStatus,
    ResultRecord,
    StatusRecord,
)
from optimizer_jobs.observability.log_utils import log_job_event, log_job_failure

logger = logging.getLogger(__name__)


class JobOutput(NamedTuple):
    """Value returned by a job body."""

    payload: Any
    metrics: dict[str, Any]


class BaseJob(ABC):
    """
    Lifecycle wrapper for one job attempt.

    Subclasses implement ``run`` and may override the status messages.
    One instance handles one attempt at a time.
    """

    start_message = "Starting job"
    progress_message = "Working... {progress}% complete"
    completion_message = "Job completed successfully"
    failure_message = "Job failed: {error}"

    def __init__(self, store: ResultStore, result_ttl: int | None = None) -> None:
        """
        Initialize job with its result store.

        Args:
            store: Status/result store shared with readers
            result_ttl: Lifetime of the result record in seconds (default 24h)

        Raises:
            ConfigurationError: result_ttl is not a positive integer
        """
        if result_ttl is None:
            result_ttl = DEFAULT_RESULT_TTL_SECONDS
        if isinstance(result_ttl, bool) or not isinstance(result_ttl, int) or result_ttl <= 0:
            raise ConfigurationError(
                f"Result TTL must be a positive integer number of seconds, got {result_ttl!r}",
                field="result_ttl",
            )
        self.store = store
        self.result_ttl = result_ttl
        self._progress = 0

    @abstractmethod
    def run(self, job_id: str, *args: Any, **kwargs: Any) -> JobOutput:
        """Job body. Raise to fail the attempt."""

    # ── Two-step contract ────────────────────────────────────────────

    def perform(self, job_id: str, *args: Any, **kwargs: Any) -> ResultRecord:
        """
        Dispatch entry point.

        Records the outcome, then re-raises the original routine exception
        if the attempt failed.

        Returns:
            ResultRecord: The stored success record

        Raises:
            Exception: The routine's own exception after it was recorded
            ResultStoreError: A status/result write failed
        """
        outcome = self.execute(job_id, *args, **kwargs)
        if outcome.error is not None:
            raise outcome.error
        return outcome.result

    def execute(self, job_id: str, *args: Any, **kwargs: Any) -> JobOutcome:
        """
        Run one attempt and record its terminal state.

        Returns:
            JobOutcome: Stored result plus the routine exception on failure

        Raises:
            ResultStoreError: A status/result write failed (re-raised after one
                attempt to mark the status failed)
        """
        self._progress = 0
        log_job_event(logger, logging.INFO, job_id, f"{__name__}:execute - Job started")
        self.update_status(job_id, JobStatus.RUNNING, 0, self.start_message)

        try:
            output = self.run(job_id, *args, **kwargs)
        except ResultStoreError as e:
            self._abort(job_id, e)
            raise
        except Exception as e:
            return self._fail(job_id, e)

        try:
            return self._complete(job_id, output)
        except ResultStoreError as e:
            self._abort(job_id, e)
            raise

    # ── Status writes ────────────────────────────────────────────────

    def update_status(
        self,
        job_id: str,
        status: JobStatus,
        progress: int,
        message: str,
    ) -> None:
        """Overwrite the status record. Store errors propagate."""
        self.store.write_status(
            job_id,
            StatusRecord(job_id=job_id, status=status, progress=progress, message=message),
        )

    def report_progress(self, job_id: str, progress: int, message: str | None = None) -> None:
        """
        Record a running progress update.

        Values are clamped to 0-100. Non-decreasing progress is the caller's
        convention; a decrease is logged and written as given.
        """
        value = max(0, min(100, int(progress)))
        if value < self._progress:
            logger.warning(
                f"{__name__}:report_progress - Progress went backwards ({self._progress} -> {value})",
                extra={"job_id": job_id},
            )
        self._progress = value
        self.update_status(
            job_id,
            JobStatus.RUNNING,
            value,
            message or self.progress_message.format(progress=value),
        )

    def progress_callback(self, job_id: str) -> ProgressCallback:
        """Bind ``report_progress`` to a job for handing to a routine."""

        def callback(progress: int) -> None:
            self.report_progress(job_id, progress)

        return callback

    # ── Terminal transitions ─────────────────────────────────────────

    def _complete(self, job_id: str, output: JobOutput) -> JobOutcome:
        record = ResultRecord.succeeded(
            job_id,
            payload=output.payload,
            metrics=output.metrics,
            ttl=self.result_ttl,
        )
        self.store.write_result(job_id, record, ttl=self.result_ttl)
        self.update_status(job_id, JobStatus.COMPLETED, 100, self.completion_message)
        self._progress = 100

        log_job_event(
            logger,
            logging.INFO,
            job_id,
            f"{__name__}:execute - Job completed",
            metrics=record.metrics,
        )
        return JobOutcome(job_id, record)

    def _fail(self, job_id: str, exc: Exception) -> JobOutcome:
        error_kind = classify_error(exc)
        error = str(exc) or error_kind

        log_job_failure(
            logger,
            job_id,
            f"{__name__}:execute - Job failed",
            exc,
            error_kind=error_kind,
            progress=self._progress,
        )

        record = ResultRecord.failed(job_id, error=error, error_kind=error_kind, ttl=self.result_ttl)
        try:
            self.store.write_result(job_id, record, ttl=self.result_ttl)
        except ResultStoreError as store_error:
            self._abort(job_id, store_error)
            raise
        self.update_status(
            job_id,
            JobStatus.FAILED,
            self._progress,
            self.failure_message.format(error=error),
        )
        return JobOutcome(job_id, record, error=exc)

    def _abort(self, job_id: str, exc: ResultStoreError) -> None:
        """
        Mark the status failed after a store error, without a result record.

        A second store error from this write propagates in place of ``exc``.
        """
        log_job_failure(
            logger,
            job_id,
            f"{__name__}:execute - Store error, marking job failed",
            exc,
            operation=exc.operation,
            progress=self._progress,
        )
        error = f"storage error during {exc.operation or 'store access'}"
        self.update_status(job_id, JobStatus.FAILED, self._progress, self.failure_message.format(error=error))


def classify_error(exc: BaseException) -> str:
    """
    Stable classifier for a failure.

    Uses the exception's ``error_kind`` attribute when it provides one,
    otherwise its class name.
    """
    kind = getattr(exc, "error_kind", None)
    if isinstance(kind, str) and kind:
        return kind
    return type(exc).__name__
