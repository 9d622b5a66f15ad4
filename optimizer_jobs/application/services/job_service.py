"""
Job service orchestrator.

Read side of the status/result contract for pollers and result fetchers.
Readers never write job records.

Dependencies: optimizer_jobs.boundary.store, optimizer_jobs.core.exceptions
System role: Job status lookups for the HTTP API
"""

from optimizer_jobs.boundary.store.base import ResultStore
from optimizer_jobs.core.exceptions import JobNotFoundError


class JobService:
    """
    Job service orchestrator.

    Wraps the result store for status polling and result retrieval.
    """

    def __init__(self, store: ResultStore) -> None:
        """
        Initialize job service.

        Args:
            store: Result store shared with the workers
        """
        self.store = store

    def get_job_status(self, job_id: str) -> dict:
        """
        Get the live status record for polling.

        Args:
            job_id: Job identifier

        Returns:
            dict: job_id, status, progress, message, updated_at

        Raises:
            JobNotFoundError: No status has been written for this job
        """
        record = self.store.read_status(job_id)
        if record is None:
            raise JobNotFoundError(job_id, record="status")
        return record.model_dump(mode="json")

    def get_job_result(self, job_id: str) -> dict:
        """
        Get the terminal result record.

        Raises:
            JobNotFoundError: Job not finished, or its result has expired
        """
        record = self.store.read_result(job_id)
        if record is None:
            raise JobNotFoundError(job_id, record="result")
        return record.model_dump(mode="json")
