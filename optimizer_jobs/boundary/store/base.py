"""
Result store interface.

Key-value persistence for job status and result records with per-key
time-to-live. Both namespaces derive from the job identifier:

    {key_prefix}status:{job_id}  -> StatusRecord (optional retention TTL)
    {key_prefix}result:{job_id}  -> ResultRecord (mandatory TTL)

Backends implement raw get/set; serialization, timestamping and TTL
validation live here so every backend exposes the same wire contract.

Dependencies: pydantic, optimizer_jobs.models, optimizer_jobs.core.exceptions
System role: Persistence facade for the job envelope and status readers
"""

import logging
from abc import ABC, abstractmethod
from typing import TypeVar

from pydantic import BaseModel, ValidationError

from optimizer_jobs.core.exceptions import ResultStoreError
from optimizer_jobs.models.job import ResultRecord, StatusRecord, utc_now_iso

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=BaseModel)


class ResultStore(ABC):
    """
    Abstract status/result store.

    Storage errors are never retried or swallowed here; every backend
    failure surfaces as ResultStoreError to the caller.
    """

    def __init__(self, key_prefix: str = "", status_ttl: int | None = None) -> None:
        """
        Initialize shared store options.

        Args:
            key_prefix: Namespace prepended to every key
            status_ttl: Optional retention for status records in seconds
        """
        if status_ttl is not None:
            _validate_ttl(status_ttl, "write_status")
        self.key_prefix = key_prefix
        self.status_ttl = status_ttl

    def status_key(self, job_id: str) -> str:
        return f"{self.key_prefix}status:{job_id}"

    def result_key(self, job_id: str) -> str:
        return f"{self.key_prefix}result:{job_id}"

    # ── Write side ───────────────────────────────────────────────────

    def write_status(self, job_id: str, record: StatusRecord) -> None:
        """
        Overwrite the status record for a job.

        ``updated_at`` is stamped here on every write.

        Args:
            job_id: Job identifier
            record: Status to persist

        Raises:
            ResultStoreError: Serialization or backend failure
        """
        stamped = record.model_copy(update={"job_id": job_id, "updated_at": utc_now_iso()})
        value = self._serialize(stamped, "write_status", job_id)
        self._set(self.status_key(job_id), value, self.status_ttl, "write_status", job_id)

    def write_result(self, job_id: str, record: ResultRecord, ttl: int | None = None) -> None:
        """
        Store the terminal result for a job with a bounded lifetime.

        Args:
            job_id: Job identifier
            record: Result to persist
            ttl: Lifetime in seconds; defaults to ``record.ttl``

        Raises:
            ResultStoreError: Invalid TTL, serialization or backend failure
        """
        ttl = record.ttl if ttl is None else ttl
        _validate_ttl(ttl, "write_result", job_id)
        stored = record.model_copy(update={"job_id": job_id, "ttl": ttl})
        value = self._serialize(stored, "write_result", job_id)
        self._set(self.result_key(job_id), value, ttl, "write_result", job_id)

    # ── Read side ────────────────────────────────────────────────────

    def read_status(self, job_id: str) -> StatusRecord | None:
        """Return the current status record, or None if absent/expired."""
        raw = self._get(self.status_key(job_id), "read_status", job_id)
        if raw is None:
            return None
        return self._deserialize(StatusRecord, raw, "read_status", job_id)

    def read_result(self, job_id: str) -> ResultRecord | None:
        """Return the result record, or None if absent/expired."""
        raw = self._get(self.result_key(job_id), "read_result", job_id)
        if raw is None:
            return None
        return self._deserialize(ResultRecord, raw, "read_result", job_id)

    # ── Backend hooks ────────────────────────────────────────────────

    @abstractmethod
    def _set(self, key: str, value: str, ttl: int | None, operation: str, job_id: str) -> None:
        """Store ``value`` under ``key``, expiring after ``ttl`` seconds when given."""

    @abstractmethod
    def _get(self, key: str, operation: str, job_id: str) -> str | None:
        """Return the live value under ``key`` or None."""

    @abstractmethod
    def ping(self) -> bool:
        """Health probe. Returns False rather than raising."""

    # ── Helpers ──────────────────────────────────────────────────────

    @staticmethod
    def _serialize(record: BaseModel, operation: str, job_id: str) -> str:
        try:
            return record.model_dump_json()
        except (TypeError, ValueError) as e:
            logger.error(f"{__name__}:{operation} - Serialization failed: {type(e).__name__}: {e}")
            raise ResultStoreError(
                f"Could not serialize record: {e}",
                operation=operation,
                job_id=job_id,
            ) from e

    @staticmethod
    def _deserialize(model: type[RecordT], raw: str, operation: str, job_id: str) -> RecordT:
        try:
            return model.model_validate_json(raw)
        except ValidationError as e:
            raise ResultStoreError(
                f"Stored record is not a valid {model.__name__}",
                operation=operation,
                job_id=job_id,
            ) from e


def _validate_ttl(ttl: object, operation: str, job_id: str | None = None) -> None:
    if isinstance(ttl, bool) or not isinstance(ttl, int) or ttl <= 0:
        raise ResultStoreError(
            f"TTL must be a positive integer number of seconds, got {ttl!r}",
            operation=operation,
            job_id=job_id,
        )
