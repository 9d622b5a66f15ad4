"""
In-process result store.

Keeps serialized records in a dict with absolute expiry times computed from
an injectable clock, so TTL behaviour can be exercised without waiting.
Only suitable when the worker and the readers share one process (local
development, tests).

Dependencies: threading, time
System role: Local status/result persistence
"""

import logging
import threading
import time
from typing import Callable

from optimizer_jobs.boundary.store.base import ResultStore

logger = logging.getLogger(__name__)


class InMemoryResultStore(ResultStore):
    """Dict-backed result store with lazy expiry."""

    def __init__(
        self,
        key_prefix: str = "",
        status_ttl: int | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """
        Initialize an empty store.

        Args:
            key_prefix: Namespace prepended to every key
            status_ttl: Optional retention for status records in seconds
            clock: Seconds source used for expiry (monotonic by default)
        """
        super().__init__(key_prefix=key_prefix, status_ttl=status_ttl)
        self._clock = clock
        self._data: dict[str, tuple[str, float | None]] = {}
        self._lock = threading.Lock()

    def _set(self, key: str, value: str, ttl: int | None, operation: str, job_id: str) -> None:
        expires_at = self._clock() + ttl if ttl is not None else None
        with self._lock:
            self._data[key] = (value, expires_at)

    def _get(self, key: str, operation: str, job_id: str) -> str | None:
        with self._lock:
            entry = self._data.get(key)
            if entry is None:
                return None
            value, expires_at = entry
            if expires_at is not None and self._clock() >= expires_at:
                del self._data[key]
                logger.debug(f"{__name__}:{operation} - Expired {key}")
                return None
            return value

    def ping(self) -> bool:
        return True

    def __len__(self) -> int:
        with self._lock:
            return len(self._data)
