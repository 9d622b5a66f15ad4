"""
Redis-backed result store.

Status and result records are stored as JSON strings with ``SET``; the
result TTL is applied atomically with ``SET ... EX`` so a record never
exists without its expiry.

Dependencies: redis
System role: Shared status/result persistence for workers and readers
"""

import logging

import redis

from optimizer_jobs.boundary.store.base import ResultStore
from optimizer_jobs.core.exceptions import ResultStoreError

logger = logging.getLogger(__name__)


class RedisResultStore(ResultStore):
    """Result store on a Redis server shared by all workers."""

    def __init__(
        self,
        client: redis.Redis,
        key_prefix: str = "",
        status_ttl: int | None = None,
    ) -> None:
        """
        Initialize with an existing client.

        Args:
            client: redis-py client created with ``decode_responses=True``
            key_prefix: Namespace prepended to every key
            status_ttl: Optional retention for status records in seconds
        """
        super().__init__(key_prefix=key_prefix, status_ttl=status_ttl)
        self._client = client

    @classmethod
    def from_url(
        cls,
        url: str,
        key_prefix: str = "",
        status_ttl: int | None = None,
        socket_timeout: float = 5.0,
        socket_connect_timeout: float = 5.0,
    ) -> "RedisResultStore":
        """
        Create a store with its own connection pool.

        Connection is lazy; an unreachable server surfaces on first use.
        """
        client = redis.Redis.from_url(
            url,
            decode_responses=True,
            socket_timeout=socket_timeout,
            socket_connect_timeout=socket_connect_timeout,
        )
        return cls(client, key_prefix=key_prefix, status_ttl=status_ttl)

    def _set(self, key: str, value: str, ttl: int | None, operation: str, job_id: str) -> None:
        try:
            self._client.set(key, value, ex=ttl)
        except redis.RedisError as e:
            logger.error(
                f"{__name__}:{operation} - {type(e).__name__}: {e}",
                extra={"job_id": job_id, "key": key},
            )
            raise ResultStoreError(
                f"Redis write failed: {e}",
                operation=operation,
                job_id=job_id,
            ) from e

    def _get(self, key: str, operation: str, job_id: str) -> str | None:
        try:
            return self._client.get(key)
        except redis.RedisError as e:
            logger.error(
                f"{__name__}:{operation} - {type(e).__name__}: {e}",
                extra={"job_id": job_id, "key": key},
            )
            raise ResultStoreError(
                f"Redis read failed: {e}",
                operation=operation,
                job_id=job_id,
            ) from e

    def ping(self) -> bool:
        try:
            return bool(self._client.ping())
        except redis.RedisError as e:
            logger.warning(f"{__name__}:ping - Redis unreachable: {e}")
            return False

    def close(self) -> None:
        """Release the connection pool."""
        self._client.close()
