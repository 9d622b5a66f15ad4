"""Job status/result stores."""

from optimizer_jobs.boundary.store.base import ResultStore
from optimizer_jobs.boundary.store.memory_store import InMemoryResultStore
from optimizer_jobs.boundary.store.redis_store import RedisResultStore
from optimizer_jobs.boundary.store.store_factory import get_result_store

__all__ = [
    "InMemoryResultStore",
    "RedisResultStore",
    "ResultStore",
    "get_result_store",
]
