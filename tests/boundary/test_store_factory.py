"""
Test suite for get_result_store factory.

System role: Verification of backend selection from settings
"""

from unittest.mock import MagicMock, patch

import pytest

from optimizer_jobs.boundary.store.memory_store import InMemoryResultStore
from optimizer_jobs.boundary.store.redis_store import RedisResultStore
from optimizer_jobs.boundary.store.store_factory import get_result_store
from optimizer_jobs.configs.result_store import ResultStoreSettings
from optimizer_jobs.core.exceptions import ConfigurationError


@pytest.fixture(autouse=True)
def clear_store_cache():
    """Reset the cached store around each test."""
    get_result_store.cache_clear()
    yield
    get_result_store.cache_clear()


def _settings(**overrides) -> MagicMock:
    settings = MagicMock()
    settings.result_store = ResultStoreSettings(**overrides)
    return settings


class TestGetResultStore:
    """Test suite for backend selection."""

    def test_should_create_memory_store(self) -> None:
        """Test backend=memory yields InMemoryResultStore."""
        with patch(
            "optimizer_jobs.boundary.store.store_factory.get_settings",
            return_value=_settings(backend="memory", key_prefix="t:"),
        ):
            store = get_result_store()

        assert isinstance(store, InMemoryResultStore)
        assert store.key_prefix == "t:"

    def test_should_create_redis_store_from_url(self) -> None:
        """Test backend=redis builds a client from the configured URL."""
        with patch(
            "optimizer_jobs.boundary.store.store_factory.get_settings",
            return_value=_settings(backend="REDIS", redis_url="redis://cache:6379/3"),
        ), patch("redis.Redis.from_url") as mock_from_url:
            store = get_result_store()

        assert isinstance(store, RedisResultStore)
        assert mock_from_url.call_args.args[0] == "redis://cache:6379/3"

    def test_should_cache_store_instance(self) -> None:
        """Test the same store is shared within a process."""
        with patch(
            "optimizer_jobs.boundary.store.store_factory.get_settings",
            return_value=_settings(backend="memory"),
        ):
            assert get_result_store() is get_result_store()

    def test_should_reject_unknown_backend(self) -> None:
        """Test invalid backend names fail with a configuration error."""
        with patch(
            "optimizer_jobs.boundary.store.store_factory.get_settings",
            return_value=_settings(backend="memcached"),
        ):
            with pytest.raises(ConfigurationError, match="RESULT_STORE_BACKEND"):
                get_result_store()
