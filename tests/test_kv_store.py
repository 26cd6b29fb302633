"""
Tests for key-value store implementations.
"""
import threading

import pytest
from unittest.mock import MagicMock, patch
from redis.exceptions import ConnectionError as RedisConnectionError, TimeoutError as RedisTimeoutError

from research_memory.exceptions import StoreUnavailableError, RetrievalError
from research_memory.storage import InMemoryKeyValueStore, RedisKeyValueStore


class TestInMemoryKeyValueStore:
    """Tests for InMemoryKeyValueStore."""

    def test_get_missing_returns_none(self):
        """Test that absent keys read as None."""
        assert InMemoryKeyValueStore().get("missing") is None

    def test_set_overwrites(self):
        """Test create-or-overwrite semantics."""
        store = InMemoryKeyValueStore()
        store.set("Title", "v1")
        store.set("Title", "v2")

        assert store.get("Title") == "v2"
        assert len(store) == 1

    def test_scan_keys_in_insertion_order(self):
        """Test that enumeration follows insertion order."""
        store = InMemoryKeyValueStore({"b": "1", "a": "2"})
        store.set("c", "3")

        assert store.scan_keys() == ["b", "a", "c"]

    def test_scan_keys_is_a_snapshot(self):
        """Test that writes after a scan do not change the returned list."""
        store = InMemoryKeyValueStore({"a": "1"})
        keys = store.scan_keys()
        store.set("b", "2")

        assert keys == ["a"]

    def test_delete(self):
        """Test delete reports whether the key existed."""
        store = InMemoryKeyValueStore({"a": "1"})

        assert store.delete("a") is True
        assert store.delete("a") is False
        assert store.get("a") is None

    def test_concurrent_writes(self):
        """Test that parallel writers do not lose keys."""
        store = InMemoryKeyValueStore()

        def writer(prefix):
            for i in range(200):
                store.set(f"{prefix}-{i}", "x")

        threads = [threading.Thread(target=writer, args=(n,)) for n in range(4)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(store.scan_keys()) == 800


@pytest.fixture
def redis_client():
    return MagicMock()


class TestRedisKeyValueStore:
    """Tests for RedisKeyValueStore against a mocked client."""

    def test_get_passes_through(self, redis_client):
        """Test that GET results are returned as-is."""
        redis_client.get.return_value = "An introduction..."
        store = RedisKeyValueStore(redis_client)

        assert store.get("Deep Learning") == "An introduction..."
        redis_client.get.assert_called_once_with("Deep Learning")

    def test_get_missing_returns_none(self, redis_client):
        """Test that a nil reply means absent."""
        redis_client.get.return_value = None

        assert RedisKeyValueStore(redis_client).get("missing") is None

    def test_set(self, redis_client):
        """Test that SET is issued without expiry."""
        RedisKeyValueStore(redis_client).set("Title", "Body")

        redis_client.set.assert_called_once_with("Title", "Body")

    def test_scan_keys_drains_cursor(self, redis_client):
        """Test that SCAN iteration is fully drained with the COUNT hint."""
        redis_client.scan_iter.return_value = iter(["a", "b", "c"])
        store = RedisKeyValueStore(redis_client, scan_count=50)

        assert store.scan_keys() == ["a", "b", "c"]
        redis_client.scan_iter.assert_called_once_with(match="*", count=50)

    def test_get_failure_raises_store_error(self, redis_client):
        """Test that client errors become StoreUnavailableError."""
        redis_client.get.side_effect = RedisConnectionError("connection refused")

        with pytest.raises(StoreUnavailableError):
            RedisKeyValueStore(redis_client).get("Title")

    def test_scan_failure_raises_retrieval_error(self, redis_client):
        """Test that a failing scan is a retrieval error."""
        redis_client.scan_iter.side_effect = RedisTimeoutError("timed out")

        with pytest.raises(RetrievalError, match="error scanning keys"):
            RedisKeyValueStore(redis_client).scan_keys()

    def test_set_failure_raises_store_error(self, redis_client):
        """Test that write failures are surfaced."""
        redis_client.set.side_effect = RedisConnectionError("down")

        with pytest.raises(StoreUnavailableError):
            RedisKeyValueStore(redis_client).set("Title", "Body")

    def test_delete(self, redis_client):
        """Test that DEL reply count maps to a bool."""
        redis_client.delete.return_value = 1

        assert RedisKeyValueStore(redis_client).delete("Title") is True

    def test_ping_failure_is_false(self, redis_client):
        """Test that ping reports unreachable stores without raising."""
        redis_client.ping.side_effect = RedisConnectionError("down")

        assert RedisKeyValueStore(redis_client).ping() is False

    def test_close_closes_client(self, redis_client):
        """Test that close releases the client."""
        RedisKeyValueStore(redis_client).close()

        redis_client.close.assert_called_once()

    def test_from_url_creates_single_client(self):
        """Test that from_url builds one decoding client."""
        with patch("research_memory.storage.redis_store.redis.Redis.from_url") as from_url:
            store = RedisKeyValueStore.from_url("redis://localhost:6379/0", scan_count=10)

        from_url.assert_called_once()
        args, kwargs = from_url.call_args
        assert args == ("redis://localhost:6379/0",)
        assert kwargs["decode_responses"] is True
        assert store._client is from_url.return_value

    def test_from_url_rejects_bad_url(self):
        """Test that malformed URLs are reported as store errors."""
        with pytest.raises(StoreUnavailableError):
            RedisKeyValueStore.from_url("http://not-redis")
