"""
Redis-backed key-value store.

One client (and its connection pool) is created at service start and shared
by every request.
"""
import logging
from typing import List, Optional

import redis
from redis.exceptions import RedisError

from .kv_store import KeyValueStore
from ..exceptions import StoreUnavailableError


logger = logging.getLogger(__name__)


class RedisKeyValueStore(KeyValueStore):
    """
    KeyValueStore over plain Redis string keys.

    Keys are enumerated with SCAN, so large key spaces are paged in batches of
    scan_count. SCAN may yield a key more than once; callers must tolerate that.
    """

    def __init__(self, client: redis.Redis, scan_count: int = 100):
        """
        :param client: Redis client created with decode_responses=True
        :param scan_count: COUNT hint passed to SCAN
        """
        self._client = client
        self._scan_count = scan_count

    @classmethod
    def from_url(
        cls,
        url: str,
        scan_count: int = 100,
        socket_timeout: float = 5.0,
    ) -> "RedisKeyValueStore":
        """Connect to Redis at url."""
        try:
            client = redis.Redis.from_url(
                url,
                encoding="utf-8",
                decode_responses=True,
                socket_connect_timeout=socket_timeout,
                socket_timeout=socket_timeout,
                retry_on_timeout=True,
            )
        except ValueError as e:
            raise StoreUnavailableError(f"Invalid Redis URL: {e}") from e

        return cls(client, scan_count=scan_count)

    def get(self, key: str) -> Optional[str]:
        try:
            return self._client.get(key)
        except RedisError as e:
            logger.warning(f"Redis GET failed for key '{key}': {e}")
            raise StoreUnavailableError(f"error retrieving key '{key}': {e}") from e

    def set(self, key: str, value: str) -> None:
        try:
            self._client.set(key, value)
        except RedisError as e:
            logger.warning(f"Redis SET failed for key '{key}': {e}")
            raise StoreUnavailableError(f"error storing key '{key}': {e}") from e

    def scan_keys(self) -> List[str]:
        try:
            return list(self._client.scan_iter(match="*", count=self._scan_count))
        except RedisError as e:
            logger.warning(f"Redis SCAN failed: {e}")
            raise StoreUnavailableError(f"error scanning keys: {e}") from e

    def delete(self, key: str) -> bool:
        try:
            return bool(self._client.delete(key))
        except RedisError as e:
            raise StoreUnavailableError(f"error deleting key '{key}': {e}") from e

    def ping(self) -> bool:
        try:
            return bool(self._client.ping())
        except RedisError as e:
            logger.error(f"Redis ping failed: {e}")
            return False

    def close(self) -> None:
        self._client.close()
        logger.info("Redis connection closed")
