import json
import logging
import time
from collections import OrderedDict
from typing import Any, Callable, Dict, Optional, Protocol, Tuple

from redis.asyncio import Redis as AsyncRedis
from redis.exceptions import RedisError

from seasonal_trends.core.config import Settings
from seasonal_trends.core.exceptions import CacheError, ConfigurationError

logger = logging.getLogger(__name__)


class CacheStore(Protocol):
    """Key/value store with per-entry expiry used by the report services"""

    async def get(self, key: str) -> Optional[Dict[str, Any]]:
        ...

    async def set(self, key: str, value: Dict[str, Any], ttl: int) -> bool:
        ...

    async def delete_prefix(self, prefix: str) -> int:
        ...

    async def ping(self) -> bool:
        ...


class InMemoryCacheStore:
    """Process-local cache store for development and testing

    Entries are kept as ``(expires_at, value)`` pairs in least recently used
    order. Expired entries are dropped on read and purged on every write, and
    the least recently used entry is evicted once ``max_items`` is reached.
    """

    backend = "memory"

    def __init__(self, clock: Callable[[], float] = time.monotonic, max_items: int = 1000):
        self._clock = clock
        self.max_items = max(1, max_items)
        self._entries: "OrderedDict[str, Tuple[float, Dict[str, Any]]]" = OrderedDict()

    async def get(self, key: str) -> Optional[Dict[str, Any]]:
        entry = self._entries.get(key)
        if entry is None:
            return None
        expires_at, value = entry
        if expires_at <= self._clock():
            del self._entries[key]
            return None
        self._entries.move_to_end(key)
        return value

    async def set(self, key: str, value: Dict[str, Any], ttl: int) -> bool:
        self._purge_expired()
        self._entries.pop(key, None)
        while len(self._entries) >= self.max_items:
            lru_key, _ = self._entries.popitem(last=False)
            logger.debug(f"Evicted least recently used cache entry: {lru_key}")
        self._entries[key] = (self._clock() + ttl, value)
        return True

    def _purge_expired(self) -> int:
        now = self._clock()
        expired = [key for key, (expires_at, _) in self._entries.items() if expires_at <= now]
        for key in expired:
            del self._entries[key]
        return len(expired)

    def __len__(self) -> int:
        return len(self._entries)

    async def delete_prefix(self, prefix: str) -> int:
        keys = [key for key in self._entries if key.startswith(prefix)]
        for key in keys:
            del self._entries[key]
        return len(keys)

    async def ping(self) -> bool:
        return True


class RedisCacheStore:
    """Cache store backed by redis, values stored as JSON with SETEX"""

    backend = "redis"

    def __init__(self, client: AsyncRedis, key_prefix: str = ""):
        self.client = client
        self.key_prefix = key_prefix

    @classmethod
    def from_settings(cls, settings: Settings) -> "RedisCacheStore":
        if not settings.REDIS_URL:
            raise ConfigurationError("REDIS_URL must be set when REDIS_ENABLED is true")
        client = AsyncRedis.from_url(settings.REDIS_URL, **settings.REDIS_CONNECTION_PARAMS)
        return cls(client, key_prefix=settings.REDIS_KEY_PREFIX)

    def _key(self, key: str) -> str:
        return f"{self.key_prefix}{key}"

    async def get(self, key: str) -> Optional[Dict[str, Any]]:
        try:
            data = await self.client.get(self._key(key))
        except RedisError as e:
            raise CacheError(f"Error getting from cache: {e}", context={"key": key}, cause=e) from e
        if data is None:
            return None
        return json.loads(data)

    async def set(self, key: str, value: Dict[str, Any], ttl: int) -> bool:
        try:
            return bool(await self.client.setex(self._key(key), ttl, json.dumps(value)))
        except RedisError as e:
            raise CacheError(f"Error setting cache: {e}", context={"key": key}, cause=e) from e

    async def delete_prefix(self, prefix: str) -> int:
        deleted = 0
        try:
            async for raw_key in self.client.scan_iter(match=f"{self._key(prefix)}*"):
                deleted += await self.client.delete(raw_key)
        except RedisError as e:
            raise CacheError(f"Error deleting from cache: {e}", context={"prefix": prefix}, cause=e) from e
        return deleted

    async def ping(self) -> bool:
        try:
            return bool(await self.client.ping())
        except RedisError as e:
            logger.warning(f"Redis ping failed: {e}")
            return False


def create_cache_store(settings: Settings) -> CacheStore:
    """Build the cache store selected by ``REDIS_ENABLED``"""
    if settings.REDIS_ENABLED:
        logger.info("Using redis cache store")
        return RedisCacheStore.from_settings(settings)
    logger.info("Using in-memory cache store")
    return InMemoryCacheStore(max_items=settings.CACHE_MEMORY_MAX_ITEMS)
