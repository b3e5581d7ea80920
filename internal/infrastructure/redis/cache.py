"""
Redis Cache implementation.

Implements Cache-Aside pattern with jitter for TTL, used to keep remote catalog
API responses close to the service.
"""
import json
import random
from typing import Any, Optional

import msgpack
import redis.asyncio as aioredis
from redis.asyncio import Redis
from redis.exceptions import RedisError

from config.settings import settings
from internal.infrastructure.metrics import CACHE_LOOKUPS_TOTAL
from pkg.logger.logger import get_logger


logger = get_logger(__name__)


KEY_PREFIX = "api:"


class RedisCache:
    """
    Redis cache implementation with Cache-Aside pattern.

    Uses msgpack for efficient serialization and jitter for TTL
    to prevent cache stampede. A failing cache never fails the caller:
    errors are logged and reported as a miss.
    """

    def __init__(
        self,
        redis_url: str,
        default_ttl: int = settings.CACHE_TTL_PRODUCTS_LIST,
        max_jitter: int = settings.CACHE_MAX_JITTER,
        client: Optional[Redis] = None,
    ) -> None:
        """
        Initialize the Redis cache.

        Args:
            redis_url: Redis connection URL.
            default_ttl: Default TTL in seconds.
            max_jitter: Maximum jitter to add to TTL.
            client: Already-built client (mainly for tests).
        """
        self._redis_url = redis_url
        self._default_ttl = default_ttl
        self._max_jitter = max_jitter
        self._redis: Optional[Redis] = client

    async def connect(self) -> None:
        """Connect to Redis and check the connection."""
        self._redis = aioredis.from_url(
            self._redis_url,
            decode_responses=False,  # binary values for msgpack
        )
        await self._redis.ping()
        logger.info("Connected to Redis", url=self._redis_url)

    async def disconnect(self) -> None:
        """Disconnect from Redis."""
        if self._redis:
            await self._redis.aclose()
            self._redis = None
            logger.info("Disconnected from Redis")

    def _get_ttl_with_jitter(self, ttl: Optional[int] = None) -> int:
        """
        Calculate TTL with random jitter.

        Args:
            ttl: Base TTL in seconds. Uses default if not provided.

        Returns:
            TTL with random jitter added.
        """
        base_ttl = ttl or self._default_ttl
        return base_ttl + random.randint(0, self._max_jitter)

    async def get(self, key: str) -> Optional[Any]:
        """
        Get a value from cache.

        Args:
            key: Cache key.

        Returns:
            Cached value, or None if not found.
        """
        if not self._redis:
            return None

        try:
            data = await self._redis.get(key)
        except RedisError as e:
            logger.error("Cache get error", key=key, error=str(e))
            return None

        if data is None:
            CACHE_LOOKUPS_TOTAL.labels(result="miss").inc()
            logger.debug("Cache miss", key=key)
            return None

        try:
            value = msgpack.unpackb(data, raw=False)
        except ValueError as e:
            logger.error("Cache payload corrupt", key=key, error=str(e))
            return None

        CACHE_LOOKUPS_TOTAL.labels(result="hit").inc()
        logger.debug("Cache hit", key=key)
        return value

    async def set(
        self,
        key: str,
        value: Any,
        ttl: Optional[int] = None,
    ) -> bool:
        """
        Set a value in cache with TTL.

        Args:
            key: Cache key.
            value: msgpack-serializable value.
            ttl: TTL in seconds. Uses default with jitter if not provided.

        Returns:
            True if successful, False otherwise.
        """
        if not self._redis:
            return False

        try:
            data = msgpack.packb(value, use_bin_type=True, default=str)
            ttl_with_jitter = self._get_ttl_with_jitter(ttl)
            await self._redis.setex(key, ttl_with_jitter, data)
        except (RedisError, TypeError, ValueError) as e:
            logger.error("Cache set error", key=key, error=str(e))
            return False

        logger.debug("Cache set", key=key, ttl=ttl_with_jitter)
        return True

    async def invalidate(self, key: str) -> bool:
        """
        Invalidate a cache key.

        Args:
            key: Cache key to invalidate.

        Returns:
            True if key was deleted, False otherwise.
        """
        if not self._redis:
            return False

        try:
            deleted = await self._redis.delete(key)
        except RedisError as e:
            logger.error("Cache invalidate error", key=key, error=str(e))
            return False

        logger.debug("Cache invalidated", key=key, deleted=deleted)
        return deleted > 0

    async def invalidate_pattern(self, pattern: str) -> int:
        """
        Invalidate all keys matching a pattern.

        Args:
            pattern: Redis glob pattern (e.g., "api:/products*").

        Returns:
            Number of keys deleted.
        """
        if not self._redis:
            return 0

        try:
            keys = [key async for key in self._redis.scan_iter(match=pattern)]
            if not keys:
                return 0
            deleted = await self._redis.delete(*keys)
        except RedisError as e:
            logger.error(
                "Cache pattern invalidate error",
                pattern=pattern,
                error=str(e),
            )
            return 0

        logger.info("Cache pattern invalidated", pattern=pattern, deleted=deleted)
        return deleted


class ApiResponseCache:
    """
    Catalog-API-specific cache service.

    Keys are derived from the endpoint and its query parameters, so the same
    request always maps to the same entry.
    """

    def __init__(self, cache: RedisCache) -> None:
        """
        Initialize the API response cache.

        Args:
            cache: RedisCache instance.
        """
        self._cache = cache

    @staticmethod
    def make_key(endpoint: str, params: Optional[dict] = None) -> str:
        """
        Build the cache key for a request.

        Args:
            endpoint: API path, e.g. "/products/1".
            params: Query parameters.

        Returns:
            "api:<endpoint>" or "api:<endpoint>:<sorted json params>".
        """
        if not params:
            return f"{KEY_PREFIX}{endpoint}"
        return f"{KEY_PREFIX}{endpoint}:{json.dumps(params, sort_keys=True)}"

    async def get(self, endpoint: str, params: Optional[dict] = None) -> Optional[Any]:
        """Get a cached response."""
        return await self._cache.get(self.make_key(endpoint, params))

    async def set(
        self,
        endpoint: str,
        value: Any,
        params: Optional[dict] = None,
        kind: str = "list",
    ) -> bool:
        """
        Cache a response.

        Args:
            endpoint: API path.
            value: Decoded JSON response.
            params: Query parameters.
            kind: TTL class ("list", "detail", "categories", "search").
        """
        return await self._cache.set(
            self.make_key(endpoint, params),
            value,
            ttl=settings.get_cache_ttl(kind),
        )

    async def invalidate_product(self, product_id: int) -> int:
        """
        Drop the product's detail entry and every cached product listing.

        Args:
            product_id: Product ID.

        Returns:
            Number of keys deleted.
        """
        deleted = int(await self._cache.invalidate(self.make_key(f"/products/{product_id}")))
        deleted += await self._cache.invalidate_pattern(f"{KEY_PREFIX}/products*")
        return deleted
