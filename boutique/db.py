"""
Storage Module - Upstash Redis clients

Provides singleton instances of:
- Async Upstash Redis client (catalog cache)
- Sync Upstash Redis client (cart storage, used from sync handlers)
"""

from typing import Optional

from upstash_redis import Redis
from upstash_redis.asyncio import Redis as AsyncRedis

from boutique import config

_redis_client: Optional[AsyncRedis] = None
_sync_redis_client: Optional[Redis] = None


def _require_credentials() -> None:
    if not config.UPSTASH_REDIS_REST_URL or not config.UPSTASH_REDIS_REST_TOKEN:
        raise ValueError("UPSTASH_REDIS_REST_URL and UPSTASH_REDIS_REST_TOKEN must be set")


def get_redis() -> AsyncRedis:
    """
    Get async Upstash Redis client (singleton).

    Used for the catalog cache.
    """
    global _redis_client

    if _redis_client is None:
        _require_credentials()
        _redis_client = AsyncRedis(
            url=config.UPSTASH_REDIS_REST_URL, token=config.UPSTASH_REDIS_REST_TOKEN
        )

    return _redis_client


def get_redis_sync() -> Redis:
    """
    Get sync Upstash Redis client (singleton).

    Cart reads and writes are synchronous, so the cart storage uses this one.
    """
    global _sync_redis_client

    if _sync_redis_client is None:
        _require_credentials()
        _sync_redis_client = Redis(
            url=config.UPSTASH_REDIS_REST_URL, token=config.UPSTASH_REDIS_REST_TOKEN
        )

    return _sync_redis_client


class RedisKeys:
    """Redis key prefixes for different data types."""

    SESSION = "session:"  # session:{session_id}:{key}
    CATALOG_PRODUCTS = "catalog:products"

    @staticmethod
    def session_namespace(session_id: str) -> str:
        return f"{RedisKeys.SESSION}{session_id}"

    @staticmethod
    def session_key(session_id: str, key: str) -> str:
        return f"{RedisKeys.session_namespace(session_id)}:{key}"


class TTL:
    """Time-to-live constants for Redis keys (seconds)."""

    CATALOG = config.CATALOG_CACHE_TTL
