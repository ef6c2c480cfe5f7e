"""
Cart storage port.

The cart store only needs `read(key)` and `write(key, value)` on string
values. `MemoryStorage` backs tests and local runs; `RedisStorage` keeps one
namespace per visitor session in Upstash Redis.
"""
from typing import Optional, Protocol

from boutique.db import RedisKeys, get_redis_sync
from boutique.errors import ERROR_CART_STORAGE_UNAVAILABLE
from boutique.logging import get_logger, sanitize_id_for_logging

logger = get_logger(__name__)


class CartStorage(Protocol):
    """Durable string key-value storage."""

    def read(self, key: str) -> Optional[str]:
        ...

    def write(self, key: str, value: str) -> None:
        ...


class MemoryStorage:
    """In-process storage."""

    def __init__(self, initial: Optional[dict[str, str]] = None):
        self.data: dict[str, str] = dict(initial or {})

    def read(self, key: str) -> Optional[str]:
        return self.data.get(key)

    def write(self, key: str, value: str) -> None:
        self.data[key] = value


class RedisStorage:
    """
    Session-scoped storage in Upstash Redis.

    Keys are stored as `session:{session_id}:{key}`.

    Raises:
        ValueError: Redis is not configured or a command failed
    """

    def __init__(self, session_id: str, redis_client=None):
        self.session_id = session_id
        self._redis = redis_client

    @property
    def redis(self):
        """Get Redis client (lazy initialization)."""
        if self._redis is None:
            try:
                self._redis = get_redis_sync()
            except ValueError as e:
                raise ValueError(f"Redis not available: {e}")
        return self._redis

    def _key(self, key: str) -> str:
        return RedisKeys.session_key(self.session_id, key)

    def read(self, key: str) -> Optional[str]:
        try:
            data = self.redis.get(self._key(key))
        except ValueError:
            raise
        except Exception as e:
            logger.error(
                f"Failed to read {key} for session {sanitize_id_for_logging(self.session_id)}: {e}"
            )
            raise ValueError(f"{ERROR_CART_STORAGE_UNAVAILABLE}: {e}")
        return data if data else None

    def write(self, key: str, value: str) -> None:
        try:
            self.redis.set(self._key(key), value)
        except ValueError:
            raise
        except Exception as e:
            logger.error(
                f"Failed to write {key} for session {sanitize_id_for_logging(self.session_id)}: {e}"
            )
            raise ValueError(f"{ERROR_CART_STORAGE_UNAVAILABLE}: {e}")
