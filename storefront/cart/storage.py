"""Cart persistence backends.

A cart is stored as one JSON array under ``cart:<session_id>``. Backends only
move strings around; encoding and corruption handling live in the manager.
"""
from abc import ABC, abstractmethod
from typing import Optional

from tenacity import retry, retry_if_exception_type, stop_after_attempt, wait_exponential
from upstash_redis.asyncio import Redis as AsyncRedis

from storefront.db import RedisKeys


class CartStorage(ABC):
    """Key/value store for serialized carts."""

    @abstractmethod
    async def load(self, session_id: str) -> Optional[str]:
        """Raw persisted blob, or None if nothing was stored."""

    @abstractmethod
    async def save(self, session_id: str, blob: str) -> None:
        ...

    @abstractmethod
    async def delete(self, session_id: str) -> None:
        ...


class MemoryCartStorage(CartStorage):
    """Process-local storage for the mock backend and tests."""

    def __init__(self):
        self._blobs: dict[str, str] = {}

    def __contains__(self, session_id: str) -> bool:
        return RedisKeys.cart_key(session_id) in self._blobs

    def raw(self, session_id: str) -> Optional[str]:
        return self._blobs.get(RedisKeys.cart_key(session_id))

    async def load(self, session_id: str) -> Optional[str]:
        return self._blobs.get(RedisKeys.cart_key(session_id))

    async def save(self, session_id: str, blob: str) -> None:
        self._blobs[RedisKeys.cart_key(session_id)] = blob

    async def delete(self, session_id: str) -> None:
        self._blobs.pop(RedisKeys.cart_key(session_id), None)


# Transient network failures only; anything else surfaces immediately
_redis_retry = retry(
    stop=stop_after_attempt(3),
    wait=wait_exponential(multiplier=0.1, max=1),
    retry=retry_if_exception_type(OSError),
    reraise=True,
)


class RedisCartStorage(CartStorage):
    """Upstash Redis storage; optional TTL for abandoned carts."""

    def __init__(self, redis: AsyncRedis, ttl_seconds: Optional[int] = None):
        self.redis = redis
        self.ttl_seconds = ttl_seconds

    @_redis_retry
    async def load(self, session_id: str) -> Optional[str]:
        data = await self.redis.get(RedisKeys.cart_key(session_id))
        if data is None:
            return None
        return data.decode("utf-8") if isinstance(data, bytes) else str(data)

    @_redis_retry
    async def save(self, session_id: str, blob: str) -> None:
        key = RedisKeys.cart_key(session_id)
        if self.ttl_seconds:
            await self.redis.set(key, blob, ex=self.ttl_seconds)
        else:
            await self.redis.set(key, blob)

    @_redis_retry
    async def delete(self, session_id: str) -> None:
        await self.redis.delete(RedisKeys.cart_key(session_id))
