"""
Database Module - Supabase and Redis Clients

Provides lazily created singleton instances of:
- Async Supabase client for auth and the profiles table
- Async Upstash Redis client for persisted carts
"""

from supabase._async.client import AsyncClient, create_client as acreate_client
from upstash_redis.asyncio import Redis as AsyncRedis

from storefront.config import Settings, get_settings

# Singleton instances
_async_supabase_client: AsyncClient | None = None
_redis_client: AsyncRedis | None = None


async def get_supabase(settings: Settings | None = None) -> AsyncClient:
    """
    Get async Supabase client (singleton).

    Raises:
        ValueError: If SUPABASE_URL or SUPABASE_SERVICE_ROLE_KEY is missing
    """
    global _async_supabase_client

    if _async_supabase_client is None:
        settings = settings or get_settings()
        if not settings.supabase_url or not settings.supabase_key:
            raise ValueError("SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY must be set")
        _async_supabase_client = await acreate_client(settings.supabase_url, settings.supabase_key)

    return _async_supabase_client


def get_redis(settings: Settings | None = None) -> AsyncRedis:
    """
    Get async Upstash Redis client (singleton).

    Uses the standard Upstash env var names:
    - UPSTASH_REDIS_REST_URL
    - UPSTASH_REDIS_REST_TOKEN
    """
    global _redis_client

    if _redis_client is None:
        settings = settings or get_settings()
        if not settings.redis_url or not settings.redis_token:
            raise ValueError("UPSTASH_REDIS_REST_URL and UPSTASH_REDIS_REST_TOKEN must be set")
        _redis_client = AsyncRedis(url=settings.redis_url, token=settings.redis_token)

    return _redis_client


class RedisKeys:
    """Redis key prefixes."""

    # Cart storage
    CART = "cart"  # cart:{session_id}

    @staticmethod
    def cart_key(session_id: str) -> str:
        return f"{RedisKeys.CART}:{session_id}"
