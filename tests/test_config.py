"""Tests for settings and storefront wiring"""
import pytest

from storefront.auth import MockIdentityProvider, SupabaseIdentityProvider
from storefront.bootstrap import build_cart_storage, build_identity_provider, build_storefront
from storefront.cart import MemoryCartStorage, RedisCartStorage
from storefront.config import Settings
from storefront.db import RedisKeys


class TestSettings:

    def test_defaults(self):
        settings = Settings()
        assert settings.identity_backend == "mock"
        assert settings.cart_backend == "memory"
        assert settings.auth_delay_seconds == 1.0

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("STOREFRONT_IDENTITY_BACKEND", "Supabase")
        monkeypatch.setenv("STOREFRONT_CART_BACKEND", "redis")
        monkeypatch.setenv("STOREFRONT_AUTH_DELAY", "0.25")
        monkeypatch.setenv("STOREFRONT_CART_TTL", "3600")
        monkeypatch.setenv("STOREFRONT_MAX_SESSIONS", "50")
        monkeypatch.setenv("UPSTASH_REDIS_REST_URL", "https://redis.test")

        settings = Settings.from_env()
        assert settings.identity_backend == "supabase"
        assert settings.cart_backend == "redis"
        assert settings.auth_delay_seconds == 0.25
        assert settings.cart_ttl_seconds == 3600
        assert settings.max_sessions == 50
        assert settings.redis_url == "https://redis.test"

    def test_blank_ttl_means_none(self, monkeypatch):
        monkeypatch.setenv("STOREFRONT_CART_TTL", " ")
        assert Settings.from_env().cart_ttl_seconds is None

    @pytest.mark.parametrize("kwargs", [
        {"identity_backend": "ldap"},
        {"cart_backend": "disk"},
        {"auth_delay_seconds": -1},
        {"max_sessions": 0},
    ])
    def test_invalid(self, kwargs):
        with pytest.raises(ValueError):
            Settings(**kwargs)


class TestBootstrap:

    def test_cart_key(self):
        assert RedisKeys.cart_key("abc") == "cart:abc"

    def test_memory_storage_by_default(self):
        assert isinstance(build_cart_storage(Settings()), MemoryCartStorage)

    def test_redis_storage(self, monkeypatch):
        redis = object()
        monkeypatch.setattr("storefront.bootstrap.get_redis", lambda settings: redis)
        storage = build_cart_storage(Settings(cart_backend="redis", cart_ttl_seconds=60))
        assert isinstance(storage, RedisCartStorage)
        assert storage.redis is redis
        assert storage.ttl_seconds == 60

    @pytest.mark.asyncio
    async def test_mock_identity_by_default(self):
        provider = await build_identity_provider(Settings(auth_delay_seconds=0.5))
        assert isinstance(provider, MockIdentityProvider)
        assert provider.delay_seconds == 0.5

    @pytest.mark.asyncio
    async def test_supabase_identity(self, monkeypatch, mock_supabase_client):
        async def fake_get_supabase(settings):
            return mock_supabase_client

        monkeypatch.setattr("storefront.bootstrap.get_supabase", fake_get_supabase)
        provider = await build_identity_provider(Settings(identity_backend="supabase"))
        assert isinstance(provider, SupabaseIdentityProvider)
        assert provider.client is mock_supabase_client

    @pytest.mark.asyncio
    async def test_build_storefront_seeds_catalog(self):
        storefront = await build_storefront(Settings(auth_delay_seconds=0))
        assert len(storefront.catalog) == 8
        assert storefront.editor.catalog is storefront.catalog
        assert isinstance(storefront.sessions.storage, MemoryCartStorage)
        assert storefront.sessions.max_sessions == 10_000


def test_package_exposes_lazy_accessors():
    import storefront
    from storefront.config import get_settings
    from storefront.db import get_redis

    assert storefront.get_settings is get_settings
    assert storefront.get_redis is get_redis
    with pytest.raises(AttributeError):
        storefront.not_a_thing
