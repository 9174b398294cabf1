"""Storefront settings read from environment variables."""

import os
from dataclasses import dataclass
from functools import cache

IDENTITY_BACKENDS = ("mock", "supabase")
CART_BACKENDS = ("memory", "redis")


def _optional_int(value: str | None) -> int | None:
    if value is None or not value.strip():
        return None
    return int(value)


@dataclass(frozen=True)
class Settings:
    """Runtime settings for the storefront API."""

    identity_backend: str = "mock"
    cart_backend: str = "memory"
    auth_delay_seconds: float = 1.0
    cart_ttl_seconds: int | None = None
    max_sessions: int = 10_000
    supabase_url: str = ""
    supabase_key: str = ""
    redis_url: str = ""
    redis_token: str = ""

    def __post_init__(self):
        if self.identity_backend not in IDENTITY_BACKENDS:
            raise ValueError(
                f"STOREFRONT_IDENTITY_BACKEND must be one of {IDENTITY_BACKENDS}, "
                f"got {self.identity_backend!r}"
            )
        if self.cart_backend not in CART_BACKENDS:
            raise ValueError(
                f"STOREFRONT_CART_BACKEND must be one of {CART_BACKENDS}, "
                f"got {self.cart_backend!r}"
            )
        if self.auth_delay_seconds < 0:
            raise ValueError("STOREFRONT_AUTH_DELAY must be >= 0")
        if self.max_sessions < 1:
            raise ValueError("STOREFRONT_MAX_SESSIONS must be >= 1")

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from the process environment."""
        return cls(
            identity_backend=os.environ.get("STOREFRONT_IDENTITY_BACKEND", "mock").lower(),
            cart_backend=os.environ.get("STOREFRONT_CART_BACKEND", "memory").lower(),
            auth_delay_seconds=float(os.environ.get("STOREFRONT_AUTH_DELAY", "1.0")),
            cart_ttl_seconds=_optional_int(os.environ.get("STOREFRONT_CART_TTL")),
            max_sessions=int(os.environ.get("STOREFRONT_MAX_SESSIONS", "10000")),
            supabase_url=os.environ.get("SUPABASE_URL", ""),
            supabase_key=os.environ.get("SUPABASE_SERVICE_ROLE_KEY", ""),
            redis_url=os.environ.get("UPSTASH_REDIS_REST_URL", ""),
            redis_token=os.environ.get("UPSTASH_REDIS_REST_TOKEN", ""),
        )


@cache
def get_settings() -> Settings:
    """Get settings (read once per process)."""
    return Settings.from_env()
