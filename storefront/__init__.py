"""
Storefront Core Module

This package contains the storefront backend components:
- catalog: product records and catalog queries
- cart: session cart manager and persistence
- auth: identity providers (mock or Supabase)
- session: explicitly scoped storefront sessions
- services: money, checkout figures, notifications
- routers: FastAPI routers for the JSON API

Note: Imports are lazy to keep module loading cheap for the API entry point.
"""

__all__ = [
    "get_supabase",
    "get_redis",
    "get_settings",
]


def __getattr__(name):
    """Lazy attribute access."""
    if name == "get_supabase":
        from storefront.db import get_supabase
        return get_supabase
    elif name == "get_redis":
        from storefront.db import get_redis
        return get_redis
    elif name == "get_settings":
        from storefront.config import get_settings
        return get_settings
    raise AttributeError(f"module 'storefront' has no attribute '{name}'")
