"""
Wiring for the storefront services.

``build_storefront`` picks the identity and cart backends from Settings and
returns one Storefront object. The API keeps it on ``app.state``; tests build
their own.
"""
from dataclasses import dataclass
from typing import Optional

from storefront.auth import IdentityProvider, MockIdentityProvider, SupabaseIdentityProvider
from storefront.cart import CartStorage, MemoryCartStorage, RedisCartStorage
from storefront.catalog import CatalogService, ProductEditor, Product, load_seed_products
from storefront.config import Settings
from storefront.db import get_redis, get_supabase
from storefront.logging import get_logger
from storefront.session import SessionRegistry

logger = get_logger(__name__)


@dataclass
class Storefront:
    """Everything a request handler needs, created once per process."""
    settings: Settings
    catalog: CatalogService
    editor: ProductEditor
    sessions: SessionRegistry
    identity: IdentityProvider


def build_cart_storage(settings: Settings) -> CartStorage:
    if settings.cart_backend == "redis":
        return RedisCartStorage(get_redis(settings), ttl_seconds=settings.cart_ttl_seconds)
    return MemoryCartStorage()


async def build_identity_provider(settings: Settings) -> IdentityProvider:
    if settings.identity_backend == "supabase":
        return SupabaseIdentityProvider(await get_supabase(settings))
    return MockIdentityProvider(delay_seconds=settings.auth_delay_seconds)


async def build_storefront(
    settings: Settings,
    products: Optional[list[Product]] = None,
    storage: Optional[CartStorage] = None,
    identity: Optional[IdentityProvider] = None,
) -> Storefront:
    """Assemble the storefront; explicit arguments override the configured backends."""
    catalog = CatalogService(products if products is not None else load_seed_products())
    storage = storage or build_cart_storage(settings)
    identity = identity or await build_identity_provider(settings)

    logger.info(
        f"Storefront ready: {len(catalog)} products, identity={type(identity).__name__}, "
        f"cart={type(storage).__name__}"
    )
    return Storefront(
        settings=settings,
        catalog=catalog,
        editor=ProductEditor(catalog),
        sessions=SessionRegistry(storage, max_sessions=settings.max_sessions),
        identity=identity,
    )
