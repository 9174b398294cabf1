"""FastAPI routers for the storefront JSON API."""
from .admin import router as admin_router
from .auth import router as auth_router
from .cart import router as cart_router
from .catalog import router as catalog_router
from .session import router as session_router

__all__ = [
    "admin_router",
    "auth_router",
    "cart_router",
    "catalog_router",
    "session_router",
]
