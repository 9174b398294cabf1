"""
Storefront - Main FastAPI Application

Single entry point for the storefront JSON API: catalog, session cart,
authentication and the admin product editor.
"""
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from storefront.bootstrap import Storefront, build_storefront
from storefront.config import get_settings
from storefront.logging import get_logger
from storefront.routers import (
    admin_router,
    auth_router,
    cart_router,
    catalog_router,
    session_router,
)

logger = get_logger(__name__)


def create_app(storefront: Optional[Storefront] = None) -> FastAPI:
    """
    Build the API.

    With an explicit ``storefront`` the configured backends are never touched;
    otherwise one is built from the environment on startup.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan handler"""
        # Startup
        if getattr(app.state, "storefront", None) is None:
            app.state.storefront = await build_storefront(get_settings())
        yield
        # Shutdown
        logger.info("Storefront API shutting down")

    app = FastAPI(
        title="Storefront API",
        description="Product catalog, session cart and admin editor",
        version="1.0.0",
        lifespan=lifespan,
    )
    if storefront is not None:
        app.state.storefront = storefront

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(session_router, prefix="/api")
    app.include_router(catalog_router, prefix="/api")
    app.include_router(cart_router, prefix="/api")
    app.include_router(auth_router, prefix="/api")
    app.include_router(admin_router, prefix="/api")

    # ==================== HEALTH CHECK ====================

    @app.get("/api/health")
    async def health_check():
        """Health check endpoint"""
        return {"status": "ok", "service": "storefront"}

    return app


app = create_app()
