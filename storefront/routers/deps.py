"""
Shared Dependencies for Routers

The Storefront object lives on ``app.state``; sessions are resolved from the
``X-Session-Id`` header.
"""
from fastapi import Depends, Header, HTTPException, Request

from storefront.bootstrap import Storefront
from storefront.cart import CartStorageError
from storefront.errors import ERROR_ADMIN_REQUIRED, ERROR_SESSION_REQUIRED
from storefront.session import StorefrontSession


def get_storefront(request: Request) -> Storefront:
    return request.app.state.storefront


async def get_session(
    x_session_id: str = Header(None, alias="X-Session-Id"),
    storefront: Storefront = Depends(get_storefront),
) -> StorefrontSession:
    """
    Resolve the caller's session.

    Unknown ids are reopened, so a shopper keeping their id gets the
    persisted cart back after a restart.
    """
    if not x_session_id:
        raise HTTPException(status_code=401, detail=ERROR_SESSION_REQUIRED)
    try:
        return await storefront.sessions.open(x_session_id)
    except CartStorageError as e:
        raise HTTPException(status_code=503, detail=str(e))


async def require_admin(session: StorefrontSession = Depends(get_session)) -> StorefrontSession:
    """Session whose identity has the admin role."""
    if not session.view.is_admin:
        raise HTTPException(status_code=403, detail=ERROR_ADMIN_REQUIRED)
    return session


def drain_notifications(session: StorefrontSession) -> list[dict]:
    return [n.to_dict() for n in session.outbox.drain()]
