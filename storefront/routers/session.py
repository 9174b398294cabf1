"""
Session Router

Explicit session open/close. Clients keep the returned id and send it back as
``X-Session-Id``.
"""
from fastapi import APIRouter, Depends, Header, HTTPException

from storefront.bootstrap import Storefront
from storefront.cart import CartStorageError
from storefront.logging import get_logger
from .deps import drain_notifications, get_storefront

logger = get_logger(__name__)

router = APIRouter(tags=["session"])


@router.post("/session")
async def open_session(
    x_session_id: str = Header(None, alias="X-Session-Id"),
    storefront: Storefront = Depends(get_storefront),
):
    """Open (or resume) a session and return its id with the hydrated cart."""
    try:
        session = await storefront.sessions.open(x_session_id)
    except CartStorageError as e:
        logger.error(f"Failed to open session: {e}", exc_info=True)
        raise HTTPException(status_code=503, detail=str(e))

    return {
        "session_id": session.session_id,
        "expires_at": session.expires_at.isoformat() if session.expires_at else None,
        "cart": session.cart.to_dict(),
        "notifications": drain_notifications(session),
    }


@router.delete("/session")
async def close_session(
    x_session_id: str = Header(None, alias="X-Session-Id"),
    storefront: Storefront = Depends(get_storefront),
):
    """Forget the session; its persisted cart is kept."""
    closed = storefront.sessions.close(x_session_id) if x_session_id else False
    return {"success": True, "closed": closed}
