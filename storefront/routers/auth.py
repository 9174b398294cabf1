"""
Auth Router

Login, registration and logout against the configured identity provider.
The resulting identity is attached to the caller's session.
"""
from fastapi import APIRouter, Depends, HTTPException

from storefront.bootstrap import Storefront
from storefront.logging import get_logger, sanitize_string_for_logging
from storefront.session import StorefrontSession
from .deps import drain_notifications, get_session, get_storefront
from .models import LoginRequest, RegisterRequest

logger = get_logger(__name__)

router = APIRouter(tags=["auth"])


def _format_auth_response(session: StorefrontSession) -> dict:
    identity = session.identity
    return {
        "user": identity.model_dump(mode="json") if identity else None,
        "is_authenticated": session.view.is_authenticated,
        "is_admin": session.view.is_admin,
        "notifications": drain_notifications(session),
    }


@router.post("/auth/login")
async def login(
    request: LoginRequest,
    session: StorefrontSession = Depends(get_session),
    storefront: Storefront = Depends(get_storefront),
):
    result = await storefront.identity.login(request.email, request.password)
    if not result.success:
        raise HTTPException(status_code=401, detail=result.message)

    session.sign_in(result.identity, result.message)
    logger.info(f"Login: {sanitize_string_for_logging(request.email)} as {result.identity.role}")
    return _format_auth_response(session)


@router.post("/auth/register")
async def register(
    request: RegisterRequest,
    session: StorefrontSession = Depends(get_session),
    storefront: Storefront = Depends(get_storefront),
):
    """Create a customer account and sign the session in as it."""
    result = await storefront.identity.register(request.email, request.password, request.name)
    if not result.success:
        raise HTTPException(status_code=400, detail=result.message)

    session.sign_in(result.identity, result.message)
    return _format_auth_response(session)


@router.post("/auth/logout")
async def logout(
    session: StorefrontSession = Depends(get_session),
    storefront: Storefront = Depends(get_storefront),
):
    """Drop the identity; the cart stays with the session."""
    await storefront.identity.logout()
    session.sign_out()
    return _format_auth_response(session)


@router.get("/auth/me")
async def me(session: StorefrontSession = Depends(get_session)):
    return _format_auth_response(session)
