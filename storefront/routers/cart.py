"""
Cart Router

Session cart endpoints. Every response carries the recomputed totals and the
notifications raised since the previous response.
"""
from fastapi import APIRouter, Depends, HTTPException

from storefront.bootstrap import Storefront
from storefront.cart import CartStorageError, line_item_for
from storefront.catalog import DEFAULT_VARIANT_ID
from storefront.errors import (
    ERROR_PRODUCT_NOT_FOUND,
    ERROR_PRODUCT_OUT_OF_STOCK,
    ERROR_VARIANT_NOT_FOUND,
    ValidationError,
)
from storefront.logging import get_logger
from storefront.session import StorefrontSession
from .deps import drain_notifications, get_session, get_storefront
from .models import AddToCartRequest, UpdateCartItemRequest

logger = get_logger(__name__)

router = APIRouter(tags=["cart"])


def _format_cart_response(session: StorefrontSession) -> dict:
    return {
        **session.cart.to_dict(),
        "notifications": drain_notifications(session),
    }


def _resolve_variant_id(product, requested: str | None) -> str:
    """Requested variant, else the first in-stock one, else the implicit default."""
    if not product.variants:
        if requested not in (None, DEFAULT_VARIANT_ID):
            raise HTTPException(status_code=404, detail=ERROR_VARIANT_NOT_FOUND)
        if not product.in_stock:
            raise HTTPException(status_code=400, detail=ERROR_PRODUCT_OUT_OF_STOCK)
        return DEFAULT_VARIANT_ID

    if requested is None:
        variant = product.first_available_variant()
        if variant is None:
            raise HTTPException(status_code=400, detail=ERROR_PRODUCT_OUT_OF_STOCK)
        return variant.id

    variant = product.get_variant(requested)
    if variant is None:
        raise HTTPException(status_code=404, detail=ERROR_VARIANT_NOT_FOUND)
    if not variant.in_stock:
        raise HTTPException(status_code=400, detail=ERROR_PRODUCT_OUT_OF_STOCK)
    return variant.id


@router.get("/cart")
async def get_cart(session: StorefrontSession = Depends(get_session)):
    """Current cart with checkout figures."""
    return _format_cart_response(session)


@router.post("/cart/add")
async def add_to_cart(
    request: AddToCartRequest,
    session: StorefrontSession = Depends(get_session),
    storefront: Storefront = Depends(get_storefront),
):
    """Add a product variant to the cart (duplicates increase quantity)."""
    product = storefront.catalog.find_by_id(request.product_id)
    if product is None:
        raise HTTPException(status_code=404, detail=ERROR_PRODUCT_NOT_FOUND)

    variant_id = _resolve_variant_id(product, request.variant_id)
    item = line_item_for(product, variant_id, request.quantity)

    try:
        await session.cart.add_item(item)
    except ValidationError as ve:
        raise HTTPException(status_code=400, detail=ve.message)
    except CartStorageError as e:
        logger.error(f"Failed to add to cart: {e}", exc_info=True)
        raise HTTPException(status_code=503, detail=str(e))

    return _format_cart_response(session)


@router.patch("/cart/item")
async def update_cart_item(request: UpdateCartItemRequest, session: StorefrontSession = Depends(get_session)):
    """Set a line's quantity (0 or less removes it)."""
    try:
        await session.cart.set_quantity(request.product_id, request.variant_id, request.quantity)
    except ValidationError as ve:
        raise HTTPException(status_code=400, detail=ve.message)
    except CartStorageError as e:
        logger.error(f"Failed to update cart item: {e}", exc_info=True)
        raise HTTPException(status_code=503, detail=str(e))

    return _format_cart_response(session)


@router.delete("/cart/item")
async def remove_cart_item(product_id: str, variant_id: str, session: StorefrontSession = Depends(get_session)):
    """Remove a line; removing a missing line is not an error."""
    try:
        await session.cart.remove_item(product_id, variant_id)
    except CartStorageError as e:
        logger.error(f"Failed to remove cart item: {e}", exc_info=True)
        raise HTTPException(status_code=503, detail=str(e))

    return _format_cart_response(session)


@router.delete("/cart")
async def clear_cart(session: StorefrontSession = Depends(get_session)):
    try:
        await session.cart.clear()
    except CartStorageError as e:
        logger.error(f"Failed to clear cart: {e}", exc_info=True)
        raise HTTPException(status_code=503, detail=str(e))

    return _format_cart_response(session)
