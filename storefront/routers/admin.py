"""
Admin Router

Admin login plus the product table and product create/update form.
Everything except login requires an admin identity on the session.
"""
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException

from storefront.bootstrap import Storefront
from storefront.catalog import ProductDraft
from storefront.errors import ERROR_PRODUCT_NOT_FOUND, ValidationError
from storefront.logging import get_logger, sanitize_string_for_logging
from storefront.session import StorefrontSession
from .deps import get_session, get_storefront, require_admin
from .models import LoginRequest

logger = get_logger(__name__)

router = APIRouter(tags=["admin"])


@router.post("/admin/login")
async def admin_login(
    request: LoginRequest,
    session: StorefrontSession = Depends(get_session),
    storefront: Storefront = Depends(get_storefront),
):
    """Sign the session in, accepting admin accounts only."""
    result = await storefront.identity.admin_login(request.email, request.password)
    if not result.success:
        raise HTTPException(status_code=401, detail=result.message)

    session.sign_in(result.identity, result.message)
    logger.info(f"Admin login: {sanitize_string_for_logging(request.email)}")
    return {"success": True, "user": result.identity.model_dump(mode="json")}


@router.get("/admin/products")
async def admin_list_products(
    q: Optional[str] = None,
    sort: Optional[str] = None,
    direction: str = "asc",
    admin: StorefrontSession = Depends(require_admin),
    storefront: Storefront = Depends(get_storefront),
):
    """Product table: search on name/category/tags, then column sort."""
    catalog = storefront.catalog
    products = catalog.sort_by_column(catalog.search(q), sort, descending=direction == "desc")
    return {"products": [p.to_api() for p in products], "count": len(products)}


@router.post("/admin/products", status_code=201)
async def admin_create_product(
    draft: ProductDraft,
    admin: StorefrontSession = Depends(require_admin),
    storefront: Storefront = Depends(get_storefront),
):
    try:
        product = storefront.editor.create(draft)
    except ValidationError as ve:
        raise HTTPException(status_code=400, detail=ve.message)

    return {"success": True, "product": product.to_api()}


@router.put("/admin/products/{product_id}")
async def admin_update_product(
    product_id: str,
    draft: ProductDraft,
    admin: StorefrontSession = Depends(require_admin),
    storefront: Storefront = Depends(get_storefront),
):
    """Replace a product with the submitted form."""
    try:
        product = storefront.editor.update(product_id, draft)
    except ValidationError as ve:
        raise HTTPException(status_code=400, detail=ve.message)

    if product is None:
        raise HTTPException(status_code=404, detail=ERROR_PRODUCT_NOT_FOUND)
    return {"success": True, "product": product.to_api()}
