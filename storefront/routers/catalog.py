"""
Catalog Router

Public product listing, detail, categories and collections.
"""
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException

from storefront.bootstrap import Storefront
from storefront.catalog import ProductFlag
from storefront.errors import ERROR_PRODUCT_NOT_FOUND
from .deps import get_storefront

router = APIRouter(tags=["catalog"])


@router.get("/products")
async def list_products(
    category: Optional[str] = None,
    sort: Optional[str] = None,
    flag: Optional[str] = None,
    storefront: Storefront = Depends(get_storefront),
):
    """Products filtered by category/flag, then ordered by the sort mode."""
    catalog = storefront.catalog
    products = catalog.filter_by_category(category)

    if flag:
        try:
            attr = ProductFlag(flag).value
        except ValueError:
            raise HTTPException(status_code=400, detail=f"Unknown flag: {flag}")
        products = [p for p in products if getattr(p, attr)]

    products = catalog.sort_and_partition(products, sort)
    return {"products": [p.to_api() for p in products], "count": len(products)}


@router.get("/products/{slug}")
async def get_product(slug: str, related_limit: int = 4, storefront: Storefront = Depends(get_storefront)):
    """Product detail with related products."""
    product = storefront.catalog.find_by_slug(slug)
    if product is None:
        raise HTTPException(status_code=404, detail=ERROR_PRODUCT_NOT_FOUND)

    related = storefront.catalog.related_to(product, related_limit)
    return {"product": product.to_api(), "related": [p.to_api() for p in related]}


@router.get("/categories")
async def list_categories(storefront: Storefront = Depends(get_storefront)):
    return {"categories": storefront.catalog.distinct_categories()}


@router.get("/collections")
async def list_collections(storefront: Storefront = Depends(get_storefront)):
    """Category tiles: name, product count and cover image."""
    return {"collections": [c.to_dict() for c in storefront.catalog.category_summaries()]}


@router.get("/home")
async def home(storefront: Storefront = Depends(get_storefront)):
    """Featured, best-seller and new-arrival rails for the landing page."""
    catalog = storefront.catalog
    return {
        "featured": [p.to_api() for p in catalog.featured()],
        "best_sellers": [p.to_api() for p in catalog.best_sellers()],
        "new_arrivals": [p.to_api() for p in catalog.new_arrivals()],
    }
