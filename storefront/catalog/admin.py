"""
Admin catalog edits.

A draft is validated (name non-empty, price > 0) and then either appended as a
new product or swapped in for the product with the same id. There is no
locking, history or soft-delete.
"""
import time
from decimal import Decimal
from typing import Callable, Optional

from pydantic import BaseModel, field_validator

from storefront.errors import (
    ValidationError,
    ERROR_DUPLICATE_VARIANT,
    ERROR_NAME_REQUIRED,
    ERROR_PRICE_NOT_POSITIVE,
    ERROR_SLUG_TAKEN,
)
from storefront.logging import get_logger, sanitize_string_for_logging
from storefront.services.money import to_decimal
from .models import Product
from .service import CatalogService
from .slugs import create_slug

logger = get_logger(__name__)


class VariantDraft(BaseModel):
    id: Optional[str] = None
    name: str = ""
    price: Optional[Decimal] = None
    compare_at_price: Optional[Decimal] = None
    sku: str = ""
    in_stock: bool = True


class ProductDraft(BaseModel):
    """Admin form payload; nothing is checked until ``validate_draft``."""
    id: Optional[str] = None
    name: str = ""
    description: str = ""
    short_description: str = ""
    price: Decimal = Decimal("0")
    compare_at_price: Optional[Decimal] = None
    rating: float = 0.0
    review_count: int = 0
    images: list[str] = []
    category: str = ""
    tags: list[str] = []
    featured: bool = False
    best_seller: bool = False
    new: bool = False
    in_stock: bool = True
    slug: str = ""
    variants: list[VariantDraft] = []

    @field_validator("price", mode="before")
    @classmethod
    def convert_price(cls, v):
        return to_decimal(v)


def validate_draft(draft: ProductDraft) -> None:
    """Raise ValidationError with the form message for the first bad field."""
    if not draft.name.strip():
        raise ValidationError(ERROR_NAME_REQUIRED, field="name")
    if draft.price <= 0:
        raise ValidationError(ERROR_PRICE_NOT_POSITIVE, field="price")


def _clean_tags(tags: list[str]) -> list[str]:
    # Blank and duplicate tags are dropped, first occurrence wins
    return list(dict.fromkeys(t.strip() for t in tags if t and t.strip()))


def build_product(draft: ProductDraft, product_id: str) -> Product:
    """Turn a validated draft into a Product, filling in slug and variant ids."""
    variants = [
        {
            "id": v.id or f"{product_id}-{index}",
            "name": v.name,
            "price": v.price if v.price is not None else draft.price,
            "compare_at_price": v.compare_at_price,
            "sku": v.sku,
            "in_stock": v.in_stock,
        }
        for index, v in enumerate(draft.variants, start=1)
    ]
    seen: set[str] = set()
    for variant in variants:
        if variant["id"] in seen:
            raise ValidationError(ERROR_DUPLICATE_VARIANT, field="variants")
        seen.add(variant["id"])

    return Product(
        id=product_id,
        name=draft.name.strip(),
        description=draft.description,
        short_description=draft.short_description,
        price=draft.price,
        compare_at_price=draft.compare_at_price,
        rating=draft.rating,
        review_count=draft.review_count,
        images=[url for url in draft.images if url],
        category=draft.category.strip(),
        tags=_clean_tags(draft.tags),
        featured=draft.featured,
        best_seller=draft.best_seller,
        new=draft.new,
        in_stock=draft.in_stock,
        slug=draft.slug.strip() or create_slug(draft.name),
        variants=variants,
    )


class ProductEditor:
    """Create/update path for the admin panel."""

    def __init__(self, catalog: CatalogService, clock: Callable[[], float] = time.time):
        self.catalog = catalog
        self._clock = clock

    def _new_id(self) -> str:
        return f"product-{int(self._clock() * 1000)}"

    def _check_slug(self, product: Product) -> None:
        owner = self.catalog.find_by_slug(product.slug)
        if owner is not None and owner.id != product.id:
            raise ValidationError(ERROR_SLUG_TAKEN, field="slug")

    def create(self, draft: ProductDraft) -> Product:
        """Validate and append a new product."""
        validate_draft(draft)
        product_id = draft.id or self._new_id()
        if self.catalog.find_by_id(product_id) is not None:
            raise ValidationError(f"Product id {product_id} already exists.", field="id")

        product = build_product(draft, product_id)
        self._check_slug(product)
        self.catalog.append(product)
        logger.info(f"Admin: created product {product.id} ({sanitize_string_for_logging(product.name)})")
        return product

    def update(self, product_id: str, draft: ProductDraft) -> Optional[Product]:
        """Validate and replace an existing product; None if the id is unknown."""
        validate_draft(draft)
        if self.catalog.find_by_id(product_id) is None:
            return None

        product = build_product(draft, product_id)
        self._check_slug(product)
        self.catalog.replace(product)
        logger.info(f"Admin: updated product {product.id} ({sanitize_string_for_logging(product.name)})")
        return product
