"""Catalog models - Pydantic models for products and their variants."""
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_serializer, field_validator, model_validator
from pydantic.alias_generators import to_camel

from storefront.services.money import to_decimal as _to_decimal

# Variant id used for the single implicit line of a product without variants
DEFAULT_VARIANT_ID = "default"


class CatalogModel(BaseModel):
    """Immutable catalog record, serialized with camelCase keys."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        alias_generator=to_camel,
        populate_by_name=True,
    )


class Variant(CatalogModel):
    """Purchasable sub-option of a product (size, color, ...)."""
    id: str
    name: str
    price: Decimal
    compare_at_price: Optional[Decimal] = None
    sku: str = ""
    in_stock: bool = True

    @field_validator("price", "compare_at_price", mode="before")
    @classmethod
    def convert_to_decimal(cls, v):
        return None if v is None else _to_decimal(v)

    @field_serializer("price", "compare_at_price", when_used="json")
    def serialize_price(self, v):
        return None if v is None else float(v)


class Product(CatalogModel):
    """Catalog entry."""
    id: str
    name: str
    description: str = ""
    short_description: str = ""
    price: Decimal
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
    variants: list[Variant] = []

    @field_validator("price", "compare_at_price", mode="before")
    @classmethod
    def convert_to_decimal(cls, v):
        return None if v is None else _to_decimal(v)

    @field_serializer("price", "compare_at_price", when_used="json")
    def serialize_price(self, v):
        return None if v is None else float(v)

    @model_validator(mode="after")
    def check_unique_variant_ids(self):
        seen = set()
        for variant in self.variants:
            if variant.id in seen:
                raise ValueError(f"duplicate variant id {variant.id!r} in product {self.id!r}")
            seen.add(variant.id)
        return self

    @property
    def primary_image(self) -> str:
        return self.images[0] if self.images else ""

    def get_variant(self, variant_id: str) -> Optional[Variant]:
        """Look up a variant by id; None on miss."""
        return next((v for v in self.variants if v.id == variant_id), None)

    def first_available_variant(self) -> Optional[Variant]:
        """First in-stock variant in listing order."""
        return next((v for v in self.variants if v.in_stock), None)

    def price_for(self, variant_id: str) -> Optional[Decimal]:
        """Unit price for a variant, or the base price for a variantless product."""
        if not self.variants:
            return self.price if variant_id == DEFAULT_VARIANT_ID else None
        variant = self.get_variant(variant_id)
        return variant.price if variant else None

    def to_api(self) -> dict:
        """JSON-ready dict with camelCase keys and float prices."""
        return self.model_dump(mode="json", by_alias=True)
