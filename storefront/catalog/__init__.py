"""Catalog package: product models, seed data, queries and admin edits."""
from .models import Product, Variant, DEFAULT_VARIANT_ID
from .service import CatalogService, SortMode, ProductFlag, CategorySummary
from .admin import ProductDraft, ProductEditor, validate_draft
from .data import load_seed_products
from .slugs import create_slug

__all__ = [
    "Product",
    "Variant",
    "DEFAULT_VARIANT_ID",
    "CatalogService",
    "SortMode",
    "ProductFlag",
    "CategorySummary",
    "ProductDraft",
    "ProductEditor",
    "validate_draft",
    "load_seed_products",
    "create_slug",
]
