"""
Catalog Domain Service

Read-only views over the product collection: lookups, category and flag
filters, related products, listing sort modes and category summaries.
The only writes come from the admin edit path (``replace`` / ``append``).
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterable, Optional

from storefront.logging import get_logger
from .models import Product

logger = get_logger(__name__)

PLACEHOLDER_IMAGE = "/placeholder.svg"


class SortMode(str, Enum):
    """Listing sort modes accepted by ``sort_and_partition``."""
    FEATURED = "featured"
    PRICE_LOW_HIGH = "price-low-high"
    PRICE_HIGH_LOW = "price-high-low"
    NEWEST = "newest"
    BEST_SELLING = "best-selling"

    @classmethod
    def parse(cls, value: Optional[str]) -> "SortMode":
        """Unknown or empty modes fall back to FEATURED."""
        try:
            return cls(value)
        except ValueError:
            return cls.FEATURED


class ProductFlag(str, Enum):
    """Boolean product flags usable with ``filter_flag``."""
    FEATURED = "featured"
    BEST_SELLER = "best_seller"
    NEW = "new"


# Partition modes: flagged products move to the front, order otherwise kept
_PARTITION_FLAGS = {
    SortMode.FEATURED: ProductFlag.FEATURED,
    SortMode.NEWEST: ProductFlag.NEW,
    SortMode.BEST_SELLING: ProductFlag.BEST_SELLER,
}

# Admin table columns and their sort keys
_COLUMN_KEYS: dict[str, Callable[[Product], object]] = {
    "name": lambda p: p.name.lower(),
    "category": lambda p: p.category.lower(),
    "price": lambda p: p.price,
    "in_stock": lambda p: 1 if p.in_stock else 0,
    "rating": lambda p: p.rating,
}


def stable_partition(products: Iterable[Product], predicate: Callable[[Product], bool]) -> list[Product]:
    """Matching products first, then the rest; each group keeps its order."""
    matching, rest = [], []
    for product in products:
        (matching if predicate(product) else rest).append(product)
    return matching + rest


@dataclass(frozen=True)
class CategorySummary:
    """One tile on the collections page."""
    name: str
    count: int
    image: str

    def to_dict(self) -> dict:
        return {"name": self.name, "count": self.count, "image": self.image}


class CatalogService:
    """
    Catalog domain service.

    Holds its own list of products. Lookup misses return None or an empty
    list, never raise.
    """

    def __init__(self, products: Iterable[Product]):
        self._products: list[Product] = list(products)

    @property
    def products(self) -> list[Product]:
        """Copy of the collection in backing order."""
        return list(self._products)

    def __len__(self) -> int:
        return len(self._products)

    # ==================== LOOKUPS ====================

    def find_by_id(self, product_id: str) -> Optional[Product]:
        return next((p for p in self._products if p.id == product_id), None)

    def find_by_slug(self, slug: str) -> Optional[Product]:
        return next((p for p in self._products if p.slug == slug), None)

    # ==================== FILTERS ====================

    def filter_by_category(self, category: Optional[str]) -> list[Product]:
        """Products in ``category``; an empty category means the whole catalog."""
        if not category:
            return self.products
        return [p for p in self._products if p.category == category]

    def filter_flag(self, flag: ProductFlag | str) -> list[Product]:
        """Products with the given boolean flag set."""
        attr = ProductFlag(flag).value
        return [p for p in self._products if getattr(p, attr)]

    def featured(self) -> list[Product]:
        return self.filter_flag(ProductFlag.FEATURED)

    def best_sellers(self) -> list[Product]:
        return self.filter_flag(ProductFlag.BEST_SELLER)

    def new_arrivals(self) -> list[Product]:
        return self.filter_flag(ProductFlag.NEW)

    def related_to(self, product: Product, limit: int = 4) -> list[Product]:
        """
        Other products sharing the category or at least one tag.

        No ranking: the first ``limit`` matches in collection order win.
        """
        if limit <= 0:
            return []
        tags = set(product.tags)
        related = [
            p for p in self._products
            if p.id != product.id and (p.category == product.category or tags.intersection(p.tags))
        ]
        return related[:limit]

    def search(self, query: Optional[str]) -> list[Product]:
        """Case-insensitive substring match on name, category or any tag."""
        needle = (query or "").strip().lower()
        if not needle:
            return self.products
        return [
            p for p in self._products
            if needle in p.name.lower()
            or needle in p.category.lower()
            or any(needle in tag.lower() for tag in p.tags)
        ]

    # ==================== ORDERING ====================

    @staticmethod
    def sort_and_partition(products: Iterable[Product], mode: SortMode | str | None) -> list[Product]:
        """
        Order a product listing.

        Price modes are a stable sort by price. "newest", "best-selling" and
        the default "featured" are stable partitions on the matching flag,
        not rankings: there is no date or sales figure to rank by.
        """
        sort_mode = mode if isinstance(mode, SortMode) else SortMode.parse(mode)
        items = list(products)

        if sort_mode is SortMode.PRICE_LOW_HIGH:
            return sorted(items, key=lambda p: p.price)
        if sort_mode is SortMode.PRICE_HIGH_LOW:
            return sorted(items, key=lambda p: p.price, reverse=True)

        attr = _PARTITION_FLAGS[sort_mode].value
        return stable_partition(items, lambda p: getattr(p, attr))

    @staticmethod
    def sort_by_column(products: Iterable[Product], column: Optional[str], descending: bool = False) -> list[Product]:
        """Admin table ordering; unknown or empty columns keep the given order."""
        items = list(products)
        key = _COLUMN_KEYS.get(column or "")
        if key is None:
            return items
        return sorted(items, key=key, reverse=descending)

    def listing(self, category: Optional[str] = None, sort: Optional[str] = None) -> list[Product]:
        """Storefront product listing: category filter, then sort mode."""
        return self.sort_and_partition(self.filter_by_category(category), sort)

    # ==================== CATEGORIES ====================

    def distinct_categories(self) -> list[str]:
        """Unique category labels in first-seen order."""
        return list(dict.fromkeys(p.category for p in self._products))

    def category_summaries(self) -> list[CategorySummary]:
        """Count per category plus a cover image (first featured, else first product)."""
        summaries = []
        for category in self.distinct_categories():
            in_category = self.filter_by_category(category)
            featured = next((p for p in in_category if p.featured), None)
            image = (
                (featured.primary_image if featured else "")
                or in_category[0].primary_image
                or PLACEHOLDER_IMAGE
            )
            summaries.append(CategorySummary(name=category, count=len(in_category), image=image))
        return summaries

    # ==================== ADMIN WRITES ====================

    def append(self, product: Product) -> None:
        self._products.append(product)
        logger.info(f"Catalog: appended product {product.id} ({len(self._products)} total)")

    def replace(self, product: Product) -> bool:
        """Replace the record with the same id in place. Returns False if absent."""
        for index, existing in enumerate(self._products):
            if existing.id == product.id:
                self._products[index] = product
                logger.info(f"Catalog: replaced product {product.id}")
                return True
        return False
