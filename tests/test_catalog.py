"""Tests for the catalog service, models and slugs"""
from decimal import Decimal

import pytest
from pydantic import ValidationError as PydanticValidationError

from storefront.catalog import (
    CatalogService,
    DEFAULT_VARIANT_ID,
    ProductFlag,
    SortMode,
    create_slug,
)
from storefront.catalog.service import PLACEHOLDER_IMAGE, stable_partition


def _ids(products):
    return [p.id for p in products]


class TestSlugs:

    @pytest.mark.parametrize("name,slug", [
        ("Classic White Sneakers", "classic-white-sneakers"),
        ("Organic Cotton T-Shirt", "organic-cotton-t-shirt"),
        ("  Café & Co.  ", "caf-co"),
        ("--", ""),
    ])
    def test_create_slug(self, name, slug):
        assert create_slug(name) == slug


class TestProductModel:

    def test_seed_slugs_derived_from_names(self, seed_products):
        assert seed_products[3].slug == "organic-cotton-t-shirt"
        assert len({p.slug for p in seed_products}) == len(seed_products)

    def test_prices_are_decimal(self, seed_products):
        assert seed_products[0].price == Decimal("89.99")
        assert seed_products[0].variants[0].price == Decimal("89.99")

    def test_duplicate_variant_ids_rejected(self, make_product):
        with pytest.raises(PydanticValidationError):
            make_product("p", variants=[
                {"id": "v", "name": "A", "price": 1},
                {"id": "v", "name": "B", "price": 2},
            ])

    def test_camel_case_input_accepted(self, make_product):
        product = make_product("p", bestSeller=True, reviewCount=7)
        assert product.best_seller is True
        assert product.review_count == 7

    def test_to_api_camel_case_and_floats(self, seed_products):
        data = seed_products[0].to_api()
        assert data["price"] == 89.99
        assert data["compareAtPrice"] == 109.99
        assert data["bestSeller"] is True
        assert data["variants"][0]["inStock"] is True

    def test_first_available_variant_skips_out_of_stock(self, make_product):
        product = make_product("p", variants=[
            {"id": "p-1", "name": "A", "price": 1, "in_stock": False},
            {"id": "p-2", "name": "B", "price": 1},
        ])
        assert product.first_available_variant().id == "p-2"

    def test_price_for(self, make_product):
        product = make_product("p")
        assert product.price_for("p-2") == Decimal("12.00")
        assert product.price_for("missing") is None
        bare = make_product("q", variants=[])
        assert bare.price_for(DEFAULT_VARIANT_ID) == Decimal("10.00")

    def test_products_are_immutable(self, seed_products):
        with pytest.raises(PydanticValidationError):
            seed_products[0].name = "Changed"


class TestLookups:

    def test_find_by_id(self, catalog):
        assert catalog.find_by_id("3").name == "Premium Wireless Headphones"
        assert catalog.find_by_id("missing") is None

    def test_find_by_slug(self, catalog):
        assert catalog.find_by_slug("smart-fitness-watch").id == "5"
        assert catalog.find_by_slug("nope") is None

    def test_empty_catalog(self):
        catalog = CatalogService([])
        assert catalog.find_by_id("1") is None
        assert catalog.distinct_categories() == []
        assert catalog.category_summaries() == []


class TestFilters:

    def test_filter_by_category(self, catalog):
        assert _ids(catalog.filter_by_category("Electronics")) == ["3", "5"]
        assert catalog.filter_by_category("Toys") == []

    def test_empty_category_returns_all(self, catalog):
        assert len(catalog.filter_by_category("")) == 8
        assert len(catalog.filter_by_category(None)) == 8

    def test_category_filter_is_exact(self, catalog):
        assert catalog.filter_by_category("electronics") == []

    def test_flags(self, catalog):
        assert _ids(catalog.featured()) == ["1", "3", "5", "8"]
        assert _ids(catalog.best_sellers()) == ["1", "2", "3", "6"]
        assert _ids(catalog.new_arrivals()) == ["4", "5", "7", "8"]
        assert _ids(catalog.filter_flag("best_seller")) == ["1", "2", "3", "6"]

    def test_unknown_flag(self, catalog):
        with pytest.raises(ValueError):
            catalog.filter_flag("on_sale")

    def test_search(self, catalog):
        assert _ids(catalog.search("sustainable")) == ["4", "6"]
        assert _ids(catalog.search("HEADPHONES")) == ["3"]
        assert len(catalog.search("  ")) == 8


class TestRelated:

    def test_related_by_category_or_tag(self, catalog):
        assert _ids(catalog.related_to(catalog.find_by_id("2"))) == ["1", "7"]
        assert _ids(catalog.related_to(catalog.find_by_id("3"))) == ["5"]

    def test_related_excludes_self_and_respects_limit(self, make_product):
        products = [make_product(str(i)) for i in range(6)]
        catalog = CatalogService(products)
        related = catalog.related_to(products[0], limit=3)
        assert _ids(related) == ["1", "2", "3"]
        assert catalog.related_to(products[0], limit=0) == []

    def test_no_match(self, make_product):
        lonely = make_product("a", category="A", tags=["x"])
        other = make_product("b", category="B", tags=["y"])
        assert CatalogService([lonely, other]).related_to(lonely) == []


class TestSorting:

    def test_newest_is_stable_partition(self, make_product):
        p1 = make_product("1", new=True)
        p2 = make_product("2", new=False)
        p3 = make_product("3", new=True)
        ordered = CatalogService.sort_and_partition([p1, p2, p3], "newest")
        assert _ids(ordered) == ["1", "3", "2"]

    def test_featured_is_default(self, catalog):
        expected = ["1", "3", "5", "8", "2", "4", "6", "7"]
        assert _ids(catalog.sort_and_partition(catalog.products, "featured")) == expected
        assert _ids(catalog.sort_and_partition(catalog.products, None)) == expected
        assert _ids(catalog.sort_and_partition(catalog.products, "bogus")) == expected

    def test_best_selling(self, catalog):
        ordered = catalog.sort_and_partition(catalog.products, SortMode.BEST_SELLING)
        assert _ids(ordered) == ["1", "2", "3", "6", "4", "5", "7", "8"]

    def test_price_low_high(self, catalog):
        ordered = catalog.sort_and_partition(catalog.products, "price-low-high")
        assert _ids(ordered) == ["4", "6", "2", "7", "8", "1", "5", "3"]

    def test_price_high_low(self, catalog):
        ordered = catalog.sort_and_partition(catalog.products, "price-high-low")
        assert _ids(ordered) == ["3", "5", "1", "8", "7", "2", "6", "4"]

    def test_price_ties_keep_order(self, make_product):
        a, b = make_product("a"), make_product("b")
        assert _ids(CatalogService.sort_and_partition([a, b], "price-high-low")) == ["a", "b"]

    def test_listing_filters_then_sorts(self, catalog):
        assert _ids(catalog.listing("Electronics", "price-low-high")) == ["5", "3"]

    def test_sort_does_not_mutate_catalog(self, catalog):
        before = _ids(catalog.products)
        catalog.sort_and_partition(catalog.products, "price-high-low")
        assert _ids(catalog.products) == before

    def test_stable_partition(self):
        assert stable_partition([1, 2, 3, 4, 5], lambda n: n % 2 == 0) == [2, 4, 1, 3, 5]

    def test_sort_by_column(self, catalog):
        assert _ids(catalog.sort_by_column(catalog.products, "price", descending=True))[0] == "3"
        assert _ids(catalog.sort_by_column(catalog.products, "name"))[0] == "8"
        assert _ids(catalog.sort_by_column(catalog.products, "unknown")) == _ids(catalog.products)

    def test_sort_mode_parse(self):
        assert SortMode.parse("newest") is SortMode.NEWEST
        assert SortMode.parse("") is SortMode.FEATURED
        assert ProductFlag("new") is ProductFlag.NEW


class TestCategories:

    def test_distinct_categories_first_seen_order(self, catalog):
        assert catalog.distinct_categories() == [
            "Footwear", "Accessories", "Electronics", "Clothing", "Lifestyle", "Home",
        ]

    def test_category_summaries(self, catalog):
        summaries = {s.name: s for s in catalog.category_summaries()}
        assert summaries["Electronics"].count == 2
        assert summaries["Electronics"].image == catalog.find_by_id("3").primary_image
        # No featured accessory: falls back to the first one
        assert summaries["Accessories"].image == catalog.find_by_id("2").primary_image

    def test_summary_placeholder_image(self, make_product):
        catalog = CatalogService([make_product("p", images=[])])
        assert catalog.category_summaries()[0].image == PLACEHOLDER_IMAGE
