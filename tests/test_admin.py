"""Tests for the admin product editor"""
from decimal import Decimal

import pytest

from storefront.catalog import ProductDraft, ProductEditor, validate_draft
from storefront.catalog.admin import build_product
from storefront.errors import (
    ERROR_DUPLICATE_VARIANT,
    ERROR_NAME_REQUIRED,
    ERROR_PRICE_NOT_POSITIVE,
    ERROR_SLUG_TAKEN,
    ValidationError,
)


@pytest.fixture
def editor(catalog):
    return ProductEditor(catalog, clock=lambda: 1700000000.5)


def _draft(**overrides) -> ProductDraft:
    data = {
        "name": "Linen Throw Pillow",
        "price": "39.50",
        "category": "Home",
        "tags": ["Linen", "Decor", "linen ", "", "Decor"],
        "images": ["/img/pillow.jpg"],
    }
    data.update(overrides)
    return ProductDraft(**data)


class TestValidateDraft:

    def test_valid(self):
        validate_draft(_draft())

    @pytest.mark.parametrize("name", ["", "   "])
    def test_blank_name(self, name):
        with pytest.raises(ValidationError) as exc:
            validate_draft(_draft(name=name))
        assert exc.value.message == ERROR_NAME_REQUIRED
        assert exc.value.field == "name"

    @pytest.mark.parametrize("price", ["0", "-5", None])
    def test_price_must_be_positive(self, price):
        with pytest.raises(ValidationError) as exc:
            validate_draft(_draft(price=price))
        assert exc.value.message == ERROR_PRICE_NOT_POSITIVE

    def test_name_checked_before_price(self):
        with pytest.raises(ValidationError) as exc:
            validate_draft(_draft(name="", price="0"))
        assert exc.value.field == "name"


class TestBuildProduct:

    def test_fills_slug_and_variant_ids(self):
        draft = _draft(variants=[{"name": "Oat"}, {"name": "Sage", "price": "42.00"}])
        product = build_product(draft, "product-9")

        assert product.slug == "linen-throw-pillow"
        assert [v.id for v in product.variants] == ["product-9-1", "product-9-2"]
        assert product.variants[0].price == Decimal("39.50")
        assert product.variants[1].price == Decimal("42.00")

    def test_tags_cleaned(self):
        product = build_product(_draft(), "x")
        assert product.tags == ["Linen", "Decor", "linen"]

    def test_explicit_slug_kept(self):
        assert build_product(_draft(slug="pillow"), "x").slug == "pillow"

    @pytest.mark.parametrize("variants", [
        [{"id": "v", "name": "A"}, {"id": "v", "name": "B"}],
        # generated id of the second line collides with an explicit one
        [{"id": "x-2", "name": "A"}, {"name": "B"}],
    ])
    def test_duplicate_variant_ids_rejected(self, variants):
        with pytest.raises(ValidationError) as exc:
            build_product(_draft(variants=variants), "x")
        assert exc.value.message == ERROR_DUPLICATE_VARIANT
        assert exc.value.field == "variants"


class TestProductEditor:

    def test_create_appends_with_generated_id(self, editor, catalog):
        product = editor.create(_draft())

        assert product.id == "product-1700000000500"
        assert len(catalog) == 9
        assert catalog.products[-1] is product
        assert catalog.find_by_slug("linen-throw-pillow") is product

    def test_create_invalid_leaves_catalog_alone(self, editor, catalog):
        with pytest.raises(ValidationError):
            editor.create(_draft(price="0"))
        assert len(catalog) == 8

    def test_create_duplicate_id(self, editor):
        with pytest.raises(ValidationError) as exc:
            editor.create(_draft(id="1"))
        assert exc.value.field == "id"

    def test_update_replaces_in_place(self, editor, catalog):
        updated = editor.update("3", _draft(name="Studio Headphones", price="199.00", category="Electronics"))

        assert updated.id == "3"
        assert catalog.products[2] is updated
        assert catalog.find_by_id("3").price == Decimal("199.00")
        assert len(catalog) == 8

    def test_create_duplicate_variants_leaves_catalog_alone(self, editor, catalog):
        with pytest.raises(ValidationError):
            editor.create(_draft(variants=[{"id": "v"}, {"id": "v"}]))
        assert len(catalog) == 8

    def test_create_with_taken_slug(self, editor, catalog):
        with pytest.raises(ValidationError) as exc:
            editor.create(_draft(name="Classic White Sneakers"))
        assert exc.value.message == ERROR_SLUG_TAKEN
        assert exc.value.field == "slug"
        assert len(catalog) == 8
        assert len({p.slug for p in catalog.products}) == 8

    def test_create_same_name_with_own_slug(self, editor, catalog):
        product = editor.create(_draft(name="Classic White Sneakers", slug="classic-white-sneakers-2"))
        assert catalog.find_by_slug("classic-white-sneakers-2") is product

    def test_update_keeps_own_slug(self, editor, catalog):
        updated = editor.update("1", _draft(name="Classic White Sneakers", price="79.99"))
        assert catalog.find_by_slug("classic-white-sneakers") is updated

    def test_update_to_another_products_slug(self, editor, catalog):
        with pytest.raises(ValidationError) as exc:
            editor.update("1", _draft(slug="everyday-tote-bag"))
        assert exc.value.message == ERROR_SLUG_TAKEN
        assert catalog.find_by_id("1").name == "Classic White Sneakers"

    def test_update_unknown_id(self, editor, catalog):
        assert editor.update("missing", _draft()) is None
        assert len(catalog) == 8

    def test_update_invalid(self, editor, catalog):
        with pytest.raises(ValidationError):
            editor.update("3", _draft(name=""))
        assert catalog.find_by_id("3").name == "Premium Wireless Headphones"
