"""Cart models with Decimal-based pricing."""
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Optional

from storefront.services.money import to_decimal, to_float, multiply


def _parse_price(value) -> Decimal:
    """Strict price parsing for stored lines: a finite, non-negative number."""
    if isinstance(value, bool) or not isinstance(value, (int, float, str, Decimal)):
        raise TypeError(f"stored price must be a number, got {type(value).__name__}")
    try:
        price = Decimal(str(value))
    except InvalidOperation as e:
        raise ValueError(f"stored price is not a number: {value!r}") from e
    if not price.is_finite() or price < 0:
        raise ValueError(f"stored price must be finite and >= 0, got {value!r}")
    return price


def _parse_quantity(value) -> int:
    """Whole number >= 1; 2.0 is accepted, 2.9 and True are not."""
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"stored quantity must be a whole number, got {value!r}")
    if value < 1:
        raise ValueError(f"stored quantity must be >= 1, got {value}")
    return value


@dataclass
class CartItem:
    """One cart line: a (product, variant) pair with a snapshot taken at add-time."""
    product_id: str
    variant_id: str
    name: str
    price: Decimal
    image: str = ""
    quantity: int = 1

    def __post_init__(self):
        self.price = to_decimal(self.price)

    @property
    def key(self) -> tuple[str, str]:
        return self.product_id, self.variant_id

    @property
    def line_total(self) -> Decimal:
        return multiply(self.price, self.quantity)

    def matches(self, product_id: str, variant_id: str) -> bool:
        return self.product_id == product_id and self.variant_id == variant_id

    def to_dict(self) -> dict:
        """Persisted form (camelCase keys, numeric price)."""
        return {
            "productId": self.product_id,
            "variantId": self.variant_id,
            "name": self.name,
            "price": to_float(self.price),
            "image": self.image,
            "quantity": self.quantity,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "CartItem":
        """Inverse of ``to_dict``. Raises KeyError/TypeError/ValueError on bad input."""
        quantity = _parse_quantity(data["quantity"])
        return cls(
            product_id=str(data["productId"]),
            variant_id=str(data["variantId"]),
            name=str(data["name"]),
            price=_parse_price(data["price"]),
            image=str(data.get("image") or ""),
            quantity=quantity,
        )


def line_item_for(product, variant_id: str, quantity: int = 1) -> Optional[CartItem]:
    """
    Snapshot a product/variant into a cart line.

    Returns None if the variant does not belong to the product.
    """
    price = product.price_for(variant_id)
    if price is None:
        return None
    return CartItem(
        product_id=product.id,
        variant_id=variant_id,
        name=product.name,
        price=price,
        image=product.primary_image,
        quantity=quantity,
    )
