"""
Checkout figures derived from the cart subtotal.

Everything here is a pure function of the subtotal. Callers recompute on each
read instead of storing results next to the cart.
"""
from dataclasses import dataclass
from decimal import Decimal

from .money import round_money, multiply, to_decimal, to_float, Numeric

FREE_SHIPPING_THRESHOLD = Decimal("100")
FLAT_SHIPPING_FEE = Decimal("10")
TAX_RATE = Decimal("0.08")


def shipping_estimate(subtotal: Numeric) -> Decimal:
    """Flat fee below the free-shipping threshold; nothing for an empty cart."""
    amount = to_decimal(subtotal)
    if amount == 0 or amount >= FREE_SHIPPING_THRESHOLD:
        return Decimal("0")
    return FLAT_SHIPPING_FEE


def tax_estimate(subtotal: Numeric) -> Decimal:
    """Sales tax at the fixed rate, rounded to cents."""
    return round_money(multiply(subtotal, TAX_RATE))


def order_total(subtotal: Numeric) -> Decimal:
    """Subtotal plus shipping plus tax."""
    amount = to_decimal(subtotal)
    return amount + shipping_estimate(amount) + tax_estimate(amount)


def free_shipping_remaining(subtotal: Numeric) -> Decimal:
    """How much more the shopper must add to qualify for free shipping."""
    amount = to_decimal(subtotal)
    if amount <= 0 or amount >= FREE_SHIPPING_THRESHOLD:
        return Decimal("0")
    return FREE_SHIPPING_THRESHOLD - amount


@dataclass(frozen=True)
class CheckoutSummary:
    """Snapshot of the checkout figures for one subtotal."""

    subtotal: Decimal
    shipping: Decimal
    tax: Decimal
    total: Decimal
    free_shipping_remaining: Decimal

    @property
    def free_shipping(self) -> bool:
        return self.subtotal > 0 and self.shipping == 0

    def to_dict(self) -> dict:
        return {
            "subtotal": to_float(self.subtotal),
            "shipping": to_float(self.shipping),
            "tax": to_float(self.tax),
            "total": to_float(self.total),
            "free_shipping": self.free_shipping,
            "free_shipping_remaining": to_float(self.free_shipping_remaining),
        }


def summarize(subtotal: Numeric) -> CheckoutSummary:
    """Compute every checkout figure for ``subtotal``."""
    amount = to_decimal(subtotal)
    return CheckoutSummary(
        subtotal=amount,
        shipping=shipping_estimate(amount),
        tax=tax_estimate(amount),
        total=order_total(amount),
        free_shipping_remaining=free_shipping_remaining(amount),
    )
