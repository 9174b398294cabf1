"""Cart manager: the authoritative cart state of one storefront session."""
import asyncio
import json
from dataclasses import replace
from decimal import Decimal
from typing import Callable, Optional

from storefront.errors import ValidationError, ERROR_INVALID_QUANTITY
from storefront.logging import get_logger, sanitize_id_for_logging
from storefront.services.checkout import CheckoutSummary, summarize
from storefront.services.notifications import Notification
from .models import CartItem
from .storage import CartStorage

logger = get_logger(__name__)


class CartStorageError(RuntimeError):
    """The cart store could not be read or written."""


def _valid_quantity(quantity) -> bool:
    return isinstance(quantity, int) and not isinstance(quantity, bool) and quantity >= 1


def _reject_constant(name: str):
    raise ValueError(f"non-finite number {name} in stored cart")


def encode_items(items: list[CartItem]) -> str:
    return json.dumps([item.to_dict() for item in items])


def decode_items(blob: str) -> list[CartItem]:
    """
    Parse a persisted cart.

    Lines sharing a (product, variant) key are merged so the one-line-per-key
    rule holds even for hand-edited data.

    Raises:
        ValueError, KeyError, TypeError: on anything that is not a valid cart
    """
    data = json.loads(blob, parse_constant=_reject_constant)
    if not isinstance(data, list):
        raise TypeError(f"expected a JSON array, got {type(data).__name__}")

    items: list[CartItem] = []
    for raw in data:
        if not isinstance(raw, dict):
            raise TypeError(f"expected a JSON object per line, got {type(raw).__name__}")
        item = CartItem.from_dict(raw)
        existing = next((i for i in items if i.key == item.key), None)
        if existing:
            existing.quantity += item.quantity
        else:
            items.append(item)
    return items


class CartManager:
    """
    Owns the line items of one cart.

    - One line per (product_id, variant_id); repeated adds increase quantity
    - Every mutation is written to storage before it becomes visible
    - Mutations run one at a time, in the order they were issued
    - Totals are recomputed on every read
    """

    def __init__(
        self,
        session_id: str,
        storage: CartStorage,
        notify: Optional[Callable[[Notification], None]] = None,
    ):
        self.session_id = session_id
        self._storage = storage
        self._notify = notify
        self._items: list[CartItem] = []
        self._lock = asyncio.Lock()
        self._loaded = False

    # ==================== STATE ====================

    @property
    def items(self) -> list[CartItem]:
        """Copies of the current lines in insertion order."""
        return [replace(item) for item in self._items]

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    def __len__(self) -> int:
        return len(self._items)

    def get_item(self, product_id: str, variant_id: str) -> Optional[CartItem]:
        item = self._find(self._items, product_id, variant_id)
        return replace(item) if item else None

    def subtotal(self) -> Decimal:
        """Sum of price x quantity over all lines."""
        return sum((item.line_total for item in self._items), Decimal("0"))

    def item_count(self) -> int:
        """Sum of quantities (not the number of lines)."""
        return sum(item.quantity for item in self._items)

    def checkout_summary(self) -> CheckoutSummary:
        return summarize(self.subtotal())

    def to_dict(self) -> dict:
        return {
            "items": [item.to_dict() for item in self._items],
            "item_count": self.item_count(),
            "line_count": len(self._items),
            **self.checkout_summary().to_dict(),
        }

    # ==================== PERSISTENCE ====================

    async def load(self) -> list[CartItem]:
        """
        Hydrate from storage once per session.

        A corrupt blob is logged, removed from storage, and the cart starts empty.
        """
        async with self._lock:
            if self._loaded:
                return self.items

            try:
                blob = await self._storage.load(self.session_id)
            except Exception as e:
                logger.error(f"Failed to read cart {sanitize_id_for_logging(self.session_id)}: {e}")
                raise CartStorageError(f"Cart service unavailable: {e}") from e

            if blob:
                try:
                    self._items = decode_items(blob)
                except (json.JSONDecodeError, KeyError, TypeError, ValueError) as e:
                    logger.warning(
                        f"Corrupted cart data for session {sanitize_id_for_logging(self.session_id)}: {e}"
                    )
                    self._items = []
                    try:
                        await self._storage.delete(self.session_id)
                    except Exception as cleanup_error:
                        # Next save overwrites the key anyway
                        logger.warning(f"Failed to drop corrupted cart: {cleanup_error}")

            self._loaded = True
            logger.debug(f"Cart {sanitize_id_for_logging(self.session_id)} hydrated with {len(self._items)} lines")
            return self.items

    async def _commit(self, new_items: list[CartItem]) -> None:
        """Write ``new_items`` to storage, then make them the current state."""
        try:
            await self._storage.save(self.session_id, encode_items(new_items))
        except Exception as e:
            logger.error(f"Failed to save cart {sanitize_id_for_logging(self.session_id)}: {e}")
            raise CartStorageError(f"Cart service unavailable: {e}") from e
        self._items = new_items

    def _emit(self, title: str, description: str) -> None:
        if self._notify is not None:
            self._notify(Notification(title=title, description=description))

    @staticmethod
    def _find(items: list[CartItem], product_id: str, variant_id: str) -> Optional[CartItem]:
        return next((i for i in items if i.matches(product_id, variant_id)), None)

    # ==================== MUTATIONS ====================

    async def add_item(self, item: CartItem) -> CartItem:
        """
        Add ``item.quantity`` units of a line.

        An existing line with the same key keeps its snapshot and gains the
        quantity; otherwise the item is appended.

        Raises:
            ValidationError: quantity is not a positive integer
        """
        if not _valid_quantity(item.quantity):
            raise ValidationError(ERROR_INVALID_QUANTITY, field="quantity")

        async with self._lock:
            new_items = [replace(i) for i in self._items]
            existing = self._find(new_items, item.product_id, item.variant_id)

            if existing:
                existing.quantity += item.quantity
                await self._commit(new_items)
                self._emit(
                    "Item updated in cart",
                    f"{existing.name} quantity updated to {existing.quantity}.",
                )
                return replace(existing)

            added = replace(item)
            new_items.append(added)
            await self._commit(new_items)
            noun = "items" if item.quantity > 1 else "item"
            self._emit(
                "Item added to cart",
                f"{item.quantity} {noun} of {item.name} added to your cart.",
            )
            return replace(added)

    async def remove_item(self, product_id: str, variant_id: str) -> bool:
        """Remove a line. Returns False (and touches nothing) if it is not there."""
        async with self._lock:
            return await self._remove_locked(product_id, variant_id)

    async def _remove_locked(self, product_id: str, variant_id: str) -> bool:
        target = self._find(self._items, product_id, variant_id)
        if target is None:
            return False

        await self._commit([replace(i) for i in self._items if i is not target])
        self._emit("Item removed from cart", f"{target.name} has been removed from your cart.")
        return True

    async def set_quantity(self, product_id: str, variant_id: str, quantity: int) -> Optional[CartItem]:
        """
        Set a line's quantity in place.

        Below 1 the line is removed (same as ``remove_item``); a missing line
        is a no-op. Returns the updated line, or None if there is none.
        """
        if isinstance(quantity, bool) or not isinstance(quantity, int):
            raise ValidationError(ERROR_INVALID_QUANTITY, field="quantity")

        async with self._lock:
            if quantity < 1:
                await self._remove_locked(product_id, variant_id)
                return None

            new_items = [replace(i) for i in self._items]
            target = self._find(new_items, product_id, variant_id)
            if target is None:
                return None
            if target.quantity == quantity:
                return replace(target)

            target.quantity = quantity
            await self._commit(new_items)
            return replace(target)

    async def clear(self) -> None:
        """Empty the cart."""
        async with self._lock:
            await self._commit([])
            self._emit("Cart cleared", "All items have been removed from your cart.")
