"""Cart package: models, storage backends, and the cart manager."""
from .models import CartItem, line_item_for
from .service import CartManager, CartStorageError
from .storage import CartStorage, MemoryCartStorage, RedisCartStorage

__all__ = [
    "CartItem",
    "line_item_for",
    "CartManager",
    "CartStorageError",
    "CartStorage",
    "MemoryCartStorage",
    "RedisCartStorage",
]
