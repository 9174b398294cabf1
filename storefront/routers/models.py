"""
Storefront API Pydantic Models

Request bodies shared by the routers.
"""
from typing import Optional
from pydantic import BaseModel


# ==================== CART MODELS ====================

class AddToCartRequest(BaseModel):
    product_id: str
    variant_id: Optional[str] = None  # None = first in-stock variant
    quantity: int = 1


class UpdateCartItemRequest(BaseModel):
    product_id: str
    variant_id: str
    quantity: int = 1  # 0 removes the line


# ==================== AUTH MODELS ====================

class LoginRequest(BaseModel):
    email: str
    password: str


class RegisterRequest(BaseModel):
    email: str
    password: str
    name: str
