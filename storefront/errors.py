"""
Common Error Constants

Centralized error messages shared by the core and the HTTP layer.
"""

# Session / identity errors
ERROR_ADMIN_REQUIRED = "Admin access required"
ERROR_SESSION_REQUIRED = "No session header"
ERROR_INVALID_CREDENTIALS = "Invalid email or password."
ERROR_EMAIL_TAKEN = "An account with this email already exists."
ERROR_NOT_ADMIN = "This account does not have admin access."

# Product errors
ERROR_PRODUCT_NOT_FOUND = "Product not found"
ERROR_VARIANT_NOT_FOUND = "Variant not found"
ERROR_PRODUCT_OUT_OF_STOCK = "Product out of stock"

# Cart errors
ERROR_INVALID_QUANTITY = "quantity must be a positive integer"

# Admin form errors
ERROR_NAME_REQUIRED = "Product name is required."
ERROR_PRICE_NOT_POSITIVE = "Price must be greater than zero."
ERROR_DUPLICATE_VARIANT = "Each variant needs a unique id."
ERROR_SLUG_TAKEN = "Another product already uses this URL slug."


class ValidationError(ValueError):
    """Invalid input rejected before any state change.

    The message is safe to show to the shopper or admin as-is.
    """

    def __init__(self, message: str, field: str | None = None):
        super().__init__(message)
        self.message = message
        self.field = field
