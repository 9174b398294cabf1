"""Shared storefront services: money math, checkout figures, notifications."""
from .checkout import CheckoutSummary, summarize
from .notifications import Notification, NotificationOutbox

__all__ = [
    "CheckoutSummary",
    "summarize",
    "Notification",
    "NotificationOutbox",
]
