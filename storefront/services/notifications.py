"""User-facing notifications raised by cart and auth events.

The core only records that an event happened; rendering (toasts, banners) is
up to the presentation layer, which drains the outbox after each request.
"""
from dataclasses import dataclass, asdict
from typing import List

DEFAULT_DURATION_MS = 2000


@dataclass(frozen=True)
class Notification:
    """A single message for the shopper."""
    title: str
    description: str
    variant: str = "default"  # default | destructive
    duration_ms: int = DEFAULT_DURATION_MS

    def to_dict(self) -> dict:
        return asdict(self)


class NotificationOutbox:
    """Per-session FIFO of pending notifications."""

    def __init__(self):
        self._pending: List[Notification] = []

    def __call__(self, notification: Notification) -> None:
        self.push(notification)

    def __len__(self) -> int:
        return len(self._pending)

    def push(self, notification: Notification) -> None:
        self._pending.append(notification)

    def drain(self) -> List[Notification]:
        """Return pending notifications in order and empty the outbox."""
        pending, self._pending = self._pending, []
        return pending
