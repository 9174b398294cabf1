"""
Storefront sessions.

A StorefrontSession is created explicitly when a shopper arrives (``open``),
handed to whatever needs it, and dropped explicitly (``close``). It owns the
shopper's cart, pending notifications and, once signed in, their identity.
The persisted cart outlives the session; reopening the same id hydrates it.
"""
import secrets
from collections import OrderedDict
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Optional

from storefront.auth.identity import Admin, Customer, IdentityView
from storefront.cart import CartManager, CartStorage
from storefront.logging import get_logger, sanitize_id_for_logging
from storefront.services.notifications import Notification, NotificationOutbox

logger = get_logger(__name__)

DEFAULT_SESSION_TTL = timedelta(days=7)
DEFAULT_MAX_SESSIONS = 10_000


@dataclass
class StorefrontSession:
    """One shopper's session: cart, notifications and optional identity."""
    session_id: str
    cart: CartManager
    outbox: NotificationOutbox
    identity: Optional[Customer | Admin] = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    expires_at: Optional[datetime] = None

    @property
    def view(self) -> IdentityView:
        return IdentityView.of(self.identity)

    def is_expired(self, now: Optional[datetime] = None) -> bool:
        if self.expires_at is None:
            return False
        return (now or datetime.now(timezone.utc)) > self.expires_at

    def sign_in(self, identity: Customer | Admin, message: str = "") -> None:
        self.identity = identity
        if message:
            self.outbox.push(Notification(title="Login successful", description=message))

    def sign_out(self) -> None:
        self.identity = None
        self.outbox.push(
            Notification(title="Logged out", description="You have been successfully logged out.")
        )


class SessionRegistry:
    """
    In-memory index of open sessions, keyed by session id.

    Expired sessions are swept whenever a new one is opened. Past
    ``max_sessions`` the least recently used session is dropped; its cart
    stays in storage and comes back if the id is reopened.
    """

    def __init__(
        self,
        storage: CartStorage,
        ttl: Optional[timedelta] = DEFAULT_SESSION_TTL,
        max_sessions: int = DEFAULT_MAX_SESSIONS,
    ):
        if max_sessions < 1:
            raise ValueError("max_sessions must be >= 1")
        self.storage = storage
        self.ttl = ttl
        self.max_sessions = max_sessions
        self._sessions: OrderedDict[str, StorefrontSession] = OrderedDict()

    def __len__(self) -> int:
        return len(self._sessions)

    def __contains__(self, session_id: str) -> bool:
        return self.get(session_id) is not None

    async def open(self, session_id: Optional[str] = None) -> StorefrontSession:
        """
        Start a session and hydrate its cart.

        Without an id a fresh random one is issued. Opening an id that is
        already open returns the existing session.
        """
        if session_id:
            existing = self.get(session_id)
            if existing is not None:
                return existing
        else:
            session_id = secrets.token_urlsafe(32)

        outbox = NotificationOutbox()
        now = datetime.now(timezone.utc)
        session = StorefrontSession(
            session_id=session_id,
            cart=CartManager(session_id, self.storage, notify=outbox),
            outbox=outbox,
            created_at=now,
            expires_at=now + self.ttl if self.ttl else None,
        )
        await session.cart.load()

        # A concurrent open of the same id may have finished first
        if session_id in self._sessions:
            return self._sessions[session_id]

        self.purge_expired(now)
        while len(self._sessions) >= self.max_sessions:
            evicted_id, _ = self._sessions.popitem(last=False)
            logger.info(f"Session evicted: {sanitize_id_for_logging(evicted_id)}")
        self._sessions[session_id] = session
        logger.info(f"Session opened: {sanitize_id_for_logging(session_id)}")
        return session

    def get(self, session_id: str) -> Optional[StorefrontSession]:
        """Open, unexpired session or None. Expired sessions are dropped."""
        session = self._sessions.get(session_id)
        if session is None:
            return None
        if session.is_expired():
            self.close(session_id)
            return None
        self._sessions.move_to_end(session_id)
        return session

    def purge_expired(self, now: Optional[datetime] = None) -> int:
        """Drop every expired session. Returns how many were dropped."""
        now = now or datetime.now(timezone.utc)
        expired = [sid for sid, s in self._sessions.items() if s.is_expired(now)]
        for session_id in expired:
            self.close(session_id)
        return len(expired)

    def close(self, session_id: str) -> bool:
        """Forget the session. Its persisted cart is left in storage."""
        session = self._sessions.pop(session_id, None)
        if session is None:
            return False
        logger.info(f"Session closed: {sanitize_id_for_logging(session_id)}")
        return True
