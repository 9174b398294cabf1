"""
Identity providers.

The storefront never checks passwords itself. It asks a provider and keeps
the identity it gets back:
- MockIdentityProvider: in-memory demo accounts with simulated latency
- SupabaseIdentityProvider: Supabase Auth plus the ``profiles`` table for roles
"""
import asyncio
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from supabase._async.client import AsyncClient

from storefront.errors import ERROR_EMAIL_TAKEN, ERROR_INVALID_CREDENTIALS, ERROR_NOT_ADMIN
from storefront.logging import get_logger, sanitize_string_for_logging
from .identity import Admin, Customer, Role, identity_from_dict

logger = get_logger(__name__)

ERROR_REGISTRATION_FAILED = "Registration failed. Please try again."


@dataclass(frozen=True)
class AuthResult:
    """Outcome of a login/register call. ``message`` is shown to the user."""
    success: bool
    identity: Optional[Customer | Admin] = None
    message: str = ""

    @classmethod
    def ok(cls, identity: Customer | Admin, message: str) -> "AuthResult":
        return cls(success=True, identity=identity, message=message)

    @classmethod
    def fail(cls, message: str) -> "AuthResult":
        return cls(success=False, message=message)


def _display_name(identity: Customer | Admin) -> str:
    return identity.name or identity.email


class IdentityProvider(ABC):
    """Async authentication boundary."""

    @abstractmethod
    async def login(self, email: str, password: str) -> AuthResult:
        ...

    @abstractmethod
    async def register(self, email: str, password: str, name: str) -> AuthResult:
        ...

    async def admin_login(self, email: str, password: str) -> AuthResult:
        """Log in, but only accept accounts with the admin role."""
        result = await self.login(email, password)
        if not result.success:
            return result
        if result.identity.role != Role.ADMIN.value:
            logger.warning(f"Non-admin admin login attempt: {sanitize_string_for_logging(email)}")
            return AuthResult.fail(ERROR_NOT_ADMIN)
        return result

    async def logout(self) -> None:
        return None


# ==================== MOCK ====================

MOCK_USERS = [
    {
        "id": "user-1",
        "email": "demo@example.com",
        "password": "password123",
        "name": "Demo User",
        "role": "customer",
    },
    {
        "id": "admin-1",
        "email": "admin@example.com",
        "password": "admin123",
        "name": "Admin User",
        "role": "admin",
    },
]


class MockIdentityProvider(IdentityProvider):
    """
    Demo accounts held in memory.

    Every call sleeps ``delay_seconds`` first to stand in for a network round
    trip. Calls always complete; there is no cancellation.
    """

    def __init__(self, users: Optional[list[dict]] = None, delay_seconds: float = 1.0):
        source = MOCK_USERS if users is None else users
        self._users: dict[str, dict] = {u["email"].lower(): dict(u) for u in source}
        self.delay_seconds = delay_seconds

    async def _simulate_latency(self) -> None:
        if self.delay_seconds > 0:
            await asyncio.sleep(self.delay_seconds)

    async def login(self, email: str, password: str) -> AuthResult:
        await self._simulate_latency()

        record = self._users.get((email or "").strip().lower())
        if record is None or record["password"] != password:
            logger.info(f"Mock login failed for {sanitize_string_for_logging(email)}")
            return AuthResult.fail(ERROR_INVALID_CREDENTIALS)

        profile = {k: v for k, v in record.items() if k != "password"}
        identity = identity_from_dict(profile)
        return AuthResult.ok(identity, f"Welcome back, {_display_name(identity)}!")

    async def register(self, email: str, password: str, name: str) -> AuthResult:
        await self._simulate_latency()

        key = (email or "").strip().lower()
        if key in self._users:
            return AuthResult.fail(ERROR_EMAIL_TAKEN)

        record = {
            "id": f"user-{int(time.time() * 1000)}",
            "email": email.strip(),
            "password": password,
            "name": name,
            "role": Role.CUSTOMER.value,
        }
        self._users[key] = record
        identity = Customer(id=record["id"], email=record["email"], name=name)
        logger.info(f"Mock user registered: {identity.id}")
        return AuthResult.ok(identity, f"Welcome, {_display_name(identity)}!")


# ==================== SUPABASE ====================

class SupabaseIdentityProvider(IdentityProvider):
    """Supabase Auth for credentials, ``profiles`` table for name and role."""

    PROFILES_TABLE = "profiles"

    def __init__(self, client: AsyncClient):
        self.client = client

    async def _load_identity(self, user) -> Customer | Admin:
        """Merge the auth user with its profile row; default to customer."""
        profile: dict = {}
        try:
            result = (
                await self.client.table(self.PROFILES_TABLE)
                .select("id, name, role")
                .eq("id", user.id)
                .execute()
            )
            profile = result.data[0] if result.data else {}
        except Exception as e:
            logger.warning(f"Failed to load profile for {user.id}: {e}")

        metadata = getattr(user, "user_metadata", None) or {}
        return identity_from_dict({
            "id": user.id,
            "email": getattr(user, "email", None) or "",
            "name": profile.get("name") or metadata.get("name") or "",
            "role": profile.get("role"),
        })

    async def login(self, email: str, password: str) -> AuthResult:
        try:
            response = await self.client.auth.sign_in_with_password(
                {"email": email, "password": password}
            )
        except Exception as e:
            logger.info(f"Supabase login failed for {sanitize_string_for_logging(email)}: {e}")
            return AuthResult.fail(ERROR_INVALID_CREDENTIALS)

        if response is None or response.user is None:
            return AuthResult.fail(ERROR_INVALID_CREDENTIALS)

        identity = await self._load_identity(response.user)
        return AuthResult.ok(identity, f"Welcome back, {_display_name(identity)}!")

    async def register(self, email: str, password: str, name: str) -> AuthResult:
        try:
            response = await self.client.auth.sign_up(
                {"email": email, "password": password, "options": {"data": {"name": name}}}
            )
        except Exception as e:
            logger.info(f"Supabase sign-up failed for {sanitize_string_for_logging(email)}: {e}")
            if "already" in str(e).lower():
                return AuthResult.fail(ERROR_EMAIL_TAKEN)
            return AuthResult.fail(ERROR_REGISTRATION_FAILED)

        user = response.user if response else None
        if user is None:
            return AuthResult.fail(ERROR_REGISTRATION_FAILED)

        try:
            await (
                self.client.table(self.PROFILES_TABLE)
                .upsert({"id": user.id, "name": name, "role": Role.CUSTOMER.value})
                .execute()
            )
        except Exception as e:
            # Auth user already exists; role falls back to customer on login
            logger.warning(f"Failed to create profile for {user.id}: {e}")

        identity = Customer(id=user.id, email=getattr(user, "email", None) or email, name=name)
        return AuthResult.ok(identity, f"Welcome, {_display_name(identity)}!")
