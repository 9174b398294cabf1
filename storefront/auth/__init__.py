"""Authentication package: identity model and providers."""
from .identity import Role, Customer, Admin, Identity, IdentityView, identity_from_dict
from .providers import (
    AuthResult,
    IdentityProvider,
    MockIdentityProvider,
    SupabaseIdentityProvider,
    MOCK_USERS,
)

__all__ = [
    "Role",
    "Customer",
    "Admin",
    "Identity",
    "IdentityView",
    "identity_from_dict",
    "AuthResult",
    "IdentityProvider",
    "MockIdentityProvider",
    "SupabaseIdentityProvider",
    "MOCK_USERS",
]
