"""Identity model: a Customer | Admin union tagged by ``role``."""
from enum import Enum
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class Role(str, Enum):
    CUSTOMER = "customer"
    ADMIN = "admin"


class _BaseIdentity(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    id: str
    email: str
    name: str = ""


class Customer(_BaseIdentity):
    role: Literal["customer"] = "customer"


class Admin(_BaseIdentity):
    role: Literal["admin"] = "admin"


Identity = Annotated[Union[Customer, Admin], Field(discriminator="role")]

_identity_adapter = TypeAdapter(Identity)


def identity_from_dict(data: dict) -> Customer | Admin:
    """
    Build an identity from a profile row.

    A missing or unrecognised role is treated as a customer.
    """
    role = data.get("role")
    if role not in (Role.CUSTOMER.value, Role.ADMIN.value):
        data = {**data, "role": Role.CUSTOMER.value}
    return _identity_adapter.validate_python(data)


class IdentityView(BaseModel):
    """What the rest of the core is allowed to know about the shopper."""
    model_config = ConfigDict(frozen=True)

    is_authenticated: bool = False
    role: Optional[Role] = None

    @property
    def is_admin(self) -> bool:
        return self.is_authenticated and self.role is Role.ADMIN

    @classmethod
    def of(cls, identity: Optional[Customer | Admin]) -> "IdentityView":
        if identity is None:
            return cls()
        return cls(is_authenticated=True, role=identity.role)
