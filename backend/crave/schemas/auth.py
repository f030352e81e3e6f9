"""Account Schemas: registration, login, wallet login, profile update, public user.

Invariants:
    - RegisterRequest.username: 3-50 chars, stripped; password >= 6 chars; email validated
    - UserResponse has no password field of any kind
"""

from datetime import datetime

from pydantic import EmailStr, Field, field_validator

from crave.core.domain_types import UserRole
from crave.schemas.base import CamelModel, PatchModel


class RegisterRequest(CamelModel):
    username: str = Field(min_length=3, max_length=50)
    password: str = Field(min_length=6, max_length=128)
    email: EmailStr
    name: str = Field(min_length=1, max_length=100)
    role: UserRole = UserRole.CUSTOMER
    wallet_address: str | None = Field(None, max_length=128)
    profile_img: str | None = Field(None, max_length=2048)

    @field_validator("username", "name")
    @classmethod
    def strip_text(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("cannot be empty or whitespace")
        return v


class LoginRequest(CamelModel):
    """username accepts either the username or the email."""
    username: str = Field(min_length=1, max_length=254)
    password: str = Field(min_length=1, max_length=128)


class WalletLoginRequest(CamelModel):
    wallet_address: str = Field(min_length=1, max_length=128)


class UserUpdate(PatchModel):
    NULLABLE_FIELDS = frozenset({"wallet_address", "profile_img"})

    name: str | None = Field(None, min_length=1, max_length=100)
    email: EmailStr | None = None
    wallet_address: str | None = Field(None, max_length=128)
    profile_img: str | None = Field(None, max_length=2048)


class UserResponse(CamelModel):
    """Public user view."""
    id: int
    username: str
    email: str
    name: str
    role: UserRole
    wallet_address: str | None = None
    profile_img: str | None = None
    created_at: datetime
