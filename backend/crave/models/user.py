"""User record: customers and restaurant owners.

Invariants:
    - username and email unique case-insensitively (checked by the accounts service)
    - password_hash is a werkzeug hash, never plaintext
"""

from dataclasses import dataclass
from datetime import datetime
from typing import ClassVar

from crave.core.domain_types import UserId, UserRole


@dataclass(frozen=True)
class User:
    id: UserId
    username: str
    email: str
    password_hash: str
    name: str
    role: UserRole
    created_at: datetime
    wallet_address: str | None = None
    profile_img: str | None = None

    MUTABLE_FIELDS: ClassVar[frozenset[str]] = frozenset({
        "email", "name", "wallet_address", "profile_img", "password_hash",
    })
