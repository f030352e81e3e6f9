"""Account Flows: registration, password login, wallet login, profile update.

Invariants:
    - username and email are unique case-insensitively across all users
    - A wallet address belongs to at most one user
    - Stored passwords are werkzeug hashes; login compares via verify_password
    - Unknown user and wrong password produce the same 401 (no account enumeration)
    - Wallet login auto-creates a customer the first time an address is seen

Design Decisions:
    - Uniqueness checked here, not in the store: the store never fails except "not found"
    - Synthesized wallet usernames fall back to the full address on collision
      (many addresses share the same 8-char prefix, e.g. "0x000000"), then to
      the full address with a numeric suffix
"""

import logging

from crave.core.credentials import (
    generate_random_password, hash_password, verify_password,
)
from crave.core.domain_types import UserRole
from crave.core.errors import (
    DuplicateAccountError, InvalidCredentialsError, ResourceNotFoundError,
)
from crave.infrastructure.store import CraveStore
from crave.models import User
from crave.schemas.auth import (
    LoginRequest, RegisterRequest, UserUpdate, WalletLoginRequest,
)

logger = logging.getLogger(__name__)


def register_user(store: CraveStore, body: RegisterRequest) -> User:
    """Create an account. Raises DuplicateAccountError on username/email/wallet clash."""
    if store.get_user_by_username(body.username):
        raise DuplicateAccountError("username")
    if store.get_user_by_email(body.email):
        raise DuplicateAccountError("email")
    if body.wallet_address and store.get_user_by_wallet_address(body.wallet_address):
        raise DuplicateAccountError("wallet address")

    data = body.model_dump(exclude={"password"})
    data["password_hash"] = hash_password(body.password)
    user = store.create_user(data)
    logger.info(f"Registered user {user.id} ({user.role.value})")
    return user


def authenticate(store: CraveStore, body: LoginRequest) -> User:
    """Password login by username or email."""
    user = (
        store.get_user_by_username(body.username)
        or store.get_user_by_email(body.username)
    )
    if user is None:
        logger.warning("Login failed: unknown user")
        raise InvalidCredentialsError()
    if not verify_password(user.password_hash, body.password):
        logger.warning(
            f"Login failed: bad password for user {user.id}",
            extra={"entity": "User", "entity_id": user.id},
        )
        raise InvalidCredentialsError()
    return user


def login_with_wallet(store: CraveStore, body: WalletLoginRequest) -> User:
    """Find the user owning the wallet, creating a customer account if none."""
    address = body.wallet_address
    user = store.get_user_by_wallet_address(address)
    if user is not None:
        return user

    username, email = _wallet_identity(store, address)
    user = store.create_user({
        "username": username,
        "email": email,
        "password_hash": hash_password(generate_random_password()),
        "name": f"Wallet User {address[:6]}",
        "role": UserRole.CUSTOMER,
        "wallet_address": address,
        "profile_img": None,
    })
    logger.info(f"Created wallet user {user.id}")
    return user


def update_profile(store: CraveStore, user_id: int, body: UserUpdate) -> User:
    """Apply a profile patch. Email and wallet address must stay unique."""
    if store.get_user(user_id) is None:
        raise ResourceNotFoundError("User", user_id)
    changes = body.changes()
    if "email" in changes:
        owner = store.get_user_by_email(changes["email"])
        if owner is not None and owner.id != user_id:
            raise DuplicateAccountError("email")
    if changes.get("wallet_address"):
        holder = store.get_user_by_wallet_address(changes["wallet_address"])
        if holder is not None and holder.id != user_id:
            raise DuplicateAccountError("wallet address")
    return store.update_user(user_id, changes)


def _wallet_identity(store: CraveStore, address: str) -> tuple[str, str]:
    """First free (username, email) pair synthesized from a wallet address."""

    def taken(handle: str) -> bool:
        return bool(
            store.get_user_by_username(f"wallet_{handle}")
            or store.get_user_by_email(f"{handle}@wallet.user")
        )

    handle = address[:8]
    if taken(handle):
        handle = address
    suffix = 2
    while taken(handle):
        handle = f"{address}_{suffix}"
        suffix += 1
    return f"wallet_{handle}", f"{handle}@wallet.user"
