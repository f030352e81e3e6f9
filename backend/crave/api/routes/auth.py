"""Auth Routes: register, password login, wallet login.

Invariants:
    - Responses are UserResponse: never a password or hash
    - Duplicate username/email -> 400; bad credentials -> 401
"""

from fastapi import APIRouter, Depends, status

from crave.infrastructure.store import CraveStore, get_store
from crave.schemas.auth import (
    LoginRequest, RegisterRequest, UserResponse, WalletLoginRequest,
)
from crave.services import accounts

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post(
    "/register", response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
)
async def register(body: RegisterRequest, store: CraveStore = Depends(get_store)):
    return accounts.register_user(store, body)


@router.post("/login", response_model=UserResponse)
async def login(body: LoginRequest, store: CraveStore = Depends(get_store)):
    return accounts.authenticate(store, body)


@router.post("/wallet", response_model=UserResponse)
async def wallet_login(
    body: WalletLoginRequest, store: CraveStore = Depends(get_store),
):
    """Log in (or sign up) with a wallet address."""
    return accounts.login_with_wallet(store, body)
