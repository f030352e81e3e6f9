"""Credentials: password hashing and verification.

Invariants:
    - Only hashes are stored; plaintext passwords are never persisted or returned
    - verify_password returns False on a malformed hash (werkzeug behavior)

Design Decisions:
    - werkzeug.security over hand-rolled hashlib: salted, versioned hash strings
"""

import secrets

from werkzeug.security import check_password_hash, generate_password_hash


def hash_password(password: str) -> str:
    return generate_password_hash(password)


def verify_password(password_hash: str, password: str) -> bool:
    return check_password_hash(password_hash, password)


def generate_random_password() -> str:
    """Throwaway secret for accounts that log in by wallet only."""
    return secrets.token_urlsafe(16)
