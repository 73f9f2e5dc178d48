"""Password digests and session tokens."""

from __future__ import annotations

import hashlib
import hmac
import secrets

from ..core.config import PASSWORD_SALT

TOKEN_BYTES = 32


def hash_password(password: str) -> str:
    """Return the hex SHA-256 digest stored for ``password``."""

    return hashlib.sha256((PASSWORD_SALT + password).encode("utf-8")).hexdigest()


def verify_password(password: str, password_hash: str) -> bool:
    return hmac.compare_digest(hash_password(password), password_hash or "")


def generate_token() -> str:
    """Return a fresh, URL-safe bearer token."""

    return secrets.token_urlsafe(TOKEN_BYTES)


__all__ = ["generate_token", "hash_password", "verify_password"]
