"""Shared request dependencies."""

from __future__ import annotations

from typing import Optional

from fastapi import Header


def bearer_token(authorization: Optional[str] = Header(None)) -> Optional[str]:
    """Extract the session token from an ``Authorization: Bearer`` header."""

    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer":
        return None
    return token.strip() or None


__all__ = ["bearer_token"]
