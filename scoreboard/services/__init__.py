"""Service layer helpers."""

from . import auth, leaderboard, scores
from .security import generate_token, hash_password, verify_password

__all__ = [
    "auth",
    "generate_token",
    "hash_password",
    "leaderboard",
    "scores",
    "verify_password",
]
