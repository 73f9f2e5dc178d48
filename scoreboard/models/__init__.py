"""Database model exports."""

from .score import Period, ScoreEntry
from .session import AuthSession
from .user import User

__all__ = [
    "AuthSession",
    "Period",
    "ScoreEntry",
    "User",
]
