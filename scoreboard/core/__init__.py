"""Core configuration and infrastructure helpers."""

from .config import (
    ACTIVE_WINDOW_SECONDS,
    ALLOWED_CORS_ORIGINS,
    CURRENT_PLAYERS_SCAN_LIMIT,
    DATABASE_URL,
    DB_RESET,
    LOG_LEVEL,
    PASSWORD_SALT,
)
from .database import engine, get_session
from .errors import (
    AuthError,
    ConflictError,
    ScoreboardError,
    ValidationError,
    scoreboard_error_handler,
)
from .time import as_utc, isoformat_utc, utcnow

__all__ = [
    "ACTIVE_WINDOW_SECONDS",
    "ALLOWED_CORS_ORIGINS",
    "CURRENT_PLAYERS_SCAN_LIMIT",
    "DATABASE_URL",
    "DB_RESET",
    "LOG_LEVEL",
    "PASSWORD_SALT",
    "AuthError",
    "ConflictError",
    "ScoreboardError",
    "ValidationError",
    "as_utc",
    "engine",
    "get_session",
    "isoformat_utc",
    "scoreboard_error_handler",
    "utcnow",
]
