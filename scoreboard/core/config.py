"""Application settings and environment helpers."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, List

from dotenv import load_dotenv

load_dotenv(override=False)

_PROJECT_ROOT = Path(__file__).resolve().parents[2]


def _env_bool(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(name: str, default: int) -> int:
    """Return an integer environment variable or raise an error."""

    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise RuntimeError(f"{name} must be an integer") from exc


def _split_csv(raw: str | None) -> List[str]:
    if not raw:
        return []
    return [item.strip() for item in raw.split(",") if item.strip()]


def _unique(values: Iterable[str]) -> List[str]:
    seen = set()
    ordered: List[str] = []
    for value in values:
        if value not in seen:
            seen.add(value)
            ordered.append(value)
    return ordered


# Storage --------------------------------------------------------------------
DATA_DIR = Path(os.getenv("DATA_DIR", str(_PROJECT_ROOT / "data")))
DATABASE_URL = os.getenv("DATABASE_URL") or f"sqlite:///{DATA_DIR / 'app.db'}"
DB_RESET = _env_bool("DB_RESET", False)


# CORS -----------------------------------------------------------------------
# FRONTEND_ORIGIN can contain a comma-separated list for multi-domain deploys.
_frontend_origins = _split_csv(os.getenv("FRONTEND_ORIGIN"))
_additional_origins = _split_csv(os.getenv("ADDITIONAL_ALLOWED_ORIGINS"))

_local_dev_origins = [
    "http://localhost:5173",
    "http://127.0.0.1:5173",
    "http://localhost:3000",
    "http://127.0.0.1:3000",
]

ALLOWED_CORS_ORIGINS = _unique(
    [
        *_frontend_origins,
        *_additional_origins,
        *_local_dev_origins,
    ]
)


# Accounts -------------------------------------------------------------------
PASSWORD_SALT = os.getenv("PASSWORD_SALT", "")


# Current players snapshot ---------------------------------------------------
CURRENT_PLAYERS_SCAN_LIMIT = _env_int("CURRENT_PLAYERS_SCAN_LIMIT", 50)
ACTIVE_WINDOW_SECONDS = _env_int("ACTIVE_WINDOW_SECONDS", 300)


# Runtime behaviour ----------------------------------------------------------
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


__all__ = [
    "ACTIVE_WINDOW_SECONDS",
    "ALLOWED_CORS_ORIGINS",
    "CURRENT_PLAYERS_SCAN_LIMIT",
    "DATABASE_URL",
    "DATA_DIR",
    "DB_RESET",
    "LOG_LEVEL",
    "PASSWORD_SALT",
]
