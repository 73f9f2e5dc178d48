"""Time helpers."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional


def utcnow() -> datetime:
    """Return the current UTC datetime."""
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    """Attach UTC to naive datetimes read back from SQLite."""

    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def isoformat_utc(value: Optional[datetime]) -> Optional[str]:
    if value is None:
        return None
    return as_utc(value).replace(tzinfo=None).isoformat() + "Z"


__all__ = ["as_utc", "isoformat_utc", "utcnow"]
