"""Database model for bearer-token sessions."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlmodel import Field as ORMField, SQLModel

from ..core.time import utcnow


class AuthSession(SQLModel, table=True):
    """Opaque bearer token owned by a user. Sessions never expire."""

    __tablename__ = "session"

    id: Optional[int] = ORMField(default=None, primary_key=True)
    token: str = ORMField(index=True, unique=True)
    user_id: int = ORMField(foreign_key="user.id", index=True)
    created_at: datetime = ORMField(default_factory=utcnow)
    last_seen_at: Optional[datetime] = None


__all__ = ["AuthSession"]
