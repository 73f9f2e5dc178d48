"""Database model for registered players."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlmodel import Field as ORMField, SQLModel

from ..core.time import utcnow


class User(SQLModel, table=True):
    """Player account identified by a normalised email."""

    id: Optional[int] = ORMField(default=None, primary_key=True)
    username: str
    email: str = ORMField(index=True, unique=True)
    password_hash: str
    created_at: datetime = ORMField(default_factory=utcnow)


__all__ = ["User"]
