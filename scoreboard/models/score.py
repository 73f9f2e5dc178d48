"""Database model for the append-only score ledger."""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Optional

from sqlalchemy import Index
from sqlmodel import Field as ORMField, SQLModel

from ..core.time import utcnow


class Period(str, Enum):
    """Aggregation period a score entry is ranked in."""

    DAILY = "daily"
    WEEKLY = "weekly"
    ALLTIME = "alltime"


class ScoreEntry(SQLModel, table=True):
    """One submitted score, tagged with a single period."""

    __table_args__ = (
        Index("ix_scoreentry_period_score", "period", "score"),
        Index("ix_scoreentry_user_period", "user_id", "period"),
    )

    id: Optional[int] = ORMField(default=None, primary_key=True)
    user_id: int = ORMField(foreign_key="user.id")
    username: str
    score: float
    period: str
    achieved_at: datetime = ORMField(default_factory=utcnow)


__all__ = ["Period", "ScoreEntry"]
