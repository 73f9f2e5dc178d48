"""Leaderboard queries: top scores, global high score and current players."""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Any, Dict, List, Optional

from sqlalchemy import func
from sqlmodel import Session, select

from ..core import (
    ACTIVE_WINDOW_SECONDS,
    CURRENT_PLAYERS_SCAN_LIMIT,
    ValidationError,
    as_utc,
    isoformat_utc,
    utcnow,
)
from ..models import AuthSession, Period, ScoreEntry, User

TOP_SCORES_LIMIT = 10


def parse_period(value: Any) -> Period:
    try:
        return Period(value)
    except ValueError:
        raise ValidationError(f"Invalid period: {value!r}") from None


def period_window_start(period: Period, now: datetime) -> Optional[datetime]:
    """Earliest ``achieved_at`` counted for ``period``; None means no window.

    Daily boards restart at 00:00 UTC, weekly boards on Monday 00:00 UTC.
    """

    now = as_utc(now)
    midnight = now.replace(hour=0, minute=0, second=0, microsecond=0)
    if period is Period.DAILY:
        return midnight
    if period is Period.WEEKLY:
        return midnight - timedelta(days=midnight.weekday())
    return None


def score_to_dict(entry: ScoreEntry) -> Dict[str, Any]:
    return {
        "id": entry.id,
        "userId": entry.user_id,
        "username": entry.username,
        "score": entry.score,
        "period": entry.period,
        "achievedAt": isoformat_utc(entry.achieved_at),
    }


def get_top_scores(
    session: Session, period: Any, *, now: Optional[datetime] = None
) -> List[ScoreEntry]:
    """Best entries for ``period``, highest first, earliest first on ties."""

    period = parse_period(period)
    query = select(ScoreEntry).where(ScoreEntry.period == period.value)

    window_start = period_window_start(period, now or utcnow())
    if window_start is not None:
        query = query.where(ScoreEntry.achieved_at >= window_start)

    query = query.order_by(ScoreEntry.score.desc(), ScoreEntry.id.asc()).limit(
        TOP_SCORES_LIMIT
    )
    return list(session.exec(query).all())


def get_global_high_score(session: Session) -> Optional[Dict[str, Any]]:
    top = session.exec(
        select(ScoreEntry)
        .where(ScoreEntry.period == Period.ALLTIME.value)
        .order_by(ScoreEntry.score.desc(), ScoreEntry.id.asc())
        .limit(1)
    ).first()
    if not top:
        return None
    return {"username": top.username, "score": top.score}


def _best_alltime_score(session: Session, user_id: int) -> float:
    best = session.exec(
        select(func.max(ScoreEntry.score)).where(
            ScoreEntry.user_id == user_id,
            ScoreEntry.period == Period.ALLTIME.value,
        )
    ).first()
    return best if best is not None else 0


def get_current_players(
    session: Session,
    *,
    now: Optional[datetime] = None,
    active_window_seconds: int = ACTIVE_WINDOW_SECONDS,
    scan_limit: int = CURRENT_PLAYERS_SCAN_LIMIT,
) -> List[Dict[str, Any]]:
    """Snapshot of recently active players with their best all-time score.

    Only the ``scan_limit`` most recently seen sessions are read, and of those
    only sessions seen within ``active_window_seconds``. Players whose
    sessions fall outside either bound are left out, so the result is a
    bounded approximation rather than a complete online list.
    """

    cutoff = as_utc(now or utcnow()) - timedelta(seconds=active_window_seconds)
    seen_at = func.coalesce(AuthSession.last_seen_at, AuthSession.created_at)

    recent = session.exec(
        select(AuthSession)
        .where(seen_at >= cutoff)
        .order_by(seen_at.desc(), AuthSession.id.desc())
        .limit(scan_limit)
    ).all()

    latest_by_user: Dict[int, AuthSession] = {}
    for auth_session in recent:
        latest_by_user.setdefault(auth_session.user_id, auth_session)

    players: List[Dict[str, Any]] = []
    for user_id, auth_session in latest_by_user.items():
        user = session.get(User, user_id)
        if not user:
            continue
        players.append(
            {
                "username": user.username,
                "score": _best_alltime_score(session, user_id),
                "activeAt": isoformat_utc(
                    auth_session.last_seen_at or auth_session.created_at
                ),
            }
        )

    players.sort(key=lambda player: player["score"], reverse=True)
    return players


__all__ = [
    "TOP_SCORES_LIMIT",
    "get_current_players",
    "get_global_high_score",
    "get_top_scores",
    "parse_period",
    "period_window_start",
    "score_to_dict",
]
